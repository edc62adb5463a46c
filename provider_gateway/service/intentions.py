"""Post-intention analysis vocabulary.

The fixed system prompt, the fifteen intention tags, the structured-output
schema sent with every analysis request, and the pydantic model the reply is
validated against.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Literal, Tuple, get_args

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_SYSTEM_PROMPT = (
    "You are an AI assistant by 'Aziz' that analyzes LinkedIn posts to identify user "
    "intentions, returning results according to the provided schema. Output an array of "
    "intentions (e.g., professionalUpdates, networking, etc.) with confidence scores "
    "(0 to 1), also indicate if the post is AI-generated, and a reason for the analysis"
)

IntentionTag = Literal[
    "professionalUpdates",
    "networking",
    "industryInsights",
    "selfPromotion",
    "jobSearching",
    "thoughtLeadership",
    "companyPromotion",
    "seekingAdvice",
    "eventPromotion",
    "personalBranding",
    "engagement",
    "mentorship",
    "recruitment",
    "educationalContent",
    "communityBuilding",
]

INTENTION_TAGS: Tuple[str, ...] = get_args(IntentionTag)


def intention_schema() -> Dict[str, Any]:
    """Return a fresh copy of the analysis response schema."""
    return {
        "type": "object",
        "properties": {
            "intentions": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "intention": {"type": "string", "enum": list(INTENTION_TAGS)},
                        "confidence": {"type": "number", "minimum": 0, "maximum": 1},
                    },
                    "required": ["intention", "confidence"],
                },
                "minItems": 1,
            },
            "isAIGenerated": {"type": "boolean"},
            "reason": {"type": "string"},
        },
        "required": ["intentions", "isAIGenerated", "reason"],
    }


_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")


def humanize_intention(tag: str) -> str:
    """Insert spaces at camelCase boundaries: ``selfPromotion`` -> ``self Promotion``.

    Case is left as is.
    """
    return _ACRONYM_WORD.sub(r"\1 \2", _LOWER_UPPER.sub(r"\1 \2", tag))


class IntentionScore(BaseModel):
    intention: IntentionTag
    confidence: float = Field(..., ge=0, le=1)


class AnalysisReply(BaseModel):
    """The JSON object the model is asked to return."""

    model_config = ConfigDict(populate_by_name=True)

    intentions: List[IntentionScore] = Field(..., min_length=1)
    is_ai_generated: bool = Field(..., alias="isAIGenerated")
    reason: str


__all__ = [
    "DEFAULT_SYSTEM_PROMPT",
    "INTENTION_TAGS",
    "IntentionTag",
    "intention_schema",
    "humanize_intention",
    "IntentionScore",
    "AnalysisReply",
]
