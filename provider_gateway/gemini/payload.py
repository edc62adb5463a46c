"""Pydantic models for the Gemini ``generateContent`` request body.

Field names are snake_case in Python and camelCase on the wire
(``systemInstruction``, ``generationConfig``, ``responseMimeType``,
``responseSchema``). Dump with ``to_payload()`` so unset keys are omitted.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    text: str


class Content(BaseModel):
    role: str
    parts: List[Part]


class SystemInstruction(BaseModel):
    parts: List[Part]


class GenerationConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response_mime_type: str = Field(..., alias="responseMimeType")
    response_schema: Optional[Dict[str, Any]] = Field(None, alias="responseSchema")


class GeminiBody(BaseModel):
    """Top-level ``generateContent`` body.

    Attributes:
        contents: Non-system turns; ``assistant`` is renamed to ``model``.
        system_instruction: First system message, when there is one.
        generation_config: Output MIME type and schema, when a response type
            was requested.
        tools: Tool descriptors, forwarded verbatim.
    """

    model_config = ConfigDict(populate_by_name=True)

    contents: List[Content]
    system_instruction: Optional[SystemInstruction] = Field(None, alias="systemInstruction")
    generation_config: Optional[GenerationConfig] = Field(None, alias="generationConfig")
    tools: Optional[List[Dict[str, Any]]] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


__all__ = ["Part", "Content", "SystemInstruction", "GenerationConfig", "GeminiBody"]
