"""Helpers for model replies that are meant to be JSON."""
from __future__ import annotations


def clean_json_markers(s: str) -> str:
    """Strip common Markdown code fences from LLM JSON replies.

    Parameters:
        s: Raw string potentially wrapped in triple backtick fences
           (```json ... ``` or ``` ... ```).

    Returns:
        The input with leading/trailing fences removed and whitespace trimmed.
    """
    s = s.strip()
    if s.startswith("```json"):
        s = s[7:]
    elif s.startswith("```"):
        s = s[3:]
    if s.endswith("```"):
        s = s[:-3]
    return s.strip()


__all__ = ["clean_json_markers"]
