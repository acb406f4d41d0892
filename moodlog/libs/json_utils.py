from __future__ import annotations

import json
import re
from typing import Any


def extract_json_block(blob: str) -> str:
    """
    Strip markdown fences, leading chatter and trailing commas from LLM responses,
    returning a best-effort JSON string.
    """

    text = (blob or "").strip()
    if text.startswith("```"):
        newline_idx = text.find("\n")
        if newline_idx != -1:
            text = text[newline_idx + 1 :]
        if text.endswith("```"):
            text = text[:-3]
    text = text.strip()
    if text:
        opening = [idx for idx in (text.find("{"), text.find("[")) if idx != -1]
        if opening:
            text = text[min(opening) :]
        closing_idx = max(text.rfind("]"), text.rfind("}"))
        if closing_idx != -1:
            text = text[: closing_idx + 1]
    text = _strip_trailing_commas(text)
    return text.strip()


def parse_json_reply(blob: str) -> Any:
    """Parse an LLM reply as JSON after cleaning; raises ``json.JSONDecodeError``."""

    return json.loads(extract_json_block(blob))


def _strip_trailing_commas(text: str) -> str:
    return re.sub(r",(\s*[}\]])", r"\1", text)


__all__ = ["extract_json_block", "parse_json_reply"]
