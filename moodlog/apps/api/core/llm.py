from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Type

from pydantic import BaseModel, ValidationError

from moodlog.libs.errors import MalformedResponse, RemoteCallFailure
from moodlog.libs.json_utils import parse_json_reply
from moodlog.libs.llm_router import LLMRouter

logger = logging.getLogger(__name__)


async def call_llm(
    router: LLMRouter,
    prompt: str,
    *,
    schema: Type[BaseModel] | None = None,
    max_tokens: int = 300,
    timeout: float = 20.0,
    **kwargs: Any,
) -> Any:
    """Send ``prompt`` as a single user turn and return text, or a validated ``schema``.

    One attempt only. Transport trouble and the overall ``timeout`` surface as
    ``RemoteCallFailure``; replies that do not fit ``schema`` raise ``MalformedResponse``.
    """

    messages = [{"role": "user", "content": prompt}]
    try:
        response = await asyncio.wait_for(
            router.chat(messages=messages, max_tokens=max_tokens, **kwargs),
            timeout=timeout,
        )
    except asyncio.TimeoutError as exc:
        raise RemoteCallFailure(f"LLM call exceeded {timeout}s") from exc

    text = response.text
    if not isinstance(text, str) or not text.strip():
        raise MalformedResponse("LLM reply contained no text")

    if schema is None:
        return text

    try:
        payload = parse_json_reply(text)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(f"LLM reply is not JSON: {exc}") from exc

    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        preview = (text[:200] + "...") if len(text) > 200 else text
        logger.debug("LLM reply failed %s validation: %s", schema.__name__, preview)
        raise MalformedResponse(
            f"LLM reply failed {schema.__name__} validation: {exc.error_count()} error(s)"
        ) from exc
