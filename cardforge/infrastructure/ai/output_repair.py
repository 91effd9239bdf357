"""
Recover structured values from free-form model output.

Models asked for raw JSON still wrap it in markdown fences, prepend prose or
encode it twice. repair_and_validate tolerates those mistakes and reports
anything else as a failure value rather than raising.
"""

import json
import re
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from cardforge.application.common.result import Failure, Result, Success
from cardforge.infrastructure.ai.exceptions import ResponseParseError, SchemaValidationError

T = TypeVar("T")

_FENCE_PATTERN = re.compile(r"```[\w-]*[ \t]*\r?\n?(.*?)```", re.DOTALL)

_NOTHING = object()


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return _NOTHING


def _parse(content: str) -> Any:
    trimmed = content.strip()

    parsed: Any = _NOTHING
    fence = _FENCE_PATTERN.search(trimmed)
    if fence:
        parsed = _loads(fence.group(1).strip())
    if parsed is _NOTHING:
        parsed = _loads(trimmed)
    if parsed is _NOTHING:
        return _NOTHING

    # Double-encoded: the JSON value is a string holding JSON
    if isinstance(parsed, str) and parsed.strip().startswith(("[", "{")):
        inner = _loads(parsed.strip())
        if inner is not _NOTHING:
            parsed = inner
    return parsed


def repair_and_validate(
    content: str, adapter: TypeAdapter[T]
) -> Result[T, ResponseParseError | SchemaValidationError]:
    """
    Parse model output and validate it against a pydantic type.

    Args:
        content: Raw message content returned by the model
        adapter: TypeAdapter of the expected value

    Returns:
        Success with the validated value, or Failure carrying
        ResponseParseError (nothing parsed) or SchemaValidationError
        (parsed value has the wrong shape)
    """
    parsed = _parse(content)
    if parsed is _NOTHING:
        return Failure(ResponseParseError(content))

    try:
        return Success(adapter.validate_python(parsed))
    except PydanticValidationError as e:
        return Failure(SchemaValidationError(e.errors(include_url=False), parsed))
