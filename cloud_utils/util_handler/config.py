from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..util_errors.exceptions import HandlerError
from ..util_log.logger import Logger

FALLBACK_MESSAGE = "Something went wrong"
JSON_PARSE_FAIL_MESSAGE = "Input could not be parsed as JSON"
JSON_NO_BODY_MESSAGE = "No input supplied for JSON parsing"

_FALSY = {"0", "false", "no", "off"}


def _error(status_code: int, message: str) -> HandlerError:
    return HandlerError(status_code, body=message, message=message)


@dataclass(frozen=True)
class HelperConfig:
    """
    Settings captured once when a HandlerHelper is created.

    ``logger`` may be anything with ``warn(value)`` and ``error(value)``; with no logger nothing is logged.
    The three error fields are the responses used for unknown failures and for the two JSON parsing failures.
    """
    cors_origin: str = "*"
    default_headers: Mapping[str, str] = field(default_factory=dict)
    logger: Optional[Logger] = None
    logging_enabled: bool = True
    fallback_error: HandlerError = field(default_factory=lambda: _error(500, FALLBACK_MESSAGE))
    json_parse_fail_error: HandlerError = field(default_factory=lambda: _error(400, JSON_PARSE_FAIL_MESSAGE))
    json_no_body_error: HandlerError = field(default_factory=lambda: _error(400, JSON_NO_BODY_MESSAGE))
    fallback_message: str = FALLBACK_MESSAGE

    @classmethod
    def from_env(cls, *, logger: Optional[Logger] = None, **overrides: Any) -> "HelperConfig":
        """
        Reads CORS_ALLOW_ORIGIN, HANDLER_LOGGING and DEFAULT_HEADERS (a JSON object).
        Explicit keyword overrides win over the environment.
        """
        values: Dict[str, Any] = {"logger": logger}
        origin = os.getenv("CORS_ALLOW_ORIGIN")
        if origin:
            values["cors_origin"] = origin
        flag = os.getenv("HANDLER_LOGGING")
        if flag is not None:
            values["logging_enabled"] = flag.strip().lower() not in _FALSY
        raw_headers = os.getenv("DEFAULT_HEADERS")
        if raw_headers:
            values["default_headers"] = _parse_headers(raw_headers)
        values.update(overrides)
        return cls(**values)


def _parse_headers(raw: str) -> Dict[str, str]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RuntimeError(f"Environment variable 'DEFAULT_HEADERS' is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise RuntimeError("Environment variable 'DEFAULT_HEADERS' must be a JSON object")
    return {str(k): str(v) for k, v in parsed.items()}


__all__ = (
    "HelperConfig",
    "FALLBACK_MESSAGE",
    "JSON_PARSE_FAIL_MESSAGE",
    "JSON_NO_BODY_MESSAGE",
)
