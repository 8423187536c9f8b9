from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .exceptions import HandlerError

@dataclass(frozen=True)
class TypedFailure:
    """Failure that already knows its response."""
    status_code: int
    body: Any = None
    headers: Optional[Dict[str, str]] = None
    error: Optional[HandlerError] = None

@dataclass(frozen=True)
class UnknownFailure:
    cause: BaseException

Failure = Union[TypedFailure, UnknownFailure]

def classify(err: BaseException) -> Failure:
    if isinstance(err, HandlerError):
        return TypedFailure(status_code=err.status_code, body=err.body, headers=err.headers, error=err)
    return UnknownFailure(cause=err)
