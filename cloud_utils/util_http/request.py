# util_http/request.py
from __future__ import annotations
import base64, binascii
from typing import Any, Dict, Optional

from ..util_errors.exceptions import BadRequest, PayloadTooLarge

def event_headers(event: Dict[str, Any]) -> Dict[str, str]:
    return {(k or "").lower(): v for k, v in (event.get("headers") or {}).items()}

def event_body(event: Dict[str, Any], *, max_body_bytes: int = 1_000_000) -> Optional[str]:
    """Raw body text of a gateway event, base64-decoded when the gateway says so."""
    body_raw = event.get("body")
    if body_raw and event.get("isBase64Encoded"):
        try: body_raw = base64.b64decode(body_raw, validate=True)
        except (binascii.Error, ValueError): raise BadRequest("Body is not valid base64")

    if isinstance(body_raw, bytes):
        if len(body_raw) > max_body_bytes: raise PayloadTooLarge("Body too large")
        return body_raw.decode("utf-8", errors="replace")
    if isinstance(body_raw, str):
        if len(body_raw.encode("utf-8")) > max_body_bytes: raise PayloadTooLarge("Body too large")
        return body_raw
    return None
