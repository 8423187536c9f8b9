# util_http/cors.py
from typing import Dict, Optional
from .response import Response, build_response

ALLOW_ORIGIN = "Access-Control-Allow-Origin"

def cors_headers(allow_origin: str = "*", allow_credentials: bool = False) -> Dict[str, str]:
    h = {ALLOW_ORIGIN: allow_origin}
    if allow_credentials: h["Access-Control-Allow-Credentials"] = "true"
    return h

def preflight_headers(allow_origin: str = "*", allow_headers: str = "Content-Type,Authorization,X-Correlation-Id", allow_methods: str = "GET,POST,OPTIONS", allow_credentials: bool = False) -> Dict[str, str]:
    h = cors_headers(allow_origin, allow_credentials)
    h["Access-Control-Allow-Headers"] = allow_headers
    h["Access-Control-Allow-Methods"] = allow_methods
    return h

def handle_preflight(event_headers: Dict[str, str], allow_origin: str = "*", allow_credentials: bool = False, base_headers: Optional[Dict[str, str]] = None) -> Optional[Response]:
    hdrs = {(k or "").lower(): v for k, v in (event_headers or {}).items()}
    if "origin" in hdrs and "access-control-request-method" in hdrs:
        return build_response(204, None, preflight_headers(allow_origin, allow_credentials=allow_credentials), base_headers=base_headers)
    return None
