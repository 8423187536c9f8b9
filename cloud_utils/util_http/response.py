# util_http/response.py
import base64
from typing import Any, Dict, Optional, Tuple, TypedDict

from ..util_json.index import dumps_compact

JSON_CT = "application/json; charset=utf-8"

class Response(TypedDict):
    statusCode: int
    headers: Dict[str, str]
    body: str
    isBase64Encoded: bool

def serialize_body(body: Any) -> Tuple[str, bool]:
    """
    Returns (text, is_base64). Strings pass through untouched, None becomes "",
    bytes are base64-encoded, anything else is dumped as compact JSON.
    """
    if body is None:
        return "", False
    if isinstance(body, str):
        return body, False
    if isinstance(body, (bytes, bytearray)):
        return base64.b64encode(bytes(body)).decode("ascii"), True
    return dumps_compact(body), False

def merge_headers(*layers: Optional[Dict[str, str]]) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged

def build_response(status_code: int, body: Any = None, headers: Optional[Dict[str, str]] = None, is_base64_encoded: bool = False, *, base_headers: Optional[Dict[str, str]] = None) -> Response:
    text, encoded = serialize_body(body)
    return {
        "statusCode": int(status_code),
        "headers": merge_headers(base_headers, headers),
        "body": text,
        "isBase64Encoded": bool(is_base64_encoded or encoded),
    }
