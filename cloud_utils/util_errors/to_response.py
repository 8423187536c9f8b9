# util_errors/to_response.py
from typing import Dict, Optional
from .exceptions import HandlerError
from .failure import TypedFailure
from ..util_http.response import Response, build_response

def typed_failure_to_http(failure: TypedFailure, base_headers: Optional[Dict[str, str]] = None) -> Response:
    return build_response(failure.status_code, failure.body, failure.headers, base_headers=base_headers)

def handler_error_to_http(err: HandlerError, base_headers: Optional[Dict[str, str]] = None) -> Response:
    return build_response(err.status_code, err.body, err.headers, base_headers=base_headers)
