# cloud_utils/__init__.py
from .util_http.request import event_body, event_headers
from .util_http.response import Response, build_response, serialize_body, JSON_CT
from .util_http.cors import cors_headers, handle_preflight
from .util_log.logger import JsonLogger, Logger
from .util_errors.exceptions import HandlerError, BadRequest, Unauthorized, Forbidden, NotFound, Conflict, PayloadTooLarge, UnprocessableEntity, RateLimited, Internal
from .util_errors.failure import Failure, TypedFailure, UnknownFailure, classify
from .util_errors.to_response import handler_error_to_http
from .util_json.index import dumps_compact
from .util_handler.config import HelperConfig
from .util_handler.helper import HandlerHelper
