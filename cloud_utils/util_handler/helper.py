from __future__ import annotations

import json
from dataclasses import replace
from typing import Any, Awaitable, Callable, Dict, Optional

from ..util_errors.failure import TypedFailure, classify
from ..util_errors.to_response import handler_error_to_http, typed_failure_to_http
from ..util_http.cors import cors_headers, handle_preflight
from ..util_http.request import event_body, event_headers
from ..util_http.response import Response, build_response
from ..util_json.index import reject_constant
from .config import HelperConfig


class HandlerHelper:
    """
    Response/error helper for a function behind an API gateway.

    Business logic raises HandlerError for anything the caller should see;
    wrap_logic/run_logic turn every failure into a well-formed response.

        helper = HandlerHelper(cors_origin="https://app.example.com", logger=JsonLogger())

        def handler(event, context):
            def logic():
                data = helper.parse_body(event)
                return helper.ok({"id": data["id"]})
            return helper.run_logic(logic, "Could not load item")
    """

    def __init__(self, config: Optional[HelperConfig] = None, **params: Any):
        if config is None:
            config = HelperConfig(**params)
        elif params:
            config = replace(config, **params)
        self._config = config
        self._base_headers: Dict[str, str] = {**config.default_headers, **cors_headers(config.cors_origin)}

    # --------- configuration ---------

    @property
    def config(self) -> HelperConfig:
        return self._config

    @property
    def cors_origin(self) -> str:
        return self._config.cors_origin

    @property
    def default_headers(self) -> Dict[str, str]:
        """Default headers including Access-Control-Allow-Origin."""
        return dict(self._base_headers)

    @property
    def logging_enabled(self) -> bool:
        return self._config.logging_enabled and self._config.logger is not None

    def derive(self, **changes: Any) -> "HandlerHelper":
        return HandlerHelper(replace(self._config, **changes))

    def with_logging(self, enabled: bool) -> "HandlerHelper":
        return self.derive(logging_enabled=enabled)

    # --------- responses ---------

    def build_response(self, status_code: int, body: Any = None, headers: Optional[Dict[str, str]] = None, is_base64_encoded: bool = False) -> Response:
        return build_response(status_code, body, headers, is_base64_encoded, base_headers=self._base_headers)

    def ok(self, body: Any = None, headers: Optional[Dict[str, str]] = None) -> Response:
        return self.build_response(200, body, headers)

    def created(self, body: Any = None, headers: Optional[Dict[str, str]] = None) -> Response:
        return self.build_response(201, body, headers)

    def client_error(self, body: Any = None, headers: Optional[Dict[str, str]] = None) -> Response:
        return self.build_response(400, body, headers)

    def not_found(self, body: Any = None, headers: Optional[Dict[str, str]] = None) -> Response:
        return self.build_response(404, body, headers)

    def server_error(self, body: Any = None, headers: Optional[Dict[str, str]] = None) -> Response:
        return self.build_response(500, body, headers)

    def preflight(self, event: Dict[str, Any], *, allow_credentials: bool = False) -> Optional[Response]:
        return handle_preflight(event_headers(event), self.cors_origin, allow_credentials, base_headers=self._config.default_headers)

    # --------- request parsing ---------

    def _parse_json(self, body: Any) -> Any:
        if not body:
            raise self._config.json_no_body_error.copy()
        try:
            return json.loads(body, parse_constant=reject_constant)
        except (ValueError, TypeError) as e:
            raise self._config.json_parse_fail_error.copy() from e

    def parse_json(self, body: Optional[str]) -> Any:
        return self._parse_json(body)

    def parse_json_as_partial(self, body: Optional[str]) -> Any:
        """Same as parse_json; the result is not checked against any shape, keys may be missing."""
        return self._parse_json(body)

    def parse_body(self, event: Dict[str, Any]) -> Any:
        return self._parse_json(event_body(event))

    # --------- errors ---------

    def _log(self, level: str, value: Any) -> None:
        getattr(self._config.logger, level)(value)

    def handle_error(self, err: BaseException, error_message: Optional[str] = None, *, log: Optional[bool] = None) -> Response:
        """
        Turns a caught failure into a response.
        HandlerError keeps its own status/body/headers; anything else becomes the fallback response.
        """
        should_log = self.logging_enabled if log is None else (log and self._config.logger is not None)
        if should_log:
            self._log("warn", err)
        failure = classify(err)
        if isinstance(failure, TypedFailure):
            return typed_failure_to_http(failure, self._base_headers)
        if should_log:
            self._log("error", error_message or self._config.fallback_message)
        return handler_error_to_http(self._config.fallback_error, self._base_headers)

    async def wrap_logic(self, logic: Callable[[], Awaitable[Any]], error_message: Optional[str] = None) -> Any:
        try:
            return await logic()
        except Exception as err:
            return self.handle_error(err, error_message)

    def run_logic(self, logic: Callable[[], Any], error_message: Optional[str] = None) -> Any:
        try:
            return logic()
        except Exception as err:
            return self.handle_error(err, error_message)


__all__ = ("HandlerHelper",)
