from typing import Any, Dict, Optional

class HandlerError(Exception):
    """
    Error that carries its own HTTP response.
    Raise it anywhere inside handler logic; HandlerHelper turns it into a response verbatim.
    """
    def __init__(self, status_code: int, *, body: Any = None, headers: Optional[Dict[str, str]] = None, message: Optional[str] = None):
        super().__init__(message if message is not None else (body if isinstance(body, str) else f"HTTP {status_code}"))
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers) if headers else None

    @property
    def message(self) -> str:
        return str(self)

    @property
    def response(self) -> Dict[str, Any]:
        return {"status_code": self.status_code, "body": self.body, "headers": self.headers}

    def copy(self) -> "HandlerError":
        err = type(self).__new__(type(self))
        err.args = self.args
        err.__dict__.update(self.__dict__)
        if self.headers:
            err.headers = dict(self.headers)
        return err

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, body={self.body!r})"

class BadRequest(HandlerError):
    def __init__(self, message="Bad Request", **kw):
        kw.setdefault("body", message)
        super().__init__(400, message=message, **kw)

class Unauthorized(HandlerError):
    def __init__(self, message="Unauthorized", **kw):
        kw.setdefault("body", message)
        super().__init__(401, message=message, **kw)

class Forbidden(HandlerError):
    def __init__(self, message="Forbidden", **kw):
        kw.setdefault("body", message)
        super().__init__(403, message=message, **kw)

class NotFound(HandlerError):
    def __init__(self, message="Not Found", **kw):
        kw.setdefault("body", message)
        super().__init__(404, message=message, **kw)

class Conflict(HandlerError):
    def __init__(self, message="Conflict", **kw):
        kw.setdefault("body", message)
        super().__init__(409, message=message, **kw)

class PayloadTooLarge(HandlerError):
    def __init__(self, message="Payload Too Large", **kw):
        kw.setdefault("body", message)
        super().__init__(413, message=message, **kw)

class UnprocessableEntity(HandlerError):
    def __init__(self, message="Unprocessable Entity", **kw):
        kw.setdefault("body", message)
        super().__init__(422, message=message, **kw)

class RateLimited(HandlerError):
    def __init__(self, message="Too Many Requests", **kw):
        kw.setdefault("body", message)
        super().__init__(429, message=message, **kw)

class Internal(HandlerError):
    def __init__(self, message="Internal Error", **kw):
        kw.setdefault("body", message)
        super().__init__(500, message=message, **kw)
