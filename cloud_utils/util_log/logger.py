import json, sys, uuid, time, traceback
from typing import Any, Dict, Optional, Protocol, runtime_checkable

@runtime_checkable
class Logger(Protocol):
    """Anything with warn/error accepting a single value. Return values are ignored."""
    def warn(self, value: Any) -> Any: ...
    def error(self, value: Any) -> Any: ...

def _describe(value: Any) -> Dict[str, Any]:
    if not isinstance(value, BaseException):
        return {"msg": value if isinstance(value, str) else str(value)}
    rec: Dict[str, Any] = {"msg": str(value) or type(value).__name__, "error_type": type(value).__name__}
    status_code = getattr(value, "status_code", None)
    if status_code is not None:
        rec["status_code"] = status_code
    elif value.__traceback__ is not None:
        rec["traceback"] = "".join(traceback.format_exception(type(value), value, value.__traceback__))
    return rec

class JsonLogger:
    def __init__(self, *, correlation_id: Optional[str] = None, stream=None):
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.stream = stream

    def log(self, level: str, msg: Any, **fields: Any) -> None:
        rec = {"level": level.lower(), **_describe(msg), "ts_ms": int(time.time()*1000), "correlation_id": self.correlation_id, **fields}
        out = self.stream or sys.stdout
        try:
            out.write(json.dumps(rec, ensure_ascii=False, default=str)+"\n"); out.flush()
        except (OSError, ValueError):
            print({"level": level, "msg": rec["msg"], **fields})

    def info(self, msg: Any, **fields: Any): self.log("INFO", msg, **fields)
    def warn(self, msg: Any, **fields: Any): self.log("WARN", msg, **fields)
    def error(self, msg: Any, **fields: Any): self.log("ERROR", msg, **fields)
