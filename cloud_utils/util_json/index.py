from __future__ import annotations
from typing import Any
import json, math

def _finite(obj: Any) -> Any:
    # JSON.stringify writes NaN/Infinity as null
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if isinstance(obj, dict):
        return {k: _finite(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_finite(v) for v in obj]
    return obj

def dumps_compact(obj: Any) -> str:
    # same text JSON.stringify produces; str() for datetime/Decimal/UUID
    return json.dumps(_finite(obj), ensure_ascii=False, separators=(",", ":"), default=str)

def reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")
