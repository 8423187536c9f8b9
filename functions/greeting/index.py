# functions/greeting/index.py -- entry point: index.handler
import os

from cloud_utils import JSON_CT, HandlerHelper, HelperConfig, JsonLogger, UnprocessableEntity

STAGES = ("test", "prod")
GREETING_VARS = {"test": "TEST_GREETING", "prod": "PROD_GREETING"}

_CONFIG = HelperConfig.from_env()


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Environment variable '{name}' is not set or empty")
    return value


class GreetingClient:
    """Builds stage-specific greetings; the prefix comes from TEST_GREETING / PROD_GREETING."""

    def __init__(self, stage: str):
        if stage not in STAGES:
            raise ValueError(f"Unknown stage '{stage}', expected one of {STAGES}")
        self.stage = stage
        self.greeting_prefix = _require_env(GREETING_VARS[stage])

    def get_greeting(self, name: str) -> str:
        return f"{self.greeting_prefix}. Hello there {name}!"


def _request_id(context):
    return getattr(context, "request_id", None) or getattr(context, "aws_request_id", None)


def handler(event, context):
    helper = HandlerHelper(_CONFIG, logger=JsonLogger(correlation_id=_request_id(context)))
    preflight = helper.preflight(event)
    if preflight:
        return preflight

    def logic():
        data = helper.parse_body(event)
        name = data.get("name") if isinstance(data, dict) else None
        if not isinstance(name, str) or not name.strip():
            raise UnprocessableEntity("Field 'name' must be a non-empty string")
        client = GreetingClient(os.getenv("STAGE", "test"))
        return helper.ok({"greeting": client.get_greeting(name.strip())}, {"Content-Type": JSON_CT})

    return helper.run_logic(logic, "Greeting failed")
