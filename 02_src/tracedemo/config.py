"""Project-level configuration read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_ENV_PATH = PROJECT_ROOT / ".env"

TRACE_EXPORTERS = ("console", "otlp", "zipkin")
SPAN_PROCESSORS = ("batch", "simple")


def _get_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if not 0 < value < 65536:
        raise ValueError(f"{name} must be a valid TCP port, got {value}")
    return value


def _get_ratio(env: Mapping[str, str], name: str) -> float | None:
    raw = env.get(name)
    if raw is None or raw == "":
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1, got {value}")
    return value


def _get_choice(env: Mapping[str, str], name: str, default: str, choices: tuple[str, ...]) -> str:
    value = (env.get(name) or default).strip().lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got {value!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the demo service and the ping simulator."""

    api_host: str = "0.0.0.0"
    api_port: int = 3000
    downstream_url: str = "http://localhost:8080/ping"

    service_name: str = "PyDemoService"
    trace_exporter: str = "console"
    trace_span_processor: str = "batch"
    trace_sample_ratio: float | None = None
    otlp_endpoint: str = "http://localhost:4318/v1/traces"
    zipkin_endpoint: str = "http://localhost:9411/api/v2/spans"

    log_level: str = "INFO"
    log_file: str | None = None

    ping_host: str = "0.0.0.0"
    ping_port: int = 8080
    ping_message: str = "pong"
    ping_service_name: str = "PingDemoService"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        if env is None:
            env = os.environ
        defaults = cls()

        return cls(
            api_host=env.get("API_HOST", defaults.api_host),
            api_port=_get_int(env, "API_PORT", defaults.api_port),
            downstream_url=env.get("DOWNSTREAM_URL", defaults.downstream_url),
            service_name=env.get("SERVICE_NAME", defaults.service_name),
            trace_exporter=_get_choice(
                env, "TRACE_EXPORTER", defaults.trace_exporter, TRACE_EXPORTERS
            ),
            trace_span_processor=_get_choice(
                env, "TRACE_SPAN_PROCESSOR", defaults.trace_span_processor, SPAN_PROCESSORS
            ),
            trace_sample_ratio=_get_ratio(env, "TRACE_SAMPLE_RATIO"),
            otlp_endpoint=env.get("OTLP_ENDPOINT", defaults.otlp_endpoint),
            zipkin_endpoint=env.get("ZIPKIN_ENDPOINT", defaults.zipkin_endpoint),
            log_level=env.get("LOG_LEVEL", defaults.log_level).upper(),
            log_file=env.get("LOG_FILE") or None,
            ping_host=env.get("PING_HOST", defaults.ping_host),
            ping_port=_get_int(env, "PING_PORT", defaults.ping_port),
            ping_message=env.get("PING_MESSAGE", defaults.ping_message),
            ping_service_name=env.get("PING_SERVICE_NAME", defaults.ping_service_name),
        )
