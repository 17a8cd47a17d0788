"""One-time OpenTelemetry setup for the process."""

from dataclasses import dataclass

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.exporter.zipkin.json import ZipkinExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
    SpanProcessor,
)
from opentelemetry.sdk.trace.sampling import ParentBased, Sampler, TraceIdRatioBased

from ..config import Settings
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class TracingHandle:
    """Live tracing pipeline returned by init_tracing()."""

    provider: TracerProvider
    exporter: SpanExporter
    service_name: str

    def tracer(self, name: str) -> trace.Tracer:
        """Get a tracer bound to this provider."""
        return self.provider.get_tracer(name)

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        """Export all finished spans still held by the processor."""
        return self.provider.force_flush(timeout_millis)

    def shutdown(self) -> None:
        """Flush pending spans and shut the provider down."""
        global _handle
        logger.info("Shutting down tracing for %s", self.service_name)
        self.provider.shutdown()
        if _handle is self:
            _handle = None


_handle: TracingHandle | None = None


def build_exporter(settings: Settings) -> SpanExporter:
    """Create the single active span exporter named by settings."""
    if settings.trace_exporter == "console":
        return ConsoleSpanExporter()
    if settings.trace_exporter == "otlp":
        return OTLPSpanExporter(endpoint=settings.otlp_endpoint)
    if settings.trace_exporter == "zipkin":
        return ZipkinExporter(endpoint=settings.zipkin_endpoint)
    raise ValueError(f"Unknown trace exporter: {settings.trace_exporter!r}")


def build_sampler(settings: Settings) -> Sampler | None:
    """Ratio sampler when configured, otherwise None for the SDK default."""
    if settings.trace_sample_ratio is None:
        return None
    return ParentBased(TraceIdRatioBased(settings.trace_sample_ratio))


def build_span_processor(settings: Settings, exporter: SpanExporter) -> SpanProcessor:
    if settings.trace_span_processor == "simple":
        return SimpleSpanProcessor(exporter)
    if settings.trace_span_processor == "batch":
        return BatchSpanProcessor(exporter)
    raise ValueError(f"Unknown span processor: {settings.trace_span_processor!r}")


def init_tracing(
    settings: Settings,
    exporter: SpanExporter | None = None,
    register_global: bool = True,
) -> TracingHandle:
    """
    Initialize the tracing pipeline once for this process.

    Args:
        settings: Service name, exporter, processor and sampler selection.
        exporter: Explicit exporter overriding settings.trace_exporter.
        register_global: Also install the provider as the global tracer provider.

    Returns:
        Handle used to instrument the server and client and to flush on shutdown.
        A second call while a handle is live returns that handle unchanged.
    """
    global _handle
    if _handle is not None:
        logger.warning("Tracing already initialized for %s", _handle.service_name)
        return _handle

    if exporter is None:
        exporter = build_exporter(settings)

    resource = Resource.create({SERVICE_NAME: settings.service_name})
    sampler = build_sampler(settings)
    if sampler is None:
        provider = TracerProvider(resource=resource)
    else:
        provider = TracerProvider(resource=resource, sampler=sampler)
    provider.add_span_processor(build_span_processor(settings, exporter))

    if register_global:
        trace.set_tracer_provider(provider)

    _handle = TracingHandle(
        provider=provider,
        exporter=exporter,
        service_name=settings.service_name,
    )
    logger.info(
        "Tracing initialized",
        extra={
            "context": {
                "service_name": settings.service_name,
                "exporter": type(exporter).__name__,
                "span_processor": settings.trace_span_processor,
                "sample_ratio": settings.trace_sample_ratio,
            }
        },
    )
    return _handle


def get_tracing() -> TracingHandle | None:
    """Get the live tracing handle, if any."""
    return _handle
