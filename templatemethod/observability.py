"""
OpenTelemetry tracing for orchestration calls.

Spans are always created through the OpenTelemetry API; without a
configured provider they are no-ops. `setup_tracing()` installs an SDK
provider that exports finished spans to stderr.
"""

import sys

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

logger = structlog.get_logger(__name__)

_tracer: trace.Tracer | None = None


def setup_tracing(service_name: str | None = None) -> trace.Tracer:
    """
    Initialize OpenTelemetry tracing with a console exporter on stderr.

    Args:
        service_name: Name of the service (appears in traces).
                      Defaults to APP_NAME lowercased.
    """
    global _tracer

    from templatemethod.version import APP_NAME, VERSION

    if service_name is None:
        service_name = APP_NAME.lower()

    resource = Resource.create(
        {"service.name": service_name, "service.version": VERSION}
    )
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer(__name__)
    logger.info("otel_tracing_initialized", service=service_name)
    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the tracer, falling back to whatever provider is globally set."""
    if _tracer is None:
        return trace.get_tracer("templatemethod")
    return _tracer
