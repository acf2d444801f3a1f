import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

# One provider for the whole session: OpenTelemetry only accepts the first one.
_exporter = InMemorySpanExporter()
_provider = TracerProvider()
_provider.add_span_processor(SimpleSpanProcessor(_exporter))
trace.set_tracer_provider(_provider)


@pytest.fixture(autouse=True)
def clean_state():
    """Reset cached settings, the variant registry and structlog config."""
    import templatemethod.observability as obs
    import templatemethod.registry as registry_module
    from templatemethod.config import get_settings
    from templatemethod.logging import setup_logging

    setup_logging()
    get_settings.cache_clear()
    registry_module._registry = None
    obs._tracer = None
    _exporter.clear()
    yield
    get_settings.cache_clear()
    registry_module._registry = None
    obs._tracer = None


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """Spans finished during the test."""
    return _exporter
