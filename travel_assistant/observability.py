import os
import logging

from opentelemetry import trace as trace_api
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor

logger = logging.getLogger(__name__)

SERVICE_NAME = "travel-assistant-api"

_configured = False


def setup_tracing() -> bool:
    """Set up OpenTelemetry tracing when an OTLP endpoint is configured.

    The exporter reads ``OTEL_EXPORTER_OTLP_ENDPOINT`` and
    ``OTEL_EXPORTER_OTLP_HEADERS`` itself. Without an endpoint the global
    tracer provider stays the no-op default and spans cost nothing.
    """
    global _configured
    if _configured:
        return True

    if not os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT"):
        logger.warning(
            "OTEL_EXPORTER_OTLP_ENDPOINT not configured. Tracing will be disabled."
        )
        return False

    try:
        tracer_provider = TracerProvider(
            resource=Resource.create({"service.name": SERVICE_NAME})
        )
        tracer_provider.add_span_processor(SimpleSpanProcessor(OTLPSpanExporter()))
        trace_api.set_tracer_provider(tracer_provider=tracer_provider)
    except Exception as e:
        logger.error(f"Failed to set up tracing: {e}")
        return False

    _configured = True
    logger.info("OpenTelemetry tracing set up successfully")
    return True


def get_tracer(name: str = __name__):
    """Get a tracer instance for manual instrumentation."""
    return trace_api.get_tracer(name)
