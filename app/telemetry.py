from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.flask import FlaskInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.propagate import set_global_textmap
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from models import db

_provider_configured = False
_span_exporter = None


def _configure_provider(app):
    global _provider_configured, _span_exporter
    if _provider_configured:
        return
    service_name = app.config.get("OTEL_SERVICE_NAME", "vendorhub-backend")
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    if app.config.get("TESTING"):
        _span_exporter = InMemorySpanExporter()
        processor = SimpleSpanProcessor(_span_exporter)
    else:
        endpoint = app.config.get("OTEL_EXPORTER_OTLP_ENDPOINT")
        processor = BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint))
    provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)
    _provider_configured = True


def get_span_exporter():
    """In-memory exporter collecting spans when running under TESTING."""
    return _span_exporter


def init_tracing(app):
    """Initialize OpenTelemetry tracing for the Flask app."""
    _configure_provider(app)
    set_global_textmap(TraceContextTextMapPropagator())

    FlaskInstrumentor().instrument_app(app)
    with app.app_context():
        SQLAlchemyInstrumentor().instrument(engine=db.engine)
