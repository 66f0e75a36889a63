import logging
import os
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def telemetry_enabled() -> bool:
    return os.getenv("OTEL_ENABLED", "true").lower() in ("1", "true", "yes")

def setup_telemetry(app: FastAPI, engine=None) -> None:
    """
    Sets up OpenTelemetry for the FastAPI application.
    This includes a tracer provider, an OTLP exporter, and instrumentation for
    FastAPI and, when an engine is given, SQLAlchemy.
    """
    if not telemetry_enabled():
        logger.info("OTEL_ENABLED is off. Skipping telemetry setup.")
        return

    service_name = os.getenv("OTEL_SERVICE_NAME")
    if not service_name:
        logger.warning("OTEL_SERVICE_NAME environment variable not set. Defaulting to 'unknown_service'.")
        service_name = "unknown_service"

    resource = Resource(attributes={
        "service.name": service_name
    })

    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4317")
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True)))
    trace.set_tracer_provider(provider)

    logger.info(f"Telemetry setup for service: {service_name}")
    logger.info(f"OTLP endpoint: {endpoint}")

    # Instrument the FastAPI application.
    FastAPIInstrumentor.instrument_app(app)

    if engine is not None:
        SQLAlchemyInstrumentor().instrument(engine=engine)
        logger.info("SQLAlchemy engine has been instrumented.")

    logger.info("FastAPI has been instrumented.")
