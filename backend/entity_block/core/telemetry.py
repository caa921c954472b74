"""
OpenTelemetry Setup

Instruments FastAPI routes and SQLAlchemy queries when telemetry is enabled,
and hands out tracers for the custom spans opened around block rendering and
form submission.
"""
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from ..config import settings
from .database import engine
import logging

logger = logging.getLogger(__name__)


def setup_telemetry(app):
    """
    Setup OpenTelemetry instrumentation for the FastAPI app
    
    Args:
        app: FastAPI application instance
    
    Returns:
        The configured TracerProvider, or None when telemetry is disabled
    """
    if not settings.telemetry_enabled:
        logger.info("Telemetry disabled")
        return None
    
    resource = Resource.create({
        "service.name": "entity-block-api",
        "service.version": "1.0.0",
        "service.namespace": "entity_block",
    })
    
    tracer_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(tracer_provider)
    
    if settings.telemetry_exporter.lower() == "console":
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        logger.info("Console exporter enabled")
    
    FastAPIInstrumentor.instrument_app(app)
    SQLAlchemyInstrumentor().instrument(engine=engine)
    
    logger.info("OpenTelemetry instrumentation enabled for FastAPI and SQLAlchemy")
    return tracer_provider


def get_tracer(name: str):
    """
    Get a tracer for custom spans
    
    Args:
        name: Name of the tracer (usually __name__)
    
    Returns:
        Tracer instance
    """
    return trace.get_tracer(name)
