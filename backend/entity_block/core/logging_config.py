import logging
import sys
from opentelemetry import trace
from ..config import settings


class TraceIdFormatter(logging.Formatter):
    """
    Formatter that appends the active OpenTelemetry trace id to each record

    Records emitted outside of a recording span are formatted unchanged.
    """
    
    def __init__(self, fmt=None, datefmt=None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._traced = logging.Formatter(fmt=f"{fmt} [trace_id=%(trace_id)s]", datefmt=datefmt)
    
    def format(self, record):
        span = trace.get_current_span()
        if span.is_recording():
            span_context = span.get_span_context()
            if span_context.trace_id:
                # First 16 hex chars are enough to correlate
                record.trace_id = format(span_context.trace_id, '032x')[:16]
                return self._traced.format(record)
        return super().format(record)


def setup_logging():
    """Configure logging for the application"""
    log_level = settings.log_level.upper()
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(TraceIdFormatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        handlers=[handler]
    )
    
    # Set specific log levels for noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    
    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level}")
