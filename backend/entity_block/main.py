from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from .core.database import init_db
from .core.logging_config import setup_logging
from .core.telemetry import setup_telemetry
from .core.events.handlers import register_event_handlers
from .api.routes import auth, projects, documents, entity_browsers, blocks, regions
from .api.exceptions import (
    entity_block_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .exceptions import EntityBlockException
from .config import settings

# Setup logging first
setup_logging()

app = FastAPI(title="Entity Browser Block API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(EntityBlockException, entity_block_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

setup_telemetry(app)
register_event_handlers()
init_db()

app.include_router(auth.router, prefix="/api")
app.include_router(projects.router, prefix="/api")
app.include_router(documents.router, prefix="/api")
app.include_router(entity_browsers.router, prefix="/api")
app.include_router(blocks.router, prefix="/api")
app.include_router(regions.router, prefix="/api")


@app.get("/")
def root():
    return {"message": "Entity Browser Block API"}


@app.get("/health")
def health():
    return {"status": "healthy"}
