"""
MT799 Gateway - Main Application

Receives SWIFT MT799 (free-format) messages as file uploads, splits them
into their four blocks, extracts the header, text and trailer fields and
stores the result.

Message layout:
- {1:} Basic Header Block
- {2:} Application Header Block
- {4:} Text Block (:20: reference, :21: related reference, :79: narrative)
- {5:} Trailer Block ({MAC:}, {CHK:})
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from .api import health, messages
from .config import settings
from .db import database
from .middleware.rate_limiter import RateLimitMiddleware
from .observability import setup_tracing

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# Application lifespan for startup/shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle.

    Startup: connect to the message database and create the schema.
    Shutdown: dispose of the engine.
    """
    await database.connect()
    logger.info(
        f"Parsing policies: validation={settings.validation_policy.value}, "
        f"segmentation={settings.segmentation_policy.value}"
    )

    yield

    await database.disconnect()


app = FastAPI(
    title="MT799 Gateway",
    description="""
## SWIFT MT799 Message Gateway

Upload MT799 free-format messages and query the stored records.

### Blocks

| Block | Content | Layout |
|-------|---------|--------|
| `{1:}` | Basic Header | type(1) service(2) BIC(12) session(4) sequence(6) |
| `{2:}` | Application Header | direction(1) type(3) receiver(12) sender(11) session(4) sequence(6) priority(1) |
| `{4:}` | Text | `:20:`, `:21:`, `:79:` with continuation lines |
| `{5:}` | Trailer | `{MAC:...}`, `{CHK:...}` |

Only syntax is checked: BICs, MACs and checksums are stored as received.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=[
        {
            "name": "Health",
            "description": "Service health and readiness probes",
        },
        {
            "name": "MT799 Messages",
            "description": "Upload, preview and list MT799 messages.",
        },
    ],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RateLimitMiddleware)

if settings.otel_enabled:
    setup_tracing(app)
    FastAPIInstrumentor.instrument_app(app)

# =============================================================================
# API Routes
# =============================================================================

app.include_router(health.router, tags=["Health"])
app.include_router(messages.router)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "MT799 Gateway",
        "version": "1.0.0",
        "documentation": "/docs",
    }
