# eventbook/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from eventbook import __version__
from eventbook.api.v1.api import api_router
from eventbook.core.config import settings
from eventbook.core.email import is_email_configured
from eventbook.core.errors import (
    AppError,
    app_error_handler,
    database_error_handler,
    unexpected_error_handler,
    validation_error_handler,
)
from eventbook.core.limiter import limiter

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting eventbook service...")
    if not is_email_configured():
        logger.warning(
            "RESEND_API_KEY not configured. Reminder emails will be simulated."
        )
    yield
    logger.info("Shutting down eventbook service...")


app = FastAPI(
    title="eventbook",
    version=__version__,
    description="""
        **Event booking service**

        * **Events**: calendar listing with categories and tier eligibility
        * **Reminders**: staff-sent reminder emails with optional RSVP links
        * **Confirmations**: token-addressed confirm/decline for recipients

        Staff endpoints require a bearer token carrying the `STAFF` role.
        """,
    lifespan=lifespan,
)

app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(SQLAlchemyError, database_error_handler)
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(Exception, unexpected_error_handler)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    return {"status": "eventbook is running"}
