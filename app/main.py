"""FastAPI application entrypoint. No business logic; only wiring and error handlers."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.errors import add_exception_handlers

# The API description and its viewer are served without authentication.
app = FastAPI(
    title="Users API",
    version="1.0",
    openapi_url=settings.docs_path,
    swagger_ui_oauth2_redirect_url=None,
    docs_url=f"{settings.docs_path}/ui",
    redoc_url=None,
)

add_exception_handlers(app)

app.include_router(v1_router)
