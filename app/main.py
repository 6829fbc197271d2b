import logging

from dotenv import load_dotenv
load_dotenv()  # Load environment variables from .env file

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import assistant, health
from app.config import settings
from app.core.errors import (
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from app.middleware.logging import RequestLoggingMiddleware

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
)

app = FastAPI(
    title="Course Guide Assistant",
    version="1.0.0",
    description="Rule-based course guidance for the course assistant widget"
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request Logging Middleware
app.add_middleware(RequestLoggingMiddleware)

# Exception Handlers
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# API Routes
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(assistant.router, prefix="/api/v1", tags=["assistant"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.api_host, port=settings.api_port)
