"""FastAPI application for the database wizard."""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api_models import HealthResponse, PreviewResponse
from .config import DEFAULT_FRONTEND_ORIGIN, Settings, configure_logging
from .errors import ConfigurationError
from .schema_model import DatabaseCreationResult, SchemaDescription
from .service import DatabaseWizardService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    try:
        app.state.service = DatabaseWizardService.from_settings(Settings.from_env())
    except ConfigurationError as e:
        logger.error("%s; database creation disabled (preview still works)", e)
        app.state.service = DatabaseWizardService()
    else:
        if app.state.service.executor is None:
            logger.warning("SQLSERVER_URL not set, database creation disabled (preview still works)")
        else:
            logger.info("SQL Server execution enabled")

    yield


# Create FastAPI app
app = FastAPI(
    title="Database Wizard API",
    description="Validate schema descriptions and generate SQL Server DDL",
    version="0.1.0",
    lifespan=lifespan,
)
# Preview-only until startup wires in the configured server
app.state.service = DatabaseWizardService()

# Configure CORS
frontend_origin = os.getenv("FRONTEND_ORIGIN", DEFAULT_FRONTEND_ORIGIN)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[frontend_origin, "http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_service(request: Request) -> DatabaseWizardService:
    return request.app.state.service


@app.exception_handler(RequestValidationError)
async def malformed_schema_handler(request: Request, exc: RequestValidationError):
    """Answer unparseable bodies with the same result shape as rule violations."""
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        errors.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    result = DatabaseCreationResult(success=False, message="Validation failed", errors=errors)
    return JSONResponse(content=result.model_dump(by_alias=True))


@app.post("/api/database/validate", response_model=DatabaseCreationResult)
async def validate(schema: SchemaDescription, request: Request):
    """Run the schema rules and return every violation found."""
    return get_service(request).validate(schema)


@app.post("/api/database/preview", response_model=PreviewResponse)
async def preview(schema: SchemaDescription, request: Request):
    """Generate the DDL script without executing it."""
    result = get_service(request).preview(schema)
    return PreviewResponse(success=result.success, sql=result.generated_sql, errors=result.errors)


@app.post("/api/database/create", response_model=DatabaseCreationResult)
async def create(schema: SchemaDescription, request: Request):
    """
    Validate, generate and execute the schema on the configured SQL Server.

    Always answers 200 with a result object; check ``success``.
    """
    return await get_service(request).create_database(schema)


@app.get("/health", response_model=HealthResponse)
async def health(request: Request):
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        executor_configured=get_service(request).executor is not None,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8005)
