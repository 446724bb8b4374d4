"""
Football Betting Agent - FastAPI Application

Main entry point for the backend API.
This module configures the FastAPI app, logging, middleware, and routes.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from betting_agent import config
from betting_agent.api.page import HTML_TEMPLATE
from betting_agent.api.routes import analysis, leagues
from betting_agent.application.dtos.dtos import HealthResponseDTO, ErrorResponseDTO
from betting_agent.domain.exceptions import AnalysisException, MatchValidationException
from betting_agent.utils.time_utils import get_current_time


# Log timestamps in the configured application timezone
class AppTimeFormatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        ct = get_current_time()
        if datefmt:
            s = ct.strftime(datefmt)
        else:
            t = ct.strftime("%Y-%m-%d %H:%M:%S")
            s = "%s,%03d" % (t, record.msecs)
        return s

formatter = AppTimeFormatter(config.LOG_FORMAT)
handler = logging.StreamHandler()
handler.setFormatter(formatter)
root_logger = logging.getLogger()
root_logger.setLevel(config.LOG_LEVEL)
root_logger.handlers = [handler]
logger = logging.getLogger(__name__)


# Application metadata
APP_TITLE = "Football Betting Agent"
APP_DESCRIPTION = """
⚽ **Football Match Analysis API**

Enter two teams and a league to get a quick match read.

## Analysis Includes

- Home Win / Draw / Away Win decimal odds (with bookmaker margin)
- Predicted outcome and confidence score
- Recommended bet
- Narrative analysis and key factors

---
⚠️ **Informational purposes only** - Gambling involves risk
"""
APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {APP_TITLE} v{APP_VERSION}")
    logger.info(f"Timezone: {config.APP_TIMEZONE}")
    if config.ANALYSIS_DELAY_SECONDS > 0:
        logger.info(f"Analysis delay: {config.ANALYSIS_DELAY_SECONDS:.2f}s")
    else:
        logger.info("Analysis delay disabled")
    
    yield
    
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title=APP_TITLE,
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# Configure CORS
all_origins = list(set(config.BASE_CORS_ORIGINS + config.CORS_ORIGINS))

app.add_middleware(
    CORSMiddleware,
    allow_origins=all_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(MatchValidationException)
async def match_validation_exception_handler(request: Request, exc: MatchValidationException):
    """Missing team names are a client error."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponseDTO(
            error="validation_error",
            message=str(exc),
        ).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported as 400 like any other client error."""
    logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponseDTO(
            error="validation_error",
            message="Invalid request body",
        ).model_dump(),
    )


@app.exception_handler(AnalysisException)
async def analysis_exception_handler(request: Request, exc: AnalysisException):
    """Analysis failures hide internal detail from the caller."""
    return JSONResponse(
        status_code=500,
        content=ErrorResponseDTO(
            error="internal_server_error",
            message="Failed to analyze match",
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=ErrorResponseDTO(
            error="internal_server_error",
            message="An unexpected error occurred",
            details={"path": str(request.url.path)},
        ).model_dump(),
    )


# Health check endpoint
@app.get(
    "/health",
    response_model=HealthResponseDTO,
    tags=["Health"],
    summary="Health check",
    description="Check if the API is running and healthy.",
)
async def health_check() -> HealthResponseDTO:
    """Health check endpoint."""
    return HealthResponseDTO(
        status="healthy",
        version=APP_VERSION,
        timestamp=get_current_time(),
    )


# Analysis page
@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home():
    """Serve the analysis page."""
    return HTML_TEMPLATE


# API info endpoint
@app.get(
    "/api",
    tags=["Root"],
    summary="API Information",
    description="Get basic API information and links.",
)
async def api_info():
    """API info with endpoint links."""
    return {
        "name": APP_TITLE,
        "version": APP_VERSION,
        "documentation": "/docs",
        "health": "/health",
        "endpoints": {
            "analyze": "/api/analyze",
            "leagues": "/api/leagues",
        },
    }


# Include routers
app.include_router(analysis.router, prefix="/api")
app.include_router(leagues.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "betting_agent.api.main:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=True,
    )
