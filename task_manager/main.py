import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import CORS_ORIGINS
from .database import create_tables
from .routers import tasks
from .schemas.envelope import ErrorEnvelope

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Task Manager API",
    description="Track recent tasks: list incomplete, create, mark complete",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tasks.router, tags=["tasks"])


def _error_response(status_code: int, message: str, error=None, headers=None) -> JSONResponse:
    envelope = ErrorEnvelope(code=str(status_code), message=message, error=error)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(),
        headers=headers,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict):
        message = exc.detail.get("message", "")
        error = exc.detail.get("error")
    else:
        message = str(exc.detail)
        error = None
    return _error_response(exc.status_code, message, error, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = []
    body_error = False
    for err in exc.errors():
        loc = err.get("loc", ())
        if loc and loc[0] == "body":
            body_error = True
        field = ".".join(str(part) for part in loc[1:]) or "body"
        problems.append(f"{field}: {err.get('msg')}")

    message = "Title and Description are required" if body_error else "Invalid request"
    return _error_response(status.HTTP_400_BAD_REQUEST, message, "; ".join(problems))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", str(exc))


# Create tables on startup
@app.on_event("startup")
def on_startup():
    create_tables()

@app.get("/")
def read_root():
    return {"message": "Task Manager API"}

@app.get("/health")
def health_check():
    return {"status": "healthy"}
