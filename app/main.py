import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.routing import APIRoute
from starlette.routing import compile_path

from app.api.routes import api_router
from app.api.routes.auth import router as auth_router
from app.api.routes.quizzes import router as quizzes_router
from app.api.routes.users import router as users_router
from app.core.config import settings
from app.core.exceptions import QuizServiceError
from app.core.logging_config import configure_logging
from app.db.base import Base
from app.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    # Create the DB tables (no migrations yet)
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


def _full_path(router, route) -> str:
    if router.prefix and not route.path.startswith(router.prefix):
        return router.prefix + route.path
    return route.path


# (path pattern, methods) for every endpoint this app owns, read from our own routers
ROUTE_METHODS = [
    (compile_path(_full_path(router, route))[0], frozenset(route.methods))
    for router in (auth_router, users_router, quizzes_router)
    for route in router.routes
    if isinstance(route, APIRoute)
]


def allowed_methods(path: str) -> list:
    allowed = set()
    for pattern, methods in ROUTE_METHODS:
        if pattern.match(path):
            allowed |= methods
    return sorted(allowed)


@app.exception_handler(QuizServiceError)
async def quiz_service_error_handler(request: Request, exc: QuizServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    headers = dict(exc.headers or {})
    message = exc.detail
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        allowed = allowed_methods(request.url.path)
        if allowed:
            headers["Allow"] = ", ".join(allowed)
        message = f"Method {request.method} Not Allowed"
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=headers or None)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request"})
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body") or "body"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"{field}: {first.get('msg', 'invalid value')}"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Internal server error"})


@app.get("/")
def root():
    return {"message": "Welcome to the Quiz Code API"}
