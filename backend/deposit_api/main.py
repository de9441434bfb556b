from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from deposit_api.api.envelope import error_response
from deposit_api.api.health import router as health_router
from deposit_api.api.routes_companies import router as companies_router
from deposit_api.api.routes_products import router as products_router
from deposit_api.api.routes_users import router as users_router
from deposit_api.config import settings
from deposit_api.db import engine, init_db
from deposit_api.errors import DepositApiError, NotFoundError
from deposit_api.utils.log import get_logger

log = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    init_db()
    log.info("Available endpoints: GET/POST /api/products, GET /api/companies, GET /api/users, GET /health")

    try:
        yield
    finally:
        engine.dispose()
        log.info("Database connection closed")


app = FastAPI(
    title="Deposit Management API",
    version="1.0.0",
    description="Products, companies and users of the deposit return scheme.",
    docs_url="/api-docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["health"])

app.include_router(products_router, prefix="/api/products", tags=["products"])

app.include_router(companies_router, prefix="/api/companies", tags=["companies"])

app.include_router(users_router, prefix="/api/users", tags=["users"])


@app.exception_handler(DepositApiError)
async def deposit_api_error_handler(request: Request, exc: DepositApiError):
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # unknown paths and unsupported methods on known paths both read as "no such endpoint"
    if exc.status_code in (404, 405):
        return error_response(NotFoundError.status_code, NotFoundError.default_message)
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    log.info("rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(400, "Invalid request parameters")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, DepositApiError.default_message)


def run():
    import uvicorn

    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
