from dotenv import load_dotenv
load_dotenv()

import logging
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from database import DocumentStore, get_db, get_store

# ENV
from config.env import ENV, CORS_ALLOWED_ORIGINS, LOG_LEVEL, get_settings, validate_production_env

# ROUTES
from routes.auth import router as auth_router
from routes.users import router as users_router
from routes.products import router as products_router
from routes.catalog import categories_router, offers_router
from routes.orders import router as orders_router
from routes.cart import router as cart_router, saved_router

from utils.errors import ServiceError
from utils.indexes import ensure_indexes
from utils.validators import first_error

logging.basicConfig(
    level=LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

validate_production_env()

logger.info("ENV: %s", ENV)

app = FastAPI(
    title="Marketplace API",
    version="1.0.0",
    docs_url=None if ENV == "production" else "/docs",
    redoc_url=None if ENV == "production" else "/redoc",
    openapi_url=None if ENV == "production" else "/openapi.json",
)

app.state.legacy_error_status = get_settings().legacy_error_status

# -----------------------------
# CORS
# -----------------------------

allowed_origins = [origin.strip() for origin in CORS_ALLOWED_ORIGINS if origin.strip()]
if not allowed_origins:
    allowed_origins = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------
# ERRORS
# -----------------------------

def _error_response(request: Request, message: str, status_code: int) -> PlainTextResponse:
    # existing clients read every failure as 201 + text
    if request.app.state.legacy_error_status:
        status_code = 201
    return PlainTextResponse(message, status_code=status_code)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return _error_response(request, exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = first_error(list(exc.errors()))
    return _error_response(request, error.message, error.status_code)

# -----------------------------
# ROUTES
# -----------------------------

app.include_router(auth_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(products_router, prefix="/api")
app.include_router(categories_router, prefix="/api")
app.include_router(offers_router, prefix="/api")
app.include_router(orders_router, prefix="/api")
app.include_router(cart_router, prefix="/api")
app.include_router(saved_router, prefix="/api")

# -----------------------------
# HEALTH CHECKS
# -----------------------------

@app.get("/api/health")
async def health():

    return {"status": "ok"}

@app.get("/api/health/db")
async def health_db(store: DocumentStore = Depends(get_store)):
    await store.ping()
    return {"status": "mongodb connected"}

# -----------------------------
# STARTUP
# -----------------------------

@app.on_event("startup")
async def create_indexes():
    await ensure_indexes(get_db())
