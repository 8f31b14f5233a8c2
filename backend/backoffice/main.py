"""
Backoffice Credit API
Multi-tenant API for businesses, customers, products, balances and purchases

Run with:
    uvicorn backoffice.main:app --reload
"""
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from supabase import Client

from backoffice.api import businesses, customer_balances, customers, orders, products, purchase
from backoffice.core.config import settings
from backoffice.core.database import get_supabase
from backoffice.core.exceptions import StoreError
from backoffice.repositories.business_repository import BusinessRepository

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# Every failure leaves the API as {success: false, error}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"

    logger.warning(f"Invalid request to {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"success": False, "error": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Error in {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"},
    )


app.include_router(businesses.router)
app.include_router(customers.router)
app.include_router(customer_balances.router)
app.include_router(products.router)
app.include_router(orders.router)
app.include_router(purchase.router)


@app.get("/health")
def health(client: Client = Depends(get_supabase)):
    """Health check endpoint - one trivial store query"""
    try:
        BusinessRepository(client).ping()
    except StoreError as e:
        raise HTTPException(status_code=500, detail=e.message)

    return {"ok": True}
