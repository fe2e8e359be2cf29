# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.helpers.exception_handler import setup_exception_handlers
from shared.wrappers.response_wrapper import JsonResponseMiddleware
from .router.inventory import assets_router, stock_router
from .router.requests import request_router
from .router.customers import customer_activity_router
from .router.common import export_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title=settings.APP_NAME)

# Allow requests from the React app
origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom JSON response wrapper middleware
app.add_middleware(JsonResponseMiddleware)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(stock_router.router)
app.include_router(assets_router.router)
app.include_router(request_router.router)
app.include_router(customer_activity_router.router)
app.include_router(export_router.router)


@app.get("/api/health")
def health():
    return {"status": "healthy"}
