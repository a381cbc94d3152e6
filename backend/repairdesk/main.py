import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from repairdesk.api.health import router as health_router
from repairdesk.api.routes_customers import router as customers_router
from repairdesk.api.routes_products import router as products_router
from repairdesk.api.routes_reports import router as reports_router
from repairdesk.api.routes_services import router as services_router
from repairdesk.api.routes_stock import router as stock_router
from repairdesk.api.routes_transactions import router as transactions_router
from repairdesk.api.routes_users import router as users_router
from repairdesk.config import settings
from repairdesk.db import init_db
from repairdesk.logging_config import configure_logging

configure_logging(settings.LOG_LEVEL)
log = logging.getLogger("repairdesk.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    init_db()
    log.info("Repair Desk backend ready")
    yield


app = FastAPI(title="Repair Desk - Backend", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(customers_router)

app.include_router(products_router)

app.include_router(stock_router)

app.include_router(services_router)

app.include_router(transactions_router)

app.include_router(users_router)

app.include_router(reports_router)


def run():
    import uvicorn

    uvicorn.run("repairdesk.main:app", host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
