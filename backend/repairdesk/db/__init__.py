import importlib
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from repairdesk.config import settings

log = logging.getLogger("repairdesk.db")

DATABASE_URL = settings.DATABASE_URL
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, future=True, echo=False, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# every module that declares tables; imported before create_all so metadata is complete
MODEL_MODULES = [
    "repairdesk.models.user",
    "repairdesk.models.customer",
    "repairdesk.models.product",
    "repairdesk.models.stock_movement",
    "repairdesk.models.service",
    "repairdesk.models.transaction",
]


def init_db(reset: bool = False):
    """
    Initialize DB schema.

    Behavior:
      - reset=True (or RESET_DB=1 in the environment) drops & recreates all tables.
      - Otherwise existing tables are left in place and missing ones are created.
    """
    for mod in MODEL_MODULES:
        importlib.import_module(mod)

    if reset or settings.RESET_DB:
        log.info("Resetting database schema at %s", DATABASE_URL)
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    log.info("Database initialized (%d tables)", len(Base.metadata.tables))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
