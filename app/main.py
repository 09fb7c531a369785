# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.middleware import RequestIdMiddleware
from app.db import Base, engine
from app.config import settings
from app import models  # noqa: F401  registers tables

from app.routers import zones, quote, halfhalf
from app.services.halfhalf import HalfHalfRegistry, parse_rules

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("app")

app = FastAPI(title="POS Pricing API", version="0.1.0")
app.state.half_half = HalfHalfRegistry(parse_rules(settings.HALF_HALF_RULES))

@app.on_event("startup")
def init_db():
    Base.metadata.create_all(bind=engine)
    logger.info("startup env=%s db=%s", settings.APP_ENV, engine.url.get_backend_name())

# Middlewares
app.add_middleware(RequestIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(zones.router)
app.include_router(quote.router)
app.include_router(halfhalf.router)

@app.get("/healthz")
def healthz():
    return {"ok": True}
