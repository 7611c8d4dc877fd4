from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import engine, Base
from . import models  # noqa: F401  registers tables on Base
from .routers import calculators, quote_session

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("paintquote")

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="PaintQuote",
    description="Quoting engine for painting contractors",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculators.router, prefix="/api")
app.include_router(quote_session.router, prefix="/api")

logger.info("%s quote engine ready", settings.COMPANY_NAME)


@app.get("/health")
def health():
    return {"status": "ok", "app": "paintquote"}
