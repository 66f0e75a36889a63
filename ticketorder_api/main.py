import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from ticketorder_api.database import Base, engine
from ticketorder_api.routers import ticket_orders
from ticketorder_api import seed
from common.tracing import setup_telemetry # common 모듈 임포트

# 로거 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SEED_DEMO_DATA = os.getenv("SEED_DEMO_DATA", "false").lower() in ("1", "true", "yes")
STATIC_DIR = Path(os.getenv("STATIC_DIR", Path(__file__).resolve().parent / "static"))

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Setting up OpenTelemetry...")
    setup_telemetry(app, engine=engine)
    logger.info("OpenTelemetry setup complete.")

    logger.info("Creating database tables for Ticket Order API...")
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Ticket Order API database tables created successfully.")
    except Exception as e:
        logger.error(f"Error creating Ticket Order API database tables: {e}")

    if SEED_DEMO_DATA:
        logger.info("Seeding demo events and customers...")
        seed.run()
    yield

app = FastAPI(title="Ticket Order API", lifespan=lifespan)

app.include_router(ticket_orders.router)

@app.get("/health")
def health_check():
    return {"status": "ok", "message": "Ticket order service is running."}

# Front end lives under /ui so trailing-slash API paths still redirect to their routes.
if STATIC_DIR.is_dir():
    @app.get("/", include_in_schema=False)
    def _root():
        return RedirectResponse(url="/ui/")

    app.mount("/ui", StaticFiles(directory=str(STATIC_DIR), html=True), name="static")
