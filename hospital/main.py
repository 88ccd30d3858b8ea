import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from contextlib import asynccontextmanager

from hospital.config import LOG_LEVEL
from hospital.database import init_db
from hospital.routers import doctors, lookups, patients

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Creating missing database tables...")
    init_db()
    logger.info("Database ready.")
    yield
    logger.info("App shutting down.")


app = FastAPI(title="Hospital records", lifespan=lifespan)

app.include_router(doctors.router)
app.include_router(patients.router)
app.include_router(lookups.rooms)
app.include_router(lookups.specializations)
app.include_router(lookups.sections)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """
    Persistence failures end the request with a 500, never the process.
    """
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Database error."})
