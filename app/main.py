from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request, Response
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.logging import bind_correlation_id, configure_logging, get_logger, reset_correlation_id
from app.core.metrics import get_counters, get_metrics, timer
from app.db.database import Base, engine, get_db
from app.routers.exceptions import register_exception_handlers
from app.routers.teams import router as teams_router

CORRELATION_HEADER = "X-Correlation-ID"

configure_logging(environment=settings.environment)
logger = get_logger("teams.app.main", component="app")

_app_start_time = datetime.now(timezone.utc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup for local runs; production relies on Alembic."""
    if settings.run_startup_ddl:
        logger.info("startup_execute_ddl", extra={"structured_data": {"run_startup_ddl": True}})
        Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
register_exception_handlers(app)

# Register routers at import time so tests see routes without requiring startup
app.include_router(teams_router)


@app.middleware("http")
async def correlation_middleware(request: Request, call_next):
    cid, token = bind_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        with timer(f"http.{request.method.lower()}"):
            response = await call_next(request)
    finally:
        reset_correlation_id(token)
    response.headers[CORRELATION_HEADER] = cid
    return response


@app.get("/health")
def health(db: Session = Depends(get_db)):
    """Report uptime, database connectivity and a metrics summary."""
    now = datetime.now(timezone.utc)
    try:
        db.execute(text("SELECT 1"))
        db_status, overall_status = "connected", "healthy"
    except SQLAlchemyError as e:
        logger.error("health_check_db_failed", extra={"structured_data": {"error": str(e)}})
        db_status, overall_status = "disconnected", "unhealthy"
    counters = get_counters()
    return {
        "status": overall_status,
        "started_at": _app_start_time.isoformat(),
        "uptime_seconds": round((now - _app_start_time).total_seconds(), 2),
        "environment": settings.environment,
        "database": {
            "status": db_status,
            "engine": engine.dialect.name,
        },
        "metrics_summary": {
            "tracked_operations": len(get_metrics()),
            "team_requests": int(sum(v for k, v in counters.items() if k.startswith("teams."))),
        },
    }


@app.get("/", include_in_schema=False)
def root():
    """Lightweight index pointing to docs."""
    return {
        "name": settings.app_name,
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/favicon.ico", include_in_schema=False)
def favicon():
    return Response(status_code=204)
