from datetime import datetime, timezone

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from prompthook.config import settings
from prompthook.database import get_db, init_db
from prompthook.logging_config import get_logger, setup_logging
from prompthook.models import ExecutionHistory, Prompt
from prompthook.routers import executions, prompts, webhook

setup_logging(settings.log_level)

logger = get_logger("main")

app = FastAPI(
    title="prompthook API",
    description="Run stored LLM prompts and forward results to webhooks",
    version="0.1.0",
    debug=settings.debug,
)

cors_origins = [origin.strip() for origin in settings.cors_allow_origins.split(",") if origin.strip()]
if not cors_origins:
    cors_origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(prompts.router)
app.include_router(executions.router)
app.include_router(webhook.router)


@app.on_event("startup")
def create_tables() -> None:
    init_db()
    logger.info("prompthook API started")


@app.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/db-check")
def db_check(db: Session = Depends(get_db)):
    return {
        "status": "ok",
        "prompts": db.query(Prompt).count(),
        "executions": db.query(ExecutionHistory).count(),
    }
