from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from prompthook.database import Base

JSONColumn = JSON(none_as_null=True).with_variant(JSONB(none_as_null=True), "postgresql")


class TriggerType(str, Enum):
    CRON = "cron"
    WEBHOOK = "webhook"


class ExecutionStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


class ExecutionHistory(Base):
    __tablename__ = "execution_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    prompt_id = Column(Integer, ForeignKey("prompts.id", ondelete="CASCADE"), nullable=False, index=True)
    trigger_type = Column(Text, nullable=False)  # cron, webhook
    input_data = Column(JSONColumn)
    rendered_prompt = Column(Text, nullable=False)
    openai_response = Column(JSONColumn, nullable=False)
    webhook_response_status = Column(Integer)
    webhook_response_body = Column(Text)
    execution_status = Column(Text, nullable=False)  # success, failed
    error_message = Column(Text)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    prompt = relationship("Prompt", back_populates="executions")
