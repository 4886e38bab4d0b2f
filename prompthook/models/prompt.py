from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, Text
from sqlalchemy.orm import relationship

from prompthook.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Prompt(Base):
    __tablename__ = "prompts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    prompt_text = Column(Text, nullable=False)
    model = Column(Text, nullable=False, default="gpt-3.5-turbo")
    temperature = Column(Numeric(3, 2), nullable=False, default=0.7)
    max_tokens = Column(Integer)
    top_p = Column(Numeric(3, 2), nullable=False, default=1)
    frequency_penalty = Column(Numeric(3, 2), nullable=False, default=0)
    presence_penalty = Column(Numeric(3, 2), nullable=False, default=0)
    destination_webhook_url = Column(Text, nullable=False)
    cron_schedule = Column(Text)  # stored only, never evaluated here
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    executions = relationship(
        "ExecutionHistory",
        back_populates="prompt",
        cascade="all, delete-orphan",
    )
