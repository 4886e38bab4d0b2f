from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from prompthook.logging_config import get_logger
from prompthook.models import Prompt
from prompthook.schemas.prompt import PromptCreate, PromptUpdate

logger = get_logger("prompt_service")


class PromptError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PromptNotFoundError(PromptError):
    def __init__(self, prompt_id: int):
        self.prompt_id = prompt_id
        super().__init__(f"Prompt with id {prompt_id} not found")


class PromptInactiveError(PromptError):
    def __init__(self, prompt_id: int):
        self.prompt_id = prompt_id
        super().__init__(f"Prompt with id {prompt_id} is not active")


def get_prompt(db: Session, prompt_id: int) -> Optional[Prompt]:
    return db.query(Prompt).filter(Prompt.id == prompt_id).first()


def list_prompts(db: Session) -> List[Prompt]:
    return db.query(Prompt).order_by(Prompt.id.asc()).all()


def create_prompt(db: Session, data: PromptCreate) -> Prompt:
    now = datetime.now(timezone.utc)
    prompt = Prompt(**data.model_dump(), created_at=now, updated_at=now)
    db.add(prompt)
    db.commit()
    db.refresh(prompt)
    logger.info("Prompt created", extra={"context": {"prompt_id": prompt.id, "name": prompt.name}})
    return prompt


def update_prompt(db: Session, prompt_id: int, data: PromptUpdate) -> Prompt:
    """Apply only the fields present in ``data``; ``updated_at`` always moves."""
    prompt = get_prompt(db, prompt_id)
    if not prompt:
        raise PromptNotFoundError(prompt_id)

    changes = data.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(prompt, field, value)
    prompt.updated_at = datetime.now(timezone.utc)

    db.commit()
    db.refresh(prompt)
    logger.info(
        "Prompt updated",
        extra={"context": {"prompt_id": prompt_id, "fields": sorted(changes)}},
    )
    return prompt


def delete_prompt(db: Session, prompt_id: int) -> bool:
    """Delete a prompt and, through the cascade, its execution history."""
    prompt = get_prompt(db, prompt_id)
    if not prompt:
        return False

    db.delete(prompt)
    db.commit()
    logger.info("Prompt deleted", extra={"context": {"prompt_id": prompt_id}})
    return True
