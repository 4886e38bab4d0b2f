from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from prompthook.database import get_db
from prompthook.schemas.prompt import DeletePromptResponse, PromptCreate, PromptResponse, PromptUpdate
from prompthook.services.prompt_service import (
    PromptNotFoundError,
    create_prompt,
    delete_prompt,
    get_prompt,
    list_prompts,
    update_prompt,
)

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.post("", response_model=PromptResponse, status_code=201)
def create(request: PromptCreate, db: Session = Depends(get_db)):
    return create_prompt(db, request)


@router.get("", response_model=List[PromptResponse])
def list_all(db: Session = Depends(get_db)):
    return list_prompts(db)


@router.get("/{prompt_id}", response_model=PromptResponse)
def get_one(prompt_id: int, db: Session = Depends(get_db)):
    prompt = get_prompt(db, prompt_id)
    if not prompt:
        raise HTTPException(status_code=404, detail=f"Prompt with id {prompt_id} not found")
    return prompt


@router.patch("/{prompt_id}", response_model=PromptResponse)
def update(prompt_id: int, request: PromptUpdate, db: Session = Depends(get_db)):
    try:
        return update_prompt(db, prompt_id, request)
    except PromptNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/{prompt_id}", response_model=DeletePromptResponse)
def delete(prompt_id: int, db: Session = Depends(get_db)):
    """Delete a prompt. ``success`` is false when nothing matched."""
    return DeletePromptResponse(success=delete_prompt(db, prompt_id))
