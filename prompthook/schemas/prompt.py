from datetime import datetime
from typing import Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

_URL_ADAPTER = TypeAdapter(AnyUrl)

# Columns declared NOT NULL; a PATCH may omit them but not null them out.
NON_NULLABLE_FIELDS = (
    "name",
    "prompt_text",
    "model",
    "temperature",
    "top_p",
    "frequency_penalty",
    "presence_penalty",
    "destination_webhook_url",
    "is_active",
)


def _validate_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    _URL_ADAPTER.validate_python(value)
    return value


class PromptCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    prompt_text: str = Field(min_length=1)
    model: str = "gpt-3.5-turbo"
    temperature: float = Field(default=0.7, ge=0, le=2)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    top_p: float = Field(default=1.0, ge=0, le=1)
    frequency_penalty: float = Field(default=0.0, ge=-2, le=2)
    presence_penalty: float = Field(default=0.0, ge=-2, le=2)
    destination_webhook_url: str
    cron_schedule: Optional[str] = None
    is_active: bool = True

    @field_validator("destination_webhook_url")
    @classmethod
    def destination_must_be_url(cls, value: str) -> str:
        return _validate_url(value)


class PromptUpdate(BaseModel):
    """Partial update. Only fields present in the request body are applied."""

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    prompt_text: Optional[str] = Field(default=None, min_length=1)
    model: Optional[str] = None
    temperature: Optional[float] = Field(default=None, ge=0, le=2)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    top_p: Optional[float] = Field(default=None, ge=0, le=1)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2, le=2)
    presence_penalty: Optional[float] = Field(default=None, ge=-2, le=2)
    destination_webhook_url: Optional[str] = None
    cron_schedule: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("destination_webhook_url")
    @classmethod
    def destination_must_be_url(cls, value: Optional[str]) -> Optional[str]:
        return _validate_url(value)

    @model_validator(mode="after")
    def reject_null_for_required_columns(self) -> "PromptUpdate":
        for field in NON_NULLABLE_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class PromptResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    prompt_text: str
    model: str
    temperature: float
    max_tokens: Optional[int] = None
    top_p: float
    frequency_penalty: float
    presence_penalty: float
    destination_webhook_url: str
    cron_schedule: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class DeletePromptResponse(BaseModel):
    success: bool
