from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional
from datetime import datetime


class PostBase(BaseModel):
    """Базовая схема поста"""
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(default="")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip()


class PostCreate(PostBase):
    """Схема для создания поста"""
    model_config = ConfigDict(extra="forbid")


class PostUpdate(BaseModel):
    """Схема для частичного обновления поста.

    published меняется только через publish/unpublish.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip() if v else v


class PostResponse(PostBase):
    """Схема для ответа с данными поста"""
    id: int
    published: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
