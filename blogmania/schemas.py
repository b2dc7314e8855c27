"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
controller handlers and tests. The blog post commands double as form
models: FastAPI binds submitted form fields onto them.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

DEFAULT_TITLE = "Default Title"
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class BlogPostCommand(BaseModel):
    """Backing bean for the blog post form. No field is required."""
    title: Optional[str] = None
    slug: Optional[str] = None
    content: Optional[str] = None
    visible: bool = False


class ValidatedBlogPostCommand(BaseModel):
    """Backing bean whose fields are validated before a post is created."""
    title: str = Field(max_length=200)
    slug: str = Field(pattern=SLUG_PATTERN)
    content: str
    visible: bool = False

    @field_validator("title", "content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class CategoryIn(BaseModel):
    """Payload for creating a category."""
    slug: str = Field(min_length=1)
    name: str = Field(min_length=1)


class CategoryOut(BaseModel):
    """Category representation returned by the API."""
    slug: str
    name: str
