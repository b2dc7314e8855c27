"""Domain and table models.

`Category` and `BlogPost` are plain pydantic value objects handed
between the web layer, services and repositories. `CategoryRecord` is
the SQLModel table used by the SQL-backed category store.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field as PydanticField
from sqlmodel import SQLModel, Field


class Category(BaseModel):
    """A blog category.

    Fields:
    - `slug`: human-readable lookup key, immutable once created
    - `name`: display label
    """
    slug: str = PydanticField(frozen=True)
    name: str


class BlogPost(BaseModel):
    """A blog post built from submitted form data. Posts are never stored."""
    created_at: datetime
    title: Optional[str] = None
    slug: Optional[str] = None
    content: Optional[str] = None
    visible: bool = False


class CategoryRecord(SQLModel, table=True):
    """Row backing a `Category` in the SQL store.

    `slug` is indexed but deliberately not unique; `id` order is the
    insertion order used for first-wins lookups.
    """
    __tablename__ = "category"

    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(index=True, nullable=False)
    name: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryRecord":
        return cls(slug=category.slug, name=category.name)

    def to_category(self) -> Category:
        return Category(slug=self.slug, name=self.name)
