"""Repository classes for `Category` records.

`CategoryRepository` is the abstraction the web layer depends on. The
in-memory implementation is the default store; the SQL implementation
persists the same records through SQLModel. Neither enforces slug
uniqueness: duplicates are accepted and the first inserted one wins on
lookup.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from sqlmodel import Session, select
from . import models

logger = logging.getLogger("blogmania.repositories")

SEED_CATEGORIES = (
    ("general", "General"),
    ("spring", "Spring Framework"),
)


class InvalidArgument(ValueError):
    """Raised when a repository receives a missing required argument."""


def seed_categories() -> List[models.Category]:
    """Return fresh `Category` objects for the fixed seed data."""
    return [models.Category(slug=slug, name=name) for slug, name in SEED_CATEGORIES]


class CategoryRepository(ABC):
    """Storage contract for `Category` records."""

    def init(self) -> None:
        """Load the seed categories.

        Calling this more than once adds the seeds again.
        """
        for category in seed_categories():
            self.save(category)

    @abstractmethod
    def save(self, category: models.Category) -> models.Category:
        """Append `category` and return it unchanged."""

    @abstractmethod
    def find_by_slug(self, slug: str) -> Optional[models.Category]:
        """Return the first category with `slug`, or `None`."""

    @abstractmethod
    def find_all(self) -> List[models.Category]:
        """Return all categories in insertion order."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the store holds no category yet."""


class InMemoryCategoryRepository(CategoryRepository):
    """Category store backed by a plain list. Not safe for concurrent writes."""
    def __init__(self):
        self.categories: List[models.Category] = []

    @classmethod
    def seeded(cls) -> "InMemoryCategoryRepository":
        """Build a repository and run `init()` on it once."""
        repo = cls()
        repo.init()
        return repo

    def save(self, category: models.Category) -> models.Category:
        self.categories.append(category)
        logger.debug("saved category slug=%s (total=%d)", category.slug, len(self.categories))
        return category

    def find_by_slug(self, slug: str) -> Optional[models.Category]:
        if slug is None:
            raise InvalidArgument("Slug required")
        return next((c for c in self.categories if c.slug == slug), None)

    def find_all(self) -> List[models.Category]:
        # copy so callers cannot mutate the store
        return list(self.categories)

    def is_empty(self) -> bool:
        return not self.categories


class SqlCategoryRepository(CategoryRepository):
    """Category store persisted in the `category` table.

    Each `save` commits immediately. Lookups order by primary key so the
    first inserted row wins when slugs repeat.
    """
    def __init__(self, session: Session):
        self.session = session

    def save(self, category: models.Category) -> models.Category:
        self.session.add(models.CategoryRecord.from_category(category))
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.debug("persisted category slug=%s", category.slug)
        return category

    def find_by_slug(self, slug: str) -> Optional[models.Category]:
        if slug is None:
            raise InvalidArgument("Slug required")
        stmt = select(models.CategoryRecord).where(models.CategoryRecord.slug == slug).order_by(models.CategoryRecord.id)
        row = self.session.exec(stmt).first()
        return row.to_category() if row else None

    def find_all(self) -> List[models.Category]:
        stmt = select(models.CategoryRecord).order_by(models.CategoryRecord.id)
        return [row.to_category() for row in self.session.exec(stmt).all()]

    def is_empty(self) -> bool:
        """Return True if no category row exists yet."""
        return self.session.exec(select(models.CategoryRecord.id)).first() is None
