"""Business logic services used by HTTP controllers.

Services are intentionally thin. `BlogPostService` simulates the
processing a real application would do when a blog post form is
submitted; `seed_category_store` is the startup step that gives the
configured category store its initial records.
"""

import logging
from datetime import datetime
from typing import Optional
from . import models, repositories

logger = logging.getLogger("blogmania.services")


class BlogPostService:
    """Create blog posts from already-bound form values."""

    def create_blog_post(self, title: Optional[str], slug: Optional[str], content: Optional[str], visible: bool = False) -> models.BlogPost:
        """Stamp the creation time and return the new post.

        Nothing is persisted; the post only lives for the response.
        """
        post = models.BlogPost(
            created_at=datetime.now(),
            title=title,
            slug=slug,
            content=content,
            visible=visible,
        )
        logger.info("Created blog post %s", post)
        return post


def seed_category_store(repo: repositories.CategoryRepository) -> bool:
    """Run `init()` on `repo` at startup.

    Only an empty store is seeded, so a persistent store does not
    collect duplicate seeds across restarts.
    Returns True when seed data was written.
    """
    if not repo.is_empty():
        logger.info("category store already populated; skipping seed")
        return False
    repo.init()
    logger.info("seeded category store with %d categories", len(repositories.SEED_CATEGORIES))
    return True
