import pytest

from blogmania.config import Settings
from blogmania.services import BlogPostService, seed_category_store
from blogmania.repositories import InMemoryCategoryRepository


def test_create_blog_post_stamps_time():
    post = BlogPostService().create_blog_post('T', 't', 'C', True)
    assert post.title == 'T'
    assert post.visible is True
    assert post.created_at is not None


def test_seed_memory_store():
    repo = InMemoryCategoryRepository()
    assert seed_category_store(repo) is True
    assert [c.slug for c in repo.find_all()] == ['general', 'spring']


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("CATEGORY_STORE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = Settings()
    assert s.CATEGORY_STORE == "memory"
    assert s.LOG_LEVEL == "INFO"
    assert s.DATABASE_URL.startswith("sqlite:///")


def test_settings_rejects_unknown_store(monkeypatch):
    monkeypatch.setenv("CATEGORY_STORE", "redis")
    with pytest.raises(RuntimeError):
        Settings()


def test_seed_skips_populated_memory_store():
    repo = InMemoryCategoryRepository.seeded()
    assert not repo.is_empty()
    assert seed_category_store(repo) is False
    assert len(repo.find_all()) == 2
