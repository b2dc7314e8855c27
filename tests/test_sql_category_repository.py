import pytest

from blogmania.models import Category
from blogmania.repositories import InvalidArgument, SqlCategoryRepository
from blogmania.services import seed_category_store


def test_init_and_find_all_in_insertion_order(sql_session):
    repo = SqlCategoryRepository(sql_session)
    repo.init()
    assert [(c.slug, c.name) for c in repo.find_all()] == [("general", "General"), ("spring", "Spring Framework")]


def test_save_then_find(sql_session):
    repo = SqlCategoryRepository(sql_session)
    repo.init()
    c = Category(slug="python", name="Python")
    assert repo.save(c) is c
    assert repo.find_by_slug("python") == c
    assert repo.find_by_slug("nonexistent") is None


def test_find_by_slug_requires_slug(sql_session):
    with pytest.raises(InvalidArgument):
        SqlCategoryRepository(sql_session).find_by_slug(None)


def test_duplicate_slug_first_wins(sql_session):
    repo = SqlCategoryRepository(sql_session)
    repo.save(Category(slug="dup", name="A"))
    repo.save(Category(slug="dup", name="B"))
    assert repo.find_by_slug("dup").name == "A"
    assert len(repo.find_all()) == 2


def test_find_all_returns_new_list(sql_session):
    repo = SqlCategoryRepository(sql_session)
    repo.init()
    listed = repo.find_all()
    listed.pop()
    assert len(repo.find_all()) == 2


def test_seed_skips_populated_table(sql_session):
    repo = SqlCategoryRepository(sql_session)
    assert repo.is_empty()
    assert seed_category_store(repo) is True
    assert seed_category_store(repo) is False
    assert len(repo.find_all()) == 2


def test_failed_commit_rolls_back_session(sql_session, monkeypatch):
    repo = SqlCategoryRepository(sql_session)

    def fail_commit():
        raise RuntimeError("disk full")

    monkeypatch.setattr(sql_session, "commit", fail_commit)
    with pytest.raises(RuntimeError):
        repo.save(Category(slug="lost", name="Lost"))
    monkeypatch.undo()

    repo.save(Category(slug="kept", name="Kept"))
    assert [c.slug for c in repo.find_all()] == ["kept"]
