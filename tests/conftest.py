import pytest
from sqlmodel import Session, create_engine

from blogmania.database import create_db_and_tables
from blogmania.main import app, get_category_repository
from blogmania.repositories import InMemoryCategoryRepository


@pytest.fixture
def category_repo():
    """Give each test a freshly seeded store behind the API."""
    repo = InMemoryCategoryRepository.seeded()
    app.dependency_overrides[get_category_repository] = lambda: repo
    yield repo
    app.dependency_overrides.pop(get_category_repository, None)


@pytest.fixture
def sql_session(tmp_path):
    """Session bound to a throwaway SQLite file with the tables created."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})
    create_db_and_tables(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()
