"""FastAPI application entrypoint and HTTP controllers.

This module is the composition root: it builds the configured category
store, seeds it once and wires it into the controllers. Controllers are
intentionally thin: they accept already-bound form or JSON data,
delegate to services and repositories, and return HTML or JSON.

Endpoints implemented:
- GET /blogposts/new-multiple-values
- GET /blogposts/new-backing-bean
- GET /blogposts/new-validated-bean
- POST /blogposts/create-multiple-values
- POST /blogposts/create-backing-bean
- POST /blogposts/create-validated-bean
- GET /categories
- GET /categories/{slug}
- POST /categories
"""

from fastapi import FastAPI, Depends, HTTPException, Form, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from contextlib import contextmanager
from typing import Annotated, List, Optional
import json
import logging
import time
import uuid
from .config import settings
from .database import create_db_and_tables, get_session
from .models import Category
from .repositories import CategoryRepository, InMemoryCategoryRepository, SqlCategoryRepository
from .schemas import BlogPostCommand, ValidatedBlogPostCommand, CategoryIn, CategoryOut, DEFAULT_TITLE
from .services import BlogPostService, seed_category_store
from . import views

app = FastAPI(title="Blogmania")
logger = logging.getLogger("blogmania.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

LOGGED_PREFIXES = ("/blogposts", "/categories")

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

_session_scope = contextmanager(get_session)
_memory_categories = InMemoryCategoryRepository()
if settings.CATEGORY_STORE == "sql":
    create_db_and_tables()
    with _session_scope() as _session:
        seed_category_store(SqlCategoryRepository(_session))
else:
    seed_category_store(_memory_categories)

_blog_posts = BlogPostService()


def get_category_repository():
    """Yield the configured category store for the current request."""
    if settings.CATEGORY_STORE == "sql":
        with _session_scope() as session:
            yield SqlCategoryRepository(session)
    else:
        yield _memory_categories


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    if request.url.path.startswith(LOGGED_PREFIXES):
        logger.info(
            "request_done %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                },
                ensure_ascii=True,
            ),
        )
    return response


@app.get('/blogposts/new-multiple-values', response_class=HTMLResponse)
def render_form_for_separate_values():
    """Render the form that submits each field as its own parameter."""
    return views.render_blog_post_form("New blog post (multiple values)", "/blogposts/create-multiple-values")


@app.get('/blogposts/new-backing-bean', response_class=HTMLResponse)
def render_form_for_backing_bean():
    """Render the form bound to a `BlogPostCommand` with a default title."""
    command = BlogPostCommand(title=DEFAULT_TITLE)
    return views.render_blog_post_form("New blog post (backing bean)", "/blogposts/create-backing-bean", title=command.title)


@app.get('/blogposts/new-validated-bean', response_class=HTMLResponse)
def render_form_for_validated_bean():
    """Render the form whose submission is validated before creation."""
    return views.render_blog_post_form("New blog post (validated bean)", "/blogposts/create-validated-bean", title=DEFAULT_TITLE)


@app.post('/blogposts/create-multiple-values', response_class=HTMLResponse)
def create_blog_post_from_multiple_values(
    title: Optional[str] = Form(default=None),
    slug: Optional[str] = Form(default=None),
    content: Optional[str] = Form(default=None),
    visible: bool = Form(default=False),
):
    """Create a blog post from separate form fields and display it.

    Every field is optional; missing values render as empty.
    """
    post = _blog_posts.create_blog_post(title, slug, content, visible)
    return views.render_blog_post(post)


@app.post('/blogposts/create-backing-bean', response_class=HTMLResponse)
def create_blog_post_from_backing_bean(command: Annotated[BlogPostCommand, Form()]):
    """Create a blog post from a form bound onto `BlogPostCommand`."""
    post = _blog_posts.create_blog_post(command.title, command.slug, command.content, command.visible)
    return views.render_blog_post(post)


@app.post('/blogposts/create-validated-bean', response_class=HTMLResponse)
def create_blog_post_from_validated_bean(command: Annotated[ValidatedBlogPostCommand, Form()]):
    """Create a blog post from a validated form.

    Invalid submissions never reach this handler; FastAPI answers them
    with a 422 listing the failing fields.
    """
    post = _blog_posts.create_blog_post(command.title, command.slug, command.content, command.visible)
    return views.render_blog_post(post)


@app.get('/categories', response_model=List[CategoryOut])
def list_categories(repo: CategoryRepository = Depends(get_category_repository)):
    """List all categories in the order they were added."""
    return [CategoryOut(slug=c.slug, name=c.name) for c in repo.find_all()]


@app.get('/categories/{slug}', response_model=CategoryOut)
def get_category(slug: str, repo: CategoryRepository = Depends(get_category_repository)):
    """Return a single category by slug."""
    category = repo.find_by_slug(slug)
    if category is None:
        raise HTTPException(status_code=404, detail='category not found')
    return CategoryOut(slug=category.slug, name=category.name)


@app.post('/categories', response_model=CategoryOut, status_code=201)
def create_category(payload: CategoryIn, repo: CategoryRepository = Depends(get_category_repository)):
    """Add a category. Slugs are not checked for uniqueness."""
    saved = repo.save(Category(slug=payload.slug, name=payload.name))
    return CategoryOut(slug=saved.slug, name=saved.name)


@app.get("/", response_class=HTMLResponse)
def home():
    """Minimal homepage for quick manual testing."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
      <meta charset="UTF-8" />
      <title>Blogmania</title>
      <style>
        body { font-family: Arial, sans-serif; margin: 32px; }
        a { color: #0a6; }
        .card { max-width: 640px; padding: 16px; border: 1px solid #ddd; border-radius: 8px; }
      </style>
    </head>
    <body>
      <div class="card">
        <h1>Blogmania</h1>
        <p>Form handling demos:</p>
        <ul>
          <li><a href="/blogposts/new-multiple-values">Multiple values</a></li>
          <li><a href="/blogposts/new-backing-bean">Backing bean</a></li>
          <li><a href="/blogposts/new-validated-bean">Validated bean</a></li>
        </ul>
        <p>Categories are listed at <a href="/categories">/categories</a>; see <a href="/docs">Swagger UI</a> for the rest.</p>
      </div>
    </body>
    </html>
    """


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
