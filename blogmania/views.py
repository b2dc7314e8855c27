"""Inline HTML views for the blog post pages.

Pages are small enough to build as strings, the same way the API home
page is. Every submitted value is escaped before it is rendered.
"""

from html import escape
from typing import Optional
from .models import BlogPost

_PAGE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8" />
  <title>{title}</title>
  <style>
    body {{ font-family: Arial, sans-serif; margin: 32px; }}
    .card {{ max-width: 640px; padding: 16px; border: 1px solid #ddd; border-radius: 8px; }}
    label {{ display: block; margin-top: 8px; }}
  </style>
</head>
<body>
  <div class="card">
{body}
  </div>
</body>
</html>
"""


def _page(title: str, body: str) -> str:
    return _PAGE.format(title=escape(title), body=body)


def _text(value: Optional[str]) -> str:
    return escape(value) if value is not None else ""


def render_blog_post_form(heading: str, action: str, title: Optional[str] = None) -> str:
    """Render the blog post form posting to `action`, optionally pre-filled."""
    body = f"""    <h1>{escape(heading)}</h1>
    <form method="post" action="{escape(action)}">
      <label>Title <input type="text" name="title" value="{_text(title)}" /></label>
      <label>Slug <input type="text" name="slug" /></label>
      <label>Content <textarea name="content"></textarea></label>
      <label><input type="checkbox" name="visible" value="true" /> Visible</label>
      <button type="submit">Create</button>
    </form>"""
    return _page(heading, body)


def render_blog_post(post: BlogPost) -> str:
    """Render a created blog post."""
    body = f"""    <h1>{_text(post.title)}</h1>
    <dl>
      <dt>Slug</dt><dd class="slug">{_text(post.slug)}</dd>
      <dt>Created</dt><dd class="created">{escape(post.created_at.isoformat(timespec='seconds'))}</dd>
      <dt>Visible</dt><dd class="visible">{'yes' if post.visible else 'no'}</dd>
    </dl>
    <div class="content">{_text(post.content)}</div>"""
    return _page(post.title or "Blog post", body)
