"""blogmania: form handling and category store teaching sample.

`repositories` holds the category store contract with its in-memory and
SQL implementations; `main` is the FastAPI composition root that seeds
the configured store and serves the blog post forms, rendered by
`views`, and the category endpoints. Settings come from `config`.
"""
