"""HTML page for the repository list."""

from collections.abc import Sequence
from html import escape
from urllib.parse import urlsplit

from repofolio.models.schemas import Repo

STYLE = """
        :root { color-scheme: dark; }
        body { font-family: system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif; margin: 0; padding: 2rem; background: #020617; color: #f8fafc; }
        h1 { text-align: center; margin-bottom: 1.5rem; }
        article { background: #0f172a; border-radius: 0.75rem; padding: 1rem 1.25rem; margin-bottom: 1rem; box-shadow: 0 10px 15px -3px rgba(15, 23, 42, 0.7); }
        a { color: #38bdf8; text-decoration: none; }
        a:hover { text-decoration: underline; }
        footer { text-align: center; margin-top: 2rem; color: #94a3b8; font-size: 0.9rem; }"""


def is_web_url(value: str | None) -> bool:
    """Only http(s) homepages are rendered as links."""
    return bool(value) and urlsplit(value.strip()).scheme.lower() in ("http", "https")


def ttl_seconds(ttl_ms: int) -> int:
    # halves round up
    return (ttl_ms + 500) // 1000


def render_repo(repo: Repo) -> str:
    url = escape(str(repo.html_url))
    demo = ""
    if is_web_url(repo.homepage):
        demo = (
            f'\n        <p><a href="{escape(repo.homepage)}" target="_blank" '
            f'rel="noopener noreferrer">Demo</a></p>'
        )
    return f"""
      <article>
        <h2><a href="{url}" target="_blank" rel="noopener noreferrer">{escape(repo.name)}</a></h2>
        <p>{escape(repo.description or "Sin descripción disponible.")}</p>
        <p><strong>Lenguaje:</strong> {escape(repo.language or "N/A")} | <strong>Actualizado:</strong> {repo.updated_at.strftime("%d/%m/%Y %H:%M")}</p>{demo}
      </article>"""


def render_repos_page(repos: Sequence[Repo], github_user: str, ttl_ms: int) -> str:
    """Render the full HTML document listing ``repos``."""
    user = escape(github_user)
    items = "\n".join(render_repo(repo) for repo in repos)
    if not items:
        items = "<p>No hay repositorios públicos disponibles.</p>"

    return f"""<!DOCTYPE html>
  <html lang="es">
    <head>
      <meta charset="UTF-8" />
      <meta name="viewport" content="width=device-width, initial-scale=1.0" />
      <title>Repositorios de {user}</title>
      <style>{STYLE}
      </style>
    </head>
    <body>
      <h1>Proyectos públicos de {user}</h1>
      {items}
      <footer>
        Datos actualizados cada {ttl_seconds(ttl_ms)} segundos.
      </footer>
    </body>
  </html>"""
