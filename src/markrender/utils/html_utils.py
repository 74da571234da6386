"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted HTML attribute."""
    return _html_escape(value, quote=True)


def html_class_token(name: str) -> str:
    """Reduce an arbitrary name to a safe CSS class token.

    Characters outside ``[A-Za-z0-9_-]`` are replaced by hyphens and the
    result is lower-cased, so directive names such as ``Comment`` map to
    ``comment``.
    """
    token = "".join(ch if ch.isalnum() or ch in "-_" else "-" for ch in name.strip())
    return token.lower() or "unnamed"


def render_html_document(body: str, *, title: str, css: str) -> str:
    """Wrap an HTML fragment in a minimal HTML5 document shell."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape_html(title)}</title>\n"
        f"<style>\n{css}\n</style>\n"
        "</head>\n"
        "<body>\n"
        f"{body}"
        "</body>\n"
        "</html>\n"
    )


__all__ = ["escape_html", "escape_attribute", "html_class_token", "render_html_document"]
