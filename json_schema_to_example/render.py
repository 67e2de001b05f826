"""
Rendering of generated examples.

A result is shown the way the schema playground shows it: pretty printed
JSON, and, for HTML output, an alert region holding the error message of
a failed generation.
"""

import json
from pathlib import Path
from typing import Any

import jinja2

CURRENT_DIR = Path(__file__).parent

DEFAULT_TITLE = "Object based on schema"


def render_json(value: Any, indent: int = 2) -> str:
    """Serialize a generated value as pretty printed JSON."""
    return json.dumps(value, indent=indent, ensure_ascii=False) + "\n"


def _pretty_json(value: Any, indent: int = 2) -> str:
    return json.dumps(value, indent=indent, ensure_ascii=False)


class HtmlRenderer:
    """Renders a schema, its generated value and an optional error as an HTML page."""

    def __init__(self, indent: int = 2):
        self.indent = indent
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, autoescape=True)
        self.jinja_env.filters["pretty_json"] = _pretty_json
        with open(CURRENT_DIR / "templates/html/result.html.jinja2", encoding="utf-8") as f:
            self.page = self.jinja_env.from_string(f.read())

    def render(self, schema_text: str = "", value: Any = None, error: str | None = None, title: str = DEFAULT_TITLE) -> str:
        """
        Render the page.

        Args:
            schema_text: The schema as entered, shown above the result
            value: The generated value
            error: Message of a failed generation, shown in the alert region

        Returns:
            The HTML document
        """
        return self.page.render(
            title=title,
            schema_text=schema_text,
            value=value,
            error=error,
            indent=self.indent,
        )


def render_html(schema_text: str = "", value: Any = None, error: str | None = None, indent: int = 2) -> str:
    """Render a generated value, or the error that prevented it, as an HTML page."""
    return HtmlRenderer(indent).render(schema_text, value, error)
