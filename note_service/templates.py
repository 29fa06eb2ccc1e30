"""
ClipNotes v1 - Note Template Engine

Renders note bodies and file names from user-configured Jinja2 templates.
"""

from typing import Mapping

from jinja2 import Environment


class TemplateEngine:
    """
    Thin wrapper around a Jinja2 environment for note templates.

    Templates use ``{{fieldName}}`` placeholders and unknown fields render as
    an empty string. Output is not HTML-escaped since notes are Markdown and
    may embed raw player markup.
    """

    def __init__(self):
        self._env = Environment(autoescape=False, keep_trailing_newline=True)

    def render(self, template: str, fields: Mapping[str, str]) -> str:
        return self._env.from_string(template).render(**fields)
