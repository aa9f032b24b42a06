"""
Markdown Renderer

Public API:
- LanguageConfig
- render_conversation
- render_projects
- escape_html
- sanitize_filename
"""

from .extract import escape_html, sanitize_filename
from .languages import LanguageConfig
from .render import render_conversation, render_projects

__all__ = [
    "LanguageConfig",
    "escape_html",
    "render_conversation",
    "render_projects",
    "sanitize_filename",
]
