"""
processors package

Turns raw Claude export JSON (conversations.json / projects.json) into the
read-only records defined in model.py, and extracts message bodies that
renderers can print.

Public API:
- parse_conversation
- parse_projects
- extract_body_parts
"""

from .content import extract_body_parts
from .parse import parse_conversation, parse_projects

__all__ = ["extract_body_parts", "parse_conversation", "parse_projects"]
