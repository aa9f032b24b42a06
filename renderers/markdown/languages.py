"""
Fence language lookup for the Markdown renderer.

Decides which language tag goes after the opening ``` of a code block:
- the attachment's MIME type, when the config knows it
- else the file extension (lower-cased, without the dot)
- else "text"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Dict, Optional

DEFAULT_MIME_LANGUAGES: Dict[str, str] = {
    "application/vnd.ant.react": "jsx",
    "text/html": "html",
    "application/javascript": "javascript",
    "text/css": "css",
    "application/json": "json",
}


@dataclass(frozen=True)
class LanguageConfig:
    # MIME type -> fence language. Checked before the file extension.
    by_mime_type: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_MIME_LANGUAGES))

    # Used when neither the MIME type nor the extension gives an answer.
    fallback: str = "text"

    # Extension -> display name, used for project documents.
    extension_names: Dict[str, str] = field(default_factory=lambda: {"md": "markdown"})


def file_extension(filename: str) -> str:
    # ".bashrc" and "Makefile" both have no extension.
    return PurePath(filename or "").suffix.lower()[1:]


def attachment_language(file_name: str, file_type: Optional[str], cfg: LanguageConfig) -> str:
    if file_type and file_type in cfg.by_mime_type:
        return cfg.by_mime_type[file_type]
    return file_extension(file_name) or cfg.fallback


def document_language(filename: str, cfg: LanguageConfig) -> str:
    ext = file_extension(filename)
    return cfg.extension_names.get(ext, ext) or cfg.fallback
