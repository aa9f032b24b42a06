"""
model.py

Internal data shapes for a Claude data export.

This file defines: Conversation, Message, ContentBlock, Attachment, FileRef,
Project, Doc.
It does NOT load JSON and it does NOT write output files.

Every record is frozen and stores sequences as tuples: a parsed export is a
read-only snapshot that renderers consume once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class ContentBlock:
    """
    One entry of a message's "content" list.

    - type: "text", "tool_use", "tool_result", ... (only "text" is rendered)
    - text: block text, "" when missing
    """

    type: str
    text: str = ""


@dataclass(frozen=True)
class Attachment:
    """
    A file pasted or uploaded into a message.

    - file_size: byte count; non-integer values are kept as strings
    - extracted_content: the text Claude extracted from the file, if any
    """

    file_name: str
    file_size: Union[int, str, None] = None
    file_type: str = ""
    extracted_content: Optional[str] = None


@dataclass(frozen=True)
class FileRef:
    """A non-attachment file reference (images, PDFs) with no inline text."""

    file_name: str


@dataclass(frozen=True)
class Message:
    """
    A single chat message.

    - sender: "human", "assistant", ...
    - created_at: ISO-8601 timestamp string, if available
    - content: None when the export has no "content" list for this message
    - text: plain-text fallback used when content is None or empty
    """

    sender: str
    created_at: Optional[str] = None
    content: Optional[Tuple[ContentBlock, ...]] = None
    text: Optional[str] = None
    attachments: Tuple[Attachment, ...] = ()
    files: Tuple[FileRef, ...] = ()


@dataclass(frozen=True)
class Conversation:
    """
    Represents a full conversation thread.

    chat_messages is None when the source record had no "chat_messages"
    list at all. That marks the record as "not a conversation", which is
    different from a conversation with zero messages.
    """

    uuid: str
    name: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    chat_messages: Optional[Tuple[Message, ...]] = None


@dataclass(frozen=True)
class Doc:
    """A reference document stored in a project's knowledge base."""

    filename: str
    created_at: Optional[str] = None
    content: str = ""


@dataclass(frozen=True)
class Project:
    """
    A named workspace bundling a prompt template and reference documents.
    """

    uuid: str
    name: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    is_private: bool = False
    description: Optional[str] = None
    prompt_template: Optional[str] = None
    docs: Tuple[Doc, ...] = ()
