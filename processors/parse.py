"""
parse.py

Stage: RAW EXPORT -> MODEL

Goal:
- Take one raw conversation (or project) dict from the export
- Pull out the fields renderers need, with explicit presence checks
- Drop list entries that are not dicts

This stage does NOT render anything and does NOT validate the export
against a schema. Missing optional fields become None or empty tuples.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from model import Attachment, ContentBlock, Conversation, Doc, FileRef, Message, Project


def safe_str(value: Any) -> str:
    # Converts any value to a string for safe display.
    return "" if value is None else str(value)


def optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _file_size(x: Any) -> Union[int, str, None]:
    """
    Byte counts are normally ints. Anything else ("17.5", 17.5) is kept as
    its string form so the size still shows up in the output.
    """
    if x is None:
        return None
    if isinstance(x, float) and x.is_integer():
        return int(x)
    if isinstance(x, int) and not isinstance(x, bool):
        return x
    return safe_str(x)


def _dict_items(raw: Any) -> List[Dict[str, Any]]:
    """
    Returns the dict entries of a raw list.

    Anything that is not a list yields []; non-dict entries are skipped.
    """
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, dict)]


def parse_content_block(raw: Dict[str, Any]) -> ContentBlock:
    return ContentBlock(type=safe_str(raw.get("type")), text=safe_str(raw.get("text")))


def parse_attachment(raw: Dict[str, Any]) -> Attachment:
    extracted = raw.get("extracted_content")
    return Attachment(
        file_name=safe_str(raw.get("file_name")),
        file_size=_file_size(raw.get("file_size")),
        file_type=safe_str(raw.get("file_type")),
        extracted_content=optional_str(extracted),
    )


def parse_message(raw: Dict[str, Any]) -> Message:
    """
    Converts a raw chat message into a Message.

    "content" stays None when the key is absent or not a list, so the
    renderer can tell "no content list" apart from "an empty one".
    """
    raw_content = raw.get("content")
    content: Optional[Tuple[ContentBlock, ...]] = None
    if isinstance(raw_content, list):
        content = tuple(parse_content_block(b) for b in _dict_items(raw_content))

    return Message(
        sender=safe_str(raw.get("sender") or "unknown"),
        created_at=optional_str(raw.get("created_at")),
        content=content,
        text=optional_str(raw.get("text")),
        attachments=tuple(parse_attachment(a) for a in _dict_items(raw.get("attachments"))),
        files=tuple(FileRef(file_name=safe_str(f.get("file_name"))) for f in _dict_items(raw.get("files"))),
    )


def parse_conversation(raw: Dict[str, Any]) -> Conversation:
    """
    Parses one raw conversation object from conversations.json.

    A record without a "chat_messages" list keeps chat_messages=None.
    """
    raw_messages = raw.get("chat_messages")
    messages: Optional[Tuple[Message, ...]] = None
    if isinstance(raw_messages, list):
        messages = tuple(parse_message(m) for m in _dict_items(raw_messages))

    return Conversation(
        uuid=safe_str(raw.get("uuid")),
        name=optional_str(raw.get("name")),
        created_at=optional_str(raw.get("created_at")),
        updated_at=optional_str(raw.get("updated_at")),
        chat_messages=messages,
    )


def parse_doc(raw: Dict[str, Any]) -> Doc:
    return Doc(
        filename=safe_str(raw.get("filename")),
        created_at=optional_str(raw.get("created_at")),
        content=safe_str(raw.get("content")),
    )


def parse_project(raw: Dict[str, Any]) -> Project:
    """Parses one raw project object from projects.json."""
    return Project(
        uuid=safe_str(raw.get("uuid")),
        name=safe_str(raw.get("name")),
        created_at=optional_str(raw.get("created_at")),
        updated_at=optional_str(raw.get("updated_at")),
        is_private=bool(raw.get("is_private")),
        description=optional_str(raw.get("description")),
        prompt_template=optional_str(raw.get("prompt_template")),
        docs=tuple(parse_doc(d) for d in _dict_items(raw.get("docs"))),
    )


def parse_projects(raw: List[Any]) -> List[Project]:
    return [parse_project(p) for p in _dict_items(raw)]
