from __future__ import annotations

from typing import List

from model import Message


def extract_body_parts(message: Message) -> List[str]:
    """
    Return the readable body of a message as a list of text chunks.

    Typical export shape:
      {"content": [{"type": "text", "text": "hello"}, {"type": "tool_use", ...}],
       "text": "hello"}

    Every "text" block with text contributes one chunk; other block types
    are ignored. When that yields nothing (no content list, an empty one, or
    only non-text blocks) the plain "text" field applies instead.
    Returns [] when neither source has text.
    """
    parts = [block.text for block in message.content or () if block.type == "text" and block.text]
    if parts:
        return parts

    if message.text:
        return [message.text]

    return []
