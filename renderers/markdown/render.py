"""
Markdown rendering for Claude exports.

Produces:
- one Markdown document per conversation (render_conversation)
- one Markdown document listing every project (render_projects)

Rendering is a pure function of its input: the same records always give
byte-identical text.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from model import Attachment, Conversation, Message, Project
from processors.content import extract_body_parts

from .extract import escape_html, format_datetime, format_message_time, safe_str
from .languages import LanguageConfig, attachment_language, document_language

HUMAN_ICON = "👤"
ASSISTANT_ICON = "🤖"


def sender_heading(sender: str) -> str:
    icon = HUMAN_ICON if sender == "human" else ASSISTANT_ICON
    return f"## {icon} {sender[:1].upper() + sender[1:]}"


def render_attachment(attachment: Attachment, cfg: LanguageConfig) -> List[str]:
    """
    Render one attachment as a collapsible <details> block.

    The extracted content (when present) goes into a fenced code block
    tagged with the attachment's language.
    """
    size = safe_str(attachment.file_size)
    bits = [
        "<details>",
        f"<summary>{escape_html(attachment.file_name)} ({size} bytes, "
        f"{escape_html(attachment.file_type)})</summary>",
    ]

    if attachment.extracted_content:
        language = attachment_language(attachment.file_name, attachment.file_type, cfg)
        bits.append("")
        bits.append(f"```{language}")
        bits.append(attachment.extracted_content)
        bits.append("```")

    bits.append("</details>")
    return bits


def render_message(message: Message, cfg: LanguageConfig) -> List[str]:
    bits = [sender_heading(message.sender), f"*{format_message_time(message.created_at)}*"]

    bits.extend(extract_body_parts(message))

    if message.attachments:
        bits.append("### 📎 Attachments")
        for attachment in message.attachments:
            bits.extend(render_attachment(attachment, cfg))

    for file_ref in message.files:
        bits.append(f"**File:** {file_ref.file_name}")

    bits.append("---")
    return bits


def render_conversation(conversation: Conversation, cfg: Optional[LanguageConfig] = None) -> str:
    """
    Render a conversation as a Markdown document.

    Returns "" when the record has no chat_messages list, which tells the
    caller this is not a conversation.
    """
    if conversation.chat_messages is None:
        return ""

    cfg = cfg or LanguageConfig()

    bits: List[str] = [
        f"# {conversation.name or 'Untitled Conversation'}",
        f"**Created:** {format_datetime(conversation.created_at)}",
        f"**Updated:** {format_datetime(conversation.updated_at)}",
        f"**UUID:** {conversation.uuid}",
        "---",
    ]

    for message in conversation.chat_messages:
        bits.extend(render_message(message, cfg))

    return "\n\n".join(bits)


def render_project(project: Project, cfg: LanguageConfig) -> List[str]:
    lines = [
        f"## {project.name}",
        f"**Created:** {format_datetime(project.created_at)}",
        f"**Updated:** {format_datetime(project.updated_at)}",
        f"**Private:** {'Yes' if project.is_private else 'No'}",
        f"**UUID:** {project.uuid}",
    ]

    if project.description:
        lines.extend(["", "**Description:**", project.description])

    if project.prompt_template:
        lines.extend(["", "**Prompt Template:**", "```", project.prompt_template, "```"])

    if project.docs:
        lines.extend(["", "### 📄 Documents"])
        for doc in project.docs:
            lines.append(f"#### {doc.filename}")
            lines.append(f"*Created: {format_datetime(doc.created_at)}*")
            lines.append("")
            lines.append(f"```{document_language(doc.filename, cfg)}")
            lines.append(doc.content)
            lines.append("```")
            lines.append("")

    lines.extend(["---", ""])
    return lines


def render_projects(projects: Sequence[Project], cfg: Optional[LanguageConfig] = None) -> str:
    """
    Render every project into one Markdown document.
    """
    cfg = cfg or LanguageConfig()

    lines: List[str] = ["# Claude Projects", ""]
    for project in projects:
        lines.extend(render_project(project, cfg))

    return "\n".join(lines)
