"""
Unit tests for Markdown rendering of conversations and projects.
"""

import pytest

from model import Attachment, Conversation, Message, Project
from processors import parse_conversation, parse_projects
from renderers.markdown import LanguageConfig, render_conversation, render_projects


class TestRenderConversation:
    def test_not_a_conversation(self):
        """No chat_messages -> empty string."""
        assert render_conversation(parse_conversation({"uuid": "x", "name": "n"})) == ""

    def test_zero_messages_still_renders_header(self):
        text = render_conversation(Conversation(uuid="u", name="Empty", chat_messages=()))
        assert text.startswith("# Empty\n\n**Created:** ")
        assert text.endswith("**UUID:** u\n\n---")

    def test_untitled(self):
        text = render_conversation(Conversation(uuid="u", chat_messages=()))
        assert text.startswith("# Untitled Conversation")

    def test_header_and_sections(self, text_only_conversation):
        text = render_conversation(parse_conversation(text_only_conversation))
        blocks = text.split("\n\n")
        assert blocks[0] == "# Greetings: hello/world"
        assert blocks[1].startswith("**Created:** ")
        assert blocks[2].startswith("**Updated:** ")
        assert blocks[3] == "**UUID:** conv-1"
        assert blocks[4] == "---"
        assert "## 👤 Human" in blocks
        assert "## 🤖 Assistant" in blocks
        assert blocks.count("---") == 3

    def test_text_fallback_verbatim(self, text_only_conversation):
        text = render_conversation(parse_conversation(text_only_conversation))
        assert "\n\nHello there\n\n" in text

    def test_content_blocks_preferred(self, text_only_conversation):
        text = render_conversation(parse_conversation(text_only_conversation))
        assert "Hi!\n\nHow can I help?" in text
        assert "ignored fallback" not in text

    def test_attachment_block(self, attachment_conversation):
        text = render_conversation(parse_conversation(attachment_conversation))
        assert "### 📎 Attachments" in text
        assert (
            "<details>\n\n<summary>settings.txt (17 bytes, application/json)</summary>\n\n\n\n"
            '```json\n\n{"debug": true}\n\n```\n\n</details>'
        ) in text
        assert "**File:** screenshot.png" in text

    def test_html_mime_without_extension(self):
        convo = Conversation(
            uuid="u",
            chat_messages=(
                Message(
                    sender="human",
                    attachments=(
                        Attachment(file_name="page", file_size=10, file_type="text/html",
                                   extracted_content="<p>hi</p>"),
                    ),
                ),
            ),
        )
        assert "```html\n\n<p>hi</p>" in render_conversation(convo)

    def test_attachment_without_content_has_no_fence(self):
        convo = Conversation(
            uuid="u",
            chat_messages=(
                Message(sender="human", attachments=(Attachment(file_name="a.bin", file_size=3),)),
            ),
        )
        text = render_conversation(convo)
        assert "<summary>a.bin (3 bytes, )</summary>\n\n</details>" in text
        assert "```" not in text

    def test_fractional_size_shown(self):
        raw = {
            "uuid": "u",
            "chat_messages": [
                {
                    "sender": "human",
                    "attachments": [{"file_name": "a.txt", "file_size": "17.5", "file_type": "text/plain"}],
                }
            ],
        }
        assert "<summary>a.txt (17.5 bytes, text/plain)</summary>" in render_conversation(parse_conversation(raw))

    def test_summary_is_escaped(self):
        convo = Conversation(
            uuid="u",
            chat_messages=(
                Message(sender="human", attachments=(Attachment(file_name="<x>&y.txt", file_size=1),)),
            ),
        )
        assert "<summary>&lt;x&gt;&amp;y.txt (1 bytes, )</summary>" in render_conversation(convo)

    def test_custom_language_config(self, attachment_conversation):
        cfg = LanguageConfig(by_mime_type={})
        text = render_conversation(parse_conversation(attachment_conversation), cfg)
        assert "```txt" in text

    def test_deterministic(self, attachment_conversation):
        convo = parse_conversation(attachment_conversation)
        assert render_conversation(convo) == render_conversation(convo)


class TestRenderProjects:
    def test_full_project(self, sample_project):
        text = render_projects(parse_projects([sample_project]))
        lines = text.split("\n")
        assert lines[0] == "# Claude Projects"
        assert lines[1] == ""
        assert "## Research" in lines
        assert "**Private:** Yes" in lines
        assert "**UUID:** proj-1" in lines
        assert "**Description:**\nPapers and notes" in text
        assert "### 📄 Documents" in lines
        assert "#### notes.md" in lines
        assert "```markdown\n# Notes\n```" in text
        assert "```text\nMIT\n```" in text
        assert text.endswith("---\n")

    def test_prompt_template_without_docs(self):
        """Template in a fenced block and no Documents subsection."""
        project = Project(uuid="p", name="Writer", prompt_template="Be concise.")
        text = render_projects([project])
        assert "**Prompt Template:**\n```\nBe concise.\n```" in text
        assert "Documents" not in text
        assert "**Private:** No" in text

    def test_no_description_block_when_missing(self):
        text = render_projects([Project(uuid="p", name="Bare")])
        assert "**Description:**" not in text
        assert "**Prompt Template:**" not in text

    def test_empty_list(self):
        assert render_projects([]) == "# Claude Projects\n"

    @pytest.mark.parametrize("count", [1, 3])
    def test_one_rule_per_project(self, count):
        projects = [Project(uuid=str(i), name=f"P{i}") for i in range(count)]
        assert render_projects(projects).split("\n").count("---") == count
