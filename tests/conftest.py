"""
Shared fixtures: small Claude export records.
"""

import json

import pytest


@pytest.fixture
def text_only_conversation():
    return {
        "uuid": "conv-1",
        "name": "Greetings: hello/world",
        "created_at": "2024-03-01T14:05:09.000000Z",
        "updated_at": "2024-03-01T14:06:00.000000Z",
        "chat_messages": [
            {
                "sender": "human",
                "created_at": "2024-03-01T14:05:09.000000Z",
                "text": "Hello there",
            },
            {
                "sender": "assistant",
                "created_at": "2024-03-01T14:05:30.000000Z",
                "content": [
                    {"type": "text", "text": "Hi!"},
                    {"type": "tool_use", "name": "search"},
                    {"type": "text", "text": "How can I help?"},
                ],
                "text": "ignored fallback",
            },
        ],
    }


@pytest.fixture
def attachment_conversation():
    return {
        "uuid": "conv-2",
        "name": "Config review",
        "created_at": "2024-03-02T09:00:00Z",
        "updated_at": "2024-03-02T09:30:00Z",
        "chat_messages": [
            {
                "sender": "human",
                "created_at": "2024-03-02T09:00:00Z",
                "content": [{"type": "text", "text": "Please check this file"}],
                "attachments": [
                    {
                        "file_name": "settings.txt",
                        "file_size": 17,
                        "file_type": "application/json",
                        "extracted_content": '{"debug": true}',
                    }
                ],
                "files": [{"file_name": "screenshot.png"}],
            }
        ],
    }


@pytest.fixture
def sample_project():
    return {
        "uuid": "proj-1",
        "name": "Research",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
        "is_private": True,
        "description": "Papers and notes",
        "prompt_template": "You are a careful reviewer.",
        "docs": [
            {"filename": "notes.md", "created_at": "2024-01-01T10:00:00Z", "content": "# Notes"},
            {"filename": "LICENSE", "created_at": "2024-01-01T11:00:00Z", "content": "MIT"},
        ],
    }


@pytest.fixture
def write_json():
    def _write(path, data):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
