"""
convert.py

Entry point: Claude data export -> Markdown files.

Goal:
- Load claude_export_data/conversations.json (a list of conversations)
- Render each conversation to Markdown and write it as
  markdown_output/NNN_<sanitized name>.md
- If claude_export_data/projects.json exists, render all projects into
  markdown_output/000_projects.md (sorts first)
- Print a readable summary to the terminal

One bad conversation never aborts the batch: it is logged and recorded as
Skipped. Only a missing or unparseable conversations file, or an output
directory that cannot be created, is fatal.
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from processors import parse_conversation, parse_projects
from renderers.markdown import LanguageConfig, render_conversation, render_projects, sanitize_filename

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """A fatal error: the run cannot continue. Carries the offending path."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class ExportLoadError(ConversionError):
    """Raised when an export file is missing, unreadable, or not a JSON list."""


class OutputDirectoryError(ConversionError):
    """Raised when the output directory cannot be created."""


@dataclass(frozen=True)
class ConvertConfig:
    # Where the export files live (relative to the working directory).
    data_dir: Path = Path("claude_export_data")

    # Where Markdown files are written. Created if missing.
    output_dir: Path = Path("markdown_output")

    conversations_file: str = "conversations.json"

    # Optional. Skipped silently when absent.
    projects_file: str = "projects.json"

    # Reserved name so the projects document sorts before every conversation.
    projects_output_name: str = "000_projects.md"

    max_name_length: int = 200

    languages: LanguageConfig = field(default_factory=LanguageConfig)


@dataclass(frozen=True)
class Written:
    index: int
    name: str
    path: Path


@dataclass(frozen=True)
class Skipped:
    index: int
    name: str
    reason: str


ConversionResult = Union[Written, Skipped]


@dataclass
class ConversionSummary:
    """
    Outcome of one run.

    - results: one Written/Skipped per conversation, in input order
    - projects_path: where projects were written, if a projects file existed
    - projects_error: why projects were not written, if that failed
    """

    results: List[ConversionResult] = field(default_factory=list)
    projects_path: Optional[Path] = None
    projects_error: Optional[str] = None

    @property
    def written(self) -> List[Written]:
        return [r for r in self.results if isinstance(r, Written)]

    @property
    def skipped(self) -> List[Skipped]:
        return [r for r in self.results if isinstance(r, Skipped)]


def load_json_array(path: Path) -> List[Any]:
    """
    Read a UTF-8 JSON file whose top level must be a list.

    Raises ExportLoadError for a missing file, invalid JSON, or a non-list.
    """
    if not path.exists():
        raise ExportLoadError(path, "file not found")

    try:
        raw_data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ExportLoadError(path, f"could not read JSON ({e})") from e

    if not isinstance(raw_data, list):
        raise ExportLoadError(path, "expected the top-level JSON to be a list")

    return raw_data


def output_filename(index: int, name: Optional[str], max_length: int = 200) -> str:
    """
    Build "NNN_<sanitized name>.md" for the 1-based conversation index.

    A missing name falls back to "conversation_<index>".
    """
    base_name = sanitize_filename(name or f"conversation_{index}", max_length)
    return f"{index:03d}_{base_name}.md"


def convert_one(index: int, raw: Any, config: ConvertConfig) -> ConversionResult:
    """
    Render and write a single conversation.

    Exceptions propagate to the caller, which turns them into Skipped.
    """
    if not isinstance(raw, dict):
        return Skipped(index=index, name="", reason="not a JSON object")

    conversation = parse_conversation(raw)
    name = conversation.name or ""

    markdown = render_conversation(conversation, config.languages)
    if not markdown:
        return Skipped(index=index, name=name, reason="not a conversation (no chat_messages)")

    out_path = config.output_dir / output_filename(index, conversation.name, config.max_name_length)
    out_path.write_text(markdown, encoding="utf-8")
    return Written(index=index, name=name, path=out_path)


def convert_conversations(raw_conversations: Sequence[Any], config: ConvertConfig) -> List[ConversionResult]:
    results: List[ConversionResult] = []

    for index, raw in enumerate(raw_conversations, start=1):
        try:
            result = convert_one(index, raw, config)
        except Exception as e:
            name = raw.get("name") if isinstance(raw, dict) else None
            logger.error("Error converting conversation %d: %s", index, e)
            result = Skipped(index=index, name=str(name or ""), reason=str(e))
        else:
            if isinstance(result, Written):
                logger.info("Converted: %s -> %s", result.name, result.path.name)
            else:
                logger.info("Skipped conversation %d: %s", index, result.reason)
        results.append(result)

    return results


def convert_projects(projects_path: Path, config: ConvertConfig) -> Path:
    raw_projects = load_json_array(projects_path)
    print(f"Found {len(raw_projects)} projects to convert...")

    markdown = render_projects(parse_projects(raw_projects), config.languages)
    out_path = config.output_dir / config.projects_output_name
    out_path.write_text(markdown, encoding="utf-8")
    logger.info("Converted projects -> %s", out_path.name)
    return out_path


def convert_export(config: ConvertConfig) -> ConversionSummary:
    """
    Run the whole conversion described by config.

    Raises ExportLoadError if the conversations file cannot be loaded and
    OutputDirectoryError if the output directory cannot be created.

    A failing projects file is logged and recorded on the summary instead.
    A broken projects.json leaves the exit status at 0 and keeps the
    conversations already written.
    """
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(config.output_dir, f"cannot create output directory ({e})") from e

    raw_conversations = load_json_array(config.data_dir / config.conversations_file)
    print(f"Found {len(raw_conversations)} conversations to convert...")

    summary = ConversionSummary(results=convert_conversations(raw_conversations, config))

    projects_path = config.data_dir / config.projects_file
    if projects_path.exists():
        try:
            summary.projects_path = convert_projects(projects_path, config)
        except Exception as e:
            logger.error("Error converting projects: %s", e)
            summary.projects_error = str(e)

    return summary


def print_summary(summary: ConversionSummary, config: ConvertConfig) -> None:
    print()
    print("=" * 72)
    print("Conversion complete")
    print("=" * 72)
    print(f"Output:    {config.output_dir.resolve()}")
    print(f"Written:   {len(summary.written)}")
    print(f"Skipped:   {len(summary.skipped)}")
    for skipped in summary.skipped:
        print(f"  [{skipped.index}] {skipped.name or '(untitled)'}: {skipped.reason}")
    if summary.projects_path is not None:
        print(f"Projects:  {summary.projects_path.name}")
    elif summary.projects_error is not None:
        print(f"Projects:  failed ({summary.projects_error})")
    print()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Convert a Claude data export (claude_export_data/conversations.json "
            "and projects.json) into Markdown files under markdown_output/."
        )
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None, config: Optional[ConvertConfig] = None) -> int:
    """
    Run the conversion with fixed relative paths.

    Returns the process exit code: 0 on success, 1 if the conversations
    file cannot be loaded or the output directory cannot be created.
    """
    parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = config or ConvertConfig()

    try:
        summary = convert_export(config)
    except ConversionError as e:
        logger.error("Error during conversion: %s", e)
        return 1

    print_summary(summary, config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
