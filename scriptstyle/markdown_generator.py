"""
Markdown Generator
==================

Save style guides and generated scripts as Markdown files.

Features:
- YAML frontmatter with channel metadata
- Safe filename slugification
- One directory per channel: <output>/<channel-slug>/
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from slugify import slugify

from .models import StyleAnalysis


def _frontmatter(fields: dict) -> List[str]:
    """Build YAML frontmatter lines, skipping None values."""
    lines = ["---"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            lines.append(f"{k}: {v}")
        else:
            lines.append(f"{k}: {_quote(str(v))}")
    lines.append("---\n")
    return lines


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def channel_dir(output_root: Path, channel_title: str) -> Path:
    return Path(output_root) / (slugify(channel_title)[:80] or "channel")


def write_style_guide(output_root: Path, analysis: StyleAnalysis, generated_at: Optional[datetime] = None) -> Path:
    """
    Write a channel's style guide to <output>/<channel>/style-guide.md.

    Args:
        output_root: Root output directory
        analysis: Result of analyzing the channel
        generated_at: Timestamp for the frontmatter (defaults to now, UTC)

    Returns:
        Path to the created file
    """
    out_dir = channel_dir(output_root, analysis.channel_title)
    out_dir.mkdir(parents=True, exist_ok=True)
    fpath = out_dir / "style-guide.md"

    yaml_lines = _frontmatter({
        "channel": analysis.channel_title,
        "videos_analyzed": analysis.videos_analyzed,
        "generated_at": (generated_at or datetime.now(timezone.utc)).isoformat(),
    })

    body = "# Characteristics\n\n"
    body += "".join(f"- {c}\n" for c in analysis.characteristics) + "\n"
    body += "# Style Guide\n\n" + analysis.style_guide.strip() + "\n"

    fpath.write_text("\n".join(yaml_lines) + body, encoding="utf-8")
    return fpath


def write_script(output_root: Path, channel_title: str, topic: str, script: str) -> Path:
    """Write a generated script to <output>/<channel>/scripts/<topic-slug>.md."""
    scripts_dir = channel_dir(output_root, channel_title) / "scripts"
    scripts_dir.mkdir(parents=True, exist_ok=True)
    fpath = scripts_dir / f"{slugify(topic)[:80] or 'script'}.md"

    yaml_lines = _frontmatter({"channel": channel_title, "topic": topic})
    fpath.write_text("\n".join(yaml_lines) + "# Script\n\n" + script.strip() + "\n", encoding="utf-8")
    return fpath
