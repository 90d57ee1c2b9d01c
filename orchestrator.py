"""
Channel Style Scripter - Main CLI
=================================

Analyze a channel's writing style and optionally draft a new script in it.

Usage:
    python orchestrator.py "https://www.youtube.com/@kurzgesagt" --topic "Why octopuses are weird"

Flow:
    1. Resolve channel from any input (URL, handle, ID)
    2. Fetch the most recent uploads
    3. Fetch transcripts for up to 5 of them
    4. Build a style guide with the LLM
    5. (--topic) Generate a script in that style
    6. (--output) Save style guide and script as Markdown
"""

import argparse
import logging
import sys
from pathlib import Path

from scriptstyle import Settings, StylePipeline
from scriptstyle.errors import ScriptStyleError
from scriptstyle.markdown_generator import write_script, write_style_guide


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="YouTube channel style analyzer and script writer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Only analyze the style
  python orchestrator.py "@AliAbdaal"

  # Analyze and write a script
  python orchestrator.py "https://www.youtube.com/@veritasium" --topic "How GPS works"

  # Save results as Markdown under ./vault
  python orchestrator.py "UCsXVk37bltHxD1rDPwtNM8Q" --topic "Black holes" --output ./vault
        """
    )
    parser.add_argument(
        "channel",
        help="Channel URL, @handle, channel ID, or name"
    )
    parser.add_argument(
        "--topic",
        default=None,
        help="Write a script about this topic in the channel's style"
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Directory to save style guide and script as Markdown"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Verbose output"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = Settings.from_env()
        pipeline = StylePipeline.from_settings(settings, show_progress=True)
    except ScriptStyleError as e:
        print(f"❌ Configuration error: {e.message}")
        return 1

    print(f"\n🔍 Analyzing channel: {args.channel}")
    try:
        analysis = pipeline.analyze_channel(args.channel)
    except ScriptStyleError as e:
        print(f"❌ {e.message}")
        return 1

    print(f"\n✅ {analysis.channel_title} ({analysis.videos_analyzed} videos analyzed)")
    print("\n📋 Characteristics:")
    for c in analysis.characteristics:
        print(f"   - {c}")
    print(f"\n📝 Style guide:\n\n{analysis.style_guide}\n")

    out_root = Path(args.output) if args.output else None
    if out_root:
        fpath = write_style_guide(out_root, analysis)
        print(f"💾 Saved style guide: {fpath}")

    if not args.topic:
        return 0

    print(f"\n✍️  Writing script about: {args.topic}")
    try:
        script = pipeline.generate_script(analysis.style_guide, args.topic)
    except ScriptStyleError as e:
        print(f"❌ {e.message}")
        return 1

    print(f"\n🎬 Script:\n\n{script}\n")
    if out_root:
        fpath = write_script(out_root, analysis.channel_title, args.topic, script)
        print(f"💾 Saved script: {fpath}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
