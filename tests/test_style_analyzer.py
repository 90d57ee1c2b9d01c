import pytest

from scriptstyle.errors import UpstreamError
from scriptstyle.models import TranscriptRecord
from scriptstyle.style_analyzer import (
    FALLBACK_CHARACTERISTIC,
    analyze_style,
    combine_transcripts,
    extract_characteristics,
)


def record(title, transcript, video_id="vid"):
    return TranscriptRecord(video_id=video_id, title=title, transcript=transcript)


def test_combine_truncates_each_transcript_to_3000_chars():
    long_text = "a" * 2500 + "b" * 1000
    combined = combine_transcripts([record("Long", long_text), record("Short", "short text")])

    first, second = combined.split("\n\n---\n\n")
    assert first == "Video: Long\n\n" + "a" * 2500 + "b" * 500
    assert second == "Video: Short\n\nshort text"


def test_combine_keeps_input_order():
    combined = combine_transcripts([record("B", "two"), record("A", "one")])
    assert combined.index("Video: B") < combined.index("Video: A")


def test_analyze_style_returns_completion_verbatim(recording_llm):
    llm = recording_llm("  # Style Guide\n\nTone: upbeat  ")
    guide = analyze_style([record("Intro", "hello there")], "My Channel", llm.runnable)

    assert guide == "  # Style Guide\n\nTone: upbeat  "
    system, human = llm.calls[0]
    assert system.type == "system"
    assert "analyzing writing styles" in system.content
    assert 'YouTube channel "My Channel"' in human.content
    assert "Video: Intro\n\nhello there" in human.content
    assert "8. Any unique stylistic elements" in human.content


def test_analyze_style_wraps_failures(recording_llm):
    llm = recording_llm(error=RuntimeError("rate limited"))
    with pytest.raises(UpstreamError) as exc:
        analyze_style([record("Intro", "hello")], "My Channel", llm.runnable)
    assert exc.value.status_code == 500
    assert exc.value.message == "Failed to analyze style with AI"


def test_extract_characteristics_strips_list_markers():
    guide = "# Tone and voice analysis\n\n- Energetic and playful\n2. Uses short punchy sentences\nok\n* Frequent rhetorical questions\nExtra line past five"
    assert extract_characteristics(guide) == [
        "Tone and voice analysis",
        "Energetic and playful",
        "Uses short punchy sentences",
        "Frequent rhetorical questions",
    ]


def test_extract_characteristics_returns_at_most_five():
    guide = "\n".join(f"- Characteristic number {i}" for i in range(8))
    result = extract_characteristics(guide)
    assert len(result) == 5
    assert all(10 < len(c) < 150 for c in result)


def test_extract_characteristics_fallback():
    guide = "# Hi\n- short\n" + "x" * 150 + "\n1. tiny\n" + "y" * 200 + "\n- A perfectly fine sixth line"
    assert extract_characteristics(guide) == [FALLBACK_CHARACTERISTIC]


def test_extract_characteristics_empty_guide():
    assert extract_characteristics("") == [FALLBACK_CHARACTERISTIC]
