"""
Tests for fallback transcript synthesis.
"""

import pytest

from tubesummarize.core.synthesizer import (
    GENERIC_PHRASES,
    SYNTHETIC_DISCLOSURE,
    extract_topics,
    segment_count_for,
    synthesize,
)

DESCRIPTION = (
    "In this video we walk through the basics of sourdough baking.\n"
    "First we feed the starter and wait for it to double in size, "
    "then we mix flour and water for the autolyse.\n"
    "Short line.\n"
    "Finally we shape the loaf and bake it in a dutch oven"
)


@pytest.mark.parametrize("duration", [0, 1, 213, 299, 301, 3723])
def test_synthesize_returns_disclosure_and_at_least_twenty_segments(duration):
    segments = synthesize("abc123defgh", duration, DESCRIPTION)

    assert len(segments) >= 21
    assert len(segments) == 1 + segment_count_for(duration)
    assert segments[0].timestamp == 0
    assert SYNTHETIC_DISCLOSURE in segments[0].text


def test_segment_count_for():
    assert segment_count_for(0) == 20
    assert segment_count_for(300) == 20
    assert segment_count_for(301) == 21
    assert segment_count_for(3600) == 240


def test_synthesize_is_deterministic():
    first = synthesize("abc123defgh", 1800, DESCRIPTION)
    second = synthesize("abc123defgh", 1800, DESCRIPTION)

    assert [s.model_dump() for s in first] == [s.model_dump() for s in second]


def test_timestamps_are_evenly_spaced_and_non_decreasing():
    segments = synthesize("abc123defgh", 600, "")
    generated = segments[1:]

    # 600 seconds over 40 segments
    assert [s.timestamp for s in generated] == [i * 15 for i in range(40)]
    timestamps = [s.timestamp for s in segments]
    assert timestamps == sorted(timestamps)


def test_empty_description_uses_generic_placeholders():
    segments = synthesize("abc123defgh", 213, "")

    assert len(segments) == 21
    assert segments[1].text == "Transcript segment 1 of the video (timestamp: 0:00)"
    # 213 // 20 = 10 seconds per segment
    assert segments[20].text == "Transcript segment 20 of the video (timestamp: 3:10)"


def test_topics_are_used_verbatim_then_cycled_with_phrases():
    segments = synthesize("abc123defgh", 213, DESCRIPTION)
    topics = extract_topics(DESCRIPTION, 20)

    assert topics == [
        "In this video we walk through the basics of sourdough baking",
        "First we feed the starter and wait for it to double in size",
        "then we mix flour and water for the autolyse",
        "Finally we shape the loaf and bake it in a dutch oven",
    ]
    assert [s.text for s in segments[1:5]] == topics
    # index 4: phrase 4, topic 4 % 4 == 0
    assert segments[5].text == f"{GENERIC_PHRASES[4]} {topics[0].lower()}"
    assert segments[6].text == f"{GENERIC_PHRASES[5]} {topics[1].lower()}"


def test_extract_topics_respects_limit_and_length_bounds():
    description = "\n".join(["x" * 20, "y" * 21, "z" * 199, "w" * 200, "v" * 50])

    assert extract_topics(description, 10) == ["y" * 21, "z" * 199, "v" * 50]
    assert extract_topics(description, 1) == ["y" * 21]


def test_long_text_is_truncated_to_two_hundred_characters():
    long_topic = "a" * 199
    segments = synthesize("abc123defgh", 60, long_topic)

    assert all(len(s.text) <= 200 for s in segments)
    # Phrase + topic exceeds the limit and gets an ellipsis
    assert segments[2].text.endswith("...")
    assert len(segments[2].text) == 200
