import pytest

from authenticity.detectors import PhraseMatcher, TypingPasteTracker

def type_chars(tracker: TypingPasteTracker, count: int, start: int = 0) -> int:
    """Simulate one keystroke at a time; returns the final field length."""
    length = start
    for _ in range(count):
        tracker.record_typed_delta(length + 1, length)
        length += 1
    return length

def test_empty_tracker():
    tracker = TypingPasteTracker()
    assert tracker.typed_chars == 0
    assert tracker.pasted_chars == 0
    assert tracker.paste_ratio == 0.0
    assert tracker.has_paste_warning is False
    assert tracker.has_phrase_warning is False

def test_large_paste_after_typing_warns_and_rearms():
    tracker = TypingPasteTracker()
    tracker.acknowledge_paste()
    type_chars(tracker, 30)
    tracker.record_paste(400)

    assert tracker.typed_chars == 30
    assert tracker.pasted_chars == 400
    assert tracker.paste_ratio == pytest.approx(400 / 430)
    assert round(tracker.paste_ratio, 2) == 0.93
    assert tracker.has_paste_warning is True
    assert tracker.paste_acknowledged is False

def test_typing_alone_below_minimum_never_warns():
    tracker = TypingPasteTracker()
    type_chars(tracker, 50)
    assert tracker.typed_chars == 50
    assert tracker.has_paste_warning is False

def test_paste_ratio_ignored_below_minimum_total():
    tracker = TypingPasteTracker()
    tracker.record_paste(99)
    assert tracker.paste_ratio == 1.0
    assert tracker.has_paste_warning is False
    tracker.record_paste(1)
    assert tracker.has_paste_warning is True

@pytest.mark.parametrize("new_len,previous_len,expected", [
    (1, 0, 1),
    (12, 10, 2),
    (13, 10, 0),
    (10, 10, 0),
    (5, 10, 0),
])
def test_typed_delta_counts_only_keystrokes(new_len, previous_len, expected):
    tracker = TypingPasteTracker()
    tracker.record_typed_delta(new_len, previous_len)
    assert tracker.typed_chars == expected

def test_non_positive_paste_ignored():
    tracker = TypingPasteTracker()
    tracker.acknowledge_paste()
    tracker.record_paste(0)
    tracker.record_paste(-5)
    assert tracker.pasted_chars == 0
    assert tracker.paste_acknowledged is True

def test_record_input_tracks_previous_length():
    tracker = TypingPasteTracker()
    for length in (1, 2, 4, 40, 41, 39, 40):
        tracker.record_input(length)
    # +1, +1, +2, (+36 paste-sized), +1, (-2), +1
    assert tracker.typed_chars == 6

def test_acknowledgment_survives_growth_while_above_threshold():
    tracker = TypingPasteTracker()
    type_chars(tracker, 10)
    tracker.record_paste(200)
    tracker.acknowledge_paste()

    tracker.record_paste(20)
    type_chars(tracker, 5, start=230)
    assert tracker.has_paste_warning is True
    assert tracker.paste_acknowledged is True

def test_small_pastes_rearm_on_fresh_crossing():
    tracker = TypingPasteTracker()
    type_chars(tracker, 30)
    tracker.acknowledge_paste()

    tracker.record_paste(45)
    assert tracker.has_paste_warning is False
    assert tracker.paste_acknowledged is True

    tracker.record_paste(45)
    assert tracker.total_chars == 120
    assert tracker.has_paste_warning is True
    assert tracker.paste_acknowledged is False

def test_warning_cleared_by_typing_then_rearmed():
    tracker = TypingPasteTracker()
    tracker.record_paste(100)
    tracker.acknowledge_paste()

    length = type_chars(tracker, 50, start=100)
    assert tracker.has_paste_warning is False

    tracker.record_paste(40)
    assert tracker.paste_ratio == pytest.approx(140 / 190)
    assert tracker.has_paste_warning is True
    assert tracker.paste_acknowledged is False
    assert length == 150

def test_acknowledge_without_warning_is_harmless():
    tracker = TypingPasteTracker()
    tracker.acknowledge_paste()
    tracker.acknowledge_paste()
    tracker.acknowledge_phrases()
    assert tracker.paste_acknowledged is True
    assert tracker.phrase_acknowledged is True

# --- Phrase matches held by the tracker ---

THREE_PHRASES = "delve into this topic. it's important to note that, in conclusion, it was great."

def test_check_phrases_replaces_matches():
    tracker = TypingPasteTracker()
    assert tracker.check_phrases(THREE_PHRASES) == ["delve into", "it's important to note", "in conclusion,"]
    assert tracker.has_phrase_warning is True

    tracker.check_phrases("we walked to the glacier")
    assert tracker.phrase_matches == []
    assert tracker.has_phrase_warning is False

def test_phrase_acknowledgment_kept_while_above_threshold():
    tracker = TypingPasteTracker()
    tracker.check_phrases(THREE_PHRASES)
    tracker.acknowledge_phrases()

    tracker.check_phrases(THREE_PHRASES + " a rich tapestry of colour")
    assert len(tracker.phrase_matches) == 5
    assert tracker.phrase_acknowledged is True

def test_phrase_acknowledgment_rearmed_on_fresh_crossing():
    tracker = TypingPasteTracker()
    tracker.check_phrases(THREE_PHRASES)
    tracker.acknowledge_phrases()

    tracker.check_phrases("delve into this topic.")
    assert tracker.has_phrase_warning is False
    assert tracker.phrase_acknowledged is True

    tracker.check_phrases(THREE_PHRASES)
    assert tracker.phrase_acknowledged is False

def test_update_phrase_matches_deduplicates():
    tracker = TypingPasteTracker()
    tracker.update_phrase_matches(["synergy", "synergy", "multifaceted"])
    assert tracker.phrase_matches == ["synergy", "multifaceted"]
    assert tracker.has_phrase_warning is False

def test_custom_matcher():
    tracker = TypingPasteTracker(matcher=PhraseMatcher(["summit push", "base camp", "crampons"]))
    tracker.check_phrases("Base camp, then the summit push with crampons.")
    assert tracker.has_phrase_warning is True

# --- Lifecycle ---

def test_reset_clears_everything():
    tracker = TypingPasteTracker()
    tracker.record_input(1)
    tracker.record_paste(300)
    tracker.check_phrases(THREE_PHRASES)
    tracker.acknowledge_paste()
    tracker.acknowledge_phrases()

    tracker.reset()
    assert tracker.snapshot() == TypingPasteTracker().snapshot()
    tracker.record_input(1)
    assert tracker.typed_chars == 1

def test_snapshot_is_detached_from_tracker():
    tracker = TypingPasteTracker()
    tracker.record_paste(150)
    snap = tracker.state
    tracker.record_paste(150)
    tracker.check_phrases(THREE_PHRASES)

    assert snap.pasted_chars == 150
    assert snap.phrase_matches == []
    assert snap.has_paste_warning is True
    assert snap.paste_ratio == 1.0

def test_sessions_are_independent():
    first = TypingPasteTracker()
    second = TypingPasteTracker()
    first.record_paste(500)
    assert second.pasted_chars == 0
    assert second.has_paste_warning is False

def test_tracker_derived_values_match_snapshot():
    tracker = TypingPasteTracker()
    steps = [
        lambda t: t.record_input(1),
        lambda t: t.record_paste(60),
        lambda t: t.record_paste(45),
        lambda t: t.check_phrases(THREE_PHRASES),
        lambda t: t.acknowledge_paste(),
        lambda t: t.acknowledge_phrases(),
        lambda t: t.check_phrases(""),
    ]
    for step in steps:
        step(tracker)
        snap = tracker.snapshot()
        assert tracker.total_chars == snap.total_chars
        assert tracker.paste_ratio == snap.paste_ratio
        assert tracker.has_paste_warning == snap.has_paste_warning
        assert tracker.has_phrase_warning == snap.has_phrase_warning
        assert tracker.has_warnings == snap.has_warnings
        assert tracker.all_acknowledged == snap.all_acknowledged

def test_has_warnings_and_all_acknowledged():
    tracker = TypingPasteTracker()
    assert tracker.has_warnings is False
    assert tracker.all_acknowledged is True

    tracker.record_paste(150)
    tracker.check_phrases(THREE_PHRASES)
    assert tracker.has_warnings is True
    assert tracker.all_acknowledged is False

    tracker.acknowledge_paste()
    assert tracker.all_acknowledged is False
    tracker.acknowledge_phrases()
    assert tracker.all_acknowledged is True
