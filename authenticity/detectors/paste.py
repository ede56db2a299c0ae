import logging
from typing import Iterable, List, Optional

from authenticity.detectors.phrases import PhraseMatcher
from authenticity.schemas import (
    TypingPasteState,
    compute_paste_ratio,
    paste_warning_active,
    phrase_warning_active,
    warnings_acknowledged,
)
from authenticity.scoring_config import ScoringConfig

logger = logging.getLogger(__name__)

class TypingPasteTracker:
    """
    Keystroke vs. clipboard accounting for one text field in one composer session.

    Owned by the composer for the lifetime of the session and discarded with it.
    Not thread-safe: confine each instance to the session that created it.

    Acknowledgments are re-armed (reset to False) when a warning freshly becomes
    active, and a single paste of LARGE_PASTE_CHARS or more always re-arms the
    paste warning. A warning that stays active while totals keep growing keeps
    its acknowledgment.
    """

    def __init__(self, matcher: Optional[PhraseMatcher] = None):
        self.matcher = matcher or PhraseMatcher()
        self.reset()

    def reset(self) -> None:
        self.typed_chars = 0
        self.pasted_chars = 0
        self.paste_acknowledged = False
        self.phrase_matches: List[str] = []
        self.phrase_acknowledged = False
        self._last_length = 0

    # --- Derived values ---

    @property
    def total_chars(self) -> int:
        return self.typed_chars + self.pasted_chars

    @property
    def paste_ratio(self) -> float:
        return compute_paste_ratio(self.typed_chars, self.pasted_chars)

    @property
    def has_paste_warning(self) -> bool:
        return paste_warning_active(self.typed_chars, self.pasted_chars)

    @property
    def has_phrase_warning(self) -> bool:
        return phrase_warning_active(len(self.phrase_matches))

    @property
    def has_warnings(self) -> bool:
        return self.has_paste_warning or self.has_phrase_warning

    @property
    def all_acknowledged(self) -> bool:
        return warnings_acknowledged(self.has_paste_warning, self.paste_acknowledged,
                                     self.has_phrase_warning, self.phrase_acknowledged)

    # --- Input events ---

    def record_paste(self, pasted_text_len: int) -> None:
        if pasted_text_len <= 0:
            return
        was_warning = self.has_paste_warning
        self.pasted_chars += pasted_text_len

        if pasted_text_len >= ScoringConfig.THRESHOLDS["LARGE_PASTE_CHARS"]:
            if self.paste_acknowledged:
                logger.debug(f"[PASTE] Large paste ({pasted_text_len} chars) re-armed paste warning")
            self.paste_acknowledged = False
        else:
            self._rearm_paste(was_warning)

    def record_typed_delta(self, new_len: int, previous_len: int) -> None:
        diff = new_len - previous_len
        # 1-2 char growth is a keystroke; larger jumps are paste/autocomplete
        # and pastes are already counted by record_paste.
        if diff <= 0 or diff > ScoringConfig.THRESHOLDS["MAX_TYPED_DELTA"]:
            return
        was_warning = self.has_paste_warning
        self.typed_chars += diff
        self._rearm_paste(was_warning)

    def record_input(self, current_len: int) -> None:
        """Feed the field's current length after every input event."""
        previous = self._last_length
        self._last_length = current_len
        self.record_typed_delta(current_len, previous)

    def check_phrases(self, text: str) -> List[str]:
        """Re-scan the full field text; replaces the previous matches."""
        matches = self.matcher.scan(text)
        self.update_phrase_matches(matches)
        return matches

    def update_phrase_matches(self, matches: Iterable[str]) -> None:
        was_warning = self.has_phrase_warning
        self.phrase_matches = list(dict.fromkeys(matches))
        if self.has_phrase_warning and not was_warning:
            if self.phrase_acknowledged:
                logger.debug(f"[PHRASES] Phrase warning re-armed ({len(self.phrase_matches)} matches)")
            self.phrase_acknowledged = False

    # --- Acknowledgments ---

    def acknowledge_paste(self) -> None:
        self.paste_acknowledged = True

    def acknowledge_phrases(self) -> None:
        self.phrase_acknowledged = True

    def _rearm_paste(self, was_warning: bool) -> None:
        if self.has_paste_warning and not was_warning:
            if self.paste_acknowledged:
                logger.debug(f"[PASTE] Paste ratio crossed threshold again ({self.paste_ratio:.2f}), re-armed")
            self.paste_acknowledged = False

    # --- Snapshot ---

    def snapshot(self) -> TypingPasteState:
        return TypingPasteState(
            typed_chars=self.typed_chars,
            pasted_chars=self.pasted_chars,
            paste_acknowledged=self.paste_acknowledged,
            phrase_matches=list(self.phrase_matches),
            phrase_acknowledged=self.phrase_acknowledged,
        )

    @property
    def state(self) -> TypingPasteState:
        return self.snapshot()
