import logging
from typing import Iterable, List, Optional, Union

from authenticity.detectors.paste import TypingPasteTracker
from authenticity.schemas import ImageMetadataReport, SuspicionVerdict, TypingPasteState
from authenticity.scoring_config import ScoringConfig

logger = logging.getLogger(__name__)

StateSource = Union[TypingPasteState, TypingPasteTracker]

def _as_state(state: Optional[StateSource]) -> TypingPasteState:
    if state is None:
        return TypingPasteState()
    if isinstance(state, TypingPasteTracker):
        return state.snapshot()
    return state

def _round_half_up(value: float) -> int:
    return int(value + 0.5)

def paste_warning_text(state: TypingPasteState) -> str:
    return ScoringConfig.MESSAGES["PASTE_RATIO"].format(percent=_round_half_up(state.paste_ratio * 100))

def phrase_warning_text(state: TypingPasteState) -> str:
    limit = ScoringConfig.THRESHOLDS["PHRASE_DISPLAY_LIMIT"]
    shown = state.phrase_matches[:limit]
    quoted = ", ".join(f'"{p}"' for p in shown)
    hidden = len(state.phrase_matches) - len(shown)
    if hidden > 0:
        quoted += ScoringConfig.MESSAGES["MORE_PHRASES"].format(count=hidden)
    return ScoringConfig.MESSAGES["AI_PHRASES"].format(phrases=quoted)

def aggregate_images(image_reports: Iterable[Optional[ImageMetadataReport]],
                     state: Optional[StateSource] = None) -> SuspicionVerdict:
    """
    Fold image, paste and phrase signals into one verdict.

    Warnings are ordered: image reasons (in upload order), paste ratio, AI phrases.
    Only unacknowledged text warnings block publishing; image suspicion is
    informational. Never mutates the tracker it is given.
    """
    snapshot = _as_state(state)
    warnings: List[str] = []

    for report in image_reports:
        if report is not None and report.is_suspicious:
            warnings.extend(report.reasons)

    if snapshot.has_paste_warning:
        warnings.append(paste_warning_text(snapshot))

    if snapshot.has_phrase_warning:
        warnings.append(phrase_warning_text(snapshot))

    blocking = (
        (snapshot.has_paste_warning and not snapshot.paste_acknowledged)
        or (snapshot.has_phrase_warning and not snapshot.phrase_acknowledged)
    )

    logger.debug(f"[VERDICT] {len(warnings)} warning(s) | blocking={blocking} | "
                 f"paste_ratio={snapshot.paste_ratio:.2f} | phrases={len(snapshot.phrase_matches)}")
    return SuspicionVerdict(warnings=warnings, blocking=blocking)

def aggregate(image_report: Optional[ImageMetadataReport],
              state: Optional[StateSource] = None) -> SuspicionVerdict:
    return aggregate_images([image_report], state)

class AuthenticityAggregator:
    """Stateless entry point the composer calls before publishing."""

    def aggregate(self, image_report: Optional[ImageMetadataReport],
                  state: Optional[StateSource] = None) -> SuspicionVerdict:
        return aggregate(image_report, state)

    def aggregate_images(self, image_reports: Iterable[Optional[ImageMetadataReport]],
                         state: Optional[StateSource] = None) -> SuspicionVerdict:
        return aggregate_images(image_reports, state)
