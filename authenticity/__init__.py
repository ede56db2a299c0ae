"""
Content-authenticity heuristics for journal entries: image metadata,
typing/paste behaviour and stock AI phrasing folded into one verdict.
"""

from authenticity.detectors import (
    PHRASE_LEXICON,
    AuthenticityAggregator,
    ImageMetadataScanner,
    PhraseMatcher,
    TypingPasteTracker,
    aggregate,
    aggregate_images,
    find_ai_phrases,
    scan_image_metadata,
)
from authenticity.schemas import ImageMetadataReport, SuspicionVerdict, TypingPasteState
from authenticity.scoring_config import ScoringConfig

__version__ = "0.1.0"
