from authenticity.detectors.metadata import ImageMetadataScanner, scan_image_metadata
from authenticity.detectors.phrases import PHRASE_LEXICON, PhraseMatcher, find_ai_phrases
from authenticity.detectors.paste import TypingPasteTracker
from authenticity.detectors.core import AuthenticityAggregator, aggregate, aggregate_images

__all__ = [
    "ImageMetadataScanner",
    "scan_image_metadata",
    "PHRASE_LEXICON",
    "PhraseMatcher",
    "find_ai_phrases",
    "TypingPasteTracker",
    "AuthenticityAggregator",
    "aggregate",
    "aggregate_images",
]
