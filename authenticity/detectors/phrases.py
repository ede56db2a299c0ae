import logging
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)

# Stock transitions, hedges and cliches common in AI-generated text.
# Lowercase; matched as plain substrings in this order.
PHRASE_LEXICON: Tuple[str, ...] = (
    "as an ai",
    "i cannot and will not",
    "i'm an ai",
    "i am an ai",
    "delve into",
    "delving into",
    "it's important to note",
    "it is important to note",
    "it's worth noting",
    "in conclusion,",
    "in summary,",
    "to summarize,",
    "i hope this helps",
    "let me know if you",
    "feel free to ask",
    "dive into",
    "dive deep into",
    "comprehensive guide",
    "step-by-step guide",
    "embark on",
    "embarking on",
    "tapestry of",
    "rich tapestry",
    "multifaceted",
    "nuanced approach",
    "holistic approach",
    "paradigm shift",
    "leverage the power",
    "harness the power",
    "unlock the potential",
    "game-changer",
    "cutting-edge",
    "groundbreaking",
    "revolutionize",
    "seamlessly integrate",
    "robust framework",
    "synergy",
    "optimize your",
    "maximize your",
    "supercharge your",
)

class PhraseMatcher:
    """Case-insensitive substring matcher over a fixed phrase lexicon. Stateless."""

    def __init__(self, lexicon: Iterable[str] = PHRASE_LEXICON):
        # Keep first occurrence only so each phrase is reported at most once
        self.lexicon: Tuple[str, ...] = tuple(dict.fromkeys(p.lower() for p in lexicon if p))

    def scan(self, text: str) -> List[str]:
        lower = (text or "").lower()
        matches = [phrase for phrase in self.lexicon if phrase in lower]
        if matches:
            logger.debug(f"[PHRASES] {len(matches)} lexicon hit(s): {matches}")
        return matches

    def count(self, text: str) -> int:
        return len(self.scan(text))

_default_matcher = PhraseMatcher()

def find_ai_phrases(text: str) -> List[str]:
    return _default_matcher.scan(text)
