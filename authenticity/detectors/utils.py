import io
import logging
from typing import Optional
from PIL import Image, UnidentifiedImageError

from authenticity.scoring_config import ScoringConfig

logger = logging.getLogger(__name__)

def normalize_mime(mime: Optional[str]) -> str:
    """Lowercase a declared mime type, drop parameters and resolve aliases."""
    if not mime:
        return ""
    base = str(mime).split(";", 1)[0].strip().lower()
    return ScoringConfig.MIME_ALIASES.get(base, base)

def sniff_mime(data: bytes) -> str:
    """
    Identify the image format from its bytes when the uploader did not declare one.
    Only the header is read; pixel data is never decoded.
    """
    if not data:
        return ""
    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = (img.format or "").upper()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        logger.debug(f"[MIME] Could not identify image format: {e}")
        return ""
    return normalize_mime(Image.MIME.get(fmt, ""))

def resolve_mime(data: bytes, declared_mime: Optional[str]) -> str:
    mime = normalize_mime(declared_mime)
    if mime:
        return mime
    sniffed = sniff_mime(data)
    logger.debug(f"[MIME] No declared mime type, sniffed '{sniffed or 'unknown'}'")
    return sniffed
