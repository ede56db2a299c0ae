import logging
import re
import struct
from typing import Optional

from authenticity.detectors.utils import resolve_mime
from authenticity.schemas import ImageMetadataReport
from authenticity.scoring_config import ScoringConfig

logger = logging.getLogger(__name__)

_CAMERA_MAKER_RE = re.compile("|".join(re.escape(m) for m in ScoringConfig.CAMERA_MAKERS), re.IGNORECASE)
# Tag name, then any NULs/control bytes/separators, then the printable value
_SOFTWARE_RE = re.compile(r"software[\x00-\x1f\s:=]*([\x20-\x7e]+)", re.IGNORECASE)

def _report(fields: dict, reasons: list) -> ImageMetadataReport:
    return ImageMetadataReport(**fields, is_suspicious=bool(reasons), reasons=list(reasons))

def _read_u16(data: bytes, offset: int) -> int:
    return struct.unpack_from(">H", data, offset)[0]

def _find_app1_payload(data: bytes) -> Optional[bytes]:
    """
    Walk JPEG marker segments from just after SOI and return the payload of the
    first APP1 segment, or None if the stream ends or stops looking like markers.
    Raises ValueError/struct.error on a truncated segment.
    """
    offset = 2
    while offset < len(data) - 4:
        marker = _read_u16(data, offset)

        if marker == ScoringConfig.JPEG_APP1:
            length = _read_u16(data, offset + 2)
            start = offset + 4
            end = start + length - 2
            if length < 2 or end > len(data):
                raise ValueError(f"APP1 segment at offset {offset} overruns buffer (length={length})")
            return data[start:end]

        if (marker & 0xFF00) != 0xFF00:
            logger.debug(f"[EXIF] Non-marker bytes 0x{marker:04X} at offset {offset}, stopping")
            return None
        segment_length = _read_u16(data, offset + 2)
        offset += 2 + segment_length

    return None

def _parse_exif_text(payload: bytes, fields: dict, reasons: list) -> None:
    """
    Shallow string scan of an Exif payload. This greps the decoded bytes for
    maker names, GPS/DateTime tag names and a Software value rather than
    walking the TIFF IFDs.
    """
    text = payload.decode("utf-8", errors="replace")
    lower = text.lower()

    maker = _CAMERA_MAKER_RE.search(text)
    if maker:
        token = maker.group(0).lower()
        fields["has_camera_info"] = True
        fields["camera_make"] = ScoringConfig.CAMERA_MAKE_DISPLAY.get(token, token.title())

    if "gps" in lower or "GPSLatitude" in text or "GPSLongitude" in text:
        fields["has_gps"] = True

    if "datetime" in lower or "DateTimeOriginal" in text:
        fields["has_datetime"] = True

    software = _SOFTWARE_RE.search(text)
    if software:
        value = software.group(1).strip()
        if value:
            fields["software_tag"] = value
            value_lower = value.lower()
            if any(sig in value_lower for sig in ScoringConfig.AI_SOFTWARE_SIGNATURES):
                reasons.append(ScoringConfig.MESSAGES["AI_SOFTWARE"].format(software=value))

class ImageMetadataScanner:
    """
    Heuristic scan of an uploaded image for camera provenance.

    Missing or AI-branded metadata is reported as a suspicion reason. A corrupt
    or truncated file is never treated as evidence: parsing stops and whatever
    was found so far is returned without adding a reason.
    """

    def scan(self, data: bytes, declared_mime: Optional[str] = None) -> ImageMetadataReport:
        data = bytes(data or b"")
        mime = resolve_mime(data, declared_mime)
        fields = {}
        reasons = []

        if mime not in ScoringConfig.EXIF_MIME_TYPES:
            if mime in ScoringConfig.NO_CAMERA_METADATA_MIME_TYPES:
                reasons.append(ScoringConfig.MESSAGES["FORMAT_LACKS_METADATA"])
            return _report(fields, reasons)

        try:
            if len(data) < 2 or _read_u16(data, 0) != ScoringConfig.JPEG_SOI:
                logger.debug(f"[EXIF] Missing JPEG SOI marker ({mime}, {len(data)} bytes)")
                return _report(fields, reasons)

            payload = _find_app1_payload(data)
            if payload is not None and payload[:4] == ScoringConfig.EXIF_HEADER:
                fields["has_metadata_segment"] = True
                _parse_exif_text(payload, fields, reasons)
        except (IndexError, ValueError, struct.error) as e:
            logger.debug(f"[EXIF] Parse aborted, returning partial report: {e}")
            return _report(fields, reasons)

        if not fields.get("has_metadata_segment"):
            reasons.append(ScoringConfig.MESSAGES["NO_EXIF"])
        elif not fields.get("has_camera_info") and not fields.get("has_datetime"):
            reasons.append(ScoringConfig.MESSAGES["MISSING_CAMERA_AND_TIME"])

        return _report(fields, reasons)

_default_scanner = ImageMetadataScanner()

def scan_image_metadata(data: bytes, declared_mime: Optional[str] = None) -> ImageMetadataReport:
    """Scan one image with the shared stateless scanner."""
    return _default_scanner.scan(data, declared_mime)
