from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from typing import Optional, List

from authenticity.scoring_config import ScoringConfig

# Derived-value rules shared by TypingPasteState and the live tracker

def compute_paste_ratio(typed_chars: int, pasted_chars: int) -> float:
    total = typed_chars + pasted_chars
    return pasted_chars / total if total > 0 else 0.0

def paste_warning_active(typed_chars: int, pasted_chars: int) -> bool:
    return (
        typed_chars + pasted_chars >= ScoringConfig.THRESHOLDS["MIN_CHARS_FOR_PASTE_CHECK"]
        and compute_paste_ratio(typed_chars, pasted_chars) >= ScoringConfig.THRESHOLDS["PASTE_RATIO"]
    )

def phrase_warning_active(match_count: int) -> bool:
    return match_count >= ScoringConfig.THRESHOLDS["PHRASE_MATCHES"]

def warnings_acknowledged(has_paste_warning: bool, paste_acknowledged: bool,
                          has_phrase_warning: bool, phrase_acknowledged: bool) -> bool:
    return (
        (not has_paste_warning or paste_acknowledged)
        and (not has_phrase_warning or phrase_acknowledged)
    )

class ImageMetadataReport(BaseModel):
    """Result of a shallow metadata scan over one uploaded image."""
    model_config = ConfigDict(frozen=True)

    has_metadata_segment: bool = False
    has_camera_info: bool = False
    camera_make: Optional[str] = None
    has_gps: bool = False
    has_datetime: bool = False
    software_tag: Optional[str] = None
    is_suspicious: bool = False
    reasons: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_consistency(self):
        if self.is_suspicious != bool(self.reasons):
            raise ValueError("is_suspicious must be set exactly when reasons are present")
        if self.camera_make is not None and not self.has_camera_info:
            raise ValueError("camera_make requires has_camera_info")
        return self

class TypingPasteState(BaseModel):
    """Read-only snapshot of a composer session's typing/paste tracker."""
    model_config = ConfigDict(frozen=True)

    typed_chars: int = Field(default=0, ge=0)
    pasted_chars: int = Field(default=0, ge=0)
    paste_acknowledged: bool = False
    phrase_matches: List[str] = Field(default_factory=list)
    phrase_acknowledged: bool = False

    @computed_field
    @property
    def total_chars(self) -> int:
        return self.typed_chars + self.pasted_chars

    @computed_field
    @property
    def paste_ratio(self) -> float:
        return compute_paste_ratio(self.typed_chars, self.pasted_chars)

    @computed_field
    @property
    def has_paste_warning(self) -> bool:
        return paste_warning_active(self.typed_chars, self.pasted_chars)

    @computed_field
    @property
    def has_phrase_warning(self) -> bool:
        return phrase_warning_active(len(self.phrase_matches))

    @computed_field
    @property
    def has_warnings(self) -> bool:
        return self.has_paste_warning or self.has_phrase_warning

    @computed_field
    @property
    def all_acknowledged(self) -> bool:
        return warnings_acknowledged(self.has_paste_warning, self.paste_acknowledged,
                                     self.has_phrase_warning, self.phrase_acknowledged)

class SuspicionVerdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    warnings: List[str] = Field(default_factory=list)
    # True while a text warning is still unacknowledged (publish gate)
    blocking: bool = False
