"""
Configuration for content-authenticity heuristics.
Centralizes thresholds, signature lists and warning texts for easier tuning.
"""

class ScoringConfig:
    # --- Image formats ---
    EXIF_MIME_TYPES = ("image/jpeg", "image/tiff")
    # AI exports are commonly PNG/WebP; other non-EXIF formats stay neutral.
    NO_CAMERA_METADATA_MIME_TYPES = ("image/png", "image/webp")
    MIME_ALIASES = {
        "image/jpg": "image/jpeg",
        "image/pjpeg": "image/jpeg",
        "image/tif": "image/tiff",
        # Multi-picture JPEG (phone cameras); Pillow reports it as MPO
        "image/mpo": "image/jpeg",
    }

    # --- JPEG markers ---
    JPEG_SOI = 0xFFD8
    JPEG_APP1 = 0xFFE1
    EXIF_HEADER = b"Exif"

    # --- Camera provenance ---
    CAMERA_MAKERS = (
        "canon", "nikon", "sony", "fuji", "olympus", "panasonic", "apple", "samsung",
        "google", "huawei", "xiaomi", "oneplus", "leica", "hasselblad", "gopro", "dji",
    )
    CAMERA_MAKE_DISPLAY = {
        "canon": "Canon",
        "nikon": "Nikon",
        "sony": "Sony",
        "fuji": "Fuji",
        "olympus": "Olympus",
        "panasonic": "Panasonic",
        "apple": "Apple",
        "samsung": "Samsung",
        "google": "Google",
        "huawei": "HUAWEI",
        "xiaomi": "Xiaomi",
        "oneplus": "OnePlus",
        "leica": "Leica",
        "hasselblad": "Hasselblad",
        "gopro": "GoPro",
        "dji": "DJI",
    }

    # --- Known AI tool signatures in the Software tag ---
    AI_SOFTWARE_SIGNATURES = (
        "dall-e",
        "midjourney",
        "stable diffusion",
        "novelai",
        "adobe firefly",
        "bing image creator",
        "openai",
        "stability.ai",
        "runway",
        "leonardo.ai",
        "ideogram",
        "playground ai",
    )

    # --- Thresholds ---
    THRESHOLDS = {
        # Paste ratio is only evaluated once this many characters were observed
        "MIN_CHARS_FOR_PASTE_CHECK": 100,
        "PASTE_RATIO": 0.7,
        # A single paste this long re-arms the paste warning on its own
        "LARGE_PASTE_CHARS": 50,
        # Keystroke deltas above this are paste/autocomplete, not typing
        "MAX_TYPED_DELTA": 2,
        "PHRASE_MATCHES": 3,
        # Phrases listed in the warning text before collapsing into "(+N more)"
        "PHRASE_DISPLAY_LIMIT": 5,
    }

    # --- Human-readable reasons and warnings ---
    MESSAGES = {
        "FORMAT_LACKS_METADATA": "Image format typically lacks camera metadata",
        "NO_EXIF": "No EXIF metadata found",
        "MISSING_CAMERA_AND_TIME": "Missing camera and timestamp information",
        "AI_SOFTWARE": "AI tool signature detected: {software}",
        "PASTE_RATIO": "{percent}% of your content appears to be pasted rather than typed.",
        "AI_PHRASES": "Your content contains phrases commonly associated with AI-generated text: {phrases}",
        "MORE_PHRASES": " (+{count} more)",
    }
