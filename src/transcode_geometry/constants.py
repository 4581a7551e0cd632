"""
Centralized constants for Transcode Geometry.
"""

# Target resolution token meaning "keep the stream's own larger dimension"
ORIGINAL = "original"

# Scale filter sentinel: derive this side automatically, rounded to even
AUTO_SENTINEL = -2

# Default target resolution (larger side, in pixels)
DEFAULT_TARGET_RESOLUTION = "720"

# ffprobe color_transfer values that mark HDR content
HDR_TRANSFERS = {"smpte2084", "arib-std-b67"}
