"""
Transcode Geometry (tgeo) - Output geometry for video transcoding jobs

Derives, per video stream:
- Target resolution for the larger dimension ("original" or a fixed size)
- Scale filter expression with an even auto-computed side
- Rounded output size with even dimensions
- Whether the stream needs downscaling at all
"""

__version__ = "0.1.0"
__package_name__ = "transcode-geometry"
__short_name__ = "tgeo"
