"""
Stream descriptors - Source video geometry as reported by the media prober.

Dimensions are kept exactly as decoded. Rotation metadata is carried along
for other consumers but does not swap width and height here.
"""

from dataclasses import dataclass

from .constants import HDR_TRANSFERS


@dataclass(frozen=True)
class VideoStreamInfo:
    """One video stream of a source file."""

    index: int
    width: int
    height: int
    rotation: int = 0
    frame_count: int = 0
    is_hdr: bool = False
    bitrate: int = 0
    pixel_format: str = ""

    @property
    def is_landscape(self) -> bool:
        # Square frames count as landscape
        return self.width >= self.height

    @property
    def max_dimension(self) -> int:
        return max(self.width, self.height)

    @classmethod
    def from_ffprobe(cls, record: dict) -> "VideoStreamInfo":
        """
        Build a descriptor from one `streams[]` entry of ffprobe JSON output.

        Args:
            record: Stream dictionary from `ffprobe -show_streams -of json`

        Returns:
            VideoStreamInfo for the stream

        Raises:
            ValueError: If the record is not a dict or has no usable width/height
        """
        if not isinstance(record, dict):
            raise ValueError(f"Stream record must be an object, got {type(record).__name__}")

        width = _to_int(record.get("width"))
        height = _to_int(record.get("height"))
        if width <= 0 or height <= 0:
            raise ValueError(f"Stream {record.get('index', '?')} has no valid dimensions: {width}x{height}")

        return cls(
            index=_to_int(record.get("index")),
            width=width,
            height=height,
            rotation=_get_rotation(record),
            frame_count=_to_int(record.get("nb_frames")),
            is_hdr=record.get("color_transfer") in HDR_TRANSFERS,
            bitrate=_to_int(record.get("bit_rate")),
            pixel_format=record.get("pix_fmt", ""),
        )


def _to_int(value) -> int:
    """ffprobe reports most numbers as strings, some may be missing or 'N/A'."""
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _get_rotation(record: dict) -> int:
    """Get rotation from the display matrix side data or the legacy rotate tag."""
    side_data_list = record.get("side_data_list")
    for side_data in side_data_list if isinstance(side_data_list, list) else []:
        if not isinstance(side_data, dict):
            continue
        if side_data.get("side_data_type") == "Display Matrix" and "rotation" in side_data:
            return _to_int(side_data["rotation"])

    tags = record.get("tags")
    return _to_int(tags.get("rotate")) if isinstance(tags, dict) else 0


def video_streams_from_probe(probe: dict) -> list[VideoStreamInfo]:
    """
    Get all video streams from a parsed ffprobe JSON document.

    Raises:
        ValueError: If the document or its streams list has the wrong shape
    """
    if not isinstance(probe, dict):
        raise ValueError(f"Probe document must be an object, got {type(probe).__name__}")

    streams = probe.get("streams") or []
    if not isinstance(streams, list):
        raise ValueError(f"'streams' must be a list, got {type(streams).__name__}")

    videos = []
    for stream in streams:
        if not isinstance(stream, dict):
            raise ValueError(f"Stream record must be an object, got {type(stream).__name__}")
        if stream.get("codec_type") == "video":
            videos.append(VideoStreamInfo.from_ffprobe(stream))
    return videos
