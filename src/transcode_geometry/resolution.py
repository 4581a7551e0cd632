"""
Resolution policy - Target geometry for a video stream.

The configured target is the desired size of the LARGER source dimension,
so landscape and portrait sources end up with the same pixel count:
- 1920x1080 at 720 -> scale=720:-2  -> 720x404
- 1080x1920 at 720 -> scale=-2:720  -> 404x720

"original" resolves to each stream's own larger dimension.
"""

import logging
import re
from dataclasses import dataclass
from fractions import Fraction

from .constants import AUTO_SENTINEL, DEFAULT_TARGET_RESOLUTION, ORIGINAL
from .stream import VideoStreamInfo

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class ConfigurationError(ValueError):
    """Target resolution setting is neither "original" nor an integer."""


@dataclass(frozen=True)
class ResolutionPolicy:
    """Immutable resolution configuration passed into the derivation functions."""

    target_resolution: str = DEFAULT_TARGET_RESOLUTION

    @classmethod
    def from_setting(cls, value: str | int) -> "ResolutionPolicy":
        """Build a policy from a raw config value (YAML may hand us an int)."""
        return cls(target_resolution=str(value).strip())


@dataclass(frozen=True)
class Size:
    width: int
    height: int


@dataclass(frozen=True)
class ResolutionPlan:
    """All derived geometry for one stream."""

    target_resolution: int
    scaling: str
    size: Size
    should_scale: bool


def _parse_target(setting: str) -> int:
    if not _INTEGER_RE.fullmatch(setting):
        raise ConfigurationError(f"Invalid target resolution: {setting!r} (expected '{ORIGINAL}' or an integer)")
    return int(setting)


def _resolve_target(stream: VideoStreamInfo, policy: ResolutionPolicy) -> int:
    setting = policy.target_resolution.strip()
    if setting == ORIGINAL:
        return stream.max_dimension
    return _parse_target(setting)


def _even_floor(value: Fraction) -> int:
    """Round half to even, then drop to the even integer below if still odd."""
    rounded = round(value)
    return rounded - 1 if rounded % 2 else rounded


def get_target_resolution(stream: VideoStreamInfo, policy: ResolutionPolicy) -> int:
    """
    Get target size of the larger dimension for a stream.

    Args:
        stream: Source video stream
        policy: Resolution policy

    Returns:
        max(width, height) of this stream for "original", else the parsed setting

    Raises:
        ConfigurationError: If the setting is not "original" or an integer
    """
    return _resolve_target(stream, policy)


def get_scaling(stream: VideoStreamInfo, policy: ResolutionPolicy) -> str:
    """
    Build the scale filter expression (width first, height second).

    The larger dimension gets the target, the other one the -2 sentinel.
    """
    return _format_scaling(stream, _resolve_target(stream, policy))


def _format_scaling(stream: VideoStreamInfo, target: int) -> str:
    if stream.is_landscape:
        return f"{target}:{AUTO_SENTINEL}"
    return f"{AUTO_SENTINEL}:{target}"


def get_size(stream: VideoStreamInfo, policy: ResolutionPolicy) -> Size:
    """
    Compute the output size, keeping orientation and aspect ratio.

    The larger side becomes the target. The smaller side is
    target * small / large, rounded half to even and forced even,
    since chroma-subsampled encoders reject odd dimensions.
    """
    target = _resolve_target(stream, policy)
    return _compute_size(stream, target)


def _compute_size(stream: VideoStreamInfo, target: int) -> Size:
    if stream.is_landscape:
        return Size(width=target, height=_even_floor(Fraction(target * stream.height, stream.width)))
    return Size(width=_even_floor(Fraction(target * stream.width, stream.height)), height=target)


def should_scale(stream: VideoStreamInfo, policy: ResolutionPolicy) -> bool:
    """
    Check if the stream exceeds the target and must be downscaled.

    A stream whose larger dimension equals the target is left alone.
    """
    return stream.max_dimension > _resolve_target(stream, policy)


def plan_resolution(stream: VideoStreamInfo, policy: ResolutionPolicy) -> ResolutionPlan:
    """Derive target, scale expression, size and scale decision in one pass."""
    target = _resolve_target(stream, policy)
    plan = ResolutionPlan(
        target_resolution=target,
        scaling=_format_scaling(stream, target),
        size=_compute_size(stream, target),
        should_scale=stream.max_dimension > target,
    )
    logger.debug(
        f"Stream {stream.index}: {stream.width}x{stream.height} -> "
        f"{plan.size.width}x{plan.size.height} (scale={plan.scaling}, needed={plan.should_scale})"
    )
    return plan
