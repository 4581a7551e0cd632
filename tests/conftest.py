"""Shared pytest fixtures for transcode-geometry tests."""

import json

import pytest
from typer.testing import CliRunner

from transcode_geometry.resolution import ResolutionPolicy
from transcode_geometry.stream import VideoStreamInfo


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep user config files and environment out of the tests."""
    config_dir = tmp_path / "config_home"
    config_dir.mkdir()
    monkeypatch.setenv("TGEO_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("TGEO_TARGET_RESOLUTION", raising=False)
    monkeypatch.chdir(tmp_path)
    return config_dir


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def policy_720():
    return ResolutionPolicy("720")


@pytest.fixture
def landscape_stream():
    """1080p landscape stream."""
    return VideoStreamInfo(
        index=0,
        width=1920,
        height=1080,
        rotation=0,
        frame_count=1000,
        is_hdr=False,
        bitrate=5000000,
        pixel_format="yuv420p",
    )


@pytest.fixture
def portrait_stream():
    """1080p portrait stream (phone recording)."""
    return VideoStreamInfo(
        index=0,
        width=1080,
        height=1920,
        rotation=0,
        frame_count=1000,
        is_hdr=False,
        bitrate=5000000,
        pixel_format="yuv420p",
    )


@pytest.fixture
def sample_config(tmp_path):
    """Create a sample config file."""
    config_file = tmp_path / "global.yaml"
    config_file.write_text(
        """
transcode:
  target_resolution: "1080"
  target_video_codec: "hevc"
  accepted_containers: ["mp4", "mov"]

logging:
  level: "WARNING"
"""
    )
    return config_file


@pytest.fixture
def probe_file(tmp_path):
    """ffprobe -show_streams JSON with one portrait video and one audio stream."""
    data = {
        "streams": [
            {
                "index": 0,
                "codec_type": "video",
                "codec_name": "hevc",
                "width": 1080,
                "height": 1920,
                "pix_fmt": "yuv420p10le",
                "color_transfer": "arib-std-b67",
                "bit_rate": "8123456",
                "nb_frames": "1800",
                "side_data_list": [{"side_data_type": "Display Matrix", "rotation": -90}],
            },
            {"index": 1, "codec_type": "audio", "codec_name": "aac"},
        ]
    }
    path = tmp_path / "probe.json"
    path.write_text(json.dumps(data))
    return path
