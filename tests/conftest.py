"""Shared fakes for the pipeline tests (no browser, subprocess or network)."""
import os
import tempfile

# main builds the default pipeline at import time; keep its dirs out of the repo
_scratch = tempfile.mkdtemp(prefix="prompt-video-")
os.environ.setdefault("TEMP_DIR", os.path.join(_scratch, "temp"))
os.environ.setdefault("VIDEO_DIR", os.path.join(_scratch, "videos"))

import pytest

from main import (
    FrameSet,
    GenerationBlocked,
    PipelineConfig,
    FRAME_PATTERN,
)


SAMPLE_HTML = """<!DOCTYPE html>
<html><head><style>body{background:blue}</style></head>
<body><div class="ball"></div><script>/* bounce */</script></body></html>"""


class FakeGenerator:
    def __init__(self, html=SAMPLE_HTML, error=None):
        self.html = html
        self.error = error
        self.calls = []

    async def generate(self, prompt, session_id="-"):
        self.calls.append(prompt)
        if self.error:
            raise self.error
        return self.html


class FakeRenderer:
    """Writes placeholder frames the way the capture engine names them"""

    def __init__(self, error=None, short_by=0):
        self.error = error
        self.short_by = short_by
        self.calls = []
        self.sessions = []

    async def render(self, document, session):
        self.calls.append(document)
        self.sessions.append(session)
        if self.error:
            raise self.error
        os.makedirs(session.frames_dir, exist_ok=True)
        count = session.total_frames - self.short_by
        for index in range(count):
            with open(os.path.join(session.frames_dir, FRAME_PATTERN % index), "wb") as f:
                f.write(b"\xff\xd8\xff")
        return FrameSet(directory=session.frames_dir, count=count, fps=session.fps)


class FakeEncoder:
    def __init__(self, error=None):
        self.error = error
        self.calls = []
        self.frames_seen = []
        self.work_dirs = []

    async def encode(self, frame_set, output_path):
        self.calls.append(output_path)
        self.frames_seen.append(len(frame_set.files_on_disk()))
        if self.error:
            raise self.error
        with open(output_path, "wb") as f:
            f.write(b"mp4")
        return output_path


@pytest.fixture
def config(tmp_path):
    return PipelineConfig(
        gemini_api_key="test-key",
        fps=30,
        duration=5,
        width=1280,
        height=720,
        temp_dir=str(tmp_path / "temp"),
        video_dir=str(tmp_path / "videos"),
    )


@pytest.fixture
def small_config(tmp_path):
    return PipelineConfig(
        gemini_api_key="test-key",
        fps=5,
        duration=1,
        width=320,
        height=240,
        temp_dir=str(tmp_path / "temp"),
        video_dir=str(tmp_path / "videos"),
    )


@pytest.fixture
def blocked_generator():
    return FakeGenerator(error=GenerationBlocked("SAFETY"))
