"""Video assembler and command runner tests."""
import os
import sys

import pytest

from main import (
    CaptureFailed,
    EncodingFailed,
    FrameSet,
    VideoAssembler,
    run_command,
    FRAME_PATTERN,
)


def write_frames(directory, count):
    os.makedirs(directory, exist_ok=True)
    for index in range(count):
        with open(os.path.join(directory, FRAME_PATTERN % index), "wb") as f:
            f.write(b"\xff\xd8\xff")


class RecordingRunner:
    def __init__(self, error=None, write_output=False):
        self.error = error
        self.write_output = write_output
        self.commands = []

    async def __call__(self, cmd):
        self.commands.append(cmd)
        if self.write_output:
            with open(cmd[-1], "wb") as f:
                f.write(b"partial")
        if self.error:
            raise self.error
        return ""


class TestBuildCommand:

    def test_encoding_profile(self, config, tmp_path):
        assembler = VideoAssembler(config, ffmpeg_exe="ffmpeg")
        frame_set = FrameSet(directory=str(tmp_path / "frames"), count=150, fps=30)

        cmd = assembler.build_command(frame_set, "out.mp4")

        assert cmd[0] == "ffmpeg"
        assert cmd[cmd.index("-framerate") + 1] == "30"
        assert cmd[cmd.index("-i") + 1] == os.path.join(str(tmp_path / "frames"), "frame_%05d.jpg")
        assert cmd[cmd.index("-c:v") + 1] == "libx264"
        assert cmd[cmd.index("-crf") + 1] == "23"
        assert cmd[cmd.index("-pix_fmt") + 1] == "yuv420p"
        assert cmd[-1] == "out.mp4"


class TestEncode:

    @pytest.mark.asyncio
    async def test_runs_encoder_once(self, config, tmp_path):
        frames = str(tmp_path / "frames")
        write_frames(frames, 10)
        runner = RecordingRunner()
        assembler = VideoAssembler(config, runner=runner, ffmpeg_exe="ffmpeg")

        output = await assembler.encode(FrameSet(directory=frames, count=10, fps=30), str(tmp_path / "out.mp4"))

        assert output == str(tmp_path / "out.mp4")
        assert len(runner.commands) == 1

    @pytest.mark.asyncio
    async def test_missing_frames_detected_before_encoder(self, config, tmp_path):
        frames = str(tmp_path / "frames")
        write_frames(frames, 7)
        runner = RecordingRunner()
        assembler = VideoAssembler(config, runner=runner, ffmpeg_exe="ffmpeg")

        with pytest.raises(CaptureFailed) as exc:
            await assembler.encode(FrameSet(directory=frames, count=10, fps=30), str(tmp_path / "out.mp4"))

        assert "expected 10 frames, found 7" in str(exc.value)
        assert runner.commands == []

    @pytest.mark.asyncio
    async def test_partial_output_removed_on_failure(self, config, tmp_path):
        frames = str(tmp_path / "frames")
        write_frames(frames, 3)
        runner = RecordingRunner(error=EncodingFailed("Conversion failed!", returncode=1), write_output=True)
        assembler = VideoAssembler(config, runner=runner, ffmpeg_exe="ffmpeg")
        output = str(tmp_path / "out.mp4")

        with pytest.raises(EncodingFailed) as exc:
            await assembler.encode(FrameSet(directory=frames, count=3, fps=30), output)

        assert exc.value.diagnostics == "Conversion failed!"
        assert not os.path.exists(output)


class TestRunCommand:

    @pytest.mark.asyncio
    async def test_success_returns_stdout(self):
        out = await run_command([sys.executable, "-c", "print('ok')"])
        assert out.strip() == "ok"

    @pytest.mark.asyncio
    async def test_non_zero_exit_carries_stderr(self):
        script = "import sys; sys.stderr.write('Invalid data found when processing input'); sys.exit(3)"

        with pytest.raises(EncodingFailed) as exc:
            await run_command([sys.executable, "-c", script])

        assert exc.value.returncode == 3
        assert exc.value.diagnostics == "Invalid data found when processing input"
        assert "Invalid data found" in str(exc.value)

    @pytest.mark.asyncio
    async def test_missing_executable(self, tmp_path):
        with pytest.raises(EncodingFailed):
            await run_command([str(tmp_path / "no-such-ffmpeg")])
