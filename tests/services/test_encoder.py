import pytest

from alphawebm.domain.exceptions import CleanFailedException, EncodeFailedException
from alphawebm.domain.job import ConversionJob
from alphawebm.services.encoder import (
    build_clean_cmd,
    build_encode_cmd,
    clean,
    encode,
    progress_from_line,
)


@pytest.fixture
def job(media_dir):
    return ConversionJob.from_argument(str(media_dir / "b clip.mov"))


def test_encode_command_has_fixed_vp9_alpha_parameters(job):
    cmd = build_encode_cmd(job)

    assert cmd == [
        "ffmpeg",
        "-i", str(job.source_path),
        "-c:v", "libvpx-vp9",
        "-b:v", "25M",
        "-pix_fmt", "yuva420p",
        "-metadata:s:v:0", "alpha_mode=1",
        "-auto-alt-ref", "0",
        str(job.target_path),
    ]


def test_clean_command_targets_encoded_file(job):
    assert build_clean_cmd(job, mkclean="/opt/mkclean/mkclean") == [
        "/opt/mkclean/mkclean", "--doctype", "4", "--keep-cues", "--optimize", str(job.target_path),
    ]


@pytest.mark.parametrize(
    "line, duration, expected",
    [
        ("frame=  10 fps=0.0 q=0.0 size=0kB time=00:00:05.00 bitrate=0.0kbits/s", 10.0, 50.0),
        ("frame=  99 time=00:00:12.00 bitrate=1kbits/s", 10.0, 100.0),
        ("frame=   0 time=-577014:32:22.77 bitrate=-0.0kbits/s", 10.0, None),
        ("Stream #0:0: Video: prores", 10.0, None),
        ("frame=  10 time=00:00:05.00", 0.0, None),
    ],
)
def test_progress_from_line(line, duration, expected):
    assert progress_from_line(line, duration) == expected


def test_encode_reports_percentages(job, fake_tools):
    fake_tools.stderr_lines = ["time=00:00:01.00", "noise", "time=00:00:02.00"]
    seen = []

    encode(job, duration=4.0, on_percent=seen.append)

    assert seen == [25.0, 50.0]
    assert job.target_path.read_bytes() == b"video-b"


def test_encode_failure_raises(job, fake_tools):
    fake_tools.fail_encode.add("b clip.mov")

    with pytest.raises(EncodeFailedException) as exc_info:
        encode(job)

    assert exc_info.value.return_code == 1
    assert "Encoding failed (exit code 1)" in str(exc_info.value)
    assert not job.target_path.exists()


def test_clean_writes_temp_file(job, fake_tools):
    job.target_path.write_bytes(b"encoded")

    clean(job)

    assert job.temp_path.read_bytes() == b"encoded"
    assert job.target_path.exists()


def test_clean_failure_raises(job, fake_tools):
    job.target_path.write_bytes(b"encoded")
    fake_tools.fail_clean.add(job.target_path.name)

    with pytest.raises(CleanFailedException):
        clean(job)
    assert not job.temp_path.exists()


def test_missing_tool_is_a_step_failure(job, monkeypatch):
    from alphawebm.utils.process_utils import CommandResult

    monkeypatch.setattr(
        "alphawebm.services.encoder.run_cmd",
        lambda cmd, on_output=None: CommandResult(cmd=cmd, return_code=None, stderr_tail="No such file"),
    )

    with pytest.raises(EncodeFailedException, match="could not be started"):
        encode(job, ffmpeg="/missing/ffmpeg")
