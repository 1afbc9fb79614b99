# File: tests/conftest.py

import shutil
from pathlib import Path

import pytest

from alphawebm.utils.process_utils import CommandResult


class FakeTools:
    """
    Stands in for `run_cmd` and mimics what ffmpeg and mkclean do to the filesystem.

    ffmpeg copies its input to its last argument; mkclean writes clean.<name>
    next to its input. Names listed in `fail_encode` / `fail_clean` make the
    corresponding step exit with status 1.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.fail_encode: set[str] = set()
        self.fail_clean: set[str] = set()
        self.stderr_lines: list[str] = []

    def __call__(self, cmd, on_output=None):
        self.calls.append(list(cmd))
        tool = Path(cmd[0]).name
        if tool == "ffmpeg":
            source = Path(cmd[cmd.index("-i") + 1])
            if source.name in self.fail_encode:
                return CommandResult(cmd=cmd, return_code=1, stderr_tail="Invalid data found")
            for line in self.stderr_lines:
                if on_output:
                    on_output(line)
            shutil.copyfile(source, cmd[-1])
            return CommandResult(cmd=cmd, return_code=0)
        if tool == "mkclean":
            target = Path(cmd[-1])
            if target.name in self.fail_clean:
                return CommandResult(cmd=cmd, return_code=1, stderr_tail="not a matroska file")
            shutil.copyfile(target, target.parent / f"clean.{target.name}")
            return CommandResult(cmd=cmd, return_code=0)
        raise AssertionError(f"Unexpected command: {cmd}")

    def tools_called(self) -> list[str]:
        return [Path(cmd[0]).name for cmd in self.calls]


@pytest.fixture
def fake_tools(monkeypatch):
    tools = FakeTools()
    monkeypatch.setattr("alphawebm.services.encoder.run_cmd", tools)
    return tools


@pytest.fixture
def media_dir(tmp_path):
    """A directory with two small input files, one with a space in its name."""
    (tmp_path / "a.mov").write_bytes(b"video-a")
    (tmp_path / "b clip.mov").write_bytes(b"video-b")
    return tmp_path
