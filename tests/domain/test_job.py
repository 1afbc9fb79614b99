import os
from pathlib import Path

from alphawebm.domain.job import ConversionJob, JobState, resolve_jobs


def test_paths_derived_from_relative_argument(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    job = ConversionJob.from_argument("a.mov", 0, 1)

    assert job.source_path == Path(os.path.abspath("a.mov"))
    assert job.target_path == tmp_path / "a.mov.webm"
    assert job.temp_path == tmp_path / "clean.a.mov.webm"
    assert job.file_name == "a.mov"
    assert job.target_dir == tmp_path
    assert job.state is JobState.PENDING


def test_temp_path_is_never_the_target():
    for raw in ["/x/a.mov", "/x/clean.a.mov", "/x/dir with space/b", "/x/.hidden"]:
        job = ConversionJob.from_argument(raw)
        assert job.temp_path != job.target_path
        assert job.temp_path.parent == job.target_path.parent
        assert job.temp_path.name == "clean." + job.file_name + ".webm"


def test_construction_touches_no_files(tmp_path):
    job = ConversionJob.from_argument(str(tmp_path / "missing" / "in put.mp4"))

    assert not job.source_path.exists()
    assert job.target_path.name == "in put.mp4.webm"
    assert not (tmp_path / "missing").exists()


def test_resolve_jobs_keeps_order_and_positions():
    jobs = resolve_jobs(["/v/one.mov", "/v/two.mov", "/v/three.mov"])

    assert [job.file_name for job in jobs] == ["one.mov", "two.mov", "three.mov"]
    assert [job.position for job in jobs] == ["1/3", "2/3", "3/3"]
