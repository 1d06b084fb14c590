from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from byteme.domain.entities.probe import ContainerInfo
from byteme.services.analysis.service import AnalysisService
from byteme.services.api.commands import classify_paths, get_bitrate, has_streams
from byteme.services.bitrate.service import BitrateExtractor
from byteme.services.probe.ffprobe_adapter import FFprobeError
from byteme.services.schemas import CandidacyLoadingRead, CandidacyRead, CommandError, CommandOk

INFO = ContainerInfo(
    streams=[
        {"codec_type": "video", "codec_name": "hevc", "width": 1920, "height": 1080},
        {"codec_type": "subtitle", "codec_name": "subrip", "tags": {"language": "eng"}},
    ],
    duration="3.0",
    format_name="png_pipe",
)


class FakeProbe:
    def __init__(self, fail=(), lines=None):
        self.fail = set(fail)
        self.lines = lines or []

    def probe(self, path: Path) -> ContainerInfo:
        if Path(path).name in self.fail:
            raise FFprobeError("ffprobe returned non-zero exit code 1")
        return INFO

    def frame_sizes(self, path: Path):
        return list(self.lines)


def _service(probe: FakeProbe) -> AnalysisService:
    return AnalysisService(prober=lambda: probe, workers=1)


def test_has_streams_ok_envelope(make_file, headers):
    p = make_file("poster.png", headers.png)
    res = has_streams([str(p)], service=_service(FakeProbe()))

    assert isinstance(res, CommandOk)
    dumped = res.model_dump(mode="json")
    assert dumped["status"] == "ok"
    [item] = dumped["data"]
    assert item["filename"] == "poster.png"
    assert item["media_type"] == "Image"
    assert item["duration"] == 3.0
    assert item["format_name"] == "png_pipe"
    assert item["streams"] == [
        {"type": "video", "codec": "hevc", "width": 1920, "height": 1080, "bit_rate": None, "frame_rate": None},
        {"type": "subtitle", "codec": "subrip", "language": "eng"},
    ]


def test_has_streams_error_envelope(make_file, headers):
    ok = make_file("a.png", headers.png)
    bad = make_file("b.txt", headers.text)
    res = has_streams([str(ok), str(bad)], service=_service(FakeProbe()))

    assert isinstance(res, CommandError)
    dumped = res.model_dump(mode="json")
    assert dumped["status"] == "error"
    assert dumped["error"]["filename"] == "b.txt"
    assert dumped["error"]["error_type"] == "not_media"
    assert "Not a media file" in dumped["error"]["reason"]


def test_classify_paths_reports_every_path(make_file, headers, tmp_path):
    paths = [str(make_file("a.wav", headers.wav)), str(tmp_path / "missing.mov"), str(make_file("c.jpg", headers.jpeg))]
    res = classify_paths(paths, service=_service(FakeProbe(fail={"c.jpg"})))

    dumped = res.model_dump(mode="json")
    assert dumped["status"] == "ok"
    assert [c["path"] for c in dumped["data"]] == paths
    assert dumped["data"][0]["candidacy"] == {"status": "success", "media_type": "Audio"}
    assert dumped["data"][1]["candidacy"]["status"] == "error"
    assert dumped["data"][1]["filename"] == "missing.mov"
    assert dumped["data"][2]["candidacy"]["status"] == "error"
    assert "non-zero exit code" in dumped["data"][2]["candidacy"]["reason"]


def test_candidacy_read_accepts_loading():
    loaded = TypeAdapter(CandidacyRead).validate_python({"status": "loading"})
    assert isinstance(loaded, CandidacyLoadingRead)


def test_get_bitrate_ok(make_file):
    p = make_file("clip.mp4", b"\x00" * 32)
    res = get_bitrate(str(p), extractor=BitrateExtractor(prober=lambda: FakeProbe(lines=["10", "x", "20"])))

    assert res.model_dump() == {
        "status": "ok",
        "data": {"id": "clip.mp4", "frames": [{"frame_num": 0, "packet_size": 10}, {"frame_num": 1, "packet_size": 20}]},
    }


def test_get_bitrate_error_is_a_message(tmp_path):
    res = get_bitrate(str(tmp_path / "gone.mp4"), extractor=BitrateExtractor(prober=lambda: FakeProbe()))
    assert isinstance(res, CommandError)
    assert res.status == "error"
    assert "does not exist" in res.error


def test_get_bitrate_uninspectable_path_is_an_error_envelope(tmp_path):
    res = get_bitrate(str(tmp_path / ("x" * 300 + ".mp4")), extractor=BitrateExtractor(prober=lambda: FakeProbe()))
    assert isinstance(res, CommandError)
    assert "does not exist" in res.error
