from byteme.common.settings import get_settings
from byteme.domain.entities.analysis import FileAnalysisError, FileAnalysisResult
from byteme.domain.entities.bitrate import BitrateData, BitrateFrame
from byteme.domain.entities.streams import AudioStream, SubtitleStream, VideoStream
from byteme.domain.enums.file_error_kind import FileErrorKind
from byteme.domain.enums.media_category import MediaCategory
from byteme.domain.enums.stream_kind import StreamKind


def test_stream_defaults_keep_absent_fields_none():
    v = VideoStream()
    assert v.codec == "unknown"
    assert (v.width, v.height, v.bit_rate, v.frame_rate) == (None, None, None, None)
    assert v.kind == StreamKind.video
    assert AudioStream().kind == StreamKind.audio
    assert SubtitleStream().language is None


def test_analysis_result_display_name():
    res = FileAnalysisResult(
        path="/tmp/very_long_video_file_name.mp4",
        filename="very_long_video_file_name.mp4",
        media_type=MediaCategory.Video,
    )
    assert res.display_name(18) == "ver...ile_name.mp4"
    assert res.streams == ()
    assert res.size == 0


def test_analysis_error_message():
    err = FileAnalysisError("File does not exist", FileErrorKind.not_found, "a.mp4")
    assert err.filename == "a.mp4"
    assert "a.mp4" in str(err)
    assert "not_found" in str(err)

    anon = FileAnalysisError("File does not exist", FileErrorKind.not_found)
    assert anon.filename is None


def test_bitrate_data_defaults_to_no_frames():
    data = BitrateData(id="clip.mp4")
    assert data.frames == ()
    assert BitrateFrame(0, 100).packet_size == 100


def test_display_name_defaults_to_configured_limit(monkeypatch):
    res = FileAnalysisResult(
        path="/tmp/very_long_video_file_name.mp4",
        filename="very_long_video_file_name.mp4",
        media_type=MediaCategory.Video,
    )
    assert res.display_name() == "ver...ideo_file_name.mp4"

    monkeypatch.setenv("NAMING__FILENAME_LIMIT", "10")
    get_settings.cache_clear()
    assert res.display_name() == "v...me.mp4"
