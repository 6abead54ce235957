import pytest

from quill import config
from quill.errors import QuillConfigError, QuillError, RecursionDepthExceeded
from quill.runtime_context import call_frame, get_call_depth
from quill.types.expressions import Application, Variable
from quill.types.name import Name


def test_default_max_call_depth():
    assert config.get_max_call_depth() == config.DEFAULT_MAX_CALL_DEPTH


def test_max_call_depth_from_environment(monkeypatch):
    monkeypatch.setenv("QUILL_MAX_CALL_DEPTH", " 42 ")
    assert config.get_max_call_depth() == 42


def test_blank_value_uses_default(monkeypatch):
    monkeypatch.setenv("QUILL_MAX_CALL_DEPTH", "")
    assert config.get_max_call_depth() == config.DEFAULT_MAX_CALL_DEPTH


@pytest.mark.parametrize("raw", ["lots", "1.5", "0", "-3"])
def test_invalid_max_call_depth(monkeypatch, raw):
    monkeypatch.setenv("QUILL_MAX_CALL_DEPTH", raw)
    with pytest.raises(QuillConfigError) as exc:
        config.get_max_call_depth()
    assert "QUILL_MAX_CALL_DEPTH" in str(exc.value)
    assert isinstance(exc.value, QuillError)
    assert isinstance(exc.value, ValueError)


def test_call_frame_tracks_depth(monkeypatch):
    monkeypatch.setenv("QUILL_MAX_CALL_DEPTH", "2")
    assert get_call_depth() == 0
    with call_frame() as outer:
        assert outer == 1
        with call_frame() as inner:
            assert inner == 2
            with pytest.raises(RecursionDepthExceeded):
                with call_frame():
                    pass
            assert get_call_depth() == 2
        assert get_call_depth() == 1
    assert get_call_depth() == 0


def test_call_frame_restores_depth_on_error():
    with pytest.raises(KeyError):
        with call_frame():
            raise KeyError("boom")
    assert get_call_depth() == 0


def test_invalid_setting_is_reported_before_evaluation(monkeypatch, top_level):
    monkeypatch.setenv("QUILL_MAX_CALL_DEPTH", "many")
    with pytest.raises(QuillConfigError):
        top_level.evaluate(Application(Variable(Name("list"))))
    assert get_call_depth() == 0
