"""
Tests for settings and logging.
"""

from wangpaint.core import logging as wang_logging
from wangpaint.core import settings as wang_settings
from wangpaint.core.settings import (
    apply_logging_settings,
    ensure_settings_visible,
    get_settings,
    set_setting,
    setting,
)


class TestSettings:
    """Tests for the QSettings wrapper."""

    def test_missing_setting_returns_default(self) -> None:
        assert setting('CorrectionsEnabled') is True
        assert setting('CorrectionsEnabled', False) is False
        assert setting('Unknown', 7) == 7

    def test_bool_round_trip(self) -> None:
        set_setting('CorrectionsEnabled', False)
        assert setting('CorrectionsEnabled', True) is False
        set_setting('CorrectionsEnabled', True)
        assert setting('CorrectionsEnabled', False) is True

    def test_bool_from_ini_string(self) -> None:
        set_setting('LogToFile', 'true')
        assert setting('LogToFile', False) is True

    def test_int_conversion(self) -> None:
        set_setting('BrushSize', '5')
        assert setting('BrushSize', 0) == 5

    def test_bad_int_falls_back_to_default(self) -> None:
        set_setting('BrushSize', 'big')
        assert setting('BrushSize', 3) == 3

    def test_settings_are_grouped(self) -> None:
        set_setting('CorrectionsEnabled', False)
        set_setting('LogDirectory', '/tmp')
        keys = get_settings().allKeys()
        assert 'Painter/CorrectionsEnabled' in keys
        assert 'Logging/LogDirectory' in keys

    def test_ensure_settings_visible_writes_defaults(self) -> None:
        ensure_settings_visible()
        settings = get_settings()
        for name in wang_settings.DEFAULTS:
            assert settings.contains(wang_settings._key(name))

    def test_values_survive_reopening(self, tmp_path) -> None:
        path = str(tmp_path / "reopen.ini")
        wang_settings.init_settings(path)
        set_setting('CorrectionsEnabled', False)
        get_settings().sync()

        wang_settings.init_settings(path)
        assert setting('CorrectionsEnabled', True) is False


class TestLogging:
    """Tests for console and file logging."""

    def test_log_prints_with_prefix(self, capsys) -> None:
        wang_logging.log_painter("hello")
        assert "[WangPainter] hello" in capsys.readouterr().out

    def test_log_file(self, tmp_path) -> None:
        path = wang_logging.init_logging(str(tmp_path))
        wang_logging.log_filler("resolved")
        wang_logging.close_logging()

        text = path.read_text(encoding='utf-8')
        assert "WangPaint Debug Log" in text
        assert "[WangFiller] resolved" in text

    def test_disabled_file_logging(self, tmp_path) -> None:
        path = wang_logging.init_logging(str(tmp_path))
        wang_logging.set_logging_enabled(False)
        wang_logging.log("quiet")
        wang_logging.close_logging()
        assert "quiet" not in path.read_text(encoding='utf-8')

    def test_unwritable_directory(self, tmp_path, capsys) -> None:
        missing = tmp_path / "does" / "not" / "exist"
        assert wang_logging.init_logging(str(missing)) is None
        assert "Could not create log file" in capsys.readouterr().out

    def test_apply_logging_settings(self, tmp_path) -> None:
        set_setting('LogToFile', True)
        set_setting('LogDirectory', str(tmp_path))
        apply_logging_settings()
        wang_logging.log("after settings")
        wang_logging.close_logging()

        text = (tmp_path / wang_logging.LOG_FILE_NAME).read_text(encoding='utf-8')
        assert "[Settings] File logging enabled" in text
        assert "after settings" in text
