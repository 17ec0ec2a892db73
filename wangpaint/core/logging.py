"""
WangPaint Logging - File and console logging for Wang painting debugging
"""
from datetime import datetime
from pathlib import Path
from typing import Optional

# Log file
_log_file = None
_log_enabled = True

LOG_FILE_NAME = "wangpaint_debug.log"


def init_logging(log_dir: Optional[str] = None) -> Optional[Path]:
    """
    Initialize file logging.

    Args:
        log_dir: Directory for the log file, the current directory if None

    Returns:
        Path of the log file, or None if it could not be created
    """
    global _log_file

    close_logging()

    log_path = Path(log_dir or ".") / LOG_FILE_NAME

    try:
        # Clear previous log
        _log_file = open(log_path, 'w', encoding='utf-8')
        _log_file.write(f"=== WangPaint Debug Log - {datetime.now().isoformat()} ===\n\n")
        _log_file.flush()
        print(f"[WangPaint] Logging to: {log_path}")
    except OSError as e:
        print(f"[WangPaint] Warning: Could not create log file: {e}")
        _log_file = None
        return None

    return log_path


def log(message: str, prefix: str = "[WangPaint]"):
    """Log a message to both console and file"""
    full_message = f"{prefix} {message}"

    # Always print to console
    print(full_message)

    if _log_file and _log_enabled:
        try:
            _log_file.write(full_message + "\n")
            _log_file.flush()
        except OSError as e:
            print(f"[WangPaint] Warning: Could not write log file: {e}")


def log_painter(message: str):
    """Log a WangPainter message"""
    log(message, "[WangPainter]")


def log_filler(message: str):
    """Log a WangFiller message"""
    log(message, "[WangFiller]")


def log_settings(message: str):
    log(message, "[Settings]")


def close_logging():
    """Close the log file"""
    global _log_file
    if _log_file:
        try:
            _log_file.close()
        except OSError as e:
            print(f"[WangPaint] Warning: Could not close log file: {e}")
        _log_file = None


def set_logging_enabled(enabled: bool):
    """Enable or disable file logging"""
    global _log_enabled
    _log_enabled = enabled
