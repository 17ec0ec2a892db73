"""
Settings - Thin wrapper around QSettings for painter preferences
"""
from typing import Optional

from PyQt6 import QtCore

from .logging import init_logging, set_logging_enabled, log_settings


ORGANIZATION = "WangPaint"
APPLICATION = "WangPaint"

# Define which group each setting belongs to
SETTING_GROUPS = {
    'Painter': ['CorrectionsEnabled'],
    'Logging': ['LogToFile', 'LogDirectory'],
}

DEFAULTS = {
    'CorrectionsEnabled': True,
    'LogToFile': False,
    'LogDirectory': '',
}

_settings: Optional[QtCore.QSettings] = None


def init_settings(path: Optional[str] = None) -> QtCore.QSettings:
    """
    Open the settings store.

    Args:
        path: INI file to use, or None for the platform's native location

    Returns:
        The QSettings instance
    """
    global _settings
    if path is None:
        _settings = QtCore.QSettings(ORGANIZATION, APPLICATION)
    else:
        _settings = QtCore.QSettings(str(path), QtCore.QSettings.Format.IniFormat)
    return _settings


def get_settings() -> QtCore.QSettings:
    """Get the QSettings instance, opening the native store on first use"""
    if _settings is None:
        return init_settings()
    return _settings


def _get_group_for_setting(name):
    """Determine which group a setting belongs to"""
    for group, names in SETTING_GROUPS.items():
        if name in names:
            return group
    return 'Main'


def _key(name):
    return f"{_get_group_for_setting(name)}/{name}"


def setting(name, default=None):
    """
    Read a setting, converting it to the type of the default.

    QSettings hands back strings from INI files, so 'true'/'false' and
    numbers are converted here.
    """
    if default is None:
        default = DEFAULTS.get(name)

    settings = get_settings()
    key = _key(name)
    if not settings.contains(key):
        return default

    value = settings.value(key)

    # Handle None/null values
    if value is None or value == 'None' or value == '@Invalid()':
        return None

    if default is not None:
        target_type = type(default)

        # Handle bool specially (QSettings returns strings 'true'/'false')
        if target_type is bool:
            if isinstance(value, bool):
                return value
            return value in ('true', 'True', '1', 1)

        try:
            if target_type in (int, float, str):
                return target_type(value)
        except (ValueError, TypeError):
            return default
        return value

    # No default provided - try to intelligently convert the value
    if isinstance(value, str):
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'
        try:
            if '.' not in value:
                return int(value)
            return float(value)
        except ValueError:
            return value

    return value


def set_setting(name, value):
    """Store a setting under its group"""
    assert isinstance(name, str)
    get_settings().setValue(_key(name), value)


def ensure_settings_visible():
    """
    Write every known setting that is missing, with its default value, so
    the settings file lists all of them.
    """
    settings = get_settings()
    for name, default in DEFAULTS.items():
        if not settings.contains(_key(name)):
            set_setting(name, default)
    settings.sync()


def apply_logging_settings():
    """Open or disable the log file according to the Logging settings"""
    if setting('LogToFile', False):
        log_dir = setting('LogDirectory', '') or None
        set_logging_enabled(True)
        path = init_logging(log_dir)
        log_settings(f"File logging enabled: {path}")
    else:
        set_logging_enabled(False)
