"""
Application settings management.
Uses python-dotenv to load environment variables from .env file.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

# Values read from the environment, by key
_ENV_CACHE = {}


def get_setting(key: str, default=None):
    """
    Get a setting from environment variables.

    Args:
        key: Environment variable name
        default: Default value if not found

    Returns:
        The environment variable value or default

    Example:
        >>> OUTPUT_DIR = get_setting('OUTPUT_DIR', 'output')
        >>> DEBUG = get_setting('DEBUG', 'False') == 'True'
    """
    # Use cached value if available, otherwise get from env
    if key not in _ENV_CACHE:
        _ENV_CACHE[key] = os.getenv(key, default)

    return _ENV_CACHE[key]


def get_display_timezone(name=None):
    """
    Timezone used to display post timestamps.

    Args:
        name: IANA zone name (e.g. "Asia/Shanghai"). Defaults to DISPLAY_TIMEZONE.

    Returns:
        tzinfo, or None for the system local time
    """
    from zoneinfo import ZoneInfo

    name = name if name is not None else DISPLAY_TIMEZONE
    if not name:
        return None
    return ZoneInfo(name)


# Debug mode
DEBUG = get_setting('DEBUG', 'False').lower() in ('true', '1', 'yes')

# Markdown output
MARKDOWN_LANGUAGE = get_setting('MARKDOWN_LANGUAGE', 'en')
OUTPUT_DIR = get_setting('OUTPUT_DIR', 'output')

# Empty: system local time
DISPLAY_TIMEZONE = get_setting('DISPLAY_TIMEZONE', '')
