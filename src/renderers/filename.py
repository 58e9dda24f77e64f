"""
File names for saved Markdown documents.
"""

import re
from datetime import date


MAX_FILENAME_LENGTH = 100

_FORBIDDEN_CHARS = re.compile(r'[\\/:*?"<>|]')
_WHITESPACE = re.compile(r'\s+')


def sanitize_filename(name, max_length=MAX_FILENAME_LENGTH):
    """
    Make a string safe to use as a file name.

    Removes \\ / : * ? " < > |, turns whitespace runs into underscores and
    truncates the result.
    """
    name = _FORBIDDEN_CHARS.sub('', name or '')
    name = _WHITESPACE.sub('_', name.strip())
    return name[:max_length]


def derive_filename(post, today=None):
    """
    File name for a rendered post.

    Long-form articles are named after their title. Posts use
    "<display name>_<YYYY-MM-DD>" with today's date.

    Args:
        post: ExtractedPost
        today: Date used for posts (defaults to date.today())

    Returns:
        str: File name ending in ".md"
    """
    if post.is_long_form and post.title:
        base = post.title
    else:
        author = post.display_name or post.username
        base = f"{author}_{(today or date.today()).isoformat()}"

    return f"{sanitize_filename(base) or 'post'}.md"
