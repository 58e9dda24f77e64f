"""
Content extractors for social media pages.

Each extractor takes a ContentNode (see extractors.nodes) for a rendered page
plus the page URL and returns an ExtractedPost with the following fields:
- username, display_name: str
- title: str | None (long-form articles only)
- body: str (plain text for posts, Markdown for long-form articles)
- timestamp: str | None ("YYYY-MM-DD HH:MM")
- media: tuple[str] (post photos, empty for long-form articles)
- video_thumbnail: str | None
- quoted_post: QuotedPost | None
- stats: dict with optional replies, retweets, likes, views
- is_long_form: bool
"""

from .base import BaseExtractor, ExtractionError, PostNotFoundError
from .models import ExtractedPost, ExtractionResult, QuotedPost
from .nodes import ContentNode, NodeKind, SoupNode, parse_html
from .x_com import XPostExtractor, extract, extract_post

__all__ = [
    'BaseExtractor', 'ExtractionError', 'PostNotFoundError',
    'ExtractedPost', 'ExtractionResult', 'QuotedPost',
    'ContentNode', 'NodeKind', 'SoupNode', 'parse_html',
    'XPostExtractor', 'extract', 'extract_post',
]
