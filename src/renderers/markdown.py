"""
Render extracted posts as Markdown documents.

render_markdown() is a pure function of its input: the same ExtractedPost
always produces the same string. Sections whose source field is missing are
left out, nothing here raises on incomplete records.
"""

import re
from typing import List, Optional, Union

from .labels import get_labels


STAT_ICONS = (
    ('replies', '💬'),
    ('retweets', '🔁'),
    ('likes', '❤️'),
    ('views', '👁️'),
)

STATS_SEPARATOR = ' | '

_MENTION = re.compile(r'@(\w+)')
_HASHTAG = re.compile(r'#(\w+)')


def format_number(value: Union[int, float, str]) -> str:
    """
    Abbreviate a counter: 999 -> "999", 1000 -> "1.0K", 1500000 -> "1.5M".

    Strings are returned unchanged (counts scraped from the page are already
    formatted).
    """
    if isinstance(value, str):
        return value
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return str(int(value))


def format_inline(text: str) -> str:
    """Bold @mentions and #hashtags."""
    text = _MENTION.sub(r'**@\1**', text)
    return _HASHTAG.sub(r'**#\1**', text)


def _heading(post, labels) -> List[str]:
    display_name = post.display_name or post.username
    if post.is_long_form and post.title:
        return [
            f"# {post.title}",
            "",
            f"> {labels['author']}: **{display_name}** (@{post.username})",
            "",
        ]
    return [f"# {display_name} (@{post.username}){labels['post_suffix']}", ""]


def _stats_line(stats, labels) -> Optional[str]:
    parts = [
        f"{icon} {format_number(stats[key])}"
        for key, icon in STAT_ICONS
        if stats.get(key) is not None
    ]
    if not parts:
        return None
    return f"**{labels['engagement']}:** {STATS_SEPARATOR.join(parts)}"


def render_markdown(post, language=None) -> str:
    """
    Render an ExtractedPost as Markdown.

    Args:
        post: ExtractedPost to render
        language: Label language code ("en", "zh"); English by default

    Returns:
        str: Markdown document
    """
    labels = get_labels(language)
    lines = _heading(post, labels)

    if post.timestamp:
        lines.append(f"> 📅 {labels['published']}: {post.timestamp}")
        lines.append("")

    lines.append("---")
    lines.append("")

    if post.body:
        # Long-form bodies are already Markdown
        lines.append(post.body if post.is_long_form else format_inline(post.body))
        lines.append("")

    if post.media and not post.is_long_form:
        lines.append("")
        for index, url in enumerate(post.media, 1):
            lines.append(f"![{labels['image']} {index}]({url})")
            lines.append("")

    if post.video_thumbnail:
        lines.append("")
        lines.append(f"> 🎬 {labels['video_post']}")
        lines.append(f"> ![{labels['video_thumbnail']}]({post.video_thumbnail})")
        lines.append("")

    quoted = post.quoted_post
    if quoted is not None:
        lines.append("")
        lines.append(f"> **{labels['quoted_post']}:**")
        lines.append(f"> **{quoted.display_name or quoted.username}** (@{quoted.username})")
        if quoted.body:
            for line in quoted.body.split("\n"):
                lines.append(f"> {line}")
        lines.append("")

    lines.append("---")
    lines.append("")

    stats_line = _stats_line(post.stats or {}, labels)
    if stats_line:
        lines.append(stats_line)
        lines.append("")

    if post.source_url:
        lines.append(f"[🔗 {labels['view_original']}]({post.source_url})")
        lines.append("")

    return "\n".join(lines)
