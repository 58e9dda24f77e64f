"""
Reusable helpers to turn content trees into Markdown.

Provides the line-break preserving text walk used for post bodies and the
order-preserving block walker used for long-form articles, plus small
selector helpers shared by the site extractors.
"""

import logging
import re
from enum import Enum
from typing import List, Optional

from .models import collapse_blank_lines
from .nodes import ContentNode, NodeKind


logger = logging.getLogger(__name__)

# Host serving post and article media
MEDIA_HOST_PATTERN = 'pbs.twimg.com/media'

# Largest rendition token accepted by the media host
LARGEST_SIZE = 'large'

HEADING_CLASS_HINT = 'header'
QUOTE_CLASS_HINT = 'blockquote'
LIST_TAGS = ('ul', 'ol')

HEADING_MAX_LENGTH = 80
SUBHEADING_MAX_LENGTH = 60

_SIZE_PARAM = re.compile(r'([?&]name=)\w+')


class BlockKind(str, Enum):
    """How a long-form block is rendered."""
    QUOTE = "quote"
    LIST = "list"
    SUBHEADING = "subheading"
    PARAGRAPH = "paragraph"


def to_high_resolution(src):
    """
    Rewrite a media URL so it requests the largest rendition.

    Only the first `name=` size parameter is touched, so the rewrite is
    idempotent: `?format=jpg&name=small` -> `?format=jpg&name=large`.

    Args:
        src: Media URL

    Returns:
        Rewritten URL (unchanged if it carries no size parameter)
    """
    if not src:
        return src
    return _SIZE_PARAM.sub(rf'\g<1>{LARGEST_SIZE}', src, count=1)


def is_media_url(src) -> bool:
    return bool(src) and MEDIA_HOST_PATTERN in src


def text_with_line_breaks(node: ContentNode) -> str:
    """
    Depth-first text of a node, keeping explicit line breaks.

    Text is appended verbatim, <br> becomes a newline, links contribute
    their text, images their alt text. Everything else is recursed into.
    """
    parts = []
    for child in node.child_nodes():
        kind = child.kind
        if kind is NodeKind.TEXT:
            parts.append(child.text())
        elif kind is NodeKind.LINE_BREAK:
            parts.append('\n')
        elif kind is NodeKind.LINK:
            parts.append(child.text_content())
        elif kind is NodeKind.IMAGE:
            alt = child.attr('alt')
            if alt:
                parts.append(alt)
        else:
            parts.append(text_with_line_breaks(child))
    return ''.join(parts)


def is_heading_candidate(text, class_name, index) -> bool:
    """A block may be a heading if styled as one, or short, single-line and not first."""
    if HEADING_CLASS_HINT in class_name:
        return True
    return len(text) < HEADING_MAX_LENGTH and '\n' not in text and index > 0


def classify_heading_candidate(text, previous_had_image) -> BlockKind:
    """
    Decide whether a heading candidate is rendered as a sub-heading.

    Short text right after an image is a section title. Anything else is
    rendered as a paragraph.
    """
    if previous_had_image and len(text) < SUBHEADING_MAX_LENGTH:
        return BlockKind.SUBHEADING
    return BlockKind.PARAGRAPH


def find_block_image(block: ContentNode) -> Optional[str]:
    """Return the source of the first media image inside a block, if any."""
    for img in block.select('img'):
        src = img.attr('src')
        if is_media_url(src):
            return src
    return None


def classify_block(block: ContentNode, text, index, previous_had_image) -> BlockKind:
    """Classify a text-bearing long-form block."""
    tag = block.tag
    class_name = block.class_name

    if tag == 'blockquote' or QUOTE_CLASS_HINT in class_name:
        return BlockKind.QUOTE
    if tag in LIST_TAGS:
        return BlockKind.LIST
    if is_heading_candidate(text, class_name, index):
        return classify_heading_candidate(text, previous_had_image)
    return BlockKind.PARAGRAPH


def list_item_text(item: ContentNode) -> str:
    """Text of a list item on one line, without its nested lists."""
    parts = []
    for child in item.child_nodes():
        if child.tag in LIST_TAGS:
            continue
        if child.kind is NodeKind.LINE_BREAK:
            parts.append(' ')
        else:
            parts.append(child.text())
    return ' '.join(''.join(parts).split())


def list_item_lines(list_node: ContentNode, depth=0) -> List[str]:
    """
    One `- item` line per `li`, nested lists indented two spaces per level.

    Items without text of their own are skipped; their nested items are kept.
    """
    lines = []
    indent = '  ' * depth
    for item in list_node.children():
        if item.tag != 'li':
            continue
        item_text = list_item_text(item)
        if item_text:
            lines.append(f"{indent}- {item_text}\n")
        for nested in item.children():
            if nested.tag in LIST_TAGS:
                lines.extend(list_item_lines(nested, depth + 1 if item_text else depth))
    return lines


def render_block(block: ContentNode, kind, text) -> List[str]:
    """Render one classified block as Markdown fragments."""
    if kind is BlockKind.QUOTE:
        quoted = '\n'.join(f"> {line}" for line in text.split('\n'))
        return [f"\n{quoted}\n"]

    if kind is BlockKind.LIST:
        fragments = ["\n"]
        fragments.extend(list_item_lines(block))
        fragments.append('\n')
        return fragments

    if kind is BlockKind.SUBHEADING:
        return [f"\n### {text}\n"]

    return [f"\n{text}\n"]


def extract_longform_content(container: Optional[ContentNode], image_alt='Image') -> str:
    """
    Render a long-form article container as Markdown, keeping the order of
    text and images.

    The article DOM is: container > wrapper > blocks. Each direct child of the
    wrapper is one block (paragraph, image, list or quote).

    Args:
        container: ContentNode of the long-form container
        image_alt: Alt text used for inline image embeds

    Returns:
        str: Article body in Markdown
    """
    if container is None:
        return ''

    wrappers = container.children()
    if not wrappers:
        return container.text()

    blocks = wrappers[0].children()
    logger.debug("Long-form wrapper has %d blocks", len(blocks))

    content_parts = []
    previous_had_image = False

    for index, block in enumerate(blocks):
        image_src = find_block_image(block)
        if image_src:
            content_parts.append(f"\n![{image_alt}]({to_high_resolution(image_src)})\n")
            previous_had_image = True
            continue

        text = block.text()
        if not text:
            previous_had_image = False
            continue

        kind = classify_block(block, text, index, previous_had_image)
        content_parts.extend(render_block(block, kind, text))
        previous_had_image = False

    # Clean extra blank lines (3 or more -> 2)
    full_content = collapse_blank_lines(''.join(content_parts))

    return full_content.strip()


def extract_text_from_element(element, selector):
    """
    Extract visible text from the first element matching a CSS selector.

    Args:
        element: Base ContentNode
        selector: CSS selector

    Returns:
        str: Extracted text or empty string
    """
    if element is None:
        return ""
    found = element.select_one(selector)
    if found is not None:
        return found.text()
    return ""


def select_self_or_one(element: Optional[ContentNode], selector) -> Optional[ContentNode]:
    """The element itself when it matches the selector, else its first matching descendant."""
    if element is None:
        return None
    if element.matches(selector):
        return element
    return element.select_one(selector)


def select_first(element: Optional[ContentNode], selectors) -> Optional[ContentNode]:
    """
    Return the first match among an ordered list of CSS selectors.

    The element itself counts as a match, so a container passed as the root
    is found too.
    """
    if element is None:
        return None
    for selector in selectors:
        found = select_self_or_one(element, selector)
        if found is not None:
            return found
    return None
