"""
Read-only content tree used by the extractors.

Extractors never touch a parser API directly. They walk a ContentNode, a
narrow interface exposing the few things the heuristics need (kind, tag,
classes, children, text, attributes, CSS selection and matching). SoupNode is
the BeautifulSoup-backed implementation used by the CLI and the tests.
"""

import re
from enum import Enum
from typing import List, Optional, Protocol

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString


class NodeKind(str, Enum):
    """Closed set of node shapes the text walk distinguishes."""
    TEXT = "text"
    LINE_BREAK = "line_break"
    LINK = "link"
    IMAGE = "image"
    ELEMENT = "element"


class ContentNode(Protocol):
    """Capabilities an extractor may use on a host document node."""

    @property
    def kind(self) -> NodeKind: ...

    @property
    def tag(self) -> str: ...

    @property
    def class_name(self) -> str: ...

    def children(self) -> List["ContentNode"]: ...

    def child_nodes(self) -> List["ContentNode"]: ...

    def text(self) -> str: ...

    def text_content(self) -> str: ...

    def attr(self, name: str) -> Optional[str]: ...

    def select(self, selector: str) -> List["ContentNode"]: ...

    def select_one(self, selector: str) -> Optional["ContentNode"]: ...

    def matches(self, selector: str) -> bool: ...


# Elements that start a new line in rendered text
BLOCK_TAGS = frozenset({
    'address', 'article', 'aside', 'blockquote', 'dd', 'div', 'dl', 'dt',
    'figcaption', 'figure', 'footer', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'header', 'li', 'main', 'nav', 'ol', 'p', 'pre', 'section', 'table',
    'tr', 'ul',
})

# Elements whose text is never rendered
HIDDEN_TAGS = frozenset({'script', 'style', 'noscript', 'template', 'head', 'title'})

_BLOCK_MARK = '\x00'


class SoupNode:
    """
    ContentNode backed by a BeautifulSoup Tag or string.

    Example:
        >>> root = parse_html('<div class="a"><p>Hi<br>there</p></div>')
        >>> root.select_one('div.a').text()
        'Hi\\nthere'
    """

    __slots__ = ('_node',)

    def __init__(self, node):
        self._node = node

    def __repr__(self):
        if self.kind is NodeKind.TEXT:
            return f"SoupNode(text={str(self._node)[:30]!r})"
        return f"SoupNode(<{self.tag} class={self.class_name!r}>)"

    def __eq__(self, other):
        return isinstance(other, SoupNode) and other._node is self._node

    def __hash__(self):
        return id(self._node)

    @property
    def kind(self) -> NodeKind:
        if not isinstance(self._node, Tag):
            return NodeKind.TEXT
        name = self._node.name
        if name == 'br':
            return NodeKind.LINE_BREAK
        if name == 'a':
            return NodeKind.LINK
        if name == 'img':
            return NodeKind.IMAGE
        return NodeKind.ELEMENT

    @property
    def tag(self) -> str:
        if isinstance(self._node, Tag):
            return (self._node.name or '').lower()
        return ''

    @property
    def class_name(self) -> str:
        if not isinstance(self._node, Tag):
            return ''
        classes = self._node.get('class') or []
        if isinstance(classes, str):
            return classes
        return ' '.join(classes)

    def children(self) -> List["SoupNode"]:
        if not isinstance(self._node, Tag):
            return []
        return [SoupNode(child) for child in self._node.children if isinstance(child, Tag)]

    def child_nodes(self) -> List["SoupNode"]:
        if not isinstance(self._node, Tag):
            return []
        return [SoupNode(child) for child in self._node.children if _is_visible(child)]

    def text(self) -> str:
        """
        Rendered text of the node.

        Text nodes return their string verbatim. Elements return an
        approximation of the browser's innerText: whitespace collapsed,
        <br> and block boundaries turned into line breaks, result trimmed.
        """
        if not isinstance(self._node, Tag):
            return str(self._node)

        parts = []
        _collect_rendered_text(self._node, parts)
        text = ''.join(parts)
        text = re.sub(r' *\x00[ \x00]*', _BLOCK_MARK, text)
        text = re.sub(r'\n?\x00\n?', '\n', text)
        text = re.sub(r' *\n *', '\n', text)
        return text.strip()

    def text_content(self) -> str:
        """Concatenated text of every descendant, no whitespace handling."""
        if not isinstance(self._node, Tag):
            return str(self._node)
        return self._node.get_text()

    def attr(self, name: str) -> Optional[str]:
        if not isinstance(self._node, Tag):
            return None
        value = self._node.get(name)
        if isinstance(value, list):
            return ' '.join(value)
        return value

    def select(self, selector: str) -> List["SoupNode"]:
        if not isinstance(self._node, Tag):
            return []
        return [SoupNode(found) for found in self._node.select(selector)]

    def select_one(self, selector: str) -> Optional["SoupNode"]:
        if not isinstance(self._node, Tag):
            return None
        found = self._node.select_one(selector)
        return SoupNode(found) if found is not None else None

    def matches(self, selector: str) -> bool:
        """Whether the node itself matches a CSS selector."""
        if not isinstance(self._node, Tag) or isinstance(self._node, BeautifulSoup):
            return False
        return self._node.css.match(selector)


def _is_visible(child) -> bool:
    if isinstance(child, Tag):
        return True
    return isinstance(child, NavigableString) and not isinstance(child, PreformattedString)


def _collect_rendered_text(tag, parts):
    for child in tag.children:
        if isinstance(child, Tag):
            name = (child.name or '').lower()
            if name in HIDDEN_TAGS:
                continue
            if name == 'br':
                parts.append('\n')
                continue
            if name in BLOCK_TAGS:
                parts.append(_BLOCK_MARK)
                _collect_rendered_text(child, parts)
                parts.append(_BLOCK_MARK)
            else:
                _collect_rendered_text(child, parts)
        elif _is_visible(child):
            parts.append(re.sub(r'\s+', ' ', str(child)))


def parse_html(html_content, parser='lxml') -> SoupNode:
    """
    Parse an HTML document into a content tree.

    Args:
        html_content: HTML source (string or bytes)
        parser: BeautifulSoup tree builder

    Returns:
        SoupNode wrapping the document root
    """
    return SoupNode(BeautifulSoup(html_content, parser))
