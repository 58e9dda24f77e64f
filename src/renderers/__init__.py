"""
Renderers for extracted posts.
"""

from .filename import derive_filename, sanitize_filename
from .labels import LABELS, get_labels
from .markdown import format_inline, format_number, render_markdown

__all__ = [
    'derive_filename', 'sanitize_filename',
    'LABELS', 'get_labels',
    'format_inline', 'format_number', 'render_markdown',
]
