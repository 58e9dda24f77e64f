"""
Base class and errors for post extractors.
"""

from abc import ABC, abstractmethod

from .nodes import ContentNode


class ExtractionError(Exception):
    """Base exception for extraction errors."""
    pass


class PostNotFoundError(ExtractionError):
    """No post container could be located in the content tree."""
    pass


class BaseExtractor(ABC):
    """Base class for all site extractors."""

    def __init__(self, url=''):
        """
        Args:
            url: URL of the page the content tree was rendered from
        """
        self.url = url or ''

    @abstractmethod
    def extract(self, root: ContentNode):
        """
        Extract a post from a content tree.

        Args:
            root: ContentNode for the page (or the post/article container)

        Returns:
            ExtractedPost

        Raises:
            PostNotFoundError: if the tree holds no extractable post
        """
        pass
