"""
Pydantic models for extracted posts.

An ExtractedPost is built once per extraction call and never mutated. The
validators below keep the record invariants regardless of who builds it.
"""

import re
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


STAT_KEYS = ('replies', 'retweets', 'likes', 'views')

StatValue = Union[int, str]


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of 3 or more newlines to exactly 2."""
    return re.sub(r'\n{3,}', '\n\n', text)


class QuotedPost(BaseModel):
    """Reduced record for a post embedded inside another post."""
    model_config = ConfigDict(frozen=True)

    username: str = 'unknown'
    display_name: str = ''
    body: str = ''


class ExtractedPost(BaseModel):
    """Normalized content of one post or long-form article."""
    model_config = ConfigDict(frozen=True)

    source_url: str = ''
    username: str = 'unknown'
    display_name: str = ''
    title: Optional[str] = None
    body: str = ''
    timestamp: Optional[str] = None
    media: Tuple[str, ...] = ()
    video_thumbnail: Optional[str] = None
    quoted_post: Optional[QuotedPost] = None
    stats: Dict[str, StatValue] = Field(default_factory=dict)
    is_long_form: bool = False

    @field_validator('body')
    @classmethod
    def _normalize_body(cls, value: str) -> str:
        return collapse_blank_lines(value)

    @field_validator('media')
    @classmethod
    def _dedupe_media(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        seen = set()
        out = []
        for url in value:
            if url and url not in seen:
                seen.add(url)
                out.append(url)
        return tuple(out)

    @field_validator('stats')
    @classmethod
    def _known_stats(cls, value: Dict[str, StatValue]) -> Dict[str, StatValue]:
        unknown = set(value) - set(STAT_KEYS)
        if unknown:
            raise ValueError(f"Unknown stat keys: {sorted(unknown)}")
        return {key: value[key] for key in STAT_KEYS if key in value}

    @model_validator(mode='after')
    def _longform_has_no_media(self):
        if self.is_long_form and self.media:
            raise ValueError("Long-form posts carry their images inline in the body")
        return self


class ExtractionResult(BaseModel):
    """
    Outcome of one extraction call.

    Either `post` is set (success) or `error` explains why nothing could be
    extracted. Never both.
    """
    model_config = ConfigDict(frozen=True)

    success: bool
    post: Optional[ExtractedPost] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, post: ExtractedPost) -> "ExtractionResult":
        return cls(success=True, post=post)

    @classmethod
    def failed(cls, reason: str) -> "ExtractionResult":
        return cls(success=False, error=reason)
