"""
Extractor for x.com (formerly twitter.com) posts and long-form articles.
"""

import logging
import re
from datetime import datetime, timezone

from . import html_to_markdown
from .base import BaseExtractor, PostNotFoundError
from .models import STAT_KEYS, ExtractedPost, ExtractionResult, QuotedPost
from .nodes import ContentNode


logger = logging.getLogger(__name__)


# CSS selectors for post and article elements
SELECTORS = {
    'longform': [
        '[data-testid="longformRichTextComponent"]',
        '[data-testid="twitterArticleRichTextView"]',
    ],
    'longform_title': '[data-testid="twitter-article-title"]',
    'post': 'article[data-testid="tweet"]',
    'user_name': '[data-testid="User-Name"]',
    'profile_link': 'a[href^="/"]',
    'text': '[data-testid="tweetText"]',
    'photo': '[data-testid="tweetPhoto"] img',
    'video_player': '[data-testid="videoPlayer"]',
    'video_poster': 'video[poster]',
    'quote': '[data-testid="quoteTweet"]',
    'status_link': 'a[href*="/status/"]',
    'time': 'time',
    'reply': '[data-testid="reply"]',
    'retweet': '[data-testid="retweet"]',
    'like': '[data-testid="like"]',
    'views': 'a[href*="/analytics"]',
}

# Detail pages carry the post id after this segment
POST_ID_SEGMENT = '/status/'

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M'

UNKNOWN_USERNAME = 'unknown'

_USERNAME_IN_URL = re.compile(r'(?:x|twitter)\.com/([^/?#]+)/status/')
_USERNAME_IN_HREF = re.compile(r'/([^/]+)/status')
_STAT_NUMBER = re.compile(r'[\d,.]+[KMkm]?')
_NOT_VIEW_CHAR = re.compile(r'[^0-9KMkm.]')

# Stat key -> selector key of the action control
_ACTION_STATS = (
    ('replies', 'reply'),
    ('retweets', 'retweet'),
    ('likes', 'like'),
)


def is_detail_url(url) -> bool:
    return POST_ID_SEGMENT in (url or '')


def username_from_url(url):
    """Author handle from a detail URL (`x.com/<handle>/status/<id>`), or None."""
    match = _USERNAME_IN_URL.search(url or '')
    return match.group(1) if match else None


def format_timestamp(value, tz=None):
    """
    Convert an ISO-8601 datetime attribute to `YYYY-MM-DD HH:MM`.

    Args:
        value: Datetime string such as "2024-01-15T14:30:00.000Z"
        tz: Display timezone (None: system local time)

    Returns:
        str: Formatted timestamp, or None if the value cannot be parsed
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(tz).strftime(TIMESTAMP_FORMAT)


def parse_stat_number(control):
    """Leading count of an action control label ("1,234", "5.6K"); "0" when none."""
    match = _STAT_NUMBER.search(control.text_content().strip())
    return match.group(0) if match else '0'


class XPostExtractor(BaseExtractor):
    """
    Extract posts and long-form articles from a rendered x.com page.

    Each field is extracted independently. A field that cannot be resolved
    falls back to its default and never aborts the extraction.
    """

    def __init__(self, url='', tz=None, image_alt='Image'):
        """
        Args:
            url: Page URL
            tz: tzinfo used to display timestamps (None: local time)
            image_alt: Alt text for images inlined in long-form bodies
        """
        super().__init__(url)
        self.tz = tz
        self.image_alt = image_alt

    def extract(self, root: ContentNode) -> ExtractedPost:
        container = html_to_markdown.select_first(root, SELECTORS['longform'])
        if container is not None:
            logger.debug("Long-form container detected")
            return self.extract_longform(root, container)

        post = self.find_post(root)
        if post is None:
            raise PostNotFoundError(
                "No post found. Open the post detail page (URL with /status/) and try again."
            )
        return self.extract_standard(post)

    def find_post(self, root: ContentNode):
        """The root or its first descendant post container on a detail page, or None."""
        if not is_detail_url(self.url):
            logger.debug("URL is not a post detail page: %s", self.url)
            return None
        return html_to_markdown.select_self_or_one(root, SELECTORS['post'])

    # Modes

    def extract_standard(self, post):
        return ExtractedPost(
            source_url=self.url,
            username=self._safely('username', self.extract_username, post, default=UNKNOWN_USERNAME),
            display_name=self._safely('display_name', self.extract_display_name, post, default=''),
            body=self._safely('body', self.extract_body, post, default=''),
            timestamp=self._safely('timestamp', self.extract_timestamp, post),
            media=self._safely('media', self.extract_media, post, default=()),
            video_thumbnail=self._safely('video_thumbnail', self.extract_video_thumbnail, post),
            quoted_post=self._safely('quoted_post', self.extract_quoted_post, post),
            stats=self._safely('stats', self.extract_stats, post, default={}),
            is_long_form=False,
        )

    def extract_longform(self, root, container):
        # Author details live in the post header rendered above the article
        author = html_to_markdown.select_self_or_one(root, SELECTORS['post'])
        scope = author if author is not None else root

        title = self._safely(
            'title', html_to_markdown.extract_text_from_element, root, SELECTORS['longform_title'], default=''
        )
        body = self._safely(
            'body', html_to_markdown.extract_longform_content, container, self.image_alt, default=''
        )
        stats = {}
        if author is not None:
            stats = self._safely('stats', self.extract_stats, author, default={})

        return ExtractedPost(
            source_url=self.url,
            username=self._safely('username', self.extract_username, scope, default=UNKNOWN_USERNAME),
            display_name=self._safely('display_name', self.extract_display_name, scope, default=''),
            title=title or None,
            body=body,
            timestamp=self._safely('timestamp', self.extract_timestamp, scope),
            media=(),
            video_thumbnail=None,
            quoted_post=None,
            stats=stats,
            is_long_form=True,
        )

    # Fields

    def extract_username(self, scope):
        from_url = username_from_url(self.url)
        if from_url:
            return from_url

        user_name = scope.select_one(SELECTORS['user_name'])
        if user_name is not None:
            link = user_name.select_one(SELECTORS['profile_link'])
            if link is not None:
                segments = [s for s in (link.attr('href') or '').split('/') if s]
                if segments:
                    return segments[0]

        logger.debug("Username not found, using '%s'", UNKNOWN_USERNAME)
        return UNKNOWN_USERNAME

    def extract_display_name(self, scope):
        user_name = scope.select_one(SELECTORS['user_name'])
        if user_name is not None:
            for span in user_name.select('span'):
                text = span.text_content().strip()
                if text and not text.startswith('@'):
                    return text
        return self.extract_username(scope)

    def extract_body(self, scope):
        text_el = scope.select_one(SELECTORS['text'])
        if text_el is None:
            return ''
        return html_to_markdown.text_with_line_breaks(text_el)

    def extract_timestamp(self, scope):
        time_el = scope.select_one(SELECTORS['time'])
        if time_el is None:
            return None

        formatted = format_timestamp(time_el.attr('datetime'), self.tz)
        if formatted:
            return formatted

        text = time_el.text_content().strip()
        return text or None

    def extract_media(self, scope):
        images = []
        for img in scope.select(SELECTORS['photo']):
            src = img.attr('src')
            if not src:
                continue
            src = html_to_markdown.to_high_resolution(src)
            if src not in images:
                images.append(src)
        return tuple(images)

    def extract_video_thumbnail(self, scope):
        player = scope.select_one(SELECTORS['video_player'])
        if player is None:
            return None

        video = player.select_one(SELECTORS['video_poster'])
        if video is not None and video.attr('poster'):
            return video.attr('poster')

        thumb = player.select_one('img')
        if thumb is not None:
            return thumb.attr('src') or None
        return None

    def extract_quoted_post(self, scope):
        quote = scope.select_one(SELECTORS['quote'])
        if quote is None:
            return None

        username = self._quote_username(quote)
        return QuotedPost(
            username=username,
            display_name=self._quote_display_name(quote) or username,
            body=self.extract_body(quote),
        )

    def _quote_username(self, quote):
        link = quote.select_one(SELECTORS['status_link'])
        if link is not None:
            match = _USERNAME_IN_HREF.search(link.attr('href') or '')
            if match:
                return match.group(1)
        return UNKNOWN_USERNAME

    def _quote_display_name(self, quote):
        for span in quote.select('span'):
            text = span.text_content().strip()
            if len(text) > 1 and not text.startswith('@'):
                return text
        return None

    def extract_stats(self, scope):
        stats = {}

        for key, selector_key in _ACTION_STATS:
            control = scope.select_one(SELECTORS[selector_key])
            if control is not None:
                stats[key] = parse_stat_number(control)

        views_link = scope.select_one(SELECTORS['views'])
        if views_link is not None:
            views = _NOT_VIEW_CHAR.sub('', views_link.text_content())
            if views:
                stats['views'] = views

        return {key: stats[key] for key in STAT_KEYS if key in stats}

    def _safely(self, field, func, *args, default=None):
        try:
            return func(*args)
        except Exception as e:
            logger.debug("Field '%s' unavailable: %s", field, e)
            return default


def extract(root: ContentNode, url, **options) -> ExtractedPost:
    """
    Extract a post from a content tree.

    Args:
        root: ContentNode of the rendered page
        url: Page URL
        **options: Passed to XPostExtractor (tz, image_alt)

    Returns:
        ExtractedPost

    Raises:
        PostNotFoundError: no long-form container and no post container
    """
    return XPostExtractor(url, **options).extract(root)


def extract_post(root: ContentNode, url, **options) -> ExtractionResult:
    """Like extract(), but reports a missing post as a failed ExtractionResult."""
    try:
        return ExtractionResult.ok(extract(root, url, **options))
    except PostNotFoundError as e:
        logger.info("Extraction failed for %s: %s", url, e)
        return ExtractionResult.failed(str(e))
