"""
User-facing labels used in rendered Markdown.
"""

DEFAULT_LANGUAGE = 'en'

LABELS = {
    'en': {
        'post_suffix': "'s post",
        'author': 'Author',
        'published': 'Published',
        'image': 'Image',
        'video_post': 'Video post',
        'video_thumbnail': 'Video thumbnail',
        'quoted_post': 'Quoted post',
        'engagement': 'Engagement',
        'view_original': 'View original',
    },
    'zh': {
        'post_suffix': ' 的推文',
        'author': '作者',
        'published': '发布时间',
        'image': '图片',
        'video_post': '视频推文',
        'video_thumbnail': '视频缩略图',
        'quoted_post': '引用推文',
        'engagement': '互动数据',
        'view_original': '查看原文',
    },
}


def get_labels(language=None):
    """Label set for a language code, falling back to English."""
    return LABELS.get((language or DEFAULT_LANGUAGE).lower(), LABELS[DEFAULT_LANGUAGE])
