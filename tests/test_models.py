# tests/test_models.py
from __future__ import annotations

import unittest

from pydantic import ValidationError

from extractors.models import ExtractedPost, ExtractionResult, collapse_blank_lines


class TestExtractedPost(unittest.TestCase):
    def test_body_blank_lines_are_collapsed(self) -> None:
        post = ExtractedPost(body="one\n\n\n\ntwo\n\n\nthree\n\nfour")
        self.assertEqual(post.body, "one\n\ntwo\n\nthree\n\nfour")

    def test_media_is_deduplicated_in_order(self) -> None:
        post = ExtractedPost(media=("b", "a", "b", "", "c", "a"))
        self.assertEqual(post.media, ("b", "a", "c"))

    def test_longform_rejects_media(self) -> None:
        with self.assertRaises(ValidationError):
            ExtractedPost(is_long_form=True, media=("https://pbs.twimg.com/media/A",))

    def test_unknown_stat_keys_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            ExtractedPost(stats={"bookmarks": "3"})

    def test_stats_keep_types_and_order(self) -> None:
        post = ExtractedPost(stats={"views": "12K", "likes": 1200, "replies": "0"})
        self.assertEqual(list(post.stats), ["replies", "likes", "views"])
        self.assertEqual(post.stats["likes"], 1200)
        self.assertEqual(post.stats["replies"], "0")

    def test_is_frozen(self) -> None:
        post = ExtractedPost(username="alice")
        with self.assertRaises(ValidationError):
            post.username = "bob"


class TestExtractionResult(unittest.TestCase):
    def test_ok_and_failed(self) -> None:
        post = ExtractedPost(username="alice")
        ok = ExtractionResult.ok(post)
        self.assertTrue(ok.success)
        self.assertEqual(ok.post, post)

        failed = ExtractionResult.failed("No post found")
        self.assertFalse(failed.success)
        self.assertIsNone(failed.post)
        self.assertEqual(failed.error, "No post found")


class TestCollapse(unittest.TestCase):
    def test_collapse_blank_lines(self) -> None:
        self.assertEqual(collapse_blank_lines("a\n\n\nb"), "a\n\nb")
        self.assertEqual(collapse_blank_lines("a\n\nb"), "a\n\nb")


if __name__ == "__main__":
    unittest.main()
