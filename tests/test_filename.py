# tests/test_filename.py
from __future__ import annotations

import unittest
from datetime import date

from extractors.models import ExtractedPost
from renderers.filename import derive_filename, sanitize_filename


class TestSanitize(unittest.TestCase):
    def test_removes_forbidden_characters(self) -> None:
        self.assertEqual(sanitize_filename('a/b\\c: d*?"<>|e'), "abc_de")

    def test_collapses_whitespace(self) -> None:
        self.assertEqual(sanitize_filename("  My   long\ttitle \n"), "My_long_title")

    def test_truncates(self) -> None:
        self.assertEqual(len(sanitize_filename("x" * 150)), 100)


class TestDeriveFilename(unittest.TestCase):
    def test_longform_uses_title(self) -> None:
        post = ExtractedPost(username="carol", title="Why: Markdown?", is_long_form=True)
        self.assertEqual(derive_filename(post), "Why_Markdown.md")

    def test_post_uses_author_and_date(self) -> None:
        post = ExtractedPost(username="alice", display_name="Alice Wonder")
        self.assertEqual(derive_filename(post, today=date(2024, 1, 15)), "Alice_Wonder_2024-01-15.md")

    def test_post_without_display_name_uses_username(self) -> None:
        post = ExtractedPost(username="alice")
        self.assertEqual(derive_filename(post, today=date(2024, 1, 15)), "alice_2024-01-15.md")

    def test_long_title_is_truncated_before_extension(self) -> None:
        post = ExtractedPost(title="word " * 40, is_long_form=True)
        name = derive_filename(post)
        self.assertTrue(name.endswith(".md"))
        self.assertEqual(len(name), 103)


if __name__ == "__main__":
    unittest.main()
