# tests/test_nodes.py
from __future__ import annotations

import unittest

from extractors.nodes import NodeKind, parse_html


class TestSoupNode(unittest.TestCase):
    def test_kinds_cover_text_break_link_image_element(self) -> None:
        root = parse_html('<p id="p">hi<br><a href="/x">x</a><img src="a.png"><span>s</span></p>')
        kinds = [child.kind for child in root.select_one("#p").child_nodes()]
        self.assertEqual(
            kinds,
            [NodeKind.TEXT, NodeKind.LINE_BREAK, NodeKind.LINK, NodeKind.IMAGE, NodeKind.ELEMENT],
        )

    def test_child_nodes_skip_comments(self) -> None:
        root = parse_html('<p id="p">a<!-- note -->b</p>')
        texts = [child.text() for child in root.select_one("#p").child_nodes()]
        self.assertEqual(texts, ["a", "b"])

    def test_text_collapses_whitespace_and_keeps_block_breaks(self) -> None:
        root = parse_html(
            """
            <div id="d">
              <div>  Hello   <b>world</b> </div>
              <div>Second<br>line</div>
              <script>ignored()</script>
            </div>
            """
        )
        self.assertEqual(root.select_one("#d").text(), "Hello world\nSecond\nline")

    def test_text_content_is_raw(self) -> None:
        root = parse_html('<a id="a" href="/x"><span>https://</span>example.com</a>')
        self.assertEqual(root.select_one("#a").text_content(), "https://example.com")

    def test_attributes_and_classes(self) -> None:
        root = parse_html('<div id="d" class="one two" data-testid="tweet"></div>')
        node = root.select_one("#d")
        self.assertEqual(node.tag, "div")
        self.assertEqual(node.class_name, "one two")
        self.assertEqual(node.attr("data-testid"), "tweet")
        self.assertIsNone(node.attr("missing"))

    def test_children_are_elements_only(self) -> None:
        root = parse_html('<ul id="u"> <li>a</li> text <li>b</li> </ul>')
        children = root.select_one("#u").children()
        self.assertEqual([c.tag for c in children], ["li", "li"])

    def test_select_one_returns_none_when_missing(self) -> None:
        root = parse_html("<p>x</p>")
        self.assertIsNone(root.select_one('[data-testid="tweet"]'))
        self.assertEqual(root.select("article"), [])

    def test_matches_checks_the_node_itself(self) -> None:
        root = parse_html('<article data-testid="tweet"><p id="p">x</p></article>')
        article = root.select_one("article")
        self.assertTrue(article.matches('article[data-testid="tweet"]'))
        self.assertFalse(article.select_one("#p").matches('article[data-testid="tweet"]'))
        self.assertFalse(root.matches("article"))


if __name__ == "__main__":
    unittest.main()
