"""Attribute tokenizer: one AttributeMap per <deno occurrence."""
from __future__ import annotations

import os
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in os.sys.path:
    os.sys.path.insert(0, str(SRC_ROOT))

from denotag.parsing.tokenizer import AttributeTokenizer  # noqa: E402


def _parse(text: str):
    return AttributeTokenizer.tokenize(text)


class TokenizerBasicsTests(unittest.TestCase):
    def test_run_attribute_keeps_quotes(self) -> None:
        self.assertEqual(_parse('<deno run="file.ts" />'), [{"run": '"file.ts"'}])

    def test_boolean_attributes_become_quoted_true(self) -> None:
        self.assertEqual(
            _parse('<deno run="file.ts" boolean isOk />'),
            [{"run": '"file.ts"', "boolean": '"true"', "isOk": '"true"'}],
        )

    def test_attribute_order_is_preserved(self) -> None:
        attrs = _parse('<deno arg2="b" run="file.ts" arg1="a" />')[0]
        self.assertEqual(list(attrs), ["arg2", "run", "arg1"])

    def test_text_before_first_tag_is_ignored(self) -> None:
        self.assertEqual(_parse('<p class="x"> <deno run="f.ts" />'), [{"run": '"f.ts"'}])

    def test_attributes_after_closing_bracket_are_ignored(self) -> None:
        self.assertEqual(
            _parse('<deno run="f.ts"></deno><span id="nope">'),
            [{"run": '"f.ts"'}],
        )

    def test_extra_spaces_are_skipped(self) -> None:
        self.assertEqual(_parse('<deno    run="f.ts"     flag   />'), [{"run": '"f.ts"', "flag": '"true"'}])

    def test_no_tag_yields_empty_list(self) -> None:
        self.assertEqual(_parse("<p>plain</p>"), [])

    def test_tag_without_attributes_yields_empty_map(self) -> None:
        self.assertEqual(_parse("<deno />"), [{}])


class TokenizerMultipleOccurrencesTests(unittest.TestCase):
    def test_two_tags_on_one_line(self) -> None:
        self.assertEqual(
            _parse('<deno run="a.ts" /><deno bundle="b.ts" x="1" />'),
            [{"run": '"a.ts"'}, {"bundle": '"b.ts"', "x": '"1"'}],
        )

    def test_joined_multi_line_tag_matches_single_line(self) -> None:
        joined = " ".join(["<deno", '  run="file.ts"', "  boolean", "  isOk", "/>"])
        self.assertEqual(_parse(joined), _parse('<deno run="file.ts" boolean isOk />'))


class TokenizerLeniencyTests(unittest.TestCase):
    def test_space_inside_quoted_value_is_dropped(self) -> None:
        # Regression pin: quoted values are rejoined without their spaces.
        self.assertEqual(
            _parse('<deno run="f.ts" title="hello big world" />'),
            [{"run": '"f.ts"', "title": '"hellobigworld"'}],
        )

    def test_unterminated_quote_drops_the_attribute(self) -> None:
        self.assertEqual(_parse('<deno run="f.ts" title="oops />'), [{"run": '"f.ts"'}])

    def test_last_write_wins_for_repeated_keys(self) -> None:
        attrs = _parse('<deno run="a.ts" flag run="b.ts" />')[0]
        self.assertEqual(attrs, {"run": '"b.ts"', "flag": '"true"'})
        self.assertEqual(list(attrs), ["run", "flag"])

    def test_equals_sign_inside_value_is_kept(self) -> None:
        self.assertEqual(_parse('<deno run="f.ts" q="a=b" />'), [{"run": '"f.ts"', "q": '"a=b"'}])


if __name__ == "__main__":
    unittest.main()
