"""
AttributeTokenizer – turns the inside of <deno ...> tags into attribute maps.

The tokenizer is deliberately lenient, it never raises:
    * Tokens are split on single spaces; empty tokens and a lone '/' are skipped.
    * 'key=value' opens an attribute. A value is complete once the accumulated
      text ends with '"'. Quoted values that were split on spaces are glued
      back together without the separator, so "a b" becomes "ab".
    * A bare token with no pending key is a boolean attribute ('"true"').
    * A value that never reaches its closing quote is dropped.
"""
from __future__ import annotations

from typing import List, Optional

from denotag.constants import BOOLEAN_VALUE, TAG_END, TAG_OPEN
from denotag.core.models import AttributeMap

_IGNORED_TOKENS = frozenset({'', '/'})


class AttributeTokenizer:
    @staticmethod
    def tokenize(text: str) -> List[AttributeMap]:
        """Return one AttributeMap per '<deno' occurrence found in *text*.

        Multi-line tags are expected to be joined with spaces beforehand.
        Text before the first occurrence is ignored.
        """
        return [AttributeTokenizer.parse_segment(seg) for seg in text.split(TAG_OPEN)[1:]]

    @staticmethod
    def parse_segment(segment: str) -> AttributeMap:
        """Parse the text that follows a single '<deno' marker."""
        # Only the part up to the first '>' holds attributes. str.find() gives
        # -1 when there is none, which trims the trailing character.
        inside = segment[:segment.find(TAG_END)]

        attributes: AttributeMap = {}
        key: Optional[str] = None
        partial_value = ''
        for token in inside.split(' '):
            if token in _IGNORED_TOKENS:
                continue
            value: Optional[str] = None
            if '=' in token:
                key, _, token = token.partition('=')
            if token.endswith('"'):
                value = partial_value + token
                partial_value = ''
            elif not key:
                key, value = token, BOOLEAN_VALUE
            else:
                # Quoted value continues on the next token.
                partial_value += token

            if key and value:
                attributes[key] = value
                key = None
        return attributes
