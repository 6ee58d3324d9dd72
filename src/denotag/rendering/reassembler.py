"""Rebuild a document with each tag group replaced by its output."""
from __future__ import annotations

from typing import List, Sequence

from denotag.core.models import ActionResult


def replace_tags_with_results(original: str, results: Sequence[ActionResult]) -> str:
    """Drop the lines covered by *results* and insert their contents.

    Each result's contents land where its first line was. *results* may come
    in any order; lines outside every result are kept verbatim.
    """
    new_lines: List[str] = []
    for i, line in enumerate(original.split('\n')):
        ignore = False
        for result in results:
            ignore = ignore or result.from_line <= i <= result.to_line
            if i == result.from_line:
                new_lines.append(result.contents)
        if not ignore:
            new_lines.append(line)
    return '\n'.join(new_lines)
