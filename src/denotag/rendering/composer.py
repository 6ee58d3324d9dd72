from __future__ import annotations

from typing import List, Optional

from denotag.core.interfaces.logging import LoggerLikeProtocol
from denotag.core.models import ActionResult, ParsedText
from denotag.logging.helpers import get_logger
from denotag.runtime.dispatcher import ActionDispatcher


def pad_lines(text: str, indent: int) -> str:
    """Prefix every line of *text* with *indent* spaces."""
    pad = ' ' * indent
    return '\n'.join(pad + line for line in text.split('\n'))


class OutputComposer:
    """Run every parsed tag and shape its output for re-insertion.

    Groups are processed one after another in document order and so are the
    occurrences inside a group; their outputs are newline-joined and indented
    to the column of the line that opened the group.
    """

    def __init__(self, dispatcher: ActionDispatcher, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._dispatcher = dispatcher
        self._log = logger or get_logger('render.composer')

    async def compose(self, parsed: ParsedText) -> List[ActionResult]:
        results: List[ActionResult] = []
        for group, attribute_maps in parsed.tags:
            outputs = [await self._dispatcher.dispatch(attrs) for attrs in attribute_maps]
            results.append(ActionResult(
                from_line=group.line_opened,
                to_line=group.line_closed,
                contents=pad_lines('\n'.join(outputs), group.indent),
            ))
            self._log.debug('lines %d-%d → %d output(s)', group.line_opened, group.line_closed, len(outputs))
        return results
