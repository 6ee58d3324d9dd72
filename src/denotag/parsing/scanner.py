"""Line scanner that locates <deno> tag groups in a document."""
from __future__ import annotations

from typing import List, Optional

from denotag.constants import TAG_CLOSE, TAG_OPEN, TAG_SELF_CLOSE
from denotag.core.interfaces.logging import LoggerLikeProtocol
from denotag.core.models import ParsedText, TagGroup
from denotag.logging.helpers import get_logger
from denotag.parsing.tokenizer import AttributeTokenizer


def leading_whitespace(line: str) -> int:
    """Number of leading whitespace characters on *line*."""
    return len(line) - len(line.lstrip())


class TagScanner:
    """Walk a document line by line and group <deno> occurrences.

    A group starts on the first line that opens a tag and ends on the first
    line where every opened occurrence is closed (a group carried over from
    previous lines counts as one open occurrence). Lines of a group are joined
    with spaces and handed to the tokenizer as a whole.

    Tags are found by plain substring search, so a tag nested in other markup
    (`<code><deno run="x.ts"></deno></code>`) is still picked up.
    """

    def __init__(
        self,
        *,
        tokenizer: Optional[AttributeTokenizer] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._tokenizer = tokenizer or AttributeTokenizer()
        self._log = logger or get_logger('parsing.scanner')

    @staticmethod
    def count_opened(line: str) -> int:
        return line.count(TAG_OPEN)

    @staticmethod
    def count_closed(line: str) -> int:
        return line.count(TAG_SELF_CLOSE) + line.count(TAG_CLOSE)

    def scan(self, text: str) -> ParsedText:
        parsed = ParsedText(original=text)

        is_multi_line = False
        tag_lines: List[str] = []
        line_start = 0
        line_start_pad = 0
        for number, line in enumerate(text.split('\n')):
            opened = self.count_opened(line)
            closed = self.count_closed(line)

            has_open_tag = is_multi_line or opened > 0
            if has_open_tag:
                tag_lines.append(line)
                if not is_multi_line:
                    line_start = number
                    line_start_pad = leading_whitespace(line)

            closes_what_opens = int(is_multi_line) + opened == closed
            if has_open_tag and closes_what_opens:
                group = TagGroup(line_opened=line_start, line_closed=number, indent=line_start_pad)
                parsed.tags.append((group, self._tokenizer.tokenize(' '.join(tag_lines))))
                self._log.debug('tag group at lines %d-%d (indent %d)', line_start, number, line_start_pad)
                tag_lines = []
                is_multi_line = False
            else:
                is_multi_line = has_open_tag

        if is_multi_line:
            self._log.warning('⚠  unterminated <deno> tag opened at line %d; left as is', line_start + 1)
        return parsed
