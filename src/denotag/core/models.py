from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple


# Attribute name -> attribute value, in tag order.
#
# Values are stored exactly as written, including their enclosing quote
# characters ('"file.ts"'); attributes without a value hold constants.BOOLEAN_VALUE
# ('"true"'). Flags are forwarded as f'{key}={value}' so the quotes survive.
AttributeMap = Dict[str, str]


@dataclass(frozen=True)
class TagGroup:
    """Contiguous span of lines holding one or more <deno> occurrences.

    Line numbers are 0-based and inclusive; `indent` is the number of leading
    whitespace characters on `line_opened`.
    """
    line_opened: int
    line_closed: int
    indent: int


@dataclass(frozen=True)
class ParsedText:
    """Scan result: the untouched text plus every tag group in document order."""
    original: str
    tags: List[Tuple[TagGroup, List[AttributeMap]]] = field(default_factory=list)


@dataclass(frozen=True)
class ActionResult:
    """Output that replaces lines `from_line..to_line` (inclusive)."""
    from_line: int
    to_line: int
    contents: str


@dataclass(frozen=True)
class RunRequest:
    """Invocation handed to a run backend."""
    command: Tuple[str, ...]
    extra_args: Tuple[str, ...] = ()
    capture: str = 'piped'

    @property
    def argv(self) -> List[str]:
        return [*self.command, *self.extra_args]

    @classmethod
    def build(cls, command: Sequence[str], file: str, flags: Sequence[str]) -> 'RunRequest':
        return cls(command=tuple(command), extra_args=(file, *flags))
