from __future__ import annotations

from denotag.cli import DenoTag
from denotag.core.models import ActionResult, AttributeMap, ParsedText, RunRequest, TagGroup
from denotag.engine import deno_tag, deno_tag_sync
from denotag.errors import BackendError, DenoTagError, UsageError
from denotag.parsing.scanner import TagScanner
from denotag.parsing.tokenizer import AttributeTokenizer
from denotag.rendering.composer import OutputComposer
from denotag.rendering.reassembler import replace_tags_with_results
from denotag.runtime.backends import DenoBundler, SubprocessRunner, default_options
from denotag.runtime.dispatcher import ActionDispatcher
from denotag.runtime.options import DenoTagOptions

__version__ = '0.2.0'

__all__ = [
    'DenoTag',
    'deno_tag',
    'deno_tag_sync',
    'DenoTagOptions',
    'default_options',
    'ActionResult',
    'AttributeMap',
    'ParsedText',
    'RunRequest',
    'TagGroup',
    'AttributeTokenizer',
    'TagScanner',
    'ActionDispatcher',
    'OutputComposer',
    'replace_tags_with_results',
    'SubprocessRunner',
    'DenoBundler',
    'BackendError',
    'DenoTagError',
    'UsageError',
]
