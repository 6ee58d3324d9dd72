"""
engine – the `deno_tag()` pipeline.

    text ─► TagScanner ─► ActionDispatcher (per tag) ─► OutputComposer
         ─► replace_tags_with_results ─► new text

The transformation is pure apart from what the configured backends do:
the original text is never modified and every call reprocesses the whole
document.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from denotag.core.interfaces.logging import LoggerLikeProtocol
from denotag.parsing.scanner import TagScanner
from denotag.rendering.composer import OutputComposer
from denotag.rendering.reassembler import replace_tags_with_results
from denotag.runtime.dispatcher import ActionDispatcher
from denotag.runtime.options import DenoTagOptions


async def deno_tag(text: str, options: DenoTagOptions, *, logger: Optional[LoggerLikeProtocol] = None) -> str:
    """Replace every <deno> tag in *text* with the output of its action.

    Supported tags:
        <deno run="code.ts" />      → stdout of `options.runner` on code.ts
        <deno bundle="code.ts" />   → output text of `options.bundler`

    Any other attribute is forwarded to the runner as `key="value"`. The
    output is indented to the column the tag was written at. File paths are
    resolved by the backends, relative to the current working directory.

    *logger* (or `options.logger`) replaces the per-component loggers.
    """
    # None lets every component use its own denotag.* logger.
    log = logger or options.logger
    parsed = TagScanner(logger=log).scan(text)
    if not parsed.tags:
        return text
    composer = OutputComposer(ActionDispatcher(options, logger=log), logger=log)
    results = await composer.compose(parsed)
    return replace_tags_with_results(text, results)


def deno_tag_sync(text: str, options: DenoTagOptions, *, logger: Optional[LoggerLikeProtocol] = None) -> str:
    """Blocking wrapper around `deno_tag()` for callers without an event loop."""
    return asyncio.run(deno_tag(text, options, logger=logger))
