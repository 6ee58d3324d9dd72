from __future__ import annotations

import inspect
from typing import Any, List, Optional, Tuple

from denotag.constants import ATTR_BUNDLE, ATTR_RUN
from denotag.core.interfaces.logging import LoggerLikeProtocol
from denotag.core.models import AttributeMap, RunRequest
from denotag.logging.helpers import get_logger, trace_io
from denotag.runtime.options import DenoTagOptions


async def _resolve(value: Any) -> Any:
    """Await *value* when a backend handed back an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


def strip_quotes(value: str) -> str:
    """Remove the wrapping quote characters of an attribute value."""
    return value[1:-1]


def decode_output(raw: Any) -> str:
    if raw is None:
        return ''
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode('utf-8', errors='replace')
    return str(raw)


class ActionDispatcher:
    """Performs the run or bundle action requested by one <deno> tag.

    Tags with `run="file"` execute the run backend with the configured base
    command followed by the file and every other attribute as `key=value`.
    Tags with `bundle="file"` call the bundle backend and keep only its output
    text. A tag with neither attribute runs the base command with an empty
    file argument.

    Run failures are logged and yield an empty string, so one broken tag does
    not abort the document. Bundle failures propagate.
    """

    def __init__(self, options: DenoTagOptions, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._opts = options
        self._log = logger or options.logger or get_logger('dispatch')

    @staticmethod
    def plan(attributes: AttributeMap) -> Tuple[str, str, List[str]]:
        """Return `(action, file, flags)` for *attributes*."""
        action = ATTR_RUN
        file = ''
        flags: List[str] = []
        for attr, value in attributes.items():
            if attr == ATTR_RUN:
                file = strip_quotes(value)
            elif attr == ATTR_BUNDLE:
                action = ATTR_BUNDLE
                file = strip_quotes(value)
            else:
                flags.append(f'{attr}={value}')
        return action, file, flags

    async def dispatch(self, attributes: AttributeMap) -> str:
        action, file, flags = self.plan(attributes)
        if action == ATTR_BUNDLE:
            return await self.bundle(file)
        return await self.run(file, flags)

    async def run(self, file: str, flags: List[str]) -> str:
        if not file:
            self._log.warning('⚠  <deno> tag without run/bundle attribute; running with an empty file')
        request = RunRequest.build(self._opts.run_command, file, flags)
        trace_io(self._log, 'run backend', argv=request.argv)
        try:
            output = await _resolve(self._opts.runner(request))
        except Exception as exc:
            self._log.error('run action failed for %r: %s', file, exc)
            return ''
        return decode_output(output)

    async def bundle(self, file: str) -> str:
        trace_io(self._log, 'bundle backend', file=file)
        _diagnostics, output = await _resolve(
            self._opts.bundler(file, self._opts.bundle_sources, self._opts.bundle_options)
        )
        return decode_output(output)
