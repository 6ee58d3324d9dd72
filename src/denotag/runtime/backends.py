"""Default process-backed run and bundle backends.

These are the only place where denotag spawns processes. They are wired in by
`default_options()`, which the CLI calls once at start-up; library callers can
pass any other callables that honor the backend protocols.
"""
from __future__ import annotations

import asyncio
import os
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from denotag.constants import DEFAULT_DENO_BIN, DEFAULT_RUN_ARGS
from denotag.core.interfaces.logging import LoggerLikeProtocol
from denotag.core.models import RunRequest
from denotag.errors import BackendError
from denotag.logging.helpers import get_logger, trace_io
from denotag.runtime.options import DenoTagOptions
from denotag.utils.imports import load_object_from_ref


async def _spawn(argv: Sequence[str], *, capture_stdout: bool, capture_stderr: bool = True) -> Tuple[int, bytes, bytes]:
    """Run *argv* to completion and return `(returncode, stdout, stderr)`."""
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE if capture_stdout else None,
            stderr=asyncio.subprocess.PIPE if capture_stderr else None,
        )
    except OSError as exc:
        raise BackendError(f'could not start {argv[0]!r}: {exc}') from exc
    stdout, stderr = await proc.communicate()
    return proc.returncode, stdout or b'', stderr or b''


class SubprocessRunner:
    """Run backend that executes `request.argv` as a child process."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('backends.run')

    async def __call__(self, request: RunRequest) -> bytes:
        trace_io(self._log, 'spawn', argv=request.argv)
        code, stdout, _ = await _spawn(request.argv, capture_stdout=request.capture == 'piped', capture_stderr=False)
        if code != 0:
            self._log.warning('⚠  %s exited with status %d', ' '.join(request.argv), code)
        return stdout


def options_to_flags(options: Optional[Mapping[str, Any]]) -> List[str]:
    """Translate bundler options into `--key[=value]` CLI flags."""
    flags: List[str] = []
    for key, value in (options or {}).items():
        if value is None or value is False:
            continue
        flag = f'--{key}'
        flags.append(flag if value is True else f'{flag}={value}')
    return flags


class DenoBundler:
    """Bundle backend that shells out to `deno bundle FILE`."""

    def __init__(
        self,
        *,
        command: Sequence[str] = (DEFAULT_DENO_BIN, 'bundle'),
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._command = tuple(command)
        self._log = logger or get_logger('backends.bundle')

    async def __call__(
        self,
        file: str,
        sources: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Tuple[Optional[List[str]], str]:
        if sources:
            self._log.warning('⚠  in-memory bundle sources are not supported by %s; reading %r from disk',
                              self._command[0], file)
        argv = [*self._command, *options_to_flags(options), file]
        trace_io(self._log, 'spawn', argv=argv)
        code, stdout, stderr = await _spawn(argv, capture_stdout=True)
        diagnostics = stderr.decode('utf-8', errors='replace').splitlines() or None
        if code != 0:
            raise BackendError(f'bundling {file!r} failed with status {code}', diagnostics=diagnostics)
        return diagnostics, stdout.decode('utf-8', errors='replace')


def default_options(
    *,
    deno_bin: Optional[str] = None,
    runner_ref: Optional[str] = None,
    bundler_ref: Optional[str] = None,
    logger: Optional[LoggerLikeProtocol] = None,
) -> DenoTagOptions:
    """Build the process-level default configuration.

    Resolution order for each setting: explicit argument, then environment
    (DENOTAG_DENO, DENOTAG_RUNNER, DENOTAG_BUNDLER), then the built-in deno
    backends. Backend references use the 'module.path:Attr' form and are
    instantiated when they resolve to a class.
    """
    deno = deno_bin or os.getenv('DENOTAG_DENO') or DEFAULT_DENO_BIN
    runner_ref = runner_ref or os.getenv('DENOTAG_RUNNER') or ''
    bundler_ref = bundler_ref or os.getenv('DENOTAG_BUNDLER') or ''

    runner = _load_backend(runner_ref) if runner_ref else SubprocessRunner(logger=logger)
    bundler = _load_backend(bundler_ref) if bundler_ref else DenoBundler(command=(deno, 'bundle'), logger=logger)
    return DenoTagOptions(
        runner=runner,
        bundler=bundler,
        run_command=(deno, *DEFAULT_RUN_ARGS),
        logger=logger,
    )


def _load_backend(ref: str) -> Any:
    obj = load_object_from_ref(ref)
    return obj() if isinstance(obj, type) else obj
