from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
from pathlib import Path
from typing import Iterator, NoReturn, Optional, Sequence

from denotag.engine import deno_tag_sync
from denotag.errors import UsageError
from denotag.logging.factory import DefaultLoggerFactory
from denotag.logging.helpers import get_logger, is_trace_io_enabled
from denotag.runtime.backends import default_options

logger = get_logger('denotag')

USAGE = 'denotag [--deno PATH] [--runner REF] [--bundler REF] [--json-logs] FILE'


def _configure_logging(enable_json: bool) -> None:
    """Configure process-wide logging, either JSON or plain text.

    DENOTAG_TRACE_IO=1 lowers the level to DEBUG so IO traces are shown.
    """
    level = logging.DEBUG if is_trace_io_enabled() else logging.INFO
    mode = (bool(enable_json), level)
    if getattr(_configure_logging, '_configured_mode', None) == mode:
        return
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('denotag')
    setattr(_configure_logging, '_configured_mode', mode)


def _build_parser() -> argparse.ArgumentParser:
    from denotag import __version__

    p = argparse.ArgumentParser(
        prog='denotag',
        usage=USAGE,
        description='Replace every <deno> tag in FILE with the output of its run/bundle action '
                    'and print the result.',
    )
    p.add_argument('file', nargs='?', metavar='FILE', help='document to process')
    p.add_argument('--deno', dest='deno_bin', metavar='PATH',
                   help='deno executable (default: $DENOTAG_DENO or "deno")')
    p.add_argument('--runner', dest='runner_ref', metavar='REF',
                   help="custom run backend as 'module.path:Attr' (default: $DENOTAG_RUNNER)")
    p.add_argument('--bundler', dest='bundler_ref', metavar='REF',
                   help="custom bundle backend as 'module.path:Attr' (default: $DENOTAG_BUNDLER)")
    p.add_argument('--json-logs', action='store_true', help='emit log records as JSON lines')
    p.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return p


def print_usage(code: int = 1) -> NoReturn:
    print(f'> {USAGE}')
    raise SystemExit(code)


@contextlib.contextmanager
def _inside(directory: Path) -> Iterator[None]:
    """Temporarily switch CWD to *directory*."""
    cwd = Path.cwd()
    os.chdir(directory)
    try:
        yield
    finally:
        os.chdir(cwd)


class DenoTag:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Process the file named in *argv* and return the transformed text.

        Tag paths are relative to the document, so the actions run from the
        document's directory.
        """
        return DenoTag.run_namespace(_build_parser().parse_args(list(argv)))

    @staticmethod
    def run_namespace(ns: argparse.Namespace) -> str:
        json_logs = ns.json_logs or os.getenv('DENOTAG_JSON_LOGS') == '1'
        _configure_logging(json_logs)

        if not ns.file:
            raise UsageError('missing FILE argument')

        real_path = Path(ns.file).resolve(strict=True)
        text = real_path.read_text(encoding='utf-8')
        options = default_options(
            deno_bin=ns.deno_bin,
            runner_ref=ns.runner_ref,
            bundler_ref=ns.bundler_ref,
        )
        with _inside(real_path.parent):
            return deno_tag_sync(text, options)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `denotag` and `python -m denotag`."""
    args = list(sys.argv[1:] if argv is None else argv)
    ns = _build_parser().parse_args(args)
    if not ns.file:
        print_usage()
    try:
        out = DenoTag.run_namespace(ns)
        sys.stdout.write(out + '\n')
        sys.stdout.flush()
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        print(f"\n> {ns.file}: {exc}\n", file=sys.stderr)
        print_usage()


if __name__ == '__main__':
    main()
