from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from denotag.constants import DEFAULT_RUN_COMMAND
from denotag.core.interfaces.logging import LoggerLikeProtocol
from denotag.core.interfaces.backends import BundlerProtocol, RunnerProtocol


@dataclass(frozen=True)
class DenoTagOptions:
    """Immutable configuration blob for one `deno_tag()` call.

    Backends are always explicit: the core never falls back to process-wide
    defaults. The CLI builds a populated instance with
    `denotag.runtime.backends.default_options()`.
    """
    runner: RunnerProtocol
    bundler: BundlerProtocol
    run_command: Tuple[str, ...] = DEFAULT_RUN_COMMAND
    bundle_sources: Optional[Mapping[str, str]] = None
    bundle_options: Optional[Mapping[str, Any]] = None
    logger: Optional[LoggerLikeProtocol] = None

    def with_overrides(self, **changes: Any) -> 'DenoTagOptions':
        """Return a copy with *changes* applied."""
        if 'run_command' in changes:
            changes['run_command'] = tuple(changes['run_command'])
        return dataclasses.replace(self, **changes)
