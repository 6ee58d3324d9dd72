"""Project-wide constants used across modules.

This module isolates the tag vocabulary and default commands to reduce
cross-module coupling.
"""
from __future__ import annotations

from typing import Tuple

# Tag vocabulary (case-sensitive, matched as plain substrings).
TAG_OPEN: str = '<deno'
TAG_SELF_CLOSE: str = '/>'
TAG_CLOSE: str = '</deno>'
TAG_END: str = '>'

# Attribute keys that select the action; everything else is a flag.
ATTR_RUN: str = 'run'
ATTR_BUNDLE: str = 'bundle'

# Value stored for attributes written without "=value".
BOOLEAN_VALUE: str = '"true"'

DEFAULT_DENO_BIN: str = 'deno'
DEFAULT_RUN_ARGS: Tuple[str, ...] = ('run', '--allow-read', '--allow-run')
DEFAULT_RUN_COMMAND: Tuple[str, ...] = (DEFAULT_DENO_BIN, *DEFAULT_RUN_ARGS)
