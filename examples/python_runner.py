"""Run backend that executes `<deno run="…">` targets with the current Python.

    denotag --runner python_runner:PythonRunner site/index.html

(with this directory on PYTHONPATH). The target script receives the tag's
other attributes as `key="value"` arguments, exactly as a deno script would.
"""
from __future__ import annotations

import dataclasses
import sys

from denotag.core.models import RunRequest
from denotag.runtime.backends import SubprocessRunner


class PythonRunner:
    def __init__(self) -> None:
        self._runner = SubprocessRunner()

    async def __call__(self, request: RunRequest) -> bytes:
        return await self._runner(dataclasses.replace(request, command=(sys.executable,)))
