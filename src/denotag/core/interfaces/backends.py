from __future__ import annotations
from typing import Any, Awaitable, Mapping, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

from denotag.core.models import RunRequest

BundleOutput = Tuple[Optional[Sequence[Any]], str]


@runtime_checkable
class RunnerProtocol(Protocol):
    """Run backend: executes `request.argv` and returns its captured stdout.

    Implementations may be plain callables or coroutine functions.
    """

    def __call__(self, request: RunRequest) -> Union[bytes, str, Awaitable[Union[bytes, str]]]:
        ...


@runtime_checkable
class BundlerProtocol(Protocol):
    """Bundle backend: returns a `(diagnostics, output_text)` pair."""

    def __call__(
        self,
        file: str,
        sources: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Union[BundleOutput, Awaitable[BundleOutput]]:
        ...
