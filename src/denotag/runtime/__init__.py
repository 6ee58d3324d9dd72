"""Public API surface for denotag.runtime."""
from .backends import DenoBundler, SubprocessRunner, default_options
from .dispatcher import ActionDispatcher
from .options import DenoTagOptions

__all__ = ["ActionDispatcher", "DenoBundler", "DenoTagOptions", "SubprocessRunner", "default_options"]
