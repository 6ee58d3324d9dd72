from .backends import BundleOutput, BundlerProtocol, RunnerProtocol
from .logging import LoggerLikeProtocol

__all__ = [
    'BundleOutput',
    'BundlerProtocol',
    'RunnerProtocol',
    'LoggerLikeProtocol',
]
