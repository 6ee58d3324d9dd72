"""Public surface for denotag.core: data model and backend protocols.

    from denotag.core import TagGroup, ActionResult, RunnerProtocol, ...
"""

from denotag.core.interfaces import BundlerProtocol, RunnerProtocol
from denotag.core.models import ActionResult, AttributeMap, ParsedText, RunRequest, TagGroup

__all__ = [
    "ActionResult",
    "AttributeMap",
    "ParsedText",
    "RunRequest",
    "TagGroup",
    "BundlerProtocol",
    "RunnerProtocol",
]
