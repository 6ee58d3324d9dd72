"""Public API surface for denotag.rendering."""
from .composer import OutputComposer, pad_lines
from .reassembler import replace_tags_with_results

__all__ = ["OutputComposer", "pad_lines", "replace_tags_with_results"]
