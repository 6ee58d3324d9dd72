"""Public API surface for denotag.parsing."""
from .scanner import TagScanner
from .tokenizer import AttributeTokenizer

__all__ = ["AttributeTokenizer", "TagScanner"]
