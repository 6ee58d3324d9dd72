"""
denotag.utils – Small shared utilities (dynamic backend loading).
"""
from .imports import load_object_from_ref

__all__ = ["load_object_from_ref"]
