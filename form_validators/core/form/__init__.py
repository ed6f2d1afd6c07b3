"""
HTML host layer: documents, forms and the validator plugin.
"""

from .document import ERROR_MARKER, ERROR_SELECTOR, FormDocument
from .plugin import FormValidatorPlugin, SubmitOutcome

__all__ = [
    "FormDocument",
    "FormValidatorPlugin",
    "SubmitOutcome",
    "ERROR_SELECTOR",
    "ERROR_MARKER",
]
