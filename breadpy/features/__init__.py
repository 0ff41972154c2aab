"""Cursor-position queries: completion, hover and signature help."""

from breadpy.features.completion import CompletionCandidate, CompletionKind, complete
from breadpy.features.hover import hover
from breadpy.features.signature import SignatureInfo, signature_help

__all__ = [
    "CompletionCandidate",
    "CompletionKind",
    "SignatureInfo",
    "complete",
    "hover",
    "signature_help",
]
