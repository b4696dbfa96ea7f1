"""Hypothesis strategies for transcatalog property-based testing.

Usage:
    from tests.strategies import translation_mappings, invalid_inputs
"""

from .localization import (
    LOCALES,
    invalid_inputs,
    message_texts,
    plural_counts,
    translation_mappings,
)

__all__ = [
    "LOCALES",
    "invalid_inputs",
    "message_texts",
    "plural_counts",
    "translation_mappings",
]
