"""Placeholder substitution for resolved messages.

Replaces caller-supplied tokens such as ``%name%`` in one pass. Each
position is matched against the longest key first; replaced text is never
scanned again, so values containing tokens are emitted verbatim.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

__all__ = ["substitute"]


def substitute(text: str, parameters: Mapping[str, object] | None = None) -> str:
    """Replace each parameter key in text with str(value).

    Args:
        text: Message text
        parameters: Mapping of literal tokens (e.g. "%what%") to values

    Returns:
        Text with every token occurrence replaced

    Examples:
        >>> substitute("Charcoal is %what%!", {"%what%": "awesome"})
        'Charcoal is awesome!'
        >>> substitute("%a%", {"%a%": "%b%", "%b%": "x"})
        '%b%'
    """
    if not parameters or not text:
        return text
    keys = [str(key) for key in parameters if str(key)]
    if not keys:
        return text
    values = {str(key): str(value) for key, value in parameters.items()}
    pattern = re.compile("|".join(re.escape(key) for key in sorted(keys, key=len, reverse=True)))
    return pattern.sub(lambda match: values[match.group(0)], text)
