"""Keyword classification of qualified names."""

from typing import Optional

from symdeps_core.metadata.models import Classification, ParsedIdentifier


def classify(name: str) -> Optional[Classification]:
    """Guess the category of a name by case-insensitive keyword search.

    Keywords are tried in ``Classification`` declaration order
    (component, pipe, module, directive); the first one found anywhere
    in the name wins.

    Examples:
        >>> classify("SharedModule")
        <Classification.MODULE: 'module'>
        >>> classify("PipeComponent")
        <Classification.COMPONENT: 'component'>
        >>> classify("AuthService") is None
        True
    """
    lowered = name.lower()
    for classification in Classification:
        if classification.value in lowered:
            return classification
    return None


get_type = classify


def parse_deep_identifier(name: str) -> ParsedIdentifier:
    """Split a dotted name on its first segment and classify the whole name.

    ``"Shared.SharedModule"`` gets namespace ``"Shared"``; a name without a
    dot gets no namespace. ``name`` is always the full original string.
    """
    segments = name.split(".")
    if len(segments) > 1:
        return ParsedIdentifier(namespace=segments[0], name=name, classification=classify(name))
    return ParsedIdentifier(name=name, classification=classify(name))


__all__ = [
    "classify",
    "get_type",
    "parse_deep_identifier",
]
