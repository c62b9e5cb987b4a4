"""
Motif Token
===========

A motif is a named, weighted, tagged property bag. It is the unit of
symbolic meaning the vectorizer consumes.

Property values fall into a closed set of kinds:
    NUMBER   - real numbers (int, float, numpy scalars). Drive embeddings.
    TEXT     - strings. Carried, never computed on.
    BOOLEAN  - True/False. Carried, never computed on.
    OTHER    - anything else. Carried, never computed on.

Booleans are NOT numbers here, even though bool subclasses int.
"""

import numbers
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Tuple


class PropertyKind(Enum):
    NUMBER = "number"
    TEXT = "text"
    BOOLEAN = "boolean"
    OTHER = "other"


def property_kind(value: Any) -> PropertyKind:
    """Classify a property value."""
    if isinstance(value, bool):
        return PropertyKind.BOOLEAN
    if isinstance(value, numbers.Real):
        return PropertyKind.NUMBER
    if isinstance(value, str):
        return PropertyKind.TEXT
    return PropertyKind.OTHER


@dataclass(frozen=True)
class MotifToken:
    """
    Immutable motif descriptor.

    Args:
        name: Unique identifier, used as the embedding cache key
        properties: Mapping of property name -> value
        weight: Motif weight (typically in [0, 1], not enforced)
        context: Category tags, e.g. ('temporal', 'memory')
    """
    name: str
    properties: Mapping[str, Any] = field(default_factory=dict, hash=False)
    weight: float = 1.0
    context: Tuple[str, ...] = ()

    def __post_init__(self):
        context = self.context
        if isinstance(context, str):
            context = (context,)
        # Ordered set: first occurrence of each tag wins
        tags = tuple(dict.fromkeys(str(t) for t in context))
        object.__setattr__(self, 'name', str(self.name))
        object.__setattr__(self, 'properties', MappingProxyType(dict(self.properties)))
        object.__setattr__(self, 'weight', float(self.weight))
        object.__setattr__(self, 'context', tags)

    def numeric_properties(self) -> Iterator[Tuple[str, float]]:
        """Yield (key, value) for NUMBER properties, in insertion order."""
        for key, value in self.properties.items():
            if property_kind(value) is PropertyKind.NUMBER:
                yield key, float(value)

    def has_tag(self, tag: str) -> bool:
        return tag in self.context
