"""
motifvec.core — compute engines (no I/O).

    motif       MotifToken, property kinds
    embedding   Procedural motif embeddings
    cache       Name -> embedding store
    symbolic    Linear symbolic compression
    entropy     Diversity-scaled Shannon entropy
"""

from motifvec.core.motif import MotifToken, PropertyKind, property_kind
from motifvec.core.embedding import create_motif_embedding
from motifvec.core.cache import EmbeddingCache
from motifvec.core.symbolic import (
    Expression,
    Variable,
    create_variable,
    scale_and_add,
    to_text,
    symbolic_state_compression,
)
from motifvec.core.entropy import compute_entropy

__all__ = [
    'MotifToken',
    'PropertyKind',
    'property_kind',
    'create_motif_embedding',
    'EmbeddingCache',
    'Expression',
    'Variable',
    'create_variable',
    'scale_and_add',
    'to_text',
    'symbolic_state_compression',
    'compute_entropy',
]
