"""
Motifvec — motif token vectorization for symbolic reasoning.

Public API:
    from motifvec import MotifToken, initialize_vectorizer, vectorize_message

    vectorizer = initialize_vectorizer(64)
    add_motif_embedding(vectorizer, motif)
    state = vectorize_message([motif], vectorizer)
    payload = al_uls_interface(state)

Layers:
    motifvec.core        Engines (embedding, symbolic, entropy). No I/O.
    motifvec.vectorizer  Orchestrator: motifs -> MessageState
    motifvec.io          JSON contract, YAML manifest, polars summary
    motifvec.config      Layered defaults
    motifvec.validation  InvalidDimension, ManifestError
"""

from motifvec.core import (
    MotifToken,
    EmbeddingCache,
    Expression,
    Variable,
    compute_entropy,
    create_motif_embedding,
    symbolic_state_compression,
)
from motifvec.vectorizer import (
    MessageState,
    MessageVectorizer,
    add_motif_embedding,
    initialize_vectorizer,
    vectorize_message,
)
from motifvec.io.interface import al_uls_interface, to_external
from motifvec.validation import InvalidDimension, ManifestError

__version__ = "0.1.0"

__all__ = [
    'MotifToken',
    'EmbeddingCache',
    'Expression',
    'Variable',
    'MessageState',
    'MessageVectorizer',
    'initialize_vectorizer',
    'add_motif_embedding',
    'create_motif_embedding',
    'symbolic_state_compression',
    'compute_entropy',
    'vectorize_message',
    'al_uls_interface',
    'to_external',
    'InvalidDimension',
    'ManifestError',
]
