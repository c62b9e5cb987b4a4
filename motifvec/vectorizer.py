"""
Message Vectorizer
==================

Turns a list of motif tokens into one immutable MessageState.
Orchestration only. Compute lives in motifvec.core.

Pipeline (per message):
    1. motif_configuration   name -> weight (last duplicate wins)
    2. combined_vector       sum(weight * embedding), cache first, else synthesize
    3. unit-normalize        (zero vector stays zero)
    4. symbolic_expression   core.symbolic
    5. entropy_score         core.entropy
    6. metadata              counts, config snapshot, timestamp, density

Cache misses are synthesized but NOT inserted. The cache only grows
through add_motif_embedding().

Usage:
    vectorizer = initialize_vectorizer(64)
    add_motif_embedding(vectorizer, motif)
    state = vectorize_message([motif, other], vectorizer)
"""

import logging
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence

import numpy as np

from motifvec.config import get_config
from motifvec.core.cache import EmbeddingCache
from motifvec.core.embedding import create_motif_embedding, unit_normalize
from motifvec.core.entropy import compute_entropy
from motifvec.core.motif import MotifToken
from motifvec.core.symbolic import (
    Expression,
    Variable,
    category_variables,
    symbolic_state_compression,
)
from motifvec.validation import validate_dimension

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessageState:
    """
    Compressed symbolic state of one message.

    Args:
        symbolic_expression: Linear combination of category variables
        vector_representation: Unit (or zero) vector of length embedding_dim
        entropy_score: Non-negative entropy
        motif_configuration: Motif name -> weight
        metadata: num_motifs, compression_ratio, timestamp,
                  compressed_size, information_density
    """
    symbolic_expression: Expression
    vector_representation: np.ndarray
    entropy_score: float
    motif_configuration: Mapping[str, float] = field(default_factory=dict)
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        vec = np.array(self.vector_representation, dtype=np.float64, copy=True)
        vec.setflags(write=False)
        object.__setattr__(self, 'vector_representation', vec)
        object.__setattr__(self, 'entropy_score', float(self.entropy_score))
        object.__setattr__(
            self, 'motif_configuration',
            MappingProxyType({str(k): float(v) for k, v in self.motif_configuration.items()}),
        )
        object.__setattr__(self, 'metadata', MappingProxyType(dict(self.metadata)))

    # numpy arrays have no scalar truth value; compare field by field
    def __eq__(self, other):
        if not isinstance(other, MessageState):
            return NotImplemented
        return (
            self.symbolic_expression == other.symbolic_expression
            and np.array_equal(self.vector_representation, other.vector_representation)
            and self.entropy_score == other.entropy_score
            and dict(self.motif_configuration) == dict(other.motif_configuration)
            and dict(self.metadata) == dict(other.metadata)
        )

    @property
    def num_motifs(self) -> int:
        return int(self.metadata.get('num_motifs', 0))

    @property
    def information_density(self) -> float:
        return float(self.metadata.get('information_density', 0.0))

    def to_dict(self) -> Dict[str, Any]:
        """Plain Python data (JSON-ready)."""
        return {
            'symbolic_expression': str(self.symbolic_expression),
            'vector_representation': self.vector_representation.tolist(),
            'entropy_score': self.entropy_score,
            'motif_configuration': dict(self.motif_configuration),
            'metadata': dict(self.metadata),
        }


class MessageVectorizer:
    """
    Long-lived vectorizer: embedding cache + category variables + config.

    `entropy_threshold` and `compression_ratio` are carried into metadata
    only. No computation reads them.
    """

    def __init__(
        self,
        embedding_dim: int,
        entropy_threshold: float,
        compression_ratio: float,
        symbolic_variables: Optional[Dict[str, Variable]] = None,
    ):
        self.embedding_dim = validate_dimension(embedding_dim)
        self.entropy_threshold = float(entropy_threshold)
        self.compression_ratio = float(compression_ratio)
        self.motif_embeddings = EmbeddingCache()
        if symbolic_variables is None:
            symbolic_variables = category_variables()
        self.symbolic_variables = MappingProxyType(dict(symbolic_variables))

    def __repr__(self) -> str:
        return (
            f"MessageVectorizer(embedding_dim={self.embedding_dim}, "
            f"entropy_threshold={self.entropy_threshold}, "
            f"compression_ratio={self.compression_ratio}, "
            f"cached={len(self.motif_embeddings)})"
        )

    def embedding_for(self, motif: MotifToken) -> np.ndarray:
        """Cached embedding for motif.name, else a freshly synthesized one (not cached)."""
        cached = self.motif_embeddings.lookup(motif.name)
        if cached is not None:
            return cached
        logger.debug("cache miss for %r, synthesizing", motif.name)
        return create_motif_embedding(motif, self.embedding_dim)


def initialize_vectorizer(
    dim: int,
    entropy_threshold: Optional[float] = None,
    compression_ratio: Optional[float] = None,
) -> MessageVectorizer:
    """
    Create a MessageVectorizer with the four category variables.

    Args:
        dim: Embedding dimension (> 0)
        entropy_threshold: Stored only (default from config, 0.5)
        compression_ratio: Stored only (default from config, 0.8)

    Raises:
        InvalidDimension: if dim <= 0
    """
    config = get_config()
    if entropy_threshold is None:
        entropy_threshold = config.get('vectorizer.entropy_threshold', 0.5)
    if compression_ratio is None:
        compression_ratio = config.get('vectorizer.compression_ratio', 0.8)

    vectorizer = MessageVectorizer(dim, entropy_threshold, compression_ratio)
    logger.debug("initialized %r", vectorizer)
    return vectorizer


def add_motif_embedding(vectorizer: MessageVectorizer, motif: MotifToken) -> None:
    """Compute and cache (overwrite) the embedding for motif.name."""
    embedding = create_motif_embedding(motif, vectorizer.embedding_dim)
    vectorizer.motif_embeddings.insert(motif.name, embedding)


def vectorize_message(motifs: Sequence[MotifToken], vectorizer: MessageVectorizer) -> MessageState:
    """
    Transform motif tokens into a message state.

    Args:
        motifs: Motif tokens, in message order. May be empty or contain duplicates.
        vectorizer: Vectorizer (cache is read, never written)

    Returns:
        MessageState
    """
    motifs = list(motifs)
    dim = vectorizer.embedding_dim

    motif_config: Dict[str, float] = {}
    for motif in motifs:
        motif_config[motif.name] = motif.weight

    combined_vector = np.zeros(dim, dtype=np.float64)
    for motif in motifs:
        combined_vector += motif.weight * vectorizer.embedding_for(motif)

    combined_vector = unit_normalize(combined_vector)

    symbolic_expr = symbolic_state_compression(motifs, vectorizer.symbolic_variables)
    entropy_score = compute_entropy(combined_vector, motif_config)

    metadata = {
        'num_motifs': len(motifs),
        'compression_ratio': vectorizer.compression_ratio,
        'timestamp': time.time(),
        'compressed_size': len(combined_vector),
        'information_density': entropy_score / max(len(combined_vector), 1),
    }

    logger.debug(
        "vectorized %d motifs (%d distinct): entropy=%.6f",
        len(motifs), len(motif_config), entropy_score,
    )

    return MessageState(
        symbolic_expr,
        combined_vector,
        entropy_score,
        motif_config,
        metadata,
    )
