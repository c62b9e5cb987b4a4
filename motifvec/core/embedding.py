"""
Motif Embedding Engine
======================

Procedural (not learned) embeddings. Each motif maps to a unit vector
driven by its weight and its numeric properties.

Algorithm:
    rng = Generator seeded from the motif NAME only
    v = zeros(dim)
    for each numeric property value x:
        influence = x * weight
        v[:min(dim, 10)] += influence * rng.random(min(dim, 10))
    v = v / ||v||  (if ||v|| > 0)

Two motifs with the same name draw identical random numbers; only the
weighted scaling differs. Non-numeric properties are ignored.

The generator is created per call. No global RNG state is touched, so
embedding creation is order-insensitive.
"""

import hashlib
import logging

import numpy as np

from motifvec.core.motif import MotifToken
from motifvec.validation import validate_dimension

logger = logging.getLogger(__name__)

# Only the leading positions of an embedding receive property influence
MAX_ACTIVE_DIMS = 10


def name_seed(name: str) -> int:
    """Stable 64-bit seed from a motif name (independent of PYTHONHASHSEED)."""
    digest = hashlib.blake2b(name.encode('utf-8'), digest_size=8).digest()
    return int.from_bytes(digest, 'little')


def motif_rng(name: str) -> np.random.Generator:
    """Fresh generator for one embedding call."""
    return np.random.default_rng(name_seed(name))


def unit_normalize(v: np.ndarray) -> np.ndarray:
    """Scale to unit L2 norm. A zero vector is returned unchanged."""
    norm = np.linalg.norm(v)
    if norm > 0:
        return v / norm
    return v


def create_motif_embedding(motif: MotifToken, dim: int, rng: np.random.Generator = None) -> np.ndarray:
    """
    Create a vector embedding for a motif token.

    Args:
        motif: Motif to embed
        dim: Embedding dimension (> 0)
        rng: Optional generator. Defaults to one seeded from motif.name.

    Returns:
        float64 array of length dim, unit norm or all zero

    Raises:
        InvalidDimension: if dim <= 0
    """
    dim = validate_dimension(dim)
    if rng is None:
        rng = motif_rng(motif.name)

    embedding = np.zeros(dim, dtype=np.float64)
    active = min(dim, MAX_ACTIVE_DIMS)

    n_numeric = 0
    for _, value in motif.numeric_properties():
        influence = value * motif.weight
        embedding[:active] += influence * rng.random(active)
        n_numeric += 1

    embedding = unit_normalize(embedding)

    logger.debug(
        "embedded motif %r: dim=%d numeric_properties=%d norm=%.6f",
        motif.name, dim, n_numeric, float(np.linalg.norm(embedding)),
    )
    return embedding
