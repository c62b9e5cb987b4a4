"""
Message Entropy Engine
======================

Shannon entropy of a message vector, scaled by motif diversity.

    p_i = |v_i| / sum_j |v_j|
    keep p_i > 1e-10            (noise floor; survivors NOT renormalized)
    H   = -sum p_i ln(p_i)      (nats)
    H  *= ln(n_motifs + 1)      (skipped when n_motifs == 0)

Physics:
    - All mass on one component → H = 0
    - Uniform over k components  → H = ln(k) before scaling
    - Scale invariant: entropy(c * v) == entropy(v) for c > 0
"""

from typing import Sized

import numpy as np


NOISE_FLOOR = 1e-10


def shannon_entropy(vector: np.ndarray) -> float:
    """Unscaled Shannon entropy (nats) of |vector| treated as a distribution."""
    a = np.abs(np.asarray(vector, dtype=np.float64)).ravel()
    total = a.sum()
    if total == 0:
        return 0.0

    p = a / total
    p = p[p > NOISE_FLOOR]
    if p.size == 0:
        return 0.0

    return float(-np.sum(p * np.log(p)))


def compute_entropy(vector: np.ndarray, motif_config: Sized) -> float:
    """
    Compute entropy score for a message vector.

    Args:
        vector: Message vector
        motif_config: Motif name -> weight; only its size is used

    Returns:
        Non-negative entropy score. 0.0 for the zero vector.
    """
    entropy = shannon_entropy(vector)
    if entropy == 0.0:
        return 0.0

    num_motifs = len(motif_config)
    if num_motifs > 0:
        entropy *= np.log(num_motifs + 1)

    return float(entropy)
