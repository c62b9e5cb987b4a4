"""
Summary — one row per message state, as a polars DataFrame.
"""

from typing import Mapping

import polars as pl

from motifvec.vectorizer import MessageState


SUMMARY_SCHEMA = {
    'message': pl.Utf8,
    'num_motifs': pl.Int64,
    'entropy_score': pl.Float64,
    'information_density': pl.Float64,
    'compressed_size': pl.Int64,
    'symbolic_expression': pl.Utf8,
}


def summarize_states(states: Mapping[str, MessageState]) -> pl.DataFrame:
    """
    Tabulate message states.

    Args:
        states: message name -> MessageState (input order kept)

    Returns:
        DataFrame with SUMMARY_SCHEMA columns. Empty input → 0 rows.
    """
    rows = []
    for name, state in states.items():
        rows.append({
            'message': name,
            'num_motifs': state.num_motifs,
            'entropy_score': state.entropy_score,
            'information_density': state.information_density,
            'compressed_size': len(state.vector_representation),
            'symbolic_expression': str(state.symbolic_expression),
        })

    return pl.DataFrame(rows, schema=SUMMARY_SCHEMA)
