"""
motifvec.io — external formats.

    interface   MessageState -> al-ULS JSON
    manifest    manifest.yaml -> motifs/messages
    summary     MessageStates -> polars DataFrame
"""

from motifvec.io.interface import al_uls_interface, to_external, external_payload
from motifvec.io.manifest import load_manifest, build_motifs
from motifvec.io.summary import summarize_states

__all__ = [
    'al_uls_interface',
    'to_external',
    'external_payload',
    'load_manifest',
    'build_motifs',
    'summarize_states',
]
