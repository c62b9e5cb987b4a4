"""
Motifvec Runner
===============

Loads a motif manifest, pre-embeds the cached motifs, vectorizes every
message and prints one al-ULS JSON object per message.

Usage:
    python -m motifvec examples/demo/manifest.yaml
    python -m motifvec examples/demo --dim 128 --summary
    python -m motifvec examples/demo -v
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from motifvec.config import get_config
from motifvec.io.interface import al_uls_interface
from motifvec.io.manifest import (
    build_motifs,
    get_cached_names,
    get_messages,
    get_vectorizer_config,
    load_manifest,
)
from motifvec.io.summary import summarize_states
from motifvec.validation import InvalidDimension, ManifestError
from motifvec.vectorizer import (
    MessageState,
    add_motif_embedding,
    initialize_vectorizer,
    vectorize_message,
)


def run(data_path: str, dim: Optional[int] = None) -> Dict[str, MessageState]:
    """
    Vectorize every message in a manifest.

    Args:
        data_path: manifest.yaml or the directory holding it
        dim: Embedding dimension override

    Returns:
        message name -> MessageState, in manifest order
    """
    manifest = load_manifest(data_path)
    cfg = get_vectorizer_config(manifest)
    defaults = get_config()

    if dim is None:
        dim = cfg.get('embedding_dim', defaults.get('vectorizer.embedding_dim'))

    vectorizer = initialize_vectorizer(
        dim,
        entropy_threshold=cfg.get('entropy_threshold'),
        compression_ratio=cfg.get('compression_ratio'),
    )

    motifs = build_motifs(manifest)
    for name in get_cached_names(manifest):
        add_motif_embedding(vectorizer, motifs[name])

    states = {}
    for msg, names in get_messages(manifest).items():
        states[msg] = vectorize_message([motifs[n] for n in names], vectorizer)
    return states


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Vectorize motif messages from a manifest",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('data_path', help='manifest.yaml or directory containing it')
    parser.add_argument('--dim', type=int, default=None, help='Embedding dimension override')
    parser.add_argument('--summary', action='store_true', help='Print a summary table after the JSON lines')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
    )

    try:
        states = run(args.data_path, dim=args.dim)
    except (FileNotFoundError, ManifestError, InvalidDimension) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for state in states.values():
        print(al_uls_interface(state))

    if args.summary:
        print(summarize_states(states))

    return 0


if __name__ == '__main__':
    sys.exit(main())
