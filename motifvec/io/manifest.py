"""
Manifest — parse manifest.yaml into motifs, messages and vectorizer config.

Layout:
    vectorizer:
      embedding_dim: 64
      entropy_threshold: 0.5
      compression_ratio: 0.8
    motifs:
      - name: isolation_time
        weight: 0.7
        context: [temporal, spatial, emotional]
        properties: {intensity: 0.8, duration: 24.0}
    cache: [isolation_time]
    messages:
      lonely_evening: [isolation_time, decay_memory]
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from motifvec.core.motif import MotifToken
from motifvec.validation import ManifestError, validate_manifest

logger = logging.getLogger(__name__)


def load_manifest(data_path: str) -> Dict[str, Any]:
    """
    Load and validate a motif manifest.

    Tries:
        1. data_path itself (if it's a .yaml file)
        2. data_path/manifest.yaml

    Raises:
        FileNotFoundError: no manifest found
        ManifestError: unknown motif references or malformed motifs
    """
    p = Path(data_path)

    if p.is_file() and p.suffix in ('.yaml', '.yml'):
        manifest_path = p
    else:
        manifest_path = p / 'manifest.yaml'

    if not manifest_path.exists():
        raise FileNotFoundError(f"No manifest.yaml in {data_path}")

    with open(manifest_path) as f:
        manifest = yaml.safe_load(f) or {}

    if not isinstance(manifest, dict):
        raise ManifestError(["top level must be a mapping"], source=str(manifest_path))

    errors = validate_manifest(manifest)
    if errors:
        raise ManifestError(errors, source=str(manifest_path))

    manifest['_manifest_path'] = str(manifest_path)
    logger.debug(
        "loaded manifest %s: %d motifs, %d messages",
        manifest_path, len(manifest.get('motifs') or []), len(manifest.get('messages') or {}),
    )
    return manifest


def build_motifs(manifest: Dict[str, Any]) -> Dict[str, MotifToken]:
    """Motif name -> MotifToken, in manifest order."""
    motifs = {}
    for spec in manifest.get('motifs') or []:
        motif = MotifToken(
            name=spec['name'],
            properties=spec.get('properties') or {},
            weight=spec.get('weight', 1.0),
            context=spec.get('context') or (),
        )
        motifs[motif.name] = motif
    return motifs


def get_messages(manifest: Dict[str, Any]) -> Dict[str, List[str]]:
    """Message name -> motif names."""
    return {str(k): [str(n) for n in (v or [])] for k, v in (manifest.get('messages') or {}).items()}


def get_cached_names(manifest: Dict[str, Any]) -> List[str]:
    return [str(n) for n in manifest.get('cache') or []]


def get_vectorizer_config(manifest: Dict[str, Any]) -> Dict[str, Any]:
    return dict(manifest.get('vectorizer') or {})
