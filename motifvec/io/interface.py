"""
al-ULS Interface — render a MessageState as the external JSON contract.

Schema (one object per message):
    symbolic_expression    str
    vector_representation  [float, ...]   length = embedding_dim
    entropy_score          float
    motif_configuration    {motif_name: float}
    metadata               {num_motifs, compression_ratio, timestamp,
                            compressed_size, information_density}
    compressed_size        int     (duplicate of metadata)
    information_density    float   (duplicate of metadata)

Pure. No side effects.
"""

import json
from typing import Any, Dict

import numpy as np

from motifvec.vectorizer import MessageState


def _to_builtin(value: Any) -> Any:
    """numpy scalars/arrays -> plain Python for json."""
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, dict):
        return {str(k): _to_builtin(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_builtin(v) for v in value]
    return value


def external_payload(message_state: MessageState) -> Dict[str, Any]:
    """The external contract as a dict."""
    payload = message_state.to_dict()
    payload['compressed_size'] = len(message_state.vector_representation)
    payload['information_density'] = message_state.metadata['information_density']
    return _to_builtin(payload)


def al_uls_interface(message_state: MessageState) -> str:
    """
    Format a message state for al-ULS consumption.

    Returns:
        JSON string
    """
    return json.dumps(external_payload(message_state), ensure_ascii=False)


to_external = al_uls_interface
