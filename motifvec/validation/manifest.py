"""
Manifest Validation

Checks that every motif name referenced by `messages` and `cache`
is defined under `motifs`, and that each motif definition has a name,
a numeric weight and a list (or single) context.

PRINCIPLE: "Check before compute, not after failure"
"""

import numbers
from typing import Any, Dict, List


class ManifestError(ValueError):
    """Raised when a motif manifest is inconsistent."""

    def __init__(self, errors: List[str], source: str = None):
        self.errors = errors
        self.source = source

        header = "Manifest validation failed"
        if source:
            header += f" ({source})"
        message = header + ":\n" + "\n".join(f"  ERROR: {e}" for e in errors)
        super().__init__(message)


def validate_manifest(manifest: Dict[str, Any]) -> List[str]:
    """
    Validate motif references in a parsed manifest.

    Returns list of errors. Empty list = manifest is consistent.
    """
    errors = []
    defined = set()

    for i, spec in enumerate(manifest.get('motifs') or []):
        if not isinstance(spec, dict) or not spec.get('name'):
            errors.append(f"motifs[{i}] has no name")
            continue
        name = str(spec['name'])
        if name in defined:
            errors.append(f"motif '{name}' is defined more than once")
        defined.add(name)

        props = spec.get('properties')
        if props is not None and not isinstance(props, dict):
            errors.append(f"motif '{name}': properties must be a mapping")

        weight = spec.get('weight', 1.0)
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            errors.append(f"motif '{name}': weight must be a number, got {weight!r}")

        context = spec.get('context')
        if context is not None and not isinstance(context, (list, str)):
            errors.append(f"motif '{name}': context must be a list of tags or a single tag")

    for name in manifest.get('cache') or []:
        if str(name) not in defined:
            errors.append(f"cache references unknown motif '{name}'")

    messages = manifest.get('messages') or {}
    if not isinstance(messages, dict):
        errors.append("messages must be a mapping of message name -> motif names")
        return errors

    for msg, names in messages.items():
        for name in names or []:
            if str(name) not in defined:
                errors.append(f"message '{msg}' references unknown motif '{name}'")

    return errors
