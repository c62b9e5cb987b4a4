"""
Validation Module

Exports:
    - InvalidDimension: Raised when an embedding dimension is not positive
    - validate_dimension: Check and normalize an embedding dimension
    - ManifestError: Raised when a motif manifest is inconsistent
    - validate_manifest: Collect manifest reference errors
"""

from .dimension import InvalidDimension, validate_dimension
from .manifest import ManifestError, validate_manifest

__all__ = [
    'InvalidDimension',
    'validate_dimension',
    'ManifestError',
    'validate_manifest',
]
