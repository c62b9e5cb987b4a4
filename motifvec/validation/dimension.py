"""
Embedding Dimension Validation

Every vector in the pipeline has the vectorizer's embedding dimension.
A dimension must be a positive integer.

Usage:
    from motifvec.validation import validate_dimension, InvalidDimension

    try:
        dim = validate_dimension(64)
    except InvalidDimension as e:
        print(e)
"""

import numbers


class InvalidDimension(ValueError):
    """Raised when an embedding dimension is not a positive integer."""

    def __init__(self, dim, message: str = None):
        self.dim = dim
        if message is None:
            message = f"Embedding dimension must be a positive integer, got {dim!r}"
        super().__init__(message)


def validate_dimension(dim) -> int:
    """Return `dim` as an int, or raise InvalidDimension."""
    if isinstance(dim, bool) or not isinstance(dim, numbers.Integral):
        raise InvalidDimension(dim)
    if dim <= 0:
        raise InvalidDimension(dim)
    return int(dim)
