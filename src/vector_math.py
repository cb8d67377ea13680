"""
Vector math primitives for the preference space (tone, intensity, complexity).
"""

import math
import numbers
from collections import namedtuple

Vector3 = namedtuple("Vector3", ["x", "y", "z"])

ZERO_VECTOR = Vector3(0.0, 0.0, 0.0)

# Components outside this band are rescaled before squaring so the
# products stay finite and above the subnormal range.
_SAFE_MAX = 1e50
_SAFE_MIN = 1e-50


def as_vector3(values):
    """
    Coerce a 3-sequence or an x/y/z mapping into a Vector3 of floats.

    Args:
        values: Vector3, tuple/list of three numbers, or dict with x, y, z keys

    Returns:
        Vector3

    Raises:
        TypeError: if a component is not a real number (bools and strings included)
        ValueError: if there are not exactly three components or one is NaN/infinite
    """
    if isinstance(values, dict):
        try:
            values = (values["x"], values["y"], values["z"])
        except KeyError as e:
            raise ValueError(f"Vector mapping is missing component {e}") from None

    try:
        components = list(values)
    except TypeError:
        raise TypeError(f"Expected a 3-component vector, got {type(values).__name__}") from None

    if len(components) != 3:
        raise ValueError(f"Expected 3 components, got {len(components)}")

    result = []
    for c in components:
        if isinstance(c, bool) or not isinstance(c, numbers.Real):
            raise TypeError(f"Vector component must be a real number, got {c!r}")
        c = float(c)
        if not math.isfinite(c):
            raise ValueError(f"Vector component must be finite, got {c!r}")
        result.append(c)

    return Vector3(*result)


def dot_product(a, b):
    """Dot product of two 3D vectors."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def magnitude(v):
    """Euclidean norm of a 3D vector. Zero only for the zero vector."""
    return math.sqrt(dot_product(v, v))


def is_zero_vector(v):
    return v[0] == 0 and v[1] == 0 and v[2] == 0


def scale_vector(v, s):
    """Multiply every component of v by the scalar s."""
    return Vector3(v[0] * s, v[1] * s, v[2] * s)


def _rescaled(v):
    largest = max(abs(v[0]), abs(v[1]), abs(v[2]))
    if _SAFE_MIN <= largest <= _SAFE_MAX:
        return v
    return Vector3(v[0] / largest, v[1] / largest, v[2] / largest)


def cosine_similarity(a, b):
    """
    Cosine similarity between two 3D vectors.

    Formula: (A . B) / (||A|| * ||B||), evaluated as
    (A . B) / sqrt((A . A) * (B . B)) so that parallel vectors score
    exactly alike. The result lies in [-1, 1] up to rounding; it is not clamped.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Float similarity, or exactly 0.0 if either vector is the zero vector
    """
    if is_zero_vector(a) or is_zero_vector(b):
        return 0.0

    a = _rescaled(a)
    b = _rescaled(b)

    return dot_product(a, b) / math.sqrt(dot_product(a, a) * dot_product(b, b))


def normalize_input(value):
    """
    Identity hook for a single slider value.

    Cosine similarity ignores magnitude, so slider values are used as raw
    coordinates; nothing is rescaled here.
    """
    return value
