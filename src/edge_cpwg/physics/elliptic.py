"""Complete elliptic integral of the first kind.

The conformal-mapping impedance formulas for coplanar lines reduce every
capacitance to a ratio K(k)/K'(k). This module provides the primitive and
that ratio, evaluated with the arithmetic-geometric mean (AGM), which
converges quadratically (typically 4-6 iterations for machine precision).

Conventions:
    ``k`` is the elliptic *modulus*, not the parameter ``m = k^2``::

        K(k) = integral from 0 to pi/2 of 1/sqrt(1 - k^2*sin^2(t)) dt

    Out-of-domain arguments never raise: ``|k| == 1`` gives ``inf`` and
    ``|k| > 1`` or NaN gives NaN, so an invalid geometry shows up as a
    non-finite impedance instead of an exception.

Example::

    from edge_cpwg.physics.elliptic import elliptic_k, k_over_k_prime

    elliptic_k(0.0)          # pi/2
    k_over_k_prime(0.7071)   # ~1.0 (K(k) == K'(k) at k = 1/sqrt(2))
"""

from __future__ import annotations

import math

__all__ = ["elliptic_k", "elliptic_k_prime", "k_over_k_prime"]

_MAX_ITERATIONS = 64


def _agm(a: float, b: float, tolerance: float = 1e-15) -> float:
    """Arithmetic-geometric mean of two non-negative numbers."""
    if a == 0.0 or b == 0.0:
        return 0.0

    for _ in range(_MAX_ITERATIONS):
        if abs(a - b) <= tolerance * a:
            break
        a, b = (a + b) / 2, math.sqrt(a * b)

    return a


def _complete_k(k_prime: float) -> float:
    """K expressed through the complementary modulus: K = pi / (2 * AGM(1, k'))."""
    mean = _agm(1.0, k_prime)
    if mean == 0.0:
        return math.inf
    return math.pi / (2 * mean)


def elliptic_k(k: float) -> float:
    """Compute complete elliptic integral of the first kind K(k).

    Args:
        k: Elliptic modulus (0 <= |k| < 1 for a finite result)

    Returns:
        K(k); ``inf`` for ``|k| == 1``, NaN for ``|k| > 1`` or NaN input

    Note:
        Uses symmetry K(-k) = K(k).
    """
    k = abs(float(k))
    if math.isnan(k) or k > 1.0:
        return math.nan
    if k == 1.0:
        return math.inf
    if k == 0.0:
        return math.pi / 2

    # (1 - k)(1 + k) keeps precision for k close to 1
    return _complete_k(math.sqrt((1 - k) * (1 + k)))


def elliptic_k_prime(k: float) -> float:
    """Complementary integral K'(k) = K(sqrt(1 - k^2)).

    Evaluated as pi / (2 * AGM(1, k)), which is the same quantity without
    forming ``1 - k^2`` explicitly (no precision loss for small ``k``).

    Args:
        k: Elliptic modulus

    Returns:
        K'(k); ``inf`` for ``k == 0``, NaN for ``k^2 > 1`` or NaN input
    """
    k = abs(float(k))
    if math.isnan(k) or k > 1.0:
        return math.nan
    return _complete_k(k)


def k_over_k_prime(k: float) -> float:
    """Ratio K(k)/K'(k) used by every conformal-mapping capacitance term."""
    return elliptic_k(k) / elliptic_k_prime(k)
