"""Conductor-backing correction of the coplanar moduli.

A ground plane under a substrate of finite thickness h pulls field lines
away from the coplanar gaps. Simons (Ch. 7.4) and Wadell (Ch. 4.4.3)
fold that into effective even/odd-mode moduli built from six hyperbolic
terms::

    phi1 = 0.5 * cosh(pi*c/(2h))^2
    phi2 = sinh(pi*b/(2h))^2 - phi1 + 1
    phi3 = sinh(pi*d/(4h))^2 - phi1 + 1
    phi4 = 0.5 * sinh(pi*c/(2h))^2
    phi5 = sinh(pi*b/(2h))^2 - phi4
    phi6 = sinh(pi*d/(4h))^2 - phi4

    ke = phi1 * (sqrt(phi1^2-phi3^2) - sqrt(phi1^2-phi2^2))
         / (phi3*sqrt(phi1^2-phi2^2) + phi2*sqrt(phi1^2-phi3^2))
    ko = phi4 * (sqrt(phi4^2-phi6^2) - sqrt(phi4^2-phi5^2))
         / (phi6*sqrt(phi4^2-phi5^2) + phi5*sqrt(phi4^2-phi6^2))

Written that way the terms grow like exp(pi*c/h): the squares cancel
catastrophically once c/h passes ~10 and overflow past ~225. ``ke`` and
``ko`` are homogeneous of degree zero in the phi terms and in the two
radicals, so they are evaluated here with the terms divided by
cosh^2(pi*c/2h) (resp. sinh^2) and the radicands factored as
(phi1 - phi2)(phi1 + phi2). The literal terms are still available from
:func:`backing_terms` for inspection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

__all__ = ["BackingTerms", "BackingModuli", "backing_terms", "backing_moduli"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackingTerms:
    """The six hyperbolic terms of the backing correction, as written."""

    phi1: float
    phi2: float
    phi3: float
    phi4: float
    phi5: float
    phi6: float


@dataclass(frozen=True)
class BackingModuli:
    """Effective moduli corrected for the backing ground plane.

    Attributes:
        ke: Even-mode modulus
        ko: Odd-mode modulus
        terms: Literal phi terms (may be inf for very wide structures)
    """

    ke: float
    ko: float
    terms: BackingTerms


def _arguments(b: float, c: float, d: float, h: float) -> tuple:
    """Hyperbolic arguments pi*b/2h, pi*c/2h and pi*d/4h."""
    scale = np.pi / (2 * np.float64(h))
    return scale * b, scale * c, scale * d / 2


def _cosh_ratio(u, v):
    """cosh(u) / cosh(v) without forming either cosh."""
    u, v = np.abs(u), np.abs(v)
    return np.exp(u - v) * (1 + np.exp(-2 * u)) / (1 + np.exp(-2 * v))


def _sinh_ratio(u, v):
    """sinh(u) / sinh(v) without forming either sinh."""
    sign = np.sign(u) * np.sign(v)
    u, v = np.abs(u), np.abs(v)
    return sign * np.exp(u - v) * np.expm1(-2 * u) / np.expm1(-2 * v)


def _modulus(ratio_b, ratio_d, ratio_db):
    """Shared closed form of ke and ko after normalization.

    ``ratio_b`` and ``ratio_d`` are the b and d/2 functions divided by the
    c function (cosh for ke, sinh for ko); ``ratio_db`` is d/2 over b.
    """
    q_b = ratio_b * ratio_b
    q_d = ratio_d * ratio_d
    root_b = np.sqrt(1 - q_b)
    root_d = ratio_db * np.sqrt(1 - q_d)
    return 0.5 * (root_d - root_b) / ((q_d - 0.5) * root_b + (q_b - 0.5) * root_d)


def backing_terms(b: float, c: float, d: float, h: float) -> BackingTerms:
    """Evaluate phi1..phi6 literally.

    Args:
        b: Distance from centre line to the outer strip edge
        c: Distance from centre line to the coplanar ground edge
        d: Pair gap
        h: Substrate height

    Returns:
        BackingTerms; overflowing terms come back as inf
    """
    with np.errstate(all="ignore"):
        u_b, u_c, u_d = _arguments(b, c, d, h)
        sinh_b2 = np.sinh(u_b) ** 2
        sinh_d2 = np.sinh(u_d) ** 2
        phi1 = 0.5 * np.cosh(u_c) ** 2
        phi4 = 0.5 * np.sinh(u_c) ** 2
        terms = (
            phi1,
            sinh_b2 - phi1 + 1,
            sinh_d2 - phi1 + 1,
            phi4,
            sinh_b2 - phi4,
            sinh_d2 - phi4,
        )

    return BackingTerms(*(float(x) for x in terms))


def backing_moduli(b: float, c: float, d: float, h: float) -> BackingModuli:
    """Compute the even-mode and odd-mode effective moduli.

    Args:
        b: Distance from centre line to the outer strip edge
        c: Distance from centre line to the coplanar ground edge
        d: Pair gap
        h: Substrate height

    Returns:
        BackingModuli with ke, ko and the literal phi terms. Geometries that
        put a negative value under a radical give NaN, not an exception.
    """
    with np.errstate(all="ignore"):
        u_b, u_c, u_d = _arguments(b, c, d, h)
        ke = _modulus(_cosh_ratio(u_b, u_c), _cosh_ratio(u_d, u_c), _cosh_ratio(u_d, u_b))
        ko = _modulus(_sinh_ratio(u_b, u_c), _sinh_ratio(u_d, u_c), _sinh_ratio(u_d, u_b))

    logger.debug("backing moduli: ke=%r ko=%r", float(ke), float(ko))
    return BackingModuli(ke=float(ke), ko=float(ko), terms=backing_terms(b, c, d, h))
