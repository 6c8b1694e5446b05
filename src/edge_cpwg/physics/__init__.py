"""Closed-form analysis of conductor-backed edge-coupled coplanar waveguides.

The calculation is a fixed forward chain, each stage a pure function:

1. geometry: physical lengths -> edge distances a, b, c and moduli r, k1, delta
2. elliptic: complete elliptic integral K(k), K'(k) and the ratio K/K'
3. backing: even/odd moduli ke, ko corrected for the backing ground plane
4. coupled_cpwg: even/odd effective permittivity and impedance, then
   Zdiff, Zcomm and Z0

Example:
    >>> from edge_cpwg.physics import CPWGParameters, calculate
    >>>
    >>> params = CPWGParameters(0.2, 0.41, 0.2, 0.035, 1.593, 4.5)
    >>> result = calculate(params)
    >>> print(f"Zdiff = {result.zdiff:.1f}Ω, Zcomm = {result.zcommon:.1f}Ω")

Note:
    Quasi-static model, no dispersion, and the conductor thickness is
    accepted but not part of the formulas. For full-wave results use a
    field solver such as openEMS.
"""

from .backing import (
    BackingModuli,
    BackingTerms,
    backing_moduli,
    backing_terms,
)
from .constants import ETA_0, SPEED_OF_LIGHT
from .coupled_cpwg import (
    CoupledCPWGResult,
    EdgeCoupledCPWG,
    calculate,
    synthesize_modes,
)
from .elliptic import elliptic_k, elliptic_k_prime, k_over_k_prime
from .geometry import CPWGParameters, ReducedGeometry, reduce_geometry

__all__ = [
    # Constants
    "SPEED_OF_LIGHT",
    "ETA_0",
    # Geometry
    "CPWGParameters",
    "ReducedGeometry",
    "reduce_geometry",
    # Elliptic integrals
    "elliptic_k",
    "elliptic_k_prime",
    "k_over_k_prime",
    # Backing correction
    "BackingTerms",
    "BackingModuli",
    "backing_terms",
    "backing_moduli",
    # Mode synthesis
    "CoupledCPWGResult",
    "EdgeCoupledCPWG",
    "calculate",
    "synthesize_modes",
]
