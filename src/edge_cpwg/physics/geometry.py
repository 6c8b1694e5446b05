"""Cross-section parameters and the dimensionless ratios derived from them.

Geometry (all lengths in one consistent unit)::

         W       S       d       S       W
      ──────┐ ┌─────┐ ┌─────┐ ┌─────┐ ┌──────
      Ground│ │Diff-│ │     │ │Diff+│ │Ground   } t
      ══════╧═╧═════╧═╧═════╧═╧═════╧═╧══════
        dielectric, epsilon_r              } h
      ───────────────────────────────────────  backing ground

The conformal mapping works with distances measured from the pair's
centre line::

    a = d/2            inner edge of a strip
    b = d/2 + S        outer edge of a strip
    c = d/2 + S + W    edge of the coplanar ground

and requires 0 < a < b < c for the elliptic moduli to lie in (0, 1).
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from ..exceptions import ValidationError

__all__ = ["CPWGParameters", "ReducedGeometry", "reduce_geometry"]


@dataclass(frozen=True)
class CPWGParameters:
    """Physical inputs of a conductor-backed edge-coupled CPW pair.

    Attributes:
        pair_gap: Space between the two strip conductors (d)
        strip_width: Width of each strip conductor (S)
        ground_gap: Space between a strip and the coplanar ground (W)
        thickness: Conductor thickness (t); carried but not used by the model
        substrate_height: Dielectric thickness to the backing ground (h)
        epsilon_r: Relative permittivity of the dielectric
    """

    pair_gap: float
    strip_width: float
    ground_gap: float
    thickness: float
    substrate_height: float
    epsilon_r: float

    def validate(self) -> list[str]:
        """Collect every reason this geometry falls outside the model's domain.

        The calculation itself never calls this; out-of-domain inputs simply
        produce NaN. Callers that prefer a diagnostic check first.

        Returns:
            List of problems, empty when the parameters are valid
        """
        errors = []
        positive = {
            "pair_gap (d)": self.pair_gap,
            "strip_width (S)": self.strip_width,
            "ground_gap (W)": self.ground_gap,
            "substrate_height (h)": self.substrate_height,
        }
        for name, value in positive.items():
            if not math.isfinite(value) or value <= 0:
                errors.append(f"{name} must be a positive finite length, got {value}")

        if not math.isfinite(self.thickness) or self.thickness < 0:
            errors.append(f"thickness (t) must be non-negative, got {self.thickness}")

        if not math.isfinite(self.epsilon_r) or self.epsilon_r < 1:
            errors.append(f"epsilon_r must be >= 1, got {self.epsilon_r}")

        return errors

    def check(self) -> None:
        """Raise ValidationError if :meth:`validate` reports any problem."""
        errors = self.validate()
        if errors:
            raise ValidationError(
                errors,
                context=self.as_dict(),
                suggestions=[
                    "All lengths must use the same unit and be greater than zero",
                    "epsilon_r is a relative permittivity (1.0 for air, ~4.5 for FR4)",
                ],
            )

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ReducedGeometry:
    """Dimensionless description of the cross-section.

    Attributes:
        a: Half pair gap
        b: Distance from centre line to the outer strip edge
        c: Distance from centre line to the coplanar ground edge
        r: a/b
        k1: b/c
        delta: Ground-plane correction sqrt((1 - r^2) / (1 - (k1*r)^2))
    """

    a: float
    b: float
    c: float
    r: float
    k1: float
    delta: float


def reduce_geometry(params: CPWGParameters) -> ReducedGeometry:
    """Derive the edge distances and moduli from physical lengths.

    A zero strip width gives r = 1 (degenerate conductor); it is not
    special-cased and flows through as K'(1) downstream. Negative radicands
    give NaN rather than raising.
    """
    with np.errstate(all="ignore"):
        d = np.float64(params.pair_gap)
        a = d / 2
        b = a + params.strip_width
        c = b + params.ground_gap
        r = a / b
        k1 = b / c
        delta = np.sqrt((1 - r * r) / (1 - (k1 * r) ** 2))

    return ReducedGeometry(
        a=float(a),
        b=float(b),
        c=float(c),
        r=float(r),
        k1=float(k1),
        delta=float(delta),
    )
