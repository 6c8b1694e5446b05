"""Even/odd-mode analysis of a conductor-backed edge-coupled CPW pair.

Combines the reduced geometry, the elliptic ratios and the backing-corrected
moduli into effective permittivities and impedances for both modes, then the
differential, common-mode and single-ended figures derived from them.

Example::

    from edge_cpwg.physics import CPWGParameters, calculate

    params = CPWGParameters(
        pair_gap=0.2,
        strip_width=0.41,
        ground_gap=0.2,
        thickness=0.035,
        substrate_height=1.593,
        epsilon_r=4.5,
    )
    result = calculate(params)
    print(f"Zdiff = {result.zdiff:.1f}Ω, Zcomm = {result.zcommon:.1f}Ω")

    # Or with a fixed substrate, varying the trace geometry
    pair = EdgeCoupledCPWG(substrate_height=1.593, epsilon_r=4.5, thickness=0.035)
    result = pair.analyze(pair_gap=0.2, strip_width=0.41, ground_gap=0.2)

References:
    Rainee N. Simons, "Coplanar Waveguide Circuits, Components, and
    Systems", Wiley, 2001, Ch. 7.4.
    Brian C. Wadell, "Transmission Line Design Handbook", Artech House,
    1991, Ch. 4.4.3.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from .backing import BackingModuli, backing_moduli
from .constants import ETA_0, SPEED_OF_LIGHT
from .elliptic import k_over_k_prime
from .geometry import CPWGParameters, ReducedGeometry, reduce_geometry

__all__ = ["CoupledCPWGResult", "EdgeCoupledCPWG", "calculate", "synthesize_modes"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoupledCPWGResult:
    """Result of an edge-coupled CPWG analysis.

    Attributes:
        epsilon_eff_even: Even-mode effective permittivity (Er_even)
        epsilon_eff_odd: Odd-mode effective permittivity (Er_odd)
        z0_even: Even-mode characteristic impedance (Ω)
        z0_odd: Odd-mode characteristic impedance (Ω)
        z0: Single-ended impedance sqrt(Zeven * Zodd) (Ω)
        zdiff: Differential impedance 2 * Zodd (Ω)
        zcommon: Common-mode impedance Zeven / 2 (Ω)
        parameters: Inputs the result was computed from, if known
        geometry: Reduced geometry, if known
        backing: Backing-corrected moduli, if known
    """

    epsilon_eff_even: float
    epsilon_eff_odd: float
    z0_even: float
    z0_odd: float
    z0: float
    zdiff: float
    zcommon: float
    parameters: CPWGParameters | None = None
    geometry: ReducedGeometry | None = None
    backing: BackingModuli | None = None

    @property
    def coupling_coefficient(self) -> float:
        """Coupling factor k = (Z0e - Z0o)/(Z0e + Z0o)."""
        total = self.z0_even + self.z0_odd
        if total == 0:
            return math.nan
        return (self.z0_even - self.z0_odd) / total

    @property
    def phase_velocity_even(self) -> float:
        """Even-mode phase velocity in m/s."""
        if math.isnan(self.epsilon_eff_even):
            return math.nan
        if self.epsilon_eff_even <= 0:
            return SPEED_OF_LIGHT
        return SPEED_OF_LIGHT / math.sqrt(self.epsilon_eff_even)

    @property
    def phase_velocity_odd(self) -> float:
        """Odd-mode phase velocity in m/s."""
        if math.isnan(self.epsilon_eff_odd):
            return math.nan
        if self.epsilon_eff_odd <= 0:
            return SPEED_OF_LIGHT
        return SPEED_OF_LIGHT / math.sqrt(self.epsilon_eff_odd)

    @property
    def is_finite(self) -> bool:
        """True if all seven outputs are finite numbers."""
        return all(math.isfinite(value) for value in self.outputs().values())

    def outputs(self) -> dict[str, float]:
        """The seven reported quantities, keyed by their report labels."""
        return {
            "Er_even": self.epsilon_eff_even,
            "Er_odd": self.epsilon_eff_odd,
            "Zeven": self.z0_even,
            "Zodd": self.z0_odd,
            "Z0": self.z0,
            "Zdiff": self.zdiff,
            "Zcomm": self.zcommon,
        }

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "epsilon_eff_even": self.epsilon_eff_even,
            "epsilon_eff_odd": self.epsilon_eff_odd,
            "z0_even_ohm": self.z0_even,
            "z0_odd_ohm": self.z0_odd,
            "z0_ohm": self.z0,
            "zdiff_ohm": self.zdiff,
            "zcommon_ohm": self.zcommon,
            "coupling_coefficient": self.coupling_coefficient,
        }
        if self.geometry is not None:
            data["geometry"] = dataclasses.asdict(self.geometry)
        if self.backing is not None:
            data["moduli"] = {"ke": self.backing.ke, "ko": self.backing.ko}
        return data

    def __repr__(self) -> str:
        return (
            f"CoupledCPWGResult(Zdiff={self.zdiff:.1f}Ω, "
            f"Zcomm={self.zcommon:.1f}Ω, Z0={self.z0:.1f}Ω, "
            f"εeff_even={self.epsilon_eff_even:.3f}, εeff_odd={self.epsilon_eff_odd:.3f})"
        )


def synthesize_modes(
    epsilon_r: float,
    k1: float,
    delta: float,
    ke: float,
    ko: float,
) -> CoupledCPWGResult:
    """Effective permittivities and impedances of both modes.

    Args:
        epsilon_r: Substrate relative permittivity
        k1: Ratio b/c from the reduced geometry
        delta: Ground-plane correction from the reduced geometry
        ke: Even-mode backing-corrected modulus
        ko: Odd-mode backing-corrected modulus

    Returns:
        CoupledCPWGResult without the input/intermediate records attached
    """
    with np.errstate(all="ignore"):
        er = np.float64(epsilon_r)

        # Air-side and dielectric-side partial capacitances, in K/K' units
        kokp_even = np.float64(k_over_k_prime(ke))
        kokp_odd = np.float64(k_over_k_prime(ko))
        kokp_delta_k1 = np.float64(k_over_k_prime(delta * k1))
        kokp_delta = np.float64(k_over_k_prime(delta))

        even_sum = 2 * kokp_even + kokp_delta_k1
        odd_sum = 2 * kokp_odd + kokp_delta

        er_even = (2 * er * kokp_even + kokp_delta_k1) / even_sum
        er_odd = (2 * er * kokp_odd + kokp_delta) / odd_sum

        z_even = ETA_0 / (np.sqrt(er_even) * even_sum)
        z_odd = ETA_0 / (np.sqrt(er_odd) * odd_sum)

        z0 = np.sqrt(z_even * z_odd)
        zdiff = z_odd * 2
        zcommon = z_even / 2

    return CoupledCPWGResult(
        epsilon_eff_even=float(er_even),
        epsilon_eff_odd=float(er_odd),
        z0_even=float(z_even),
        z0_odd=float(z_odd),
        z0=float(z0),
        zdiff=float(zdiff),
        zcommon=float(zcommon),
    )


def calculate(params: CPWGParameters) -> CoupledCPWGResult:
    """Run the full analysis for one parameter set.

    The inputs are not validated; a geometry outside 0 < a < b < c or a
    degenerate substrate propagates as NaN/inf in the result. Use
    :meth:`CPWGParameters.check` beforehand to get a diagnostic instead.

    Args:
        params: Physical inputs (``thickness`` is carried but unused)

    Returns:
        CoupledCPWGResult with inputs, reduced geometry and moduli attached
    """
    geometry = reduce_geometry(params)
    logger.debug("reduced geometry: %s", geometry)

    backing = backing_moduli(geometry.b, geometry.c, params.pair_gap, params.substrate_height)

    modes = synthesize_modes(
        epsilon_r=params.epsilon_r,
        k1=geometry.k1,
        delta=geometry.delta,
        ke=backing.ke,
        ko=backing.ko,
    )
    result = dataclasses.replace(modes, parameters=params, geometry=geometry, backing=backing)

    if not result.is_finite:
        logger.warning(
            "Non-finite result for %s; geometry is outside the model's domain", params
        )
    else:
        logger.debug("%r", result)

    return result


class EdgeCoupledCPWG:
    """Calculator bound to one substrate.

    Attributes:
        substrate_height: Dielectric thickness to the backing ground (h)
        epsilon_r: Relative permittivity of the dielectric
        thickness: Conductor thickness (t), carried into the parameters only
    """

    def __init__(self, substrate_height: float, epsilon_r: float, thickness: float = 0.0) -> None:
        """Initialize with substrate properties.

        Args:
            substrate_height: Dielectric thickness to the backing ground
            epsilon_r: Relative permittivity of the dielectric
            thickness: Conductor thickness
        """
        self.substrate_height = substrate_height
        self.epsilon_r = epsilon_r
        self.thickness = thickness

    def parameters(self, pair_gap: float, strip_width: float, ground_gap: float) -> CPWGParameters:
        """Combine a trace geometry with this substrate."""
        return CPWGParameters(
            pair_gap=pair_gap,
            strip_width=strip_width,
            ground_gap=ground_gap,
            thickness=self.thickness,
            substrate_height=self.substrate_height,
            epsilon_r=self.epsilon_r,
        )

    def analyze(self, pair_gap: float, strip_width: float, ground_gap: float) -> CoupledCPWGResult:
        """Analyze an edge-coupled pair on this substrate.

        Args:
            pair_gap: Space between the two strips (d)
            strip_width: Width of each strip (S)
            ground_gap: Space between a strip and the coplanar ground (W)

        Returns:
            CoupledCPWGResult
        """
        return calculate(self.parameters(pair_gap, strip_width, ground_gap))
