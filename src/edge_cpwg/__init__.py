"""
edge-cpwg: closed-form calculator for conductor-backed edge-coupled
coplanar waveguide pairs.

Computes even/odd-mode effective permittivity and the even, odd,
single-ended, differential and common-mode impedances of two coupled
strips between coplanar grounds over a grounded substrate, using the
conformal-mapping model of Simons and Wadell.

Modules:
    physics: Geometry reduction, elliptic integrals, backing correction, mode synthesis
    config: TOML configuration (project and user files)
    exceptions: Error hierarchy with context and suggestions
    cli: The ``edge_coupled_cpwg`` command

Quick Start::

    from edge_cpwg import CPWGParameters, calculate

    result = calculate(CPWGParameters(0.2, 0.41, 0.2, 0.035, 1.593, 4.5))
    print(f"Zdiff = {result.zdiff:.1f}Ω")
"""

__version__ = "0.1.0"

from edge_cpwg import log as _log  # noqa: F401  (installs the package NullHandler)
from edge_cpwg.exceptions import EdgeCpwgError, ValidationError
from edge_cpwg.physics import (
    CoupledCPWGResult,
    CPWGParameters,
    EdgeCoupledCPWG,
    calculate,
)

__all__ = [
    # Version
    "__version__",
    # Calculation
    "CPWGParameters",
    "CoupledCPWGResult",
    "EdgeCoupledCPWG",
    "calculate",
    # Errors
    "EdgeCpwgError",
    "ValidationError",
]
