"""Physical constants for the coplanar waveguide calculations."""

from __future__ import annotations

import math

# Physical constants
SPEED_OF_LIGHT = 299792458  # m/s

# Free-space wave impedance, 120*pi convention used by the closed-form CPW equations
ETA_0 = 120 * math.pi  # Ω
