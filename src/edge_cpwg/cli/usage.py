"""Usage text and cross-section diagram shown when no geometry is given."""

from __future__ import annotations

__all__ = ["PROG", "usage_text"]

PROG = "edge_coupled_cpwg"

EXAMPLE_ARGS = ("0.2", "0.41", "0.2", "0.035", "1.593", "4.5")

DIAGRAM = r"""
                      / /   /            / /   /            / /   /
                     / /   /            / /   /            / /   /
                    / /   /            / /   /            / /   /
                   / /   /            / /   /            / /   /
                  / /   /            / /   /            / /   /
-----------------+ /   +------------+ /   +------------+ /   +----------------
  Ground Plane   |/    |   Diff -   |/    |   Diff +   |/    | Ground Plane   }t
-----------------+-----+------------+-----+------------+-----+----------------
 . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . .  ^
. . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . |
 . . . . . . . . . . . . . . . . .Dielectric . . . . . . . . . . . . . . . .  |h
. . . . . . . . . . . . . . . . . . . Er. . . . . . . . . . . . . . . . . . . |
 . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . .  |
. . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . . v
------------------------------------------------------------------------------
                           G r o u n d   P l a n e

                 |     |            |     |            |     |
                 |<--->|<---------->|<--->|<---------->|<--->|
                    W        S         d         S        W
"""


def usage_text(prog: str = PROG) -> str:
    """Build the full usage screen."""
    return "\n".join(
        [
            "",
            "Conductor-backed edge coupled coplanar waveguides calculator",
            "",
            "Based on:",
            'Rainee N. Simons "Coplanar waveguide Circuits, Components, and Systems", 2001, Ch. 7.4',
            'Brian C. Wadell "Transmission Line Design Handbook", 1991, Ch. 4.4.3',
            "",
            "Usage:",
            f"{prog} [--format text|json|table] [--precision N] [--strict] [-v] d S W t h Er",
            "",
            "All lengths in the same unit. t is accepted but does not enter the model.",
            "",
            "Example:",
            f"{prog} {' '.join(EXAMPLE_ARGS)}",
            DIAGRAM,
        ]
    )
