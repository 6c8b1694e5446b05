"""
Exception hierarchy for edge-cpwg.

The calculation core never raises for out-of-domain numbers (it returns
NaN); these exceptions belong to the boundary layers: parameter checking,
configuration and the CLI.

Example::

    from edge_cpwg.exceptions import ValidationError

    raise ValidationError(
        ["strip_width (S) must be a positive finite length, got 0.0"],
        context={"strip_width": 0.0},
        suggestions=["All lengths must use the same unit and be greater than zero"],
    )
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class EdgeCpwgError(Exception):
    """
    Base exception for all edge-cpwg errors.

    Attributes:
        context: Dictionary of contextual information (inputs, file, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ValidationError(EdgeCpwgError):
    """
    Input parameters failed validation with one or more errors.

    Collects all problems instead of failing on the first one.

    Attributes:
        errors: List of individual validation error messages
    """

    def __init__(
        self,
        errors: List[str],
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.errors = errors
        message = f"Validation failed with {len(errors)} error(s):\n"
        message += "\n".join(f"  {i + 1}. {e}" for i, e in enumerate(errors))
        super().__init__(message, context, suggestions)
