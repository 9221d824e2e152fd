# contractfn/core/exceptions.py
"""
Standard exception hierarchy for contractfn.

All library errors inherit from ContractError, so callers can catch the whole
family with one clause. Validation failures additionally subclass ValueError
and definition errors subclass TypeError, so generic handlers keep working.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence


class ContractError(Exception):
    """Base error for all contractfn operations."""

    pass


class ContractDefinitionError(ContractError, TypeError):
    """Raised when a contract is built from invalid parts."""

    pass


class ValidationError(ContractError, ValueError):
    """
    A value failed its schema.

    Attributes:
        issues: Structured issue list from the validation engine. Each issue is
            a dict with at least "loc", "msg" and "type" keys.
        boundary: "args" or "return" when raised by a checked function's gate,
            None when raised by validate() directly.
        function_name: Name of the checked function, when raised from a gate.
    """

    def __init__(
        self,
        issues: Sequence[Dict[str, Any]],
        boundary: Optional[str] = None,
        function_name: Optional[str] = None,
    ):
        self.issues: List[Dict[str, Any]] = list(issues)
        self.boundary = boundary
        self.function_name = function_name
        super().__init__(self._format())

    @property
    def messages(self) -> List[str]:
        """Human-readable message of every issue, in order."""
        return [issue.get("msg", "Invalid value") for issue in self.issues]

    def with_context(self, boundary: str, function_name: str) -> "ValidationError":
        """Return a copy of this error tagged with a gate and function name."""
        return type(self)(self.issues, boundary=boundary, function_name=function_name)

    def _format(self) -> str:
        issue_lines = []
        for issue in self.issues:
            loc = ".".join(str(part) for part in issue.get("loc", ()))
            msg = issue.get("msg", "Invalid value")
            issue_lines.append(f"{loc}: {msg}" if loc else msg)

        if self.boundary is not None:
            header = f"Invalid {self.boundary} for {self.function_name or '<function>'}"
        elif len(issue_lines) == 1:
            return issue_lines[0]
        else:
            header = "Validation failed"

        return "\n".join([header + ":"] + [f"  - {line}" for line in issue_lines])


__all__ = [
    "ContractError",
    "ContractDefinitionError",
    "ValidationError",
]
