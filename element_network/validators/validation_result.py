"""
Outcome of an audit or a batch build.
"""

from typing import Any, Dict, List


class ValidationResult:
    """Collects error messages; any error makes the result invalid."""

    def __init__(self):
        self.is_valid = True
        self.errors: List[str] = []
        self.details: Dict[str, Any] = {}

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.is_valid = False

    def __str__(self) -> str:
        status = "VALID" if self.is_valid else "INVALID"
        return f"ValidationResult({status}, errors={len(self.errors)})"
