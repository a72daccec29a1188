"""Shared types used across mux_builder modules."""

from dataclasses import dataclass, field
from typing import List


class InvalidMergeRequest(ValueError):
    """Raised by ValidationResult.raise_for_errors() when a request has errors."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


@dataclass
class ValidationResult:
    """Errors block a merge; warnings are informational."""

    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)
        self.valid = False

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def raise_for_errors(self) -> None:
        if not self.valid:
            raise InvalidMergeRequest(self.errors)
