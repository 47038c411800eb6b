"""Data models for ride validation."""

from dataclasses import dataclass, field


@dataclass
class ValidationIssue:
    """A single validation issue."""

    field_name: str  # Form field that failed (e.g., "starting_floor", "elevator")
    severity: str  # "ERROR" or "WARNING"
    message: str  # Description of the issue

    def __str__(self) -> str:
        return f"[{self.severity}] {self.field_name}: {self.message}"


@dataclass
class RideValidation:
    """Result of validating a ride before it is recorded."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the ride can be recorded."""
        return not self.get_errors()

    def get_errors(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [issue for issue in self.issues if issue.severity == "ERROR"]

    def get_warnings(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [issue for issue in self.issues if issue.severity == "WARNING"]
