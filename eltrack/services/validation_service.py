"""Service for validating rides before they are recorded."""

from eltrack.exceptions import ValidationError
from eltrack.models import ElevatorType, RideValidation, ValidationIssue

SAME_FLOOR_MESSAGE = "Starting and ending floors cannot be the same"


class ValidationService:
    """Caller-side ride validation (stateless service).

    The stores never call this; equal floors are a form rule, not a
    property of stored entries.
    """

    def validate_ride(
        self,
        starting_floor: str,
        ending_floor: str,
        elevator: ElevatorType | str | None,
    ) -> RideValidation:
        """Check a ride form.

        Returns:
            RideValidation listing every problem found

        Note:
            This method never raises exceptions - all problems are captured
            in the RideValidation.
        """
        issues = []
        start = (starting_floor or "").strip()
        end = (ending_floor or "").strip()

        if not start:
            issues.append(ValidationIssue("starting_floor", "ERROR", "Select a starting floor"))
        if not end:
            issues.append(ValidationIssue("ending_floor", "ERROR", "Select an ending floor"))
        if start and end and start == end:
            issues.append(ValidationIssue("ending_floor", "ERROR", SAME_FLOOR_MESSAGE))

        if elevator is None or elevator == "":
            issues.append(ValidationIssue("elevator", "ERROR", "Select an elevator"))
        elif not isinstance(elevator, ElevatorType):
            try:
                ElevatorType.from_code(elevator)
            except ValueError as e:
                issues.append(ValidationIssue("elevator", "ERROR", str(e)))

        return RideValidation(issues=issues)

    def require_valid(
        self,
        starting_floor: str,
        ending_floor: str,
        elevator: ElevatorType | str | None,
    ) -> ElevatorType:
        """Validate a ride form and resolve its elevator.

        Returns:
            The selected ElevatorType

        Raises:
            ValidationError: If the ride has any error-level issue
        """
        result = self.validate_ride(starting_floor, ending_floor, elevator)
        if not result.is_valid:
            raise ValidationError("; ".join(issue.message for issue in result.get_errors()))
        if isinstance(elevator, ElevatorType):
            return elevator
        return ElevatorType.from_code(elevator)
