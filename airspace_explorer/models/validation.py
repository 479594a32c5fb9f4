"""
Validation of airspace datasets.

A dataset snapshot is validated once when it is built or loaded; the
service never serves a snapshot that failed validation.
"""

from dataclasses import dataclass, field
from typing import List, Any, Optional, Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .shape import AirspaceShape

# Generated centers are clamped to this latitude band
MAX_ABS_LATITUDE = 85.0
MAX_ABS_LONGITUDE = 180.0


class AirspaceError(Exception):
    """Base class for all airspace explorer errors."""


class AirspaceNotFoundError(AirspaceError, LookupError):
    """Raised when no airspace matches the requested id."""

    def __init__(self, airspace_id: str):
        super().__init__(f"Airspace not found: {airspace_id}")
        self.airspace_id = airspace_id


class DatasetLoadError(AirspaceError):
    """Raised when the dataset file cannot be read or parsed."""


@dataclass
class ValidationError:
    """Represents a single validation error."""

    field: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.field}: {self.message} (value: {self.value})"
        return f"{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, field: str, message: str, value: Any = None) -> None:
        self.errors.append(ValidationError(field, message, value))

    def get_error_messages(self) -> List[str]:
        return [str(error) for error in self.errors]

    def __str__(self) -> str:
        if self.is_valid:
            return "Valid"
        return f"Invalid ({len(self.errors)} errors)"


class DatasetValidationError(DatasetLoadError):
    """Raised when a dataset snapshot fails validation."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.validation_result = validation_result

    def __str__(self) -> str:
        if self.validation_result:
            messages = self.validation_result.get_error_messages()
            shown = "\n  - ".join(messages[:10])
            more = f"\n  ... and {len(messages) - 10} more" if len(messages) > 10 else ""
            return f"{super().__str__()}\nErrors:\n  - {shown}{more}"
        return super().__str__()


def validate_shapes(shapes: Iterable['AirspaceShape']) -> ValidationResult:
    """
    Check dataset-level invariants.

    Per-record invariants (dimensions matching the shape kind, colour
    encoding, opacity range) are enforced when the records are built; this
    covers what only shows across records or the generator's clamping.

    Args:
        shapes: Records to validate

    Returns:
        ValidationResult listing every problem found
    """
    result = ValidationResult()
    seen = set()

    for shape in shapes:
        if shape.id in seen:
            result.add_error('id', 'duplicate airspace id', shape.id)
        seen.add(shape.id)

        if abs(shape.center.latitude) > MAX_ABS_LATITUDE:
            result.add_error(f'{shape.id}.center.latitude', 'outside [-85, 85]', shape.center.latitude)
        if abs(shape.center.longitude) > MAX_ABS_LONGITUDE:
            result.add_error(f'{shape.id}.center.longitude', 'outside [-180, 180]', shape.center.longitude)

    return result
