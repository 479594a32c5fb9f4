from .base import SourceInterface
from .synthetic import SyntheticAirspaceSource, ReferenceLocation, REFERENCE_LOCATIONS

__all__ = [
    'SourceInterface',
    'SyntheticAirspaceSource',
    'ReferenceLocation',
    'REFERENCE_LOCATIONS',
]
