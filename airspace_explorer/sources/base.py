from abc import ABC, abstractmethod
from ..models.airspace_dataset import AirspaceDataset


class SourceInterface(ABC):
    """
    Base interface for all airspace data sources.

    A source produces a complete AirspaceDataset snapshot; sources never
    update an existing dataset.
    """

    @abstractmethod
    def build_dataset(self) -> AirspaceDataset:
        """
        Produce a dataset snapshot from this source.

        Returns:
            New AirspaceDataset
        """
        pass

    def get_source_name(self) -> str:
        """
        Get the name of this source.

        Returns:
            String identifier for this source
        """
        return self.__class__.__name__.lower()
