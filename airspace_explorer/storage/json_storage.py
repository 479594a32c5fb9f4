#!/usr/bin/env python3

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from ..models.airspace_dataset import AirspaceDataset
from ..models.validation import DatasetLoadError

logger = logging.getLogger(__name__)


class JsonDatasetStorage:
    """
    File storage for an AirspaceDataset as a single JSON document.

    The document layout is ``{"airspaces": [...]}``, one entry per shape in
    the camelCase wire format. Writes go to a temporary file next to the
    target and are moved into place, so readers never see a partial file.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the storage.

        Args:
            path: Path to the JSON dataset file
        """
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, dataset: AirspaceDataset, indent: int = 2) -> None:
        """
        Write the dataset, replacing any existing file atomically.

        Args:
            dataset: Dataset to serialize
            indent: JSON indentation
        """
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=str(directory), prefix=f".{self.path.name}.", suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(dataset.to_dict(), f, indent=indent)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.info(f"Saved {len(dataset)} airspaces to {self.path}")

    def load(self) -> AirspaceDataset:
        """
        Load the dataset from disk.

        Returns:
            The loaded, validated dataset

        Raises:
            DatasetLoadError: If the file is missing, is not valid JSON, or
                holds invalid records
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise DatasetLoadError(f"Dataset file not found: {self.path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetLoadError(f"Cannot read dataset file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise DatasetLoadError(f"Dataset file {self.path} is not valid JSON: {e}") from e

        dataset = AirspaceDataset.from_dict(data)
        logger.info(f"Loaded {len(dataset)} airspaces from {self.path}")
        return dataset
