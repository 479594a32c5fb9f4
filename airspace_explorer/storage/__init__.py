from .json_storage import JsonDatasetStorage

__all__ = ['JsonDatasetStorage']
