"""Built-in record sources.

Sources register themselves with ``netprofile.core.RecordSourceRegistry``.
"""

from .dataset import DatasetRecordSource

__all__ = ["DatasetRecordSource"]
