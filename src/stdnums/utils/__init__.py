"""Common utility functions for stdnums."""

from stdnums.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
