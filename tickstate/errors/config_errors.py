"""Configuration error classifications."""

from pathlib import Path
from typing import Optional, List


class ConfigurationError(Exception):
    """Configuration file could not be read or has the wrong shape."""

    def __init__(self, message: str, path: Optional[Path] = None,
                 errors: Optional[List[str]] = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []
        self.recoverable = False
