"""
Custom exception classes.
"""
from typing import Optional


class InvalidConfiguration(ValueError):
    """Rejected run configuration; raised before any simulation work starts."""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message
