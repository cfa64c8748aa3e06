"""
Error Types.

The configuration layer distinguishes two failure kinds. Absence of a setting
is never an error: getters return a documented default instead.
"""

from typing import Optional


class ConfigurationUsageError(ValueError):
    """
    Raised when the caller misuses the API, e.g. by passing a consumer identity
    that cannot be turned into a stable key prefix.
    """


class ConfigurationParseError(ValueError):
    """
    Raised when a stored or upstream value cannot be decoded into its typed form.

    Attributes:
        key: The property or configuration key holding the bad value.
        value: The raw string that failed to parse.
    """

    def __init__(self, msg: str, key: Optional[str] = None, value: Optional[str] = None):
        super().__init__(msg)
        self.key = key
        self.value = value
