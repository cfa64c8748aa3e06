from enum import Enum

from ..errors import ConfigurationParseError


class Durability(Enum):
    """
    Defines how hard the storage server works to persist a mutation before
    acknowledging it to the batch writer.
    """

    DEFAULT = "default"  # Use the durability configured on the target table.
    NONE = "none"  # Do not write to the write-ahead log at all.
    LOG = "log"  # Write to the write-ahead log, no flush.
    FLUSH = "flush"  # Flush the write-ahead log to the file system.
    SYNC = "sync"  # Sync the write-ahead log to disk.

    @classmethod
    def from_string(cls, value: str) -> "Durability":
        """
        Case-insensitive lookup by member name (e.g. "sync", "SYNC", " Sync ").

        Raises:
            ConfigurationParseError: If `value` does not name a member.
        """
        try:
            return cls[value.strip().upper()]
        except KeyError as e:
            raise ConfigurationParseError(
                f"Unknown durability '{value}'. Expected one of: "
                f"{[m.name for m in cls]}",
                value=value,
            ) from e
