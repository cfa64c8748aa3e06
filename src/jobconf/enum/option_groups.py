"""
Option Groups.

Each enum below is a closed group of options. The group name and the member
name are both part of the derived configuration key, so members must only
ever be added, never renamed: job descriptors written by older submitters
still carry the old keys.
"""

from enum import Enum, auto


class WriteOpts(Enum):
    """Configuration keys for the batch writer."""

    DEFAULT_TABLE_NAME = auto()
    BATCH_WRITER_CONFIG = auto()


class Features(Enum):
    """Configuration keys for various features."""

    CAN_CREATE_TABLES = auto()
    SIMULATION_MODE = auto()


class ClientOpts(Enum):
    """Configuration keys for the storage client connection."""

    CLIENT_PROPS = auto()
