"""
Batch Writer Configuration Module.

This module defines the settings record that tunes the storage client's batch
writer: how durable each write is, how long and how much data is buffered
before a flush, how long a write may take, and how many threads send data.
"""

import pydantic
from pydantic import ConfigDict, Field

from ..enum import Durability

_INT64_MAX = 2**63 - 1
_INT32_MAX = 2**31 - 1

UNBOUNDED_MS = _INT64_MAX
"""Sentinel for 'no limit' on the time fields (the largest signed 64-bit value)."""

DEFAULT_MAX_LATENCY_MS = 2 * 60 * 1000
DEFAULT_MAX_MEMORY_BYTES = 50 * 1024 * 1024
DEFAULT_TIMEOUT_MS = UNBOUNDED_MS
DEFAULT_MAX_WRITE_THREADS = 3


def _seconds_to_ms(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"Negative {what} not allowed: {value}")
    if value > _INT64_MAX:
        raise ValueError(f"{what.capitalize()} exceeds the 64-bit range: {value}")
    if value == 0:
        return UNBOUNDED_MS
    return min(value * 1000, UNBOUNDED_MS)


class BatchWriterConfig(pydantic.BaseModel):
    """
    Tuning parameters for a storage batch writer.

    Every field is optional in the sense that it starts at a documented default;
    the worker-side reconstruction in
    [`get_batch_writer_options()`][jobconf.configurator.get_batch_writer_options]
    only overwrites the fields for which a client property was provided.

    Time fields are held in milliseconds. The seconds-based setters convert for
    you and map `0` to "no limit" ([`UNBOUNDED_MS`][jobconf.models.batch_writer_config.UNBOUNDED_MS]).

    Example:
        ```python
        cfg = BatchWriterConfig()
        cfg.set_max_write_threads(7)
        cfg.set_max_latency(30)  # seconds
        assert cfg.max_latency_ms == 30_000
        ```
    """

    model_config = ConfigDict(validate_assignment=True)

    durability: Durability = Durability.DEFAULT
    """Durability requested for every mutation sent by the writer."""

    max_latency_ms: int = Field(default=DEFAULT_MAX_LATENCY_MS, ge=0, le=_INT64_MAX)
    """Maximum time a mutation may sit in the buffer before it is sent."""

    max_memory_bytes: int = Field(default=DEFAULT_MAX_MEMORY_BYTES, ge=0, le=_INT64_MAX)
    """Size of the mutation buffer. When exceeded, the buffer is flushed."""

    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, ge=0, le=_INT64_MAX)
    """Maximum time to wait for a write to succeed before failing."""

    max_write_threads: int = Field(
        default=DEFAULT_MAX_WRITE_THREADS, gt=0, le=_INT32_MAX
    )
    """Number of threads used to send mutations to the servers."""

    def set_durability(self, durability: Durability) -> "BatchWriterConfig":
        self.durability = durability
        return self

    def set_max_latency(self, seconds: int) -> "BatchWriterConfig":
        """
        Sets the maximum buffering latency.

        Args:
            seconds: Latency in seconds. `0` means no limit.

        Raises:
            ValueError: If `seconds` is negative.
        """
        self.max_latency_ms = _seconds_to_ms(seconds, "max latency")
        return self

    def set_max_memory(self, max_memory_bytes: int) -> "BatchWriterConfig":
        self.max_memory_bytes = max_memory_bytes
        return self

    def set_timeout(self, seconds: int) -> "BatchWriterConfig":
        """
        Sets the write timeout.

        Args:
            seconds: Timeout in seconds. `0` means no timeout.

        Raises:
            ValueError: If `seconds` is negative.
        """
        self.timeout_ms = _seconds_to_ms(seconds, "timeout")
        return self

    def set_max_write_threads(self, threads: int) -> "BatchWriterConfig":
        """
        Raises:
            ValueError: If `threads` is not positive or exceeds the 32-bit range.
        """
        if threads <= 0:
            raise ValueError(f"Max threads must be positive: {threads}")
        if threads > _INT32_MAX:
            raise ValueError(f"Max threads exceeds the 32-bit range: {threads}")
        self.max_write_threads = threads
        return self
