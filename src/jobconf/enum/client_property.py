from enum import StrEnum


class ClientProperty(StrEnum):
    """
    Names of the client properties that tune the batch writer.

    A resolved client-property bundle maps these names to raw string values.
    The bundle is produced by the storage client configuration, not by this
    library, which only reads it.
    """

    BATCH_WRITER_DURABILITY = "batch.writer.durability"
    """Durability name, see [`Durability`][jobconf.enum.Durability]."""

    BATCH_WRITER_MAX_LATENCY_SEC = "batch.writer.max.latency.sec"
    """Maximum time a mutation is buffered before being sent, in seconds."""

    BATCH_WRITER_MAX_MEMORY_BYTES = "batch.writer.max.memory.bytes"
    """Maximum size of the mutation buffer, in bytes."""

    BATCH_WRITER_MAX_TIMEOUT_SEC = "batch.writer.max.timeout.sec"
    """Maximum time to wait for a write to succeed, in seconds."""

    BATCH_WRITER_MAX_WRITE_THREADS = "batch.writer.max.write.threads"
    """Maximum number of threads sending mutations to the servers."""
