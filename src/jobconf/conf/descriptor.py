"""
Job Descriptor Transport.

Encodes a [`JobConfiguration`][jobconf.conf.JobConfiguration] as an Arrow
table with one row per key, and as Arrow IPC stream bytes so that the store
can be shipped verbatim alongside a job and reopened by the workers.
"""

import pyarrow as pa

from ..errors import ConfigurationParseError
from ..logging_config import get_logger
from .store import JobConfiguration

# Set the hierarchical logger
logger = get_logger(__name__)

DESCRIPTOR_SCHEMA = pa.schema(
    [
        pa.field("key", pa.string(), nullable=False),
        pa.field("value", pa.string(), nullable=False),
    ]
)


def to_arrow_table(conf: JobConfiguration) -> pa.Table:
    """Returns the store as a two-column (`key`, `value`) table sorted by key."""
    keys = sorted(conf)
    return pa.Table.from_arrays(
        [
            pa.array(keys, type=pa.string()),
            pa.array([conf.get(k) for k in keys], type=pa.string()),
        ],
        schema=DESCRIPTOR_SCHEMA,
    )


def from_arrow_table(table: pa.Table) -> JobConfiguration:
    """
    Rebuilds a store from a table produced by `to_arrow_table()`.

    Raises:
        ConfigurationParseError: If the table does not have exactly the
            string columns `key` and `value`, or holds null entries.
    """
    if table.schema.names != DESCRIPTOR_SCHEMA.names or any(
        not pa.types.is_string(f.type) for f in table.schema
    ):
        raise ConfigurationParseError(
            f"Unexpected job descriptor schema: {table.schema}"
        )
    if table.column("key").null_count or table.column("value").null_count:
        raise ConfigurationParseError("Job descriptor contains null keys or values")

    return JobConfiguration(
        dict(zip(table.column("key").to_pylist(), table.column("value").to_pylist()))
    )


def dumps(conf: JobConfiguration) -> bytes:
    """Serializes the store into Arrow IPC stream bytes."""
    table = to_arrow_table(conf)
    sink = pa.BufferOutputStream()
    with pa.ipc.new_stream(sink, table.schema) as writer:
        writer.write_table(table)
    data = sink.getvalue().to_pybytes()
    logger.debug(f"Serialized job descriptor: {len(conf)} keys, {len(data)} bytes")
    return data


def loads(data: bytes) -> JobConfiguration:
    """
    Reopens a store serialized with `dumps()`.

    Raises:
        ConfigurationParseError: If `data` is not a valid job descriptor.
    """
    try:
        with pa.ipc.open_stream(pa.py_buffer(data)) as reader:
            table = reader.read_all()
    except pa.ArrowException as e:
        raise ConfigurationParseError(f"Malformed job descriptor, err: '{e}'") from e
    return from_arrow_table(table)
