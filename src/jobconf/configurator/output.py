"""
Output Configurator.

Typed accessors for the settings an output format needs on the worker side:
the default table, the batch writer tuning and two feature toggles.

The submitting process calls the setters while preparing a job; the workers
call the getters on the store that was shipped with the job. Every function
takes the owning consumer and the store explicitly, nothing is read from or
written to process-wide state.
"""

from typing import Callable, Mapping, Optional, TypeVar

from ..conf import ConfigurationStore
from ..enum import ClientProperty, Durability, Features, WriteOpts
from ..errors import ConfigurationParseError
from ..logging_config import get_logger
from ..models import BatchWriterConfig
from .base import get_client_properties
from .keys import ConsumerIdentity, enum_to_conf_key

# Set the hierarchical logger
logger = get_logger(__name__)

_T = TypeVar("_T")


def set_default_table_name(
    implementing_class: ConsumerIdentity,
    conf: ConfigurationStore,
    table_name: Optional[str],
) -> None:
    """
    Sets the table to write to when a mutation is emitted without a table name.

    Passing `None` leaves the store untouched: a previously stored name is kept.

    Args:
        implementing_class: The consumer owning the setting.
        conf: The configuration store to write into.
        table_name: The default table, or None.
    """
    if table_name is not None:
        key = enum_to_conf_key(implementing_class, WriteOpts.DEFAULT_TABLE_NAME)
        conf.set(key, table_name)
        logger.debug(f"Set '{key}' = '{table_name}'")


def get_default_table_name(
    implementing_class: ConsumerIdentity, conf: ConfigurationStore
) -> Optional[str]:
    """Returns the default table name, or None if it was never set."""
    return conf.get(enum_to_conf_key(implementing_class, WriteOpts.DEFAULT_TABLE_NAME))


def _parse_property(
    properties: Mapping[str, Optional[str]],
    prop: ClientProperty,
    parse: Callable[[str], _T],
) -> Optional[_T]:
    raw = properties.get(prop.value)
    if raw is None:
        return None
    if not isinstance(raw, str):
        logger.error(f"Client property '{prop.value}' is not a string: {raw!r}")
        raise ConfigurationParseError(
            f"Client property '{prop.value}' must be a string, got {type(raw).__name__}",
            key=prop.value,
            value=repr(raw),
        )
    try:
        return parse(raw)
    except ValueError as e:
        logger.error(f"Invalid value for client property '{prop.value}': '{raw}'")
        raise ConfigurationParseError(
            f"Invalid value for client property '{prop.value}': '{raw}', err: '{e}'",
            key=prop.value,
            value=raw,
        ) from e


def _parse_int(raw: str) -> int:
    # int() would also accept digit separators such as '1_000'
    text = raw.strip()
    if not text.lstrip("+-").isdigit():
        raise ValueError(f"not an integer: '{raw}'")
    return int(text)


def get_batch_writer_options(
    implementing_class: ConsumerIdentity,
    conf: ConfigurationStore,
    client_properties: Optional[Mapping[str, Optional[str]]] = None,
) -> BatchWriterConfig:
    """
    Rebuilds the batch writer settings from the consumer's client properties.

    The record starts with every field at its default; each property that is
    present overwrites its field. The time properties are in seconds.

    Args:
        implementing_class: The consumer owning the setting.
        conf: The configuration store to read from.
        client_properties: An already resolved property bundle. When None, the
            bundle stored with
            [`set_client_properties()`][jobconf.configurator.set_client_properties]
            is used.

    Returns:
        The fully populated settings record.

    Raises:
        ConfigurationParseError: If a property holds a malformed integer, an
            out of range value or an unknown durability name.
    """
    if client_properties is None:
        client_properties = get_client_properties(implementing_class, conf)

    bw_config = BatchWriterConfig()

    durability = _parse_property(
        client_properties, ClientProperty.BATCH_WRITER_DURABILITY, Durability.from_string
    )
    if durability is not None:
        bw_config.set_durability(durability)

    latency = _parse_property(
        client_properties, ClientProperty.BATCH_WRITER_MAX_LATENCY_SEC, _parse_int
    )
    if latency is not None:
        _apply(bw_config.set_max_latency, latency, ClientProperty.BATCH_WRITER_MAX_LATENCY_SEC)

    memory = _parse_property(
        client_properties, ClientProperty.BATCH_WRITER_MAX_MEMORY_BYTES, _parse_int
    )
    if memory is not None:
        _apply(bw_config.set_max_memory, memory, ClientProperty.BATCH_WRITER_MAX_MEMORY_BYTES)

    timeout = _parse_property(
        client_properties, ClientProperty.BATCH_WRITER_MAX_TIMEOUT_SEC, _parse_int
    )
    if timeout is not None:
        _apply(bw_config.set_timeout, timeout, ClientProperty.BATCH_WRITER_MAX_TIMEOUT_SEC)

    threads = _parse_property(
        client_properties, ClientProperty.BATCH_WRITER_MAX_WRITE_THREADS, _parse_int
    )
    if threads is not None:
        _apply(
            bw_config.set_max_write_threads,
            threads,
            ClientProperty.BATCH_WRITER_MAX_WRITE_THREADS,
        )

    return bw_config


def _apply(setter: Callable[[int], BatchWriterConfig], value: int, prop: ClientProperty):
    # Range checks of the record surface as parse errors of the property
    try:
        setter(value)
    except ValueError as e:
        logger.error(f"Out of range value for client property '{prop.value}': {value}")
        raise ConfigurationParseError(
            f"Out of range value for client property '{prop.value}': {value}, err: '{e}'",
            key=prop.value,
            value=str(value),
        ) from e


def set_create_tables(
    implementing_class: ConsumerIdentity, conf: ConfigurationStore, enable_feature: bool
) -> None:
    """
    Sets the directive to create new tables, as necessary.

    By default, this feature is **disabled**.
    """
    key = enum_to_conf_key(implementing_class, Features.CAN_CREATE_TABLES)
    conf.set_boolean(key, enable_feature)
    logger.debug(f"Set '{key}' = {enable_feature}")


def can_create_tables(
    implementing_class: ConsumerIdentity, conf: ConfigurationStore
) -> bool:
    """Returns True if tables may be created as needed, False if unset."""
    return conf.get_boolean(
        enum_to_conf_key(implementing_class, Features.CAN_CREATE_TABLES), False
    )


def set_simulation_mode(
    implementing_class: ConsumerIdentity, conf: ConfigurationStore, enable_feature: bool
) -> None:
    """
    Sets the directive to run the job in simulation mode, where no output is
    produced. Useful for testing.

    By default, this feature is **disabled**.
    """
    key = enum_to_conf_key(implementing_class, Features.SIMULATION_MODE)
    conf.set_boolean(key, enable_feature)
    logger.debug(f"Set '{key}' = {enable_feature}")


def get_simulation_mode(
    implementing_class: ConsumerIdentity, conf: ConfigurationStore
) -> bool:
    """Returns True if simulation mode is enabled, False if unset."""
    return conf.get_boolean(
        enum_to_conf_key(implementing_class, Features.SIMULATION_MODE), False
    )
