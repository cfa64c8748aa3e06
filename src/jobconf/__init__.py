"""
jobconf - namespaced job configuration for distributed output formats.

Settings are written by the job-submission process into a flat, string-keyed
configuration store and read back by worker processes after the store has been
shipped with the job:

- **Key encoding**: every key is prefixed by the consumer that owns it, so
  several consumers can share one store.
- **Output configurator**: typed accessors for the default table, the batch
  writer tuning and feature toggles.
- **Job descriptor**: Arrow IPC transport of the store itself.

Example:
    >>> from jobconf import JobConfiguration, configure_output, can_create_tables
    >>> conf = configure_output("myjobs.Output").default_table("t").create_tables().store(JobConfiguration())
    >>> can_create_tables("myjobs.Output", conf)
    True
"""

# --- Store ---
from .conf import (
    ConfigurationStore as ConfigurationStore,
    JobConfiguration as JobConfiguration,
    dumps as dumps,
    loads as loads,
)

# --- Configurators ---
from .configurator import (
    enum_to_conf_key as enum_to_conf_key,
    set_client_properties as set_client_properties,
    get_client_properties as get_client_properties,
    set_default_table_name as set_default_table_name,
    get_default_table_name as get_default_table_name,
    get_batch_writer_options as get_batch_writer_options,
    set_create_tables as set_create_tables,
    can_create_tables as can_create_tables,
    set_simulation_mode as set_simulation_mode,
    get_simulation_mode as get_simulation_mode,
    OutputConfigBuilder as OutputConfigBuilder,
    configure_output as configure_output,
)

# --- Models ---
from .models import BatchWriterConfig as BatchWriterConfig

# --- Enums ---
from .enum import (
    ClientOpts as ClientOpts,
    ClientProperty as ClientProperty,
    Durability as Durability,
    Features as Features,
    WriteOpts as WriteOpts,
)

# --- Errors ---
from .errors import (
    ConfigurationParseError as ConfigurationParseError,
    ConfigurationUsageError as ConfigurationUsageError,
)

from .logging_config import (
    get_logger as get_logger,
    setup_sdk_logging as setup_sdk_logging,
)

__all__ = [
    # Store
    "ConfigurationStore",
    "JobConfiguration",
    "dumps",
    "loads",
    # Configurators
    "enum_to_conf_key",
    "set_client_properties",
    "get_client_properties",
    "set_default_table_name",
    "get_default_table_name",
    "get_batch_writer_options",
    "set_create_tables",
    "can_create_tables",
    "set_simulation_mode",
    "get_simulation_mode",
    "OutputConfigBuilder",
    "configure_output",
    # Models
    "BatchWriterConfig",
    # Enums
    "ClientOpts",
    "ClientProperty",
    "Durability",
    "Features",
    "WriteOpts",
    # Errors
    "ConfigurationParseError",
    "ConfigurationUsageError",
    # Logging
    "get_logger",
    "setup_sdk_logging",
]


# --- Set up the top-level logger for the library ---

from logging import NullHandler

_logger = get_logger()
_logger.addHandler(NullHandler())
