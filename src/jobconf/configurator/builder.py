"""
Output Configuration Builder.

Fluent entry point used by job-submission code to collect the output settings
of a consumer and write them into a job's configuration store in one go.
"""

from typing import Dict, Mapping, Optional

from ..conf import ConfigurationStore
from ..logging_config import get_logger
from .base import set_client_properties
from .keys import ConsumerIdentity, identity_name
from .output import set_create_tables, set_default_table_name, set_simulation_mode

# Set the hierarchical logger
logger = get_logger(__name__)


class OutputConfigBuilder:
    """
    Collects output settings for one consumer and stores them on demand.

    Only the settings that were explicitly given are written; everything else
    is left absent so that the workers see the documented defaults.

    Example:
        ```python
        conf = JobConfiguration()
        (
            configure_output(MyOutputFormat)
            .client_properties({"batch.writer.max.write.threads": "7"})
            .default_table("events")
            .create_tables()
            .store(conf)
        )
        ```
    """

    def __init__(self, implementing_class: ConsumerIdentity):
        # Fail at build time rather than when storing
        identity_name(implementing_class)
        self._implementing_class = implementing_class
        self._client_properties: Optional[Dict[str, str]] = None
        self._default_table: Optional[str] = None
        self._create_tables: Optional[bool] = None
        self._simulation_mode: Optional[bool] = None

    def client_properties(self, properties: Mapping[str, str]) -> "OutputConfigBuilder":
        self._client_properties = dict(properties)
        return self

    def default_table(self, table_name: str) -> "OutputConfigBuilder":
        self._default_table = table_name
        return self

    def create_tables(self, enable: bool = True) -> "OutputConfigBuilder":
        self._create_tables = enable
        return self

    def simulation_mode(self, enable: bool = True) -> "OutputConfigBuilder":
        self._simulation_mode = enable
        return self

    def store(self, conf: ConfigurationStore) -> ConfigurationStore:
        """
        Writes the collected settings into `conf`.

        Returns:
            The same store, for chaining.
        """
        if self._client_properties is not None:
            set_client_properties(self._implementing_class, conf, self._client_properties)
        set_default_table_name(self._implementing_class, conf, self._default_table)
        if self._create_tables is not None:
            set_create_tables(self._implementing_class, conf, self._create_tables)
        if self._simulation_mode is not None:
            set_simulation_mode(self._implementing_class, conf, self._simulation_mode)

        logger.info(
            f"Stored output configuration for '{identity_name(self._implementing_class)}'"
        )
        return conf


def configure_output(implementing_class: ConsumerIdentity) -> OutputConfigBuilder:
    """Shorthand for `OutputConfigBuilder(implementing_class)`."""
    return OutputConfigBuilder(implementing_class)
