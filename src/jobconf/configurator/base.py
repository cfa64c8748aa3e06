"""
Client Properties.

Stores the storage-client property bundle of a consumer inside the flat
configuration store so that workers can rebuild the client settings
(including the batch writer tuning) without further input.
"""

import json
from typing import Dict, Mapping

from ..conf import ConfigurationStore
from ..enum import ClientOpts
from ..errors import ConfigurationParseError
from ..logging_config import get_logger
from .keys import ConsumerIdentity, enum_to_conf_key

# Set the hierarchical logger
logger = get_logger(__name__)


def set_client_properties(
    implementing_class: ConsumerIdentity,
    conf: ConfigurationStore,
    properties: Mapping[str, str],
) -> None:
    """
    Stores the client properties as a JSON object string.

    Args:
        implementing_class: The consumer owning the setting.
        conf: The configuration store to write into.
        properties: Property name to raw value.

    Raises:
        TypeError: If a property name or value is not a string.
    """
    for name, value in properties.items():
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError(
                f"Client properties must map str to str, got {name!r}: {value!r}"
            )
    key = enum_to_conf_key(implementing_class, ClientOpts.CLIENT_PROPS)
    conf.set(key, json.dumps(dict(properties), sort_keys=True))
    logger.debug(f"Stored {len(properties)} client properties under '{key}'")


def get_client_properties(
    implementing_class: ConsumerIdentity, conf: ConfigurationStore
) -> Dict[str, str]:
    """
    Returns the stored client properties, or an empty dict if none were stored.

    Raises:
        ConfigurationParseError: If the stored value is not a JSON object of strings.
    """
    key = enum_to_conf_key(implementing_class, ClientOpts.CLIENT_PROPS)
    raw = conf.get(key)
    if raw is None:
        return {}

    try:
        properties = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f"Client properties under '{key}' are not valid JSON")
        raise ConfigurationParseError(
            f"Malformed client properties under '{key}', err: '{e}'", key=key, value=raw
        ) from e

    if not isinstance(properties, dict) or not all(
        isinstance(v, str) for v in properties.values()
    ):
        logger.error(f"Client properties under '{key}' are not a string mapping")
        raise ConfigurationParseError(
            f"Client properties under '{key}' must be a JSON object of strings",
            key=key,
            value=raw,
        )
    return properties
