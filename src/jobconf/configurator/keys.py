"""
Configuration Key Encoding.

Many consumers share one flat configuration store, and several of them may set
the same option (two output formats in one job both want a default table).
Every key is therefore namespaced by the consumer that owns it:

    <consumer identity>.<option group>.<OptionName>

e.g. `myjobs.output.OutputFormat.WriteOpts.DefaultTableName`.
"""

from enum import Enum
from typing import Union

from ..errors import ConfigurationUsageError

KEY_SEPARATOR = "."

ConsumerIdentity = Union[type, str]
"""A class (its module-qualified name is used) or an explicit non-empty name."""


def _camelize(name: str) -> str:
    # DEFAULT_TABLE_NAME -> DefaultTableName
    return "".join(part.capitalize() for part in name.lower().split("_"))


def identity_name(implementing_class: ConsumerIdentity) -> str:
    """
    Returns the stable string a consumer identity contributes to its keys.

    Raises:
        ConfigurationUsageError: If the identity has no stable name: an empty
            string, a class defined inside a function body, or anything that is
            neither a class nor a string.
    """
    if isinstance(implementing_class, str):
        if not implementing_class.strip():
            raise ConfigurationUsageError("Consumer identity name must not be empty")
        return implementing_class

    if not isinstance(implementing_class, type):
        raise ConfigurationUsageError(
            "Consumer identity must be a class or a name, got an instance of "
            f"'{type(implementing_class).__name__}'"
        )

    qualname = implementing_class.__qualname__
    if "<locals>" in qualname or "<lambda>" in qualname:
        raise ConfigurationUsageError(
            f"Class '{qualname}' has no stable name and cannot own configuration keys"
        )
    return f"{implementing_class.__module__}{KEY_SEPARATOR}{qualname}"


def enum_to_conf_key(implementing_class: ConsumerIdentity, option: Enum) -> str:
    """
    Derives the configuration key of `option` for the given consumer.

    The mapping is deterministic and collision-free: distinct identities give
    distinct prefixes, and group and member names come from the declared option
    enums.

    Args:
        implementing_class: The consumer owning the setting.
        option: A member of one of the option groups in [`jobconf.enum`][jobconf.enum].

    Returns:
        The flat configuration key.
    """
    return KEY_SEPARATOR.join(
        (
            identity_name(implementing_class),
            type(option).__name__,
            _camelize(option.name),
        )
    )
