"""
Flat Configuration Store.

A job's settings travel from the submitting process to remote workers inside a
single-level `str -> str` map. This module defines the interface the
configurators program against and a dict-backed implementation of it.
"""

from typing import Dict, Iterator, Mapping, Optional, Protocol, Tuple, runtime_checkable

_TRUE = "true"
_FALSE = "false"


@runtime_checkable
class ConfigurationStore(Protocol):
    """
    The minimal surface a flat configuration store must expose.

    Any object implementing these four methods can be passed to the
    configurator functions, e.g. an adapter over an existing job framework's
    configuration object.
    """

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def get_boolean(self, key: str, default: bool) -> bool: ...

    def set_boolean(self, key: str, value: bool) -> None: ...


class JobConfiguration:
    """
    A mutable, flat, string-keyed configuration map.

    The caller owns the instance: the submitter fills it, a transport ships it
    (see [`dumps()`][jobconf.conf.descriptor.dumps]) and the worker reads it.

    Booleans are stored as "true"/"false". When reading, the stored text is
    trimmed and lowercased; anything other than those two words is treated as
    absent and yields the caller's default.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = {}
        if values is not None:
            for key, value in values.items():
                self.set(key, value)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        if not isinstance(key, str):
            raise TypeError(f"Configuration keys must be str, got {type(key).__name__}")
        if not isinstance(value, str):
            raise TypeError(
                f"Configuration value for '{key}' must be str, got {type(value).__name__}"
            )
        self._values[key] = value

    def get_boolean(self, key: str, default: bool) -> bool:
        raw = self._values.get(key)
        if raw is None:
            return default
        raw = raw.strip().lower()
        if raw == _TRUE:
            return True
        if raw == _FALSE:
            return False
        return default

    def set_boolean(self, key: str, value: bool) -> None:
        self.set(key, _TRUE if value else _FALSE)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._values.items())

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JobConfiguration):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"JobConfiguration({self._values!r})"
