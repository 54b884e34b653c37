from __future__ import annotations

import json
from typing import Any, Callable, Optional, Protocol, Union

from ..core.logging import get_logger

logger = get_logger(__name__)

UpdateFn = Callable[[Any], Any]


class SettingsStore(Protocol):
    """Key-value settings capability shared with the settings screens.

    ``get`` hands back a fully parsed snapshot or ``default``; corrupt or
    missing data never raises. ``set`` accepts a value or an update function
    applied to the current snapshot. Last write wins.
    """

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Union[Any, UpdateFn]) -> None:
        raise NotImplementedError


def decode_snapshot(key: str, text: Optional[str], default: Any) -> Any:
    if text is None:
        return default
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        logger.warning("settings_corrupt", key=key, error=str(e))
        return default


def encode_snapshot(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


def resolve_update(value: Union[Any, UpdateFn], current: Any) -> Any:
    return value(current) if callable(value) else value


class InMemorySettingsStore(SettingsStore):
    """Process-local store holding JSON text, like the browser key-value store it replaces."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        return decode_snapshot(key, self._data.get(key), default)

    def set(self, key: str, value: Union[Any, UpdateFn]) -> None:
        self._data[key] = encode_snapshot(resolve_update(value, self.get(key)))

    def put_raw(self, key: str, text: str) -> None:
        """Store text verbatim (used to load legacy exports, possibly corrupt)."""
        self._data[key] = text
