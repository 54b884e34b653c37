from __future__ import annotations

from typing import Callable, Optional, Protocol

from tzlocal import get_localzone_name

from ..core.constants import BUSINESS_INFO_KEY, BUSINESS_SETTINGS_KEY, FALLBACK_TIMEZONE
from ..core.exceptions import SettingsError
from ..core.logging import get_logger
from ..settings.loader import is_valid_timezone, load_business_settings
from ..settings.store import SettingsStore

logger = get_logger(__name__)


class TimezoneProvider(Protocol):
    """Capability that names the business timezone (an IANA identifier)."""

    def timezone(self) -> str:
        raise NotImplementedError


class FixedTimezoneProvider:
    def __init__(self, name: str):
        self._name = name

    def timezone(self) -> str:
        return self._name


def host_timezone_name(override: Optional[str] = None) -> str:
    """Host platform zone: configured override, else the OS zone, else UTC."""
    if override and is_valid_timezone(override):
        return override
    try:
        name = get_localzone_name()
    except (LookupError, OSError, ValueError) as e:
        logger.debug("host_timezone_unavailable", error=str(e))
        return FALLBACK_TIMEZONE
    if name and is_valid_timezone(name):
        return name
    return FALLBACK_TIMEZONE


class SettingsTimezoneProvider:
    """Resolve the zone from ``business-info``, then ``business-settings``, then the host.

    A missing, corrupt or unknown zone in either snapshot counts as absent, and
    so does a snapshot the store cannot read.
    """

    SOURCES = (BUSINESS_INFO_KEY, BUSINESS_SETTINGS_KEY)

    def __init__(self, store: SettingsStore, *, host_zone: Callable[[], str] = host_timezone_name):
        self._store = store
        self._host_zone = host_zone

    def timezone(self) -> str:
        for key in self.SOURCES:
            try:
                settings = load_business_settings(self._store, key)
            except SettingsError as e:
                logger.warning("business_timezone_source_unavailable", key=key, error=str(e))
                continue
            if settings is not None and settings.timezone:
                return settings.timezone

        name = self._host_zone()
        logger.debug("business_timezone_fallback", timezone=name)
        return name
