"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 1440
DEFAULT_SLOT_INTERVAL_MINUTES = 60

# Settings-store keys (persisted whole-object snapshots)
BUSINESS_INFO_KEY = "business-info"
BUSINESS_SETTINGS_KEY = "business-settings"
PAYROLL_SETTINGS_KEY = "payroll-settings"
SETTINGS_KEYS = (BUSINESS_INFO_KEY, BUSINESS_SETTINGS_KEY, PAYROLL_SETTINGS_KEY)

FALLBACK_TIMEZONE = "UTC"

DEFAULT_ANCHOR_START_DATE = "2024-12-30"
DEFAULT_ANCHOR_END_DATE = "2025-01-12"
DEFAULT_ANCHOR_PAY_DATE = "2025-01-17"

SEMI_MONTHLY_FIRST_HALF_LAST_DAY = 15

DEFAULT_OVERTIME_THRESHOLD_HOURS = 40
OVERTIME_MULTIPLIER = 1.5

ISO_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%m-%d-%Y"
