"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7

DEFAULT_BREAK_MINUTES = 60
DEFAULT_TAX_RATE = 0.033

DEFAULT_PAYROLL_DAYS = 30
PAYROLL_PERIOD_CHOICES = (7, 14, 30, 60)

MIN_PASSWORD_LENGTH = 6
