"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_COUNTRY = "US"
DEFAULT_ANNUAL_LEAVE_QUOTA = 20

# Quota consumed by a half-day request is one full day minus this.
HALF_DAY_DEDUCTION = 0.5

COUNTRIES = {
    "US": "United States",
    "UK": "United Kingdom",
    "CA": "Canada",
    "AU": "Australia",
    "DE": "Germany",
    "FR": "France",
    "JP": "Japan",
    "IN": "India",
}
