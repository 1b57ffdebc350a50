# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Small pure helpers used across the application.
# =============================================================================

import calendar
import re
from datetime import datetime
from uuid import UUID

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Example:
        brand_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        brand_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Slugs
# =============================================================================

def generate_slug(name: str) -> str:
    """
    Build a URL-safe slug from a display name.

    Lower-cases the name, collapses every run of characters outside
    [a-z0-9] into a single hyphen and strips leading/trailing hyphens.

    Example:
        generate_slug("Vitamin C (1000mg)!")  # "vitamin-c-1000mg"
    """
    return _NON_ALNUM_RUN.sub("-", name.lower()).strip("-")


# =============================================================================
# Dates
# =============================================================================

def one_month_before(moment: datetime) -> datetime:
    """
    Return the same wall-clock time one calendar month earlier.

    The day is clamped to the length of the previous month, so
    March 31 becomes February 28 (or 29).
    """
    year, month = (moment.year - 1, 12) if moment.month == 1 else (moment.year, moment.month - 1)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)
