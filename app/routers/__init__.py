# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - brands.py: Brand CRUD with logo upload
# - categories.py: Category CRUD
# - medicines.py: Medicine CRUD with image gallery
# - contacts.py: Public contact form and admin triage
# - dashboard.py: Summary statistics
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import brands
from . import categories
from . import medicines
from . import contacts
from . import dashboard

__all__ = [
    "health",
    "brands",
    "categories",
    "medicines",
    "contacts",
    "dashboard",
]
