# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the catalog's business logic:
# - models/: Pydantic schemas for entities, uploads and the result envelope
# - services/: repository, storage gateway, workflows and dashboard
#
# Code in this package should NOT define routes or read requests.
# This keeps the logic testable and reusable.
# =============================================================================
