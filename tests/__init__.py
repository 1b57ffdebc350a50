# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_models.py: Pydantic model validation
# - test_utils.py: slug and date helpers
# - test_storage_service.py: storage gateway against a mocked client
# - test_catalog_repository.py: repository against mocked query chains
# - test_workflows.py: brand/category/medicine/contact workflows on fakes
# - test_dashboard.py: dashboard aggregation
# - test_auth.py: admin gate and sign-in
# - test_api.py: routes through FastAPI's TestClient
#
# Run tests with: pytest
# =============================================================================
