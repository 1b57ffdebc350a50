# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the repository, storage gateway and
# workflows. Routes receive narrow service handles instead of reaching for
# the global client; tests swap them via app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends
from supabase import Client

from core.services import (
    AuthService,
    BrandService,
    CatalogRepository,
    CategoryService,
    ContactService,
    DashboardService,
    MedicineService,
    StorageService,
)
from lib.supabase_client import SupabaseClient


def get_supabase_client() -> Client:
    """Return the process-wide Supabase client."""
    return SupabaseClient.get_client()


def get_repository(client: Annotated[Client, Depends(get_supabase_client)]) -> CatalogRepository:
    return CatalogRepository(client)


def get_storage(client: Annotated[Client, Depends(get_supabase_client)]) -> StorageService:
    return StorageService(client)


RepositoryDep = Annotated[CatalogRepository, Depends(get_repository)]
StorageDep = Annotated[StorageService, Depends(get_storage)]


def get_brand_service(repository: RepositoryDep, storage: StorageDep) -> BrandService:
    return BrandService(repository, storage)


def get_category_service(repository: RepositoryDep) -> CategoryService:
    return CategoryService(repository)


def get_medicine_service(repository: RepositoryDep, storage: StorageDep) -> MedicineService:
    return MedicineService(repository, storage)


def get_contact_service(repository: RepositoryDep) -> ContactService:
    return ContactService(repository)


def get_dashboard_service(repository: RepositoryDep) -> DashboardService:
    return DashboardService(repository)


def get_auth_service(
    repository: RepositoryDep,
    client: Annotated[Client, Depends(get_supabase_client)],
) -> AuthService:
    return AuthService(repository, client, SupabaseClient.create_anon_client)


# Type aliases for dependency injection
BrandServiceDep = Annotated[BrandService, Depends(get_brand_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
MedicineServiceDep = Annotated[MedicineService, Depends(get_medicine_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
