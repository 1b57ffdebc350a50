# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides in-memory repository/storage fakes and sample payloads
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-hs256-signing")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest

from core.models import UploadedFile
from tests.fakes import FakeRepository, FakeStorage


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def repository():
    """Empty in-memory catalog."""
    return FakeRepository()


@pytest.fixture
def storage():
    """In-memory object store."""
    return FakeStorage()


@pytest.fixture
def png_file():
    """A small PNG upload."""
    return UploadedFile(filename="Logo.PNG", content=b"\x89PNG\r\n\x1a\nfake", content_type="image/png")


@pytest.fixture
def jpg_file():
    return UploadedFile(filename="front.jpg", content=b"\xff\xd8\xff\xe0fake", content_type="image/jpeg")


@pytest.fixture
def sample_medicine_payload():
    """Sample medicine fields as the admin form sends them."""
    return {
        "name": "Vitamin C (1000mg)!",
        "description": "Immune support supplement",
        "price": 12.5,
        "prescription_required": False,
        "category_id": None,
        "brand_id": None,
        "dosages": ["1 tablet daily"],
        "ingredients": ["Ascorbic acid"],
        "side_effects": ["Stomach upset"],
        "usage_instructions": ["Take with food"],
        "warnings": ["Do not exceed the stated dose"],
        "alternatives": ["Vitamin C 500mg"],
    }
