# =============================================================================
# tests/test_dashboard.py - Dashboard Statistics Tests
# =============================================================================

import asyncio
from datetime import datetime, timezone

import pytest

from core.services import DashboardService
from core.services.dashboard_service import change_percentage

NOW = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)


def _add(table, row_id, created_at, **fields):
    table.rows[row_id] = {"id": row_id, "created_at": created_at.isoformat(), **fields}


@pytest.fixture
def populated(repository):
    users = repository.users
    _add(users, "u1", datetime(2024, 1, 1, tzinfo=timezone.utc), email="a@x.com", role="admin", full_name="Ann")
    _add(users, "u2", datetime(2024, 5, 1, tzinfo=timezone.utc), email="b@x.com", role="user", full_name="Bob")
    _add(users, "u3", datetime(2024, 5, 10, tzinfo=timezone.utc), email="c@x.com", role="user", full_name=None)

    medicines = repository.medicines
    _add(medicines, "m1", datetime(2024, 2, 1, tzinfo=timezone.utc), name="Aspirin", price=3.0)
    _add(medicines, "m2", datetime(2024, 4, 20, tzinfo=timezone.utc), name="Ibuprofen", price=None)

    _add(repository.categories, "c1", NOW, name="Pain")
    _add(repository.brands, "b1", NOW, name="Bayer")
    _add(repository.brands, "b2", NOW, name="Cipla")

    contacts = repository.contacts
    _add(contacts, "q1", datetime(2024, 5, 2, tzinfo=timezone.utc), name="Jane", subject="Hi", status="pending")
    _add(contacts, "q2", datetime(2024, 5, 3, tzinfo=timezone.utc), name="Joe", subject="Re", status="resolved")
    return repository


class TestChangePercentage:

    @pytest.mark.parametrize("recent,padding,expected", [
        (0, 10, -100.0),
        (10, 10, -50.0),
        (1, 5, -83.3),
        (0, 0, 0.0),
        (4, 0, 0.0),
    ])
    def test_values(self, recent, padding, expected):
        assert change_percentage(recent, padding) == expected


class TestGetStats:

    def test_totals(self, populated):
        service = DashboardService(populated, medicine_padding=10, user_padding=5)

        result = asyncio.run(service.get_stats(now=NOW))

        assert result.ok
        stats = result.data
        assert stats.total_users == 3
        assert stats.total_admins == 1
        assert stats.total_medicines == 2
        assert stats.out_of_stock_medicines == 1
        assert stats.total_categories == 1
        assert stats.total_brands == 2
        assert stats.total_contacts == 2
        assert stats.pending_contacts == 1

    def test_trailing_month_window(self, populated):
        service = DashboardService(populated, medicine_padding=10, user_padding=5)

        stats = asyncio.run(service.get_stats(now=NOW)).data

        assert stats.since == datetime(2024, 4, 15, 12, 0, tzinfo=timezone.utc)
        # one medicine (m2) and two users (u2, u3) in the window
        assert stats.medicines_change == change_percentage(1, 10)
        assert stats.users_change == change_percentage(2, 5)

    def test_empty_catalog(self, repository):
        service = DashboardService(repository, medicine_padding=0, user_padding=0)

        stats = asyncio.run(service.get_stats(now=NOW)).data

        assert stats.total_users == 0
        assert stats.medicines_change == 0.0
        assert stats.users_change == 0.0

    def test_any_failure_fails_whole_read(self, populated):
        populated.brands.fail_on.add("count")
        service = DashboardService(populated)

        result = asyncio.run(service.get_stats(now=NOW))

        assert result.data is None
        assert result.error.code == "REPOSITORY_ERROR"


class TestRecent:

    def test_recent_users(self, populated):
        result = DashboardService(populated).get_recent_users(limit=2)
        assert [u.id for u in result.data] == ["u3", "u2"]

    def test_recent_contacts(self, populated):
        result = DashboardService(populated).get_recent_contacts()
        assert [c.id for c in result.data] == ["q2", "q1"]
        assert result.data[0].status == "resolved"
