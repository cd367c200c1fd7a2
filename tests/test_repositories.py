import pytest

from app.api.cell_therapy.cell_therapy_repository import cell_therapy_repository
from app.api.registration.registration_repository import registration_repository
from app.domain.exceptions import ConflictError, NotFoundError


def registration_fields(email="john@example.com"):
    return {
        "full_name": "John Smith",
        "email": email,
        "phone": "5559876543",
        "consent": True,
        "status": "pending",
    }


def interest_fields(**overrides):
    fields = {
        "full_name": "Jane Doe",
        "email": "jane@example.com",
        "mobile_number": "5551234567",
        "zip_code": "94110",
        "age": 45,
        "current_diagnosis": "HCC",
        "current_health_status": "stable",
        "status": "pending",
    }
    fields.update(overrides)
    return fields


class TestRegistrationRepository:
    def test_create_assigns_id_and_timestamps(self, db):
        record = registration_repository(db).create(registration_fields())

        assert len(record.id) == 36
        assert record.create_datetime is not None
        assert record.update_datetime is not None
        assert record.email_sent is False

    def test_unique_index_rejects_duplicate_email(self, db):
        repo = registration_repository(db)
        repo.create(registration_fields())

        with pytest.raises(ConflictError):
            repo.create(registration_fields())

        # the session is usable again after the rollback
        assert repo.count() == 1

    def test_sparse_update(self, db):
        repo = registration_repository(db)
        created = repo.create(registration_fields())
        created_at = created.create_datetime

        updated = repo.update(created.id, {"status": "reviewed"})

        assert updated.status == "reviewed"
        assert updated.full_name == "John Smith"
        assert updated.create_datetime == created_at
        assert updated.update_datetime >= created_at

    def test_missing_ids(self, db):
        repo = registration_repository(db)
        with pytest.raises(NotFoundError):
            repo.get_by_id("missing")
        with pytest.raises(NotFoundError):
            repo.update("missing", {"status": "reviewed"})
        with pytest.raises(NotFoundError):
            repo.delete("missing")

    def test_counts(self, db):
        repo = registration_repository(db)
        first = repo.create(registration_fields("a@example.com"))
        repo.create(registration_fields("b@example.com"))
        repo.update(first.id, {"status": "approved", "email_sent": True})

        assert repo.count_by_status() == {"approved": 1, "pending": 1}
        assert repo.count_email_sent() == 1


class TestCellTherapyRepository:
    def test_duplicate_emails_allowed(self, db):
        repo = cell_therapy_repository(db)
        repo.create(interest_fields())
        repo.create(interest_fields())
        assert repo.count() == 2

    def test_list_filters_and_pages(self, db):
        repo = cell_therapy_repository(db)
        for i in range(4):
            repo.create(interest_fields(full_name=f"P{i}", trial_nct_id="NCT1" if i % 2 else None))

        records, total = repo.list(trial_nct_id="NCT1")
        assert total == 2
        assert [r.full_name for r in records] == ["P3", "P1"]

        records, total = repo.list(page=2, limit=3)
        assert total == 4
        assert [r.full_name for r in records] == ["P0"]

    def test_delete_is_permanent(self, db):
        repo = cell_therapy_repository(db)
        created = repo.create(interest_fields())

        repo.delete(created.id)

        assert repo.count() == 0
        with pytest.raises(NotFoundError):
            repo.get_by_id(created.id)

    def test_contacted_counts_as_email_sent(self, db):
        repo = cell_therapy_repository(db)
        repo.create(interest_fields(status="contacted"))
        repo.create(interest_fields(email_sent=True))
        repo.create(interest_fields())
        assert repo.count_email_sent() == 2
