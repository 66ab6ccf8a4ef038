"""Tests for UserRepository."""

from unittest.mock import patch

import pytest

from stock_tracker.services.repositories import DuplicateError, NotFoundError, UserRepository


class TestUserRepository:
    """Test UserRepository."""

    def test_create_normalizes_email(self, user_repo, db):
        user = user_repo.create(email="  New.User@Example.com ", name="New User")
        db.commit()

        assert user.id is not None
        assert user.email == "new.user@example.com"
        assert user.name == "New User"

    def test_create_duplicate_email_raises(self, user_repo, test_user):
        with pytest.raises(DuplicateError) as exc_info:
            user_repo.create(email=test_user.email.upper())

        assert exc_info.value.field == "email"

    def test_find_by_id(self, user_repo, test_user):
        assert user_repo.find_by_id(test_user.id).email == test_user.email
        assert user_repo.find_by_id("nonexistent") is None

    def test_get_by_id_missing_raises(self, user_repo):
        with pytest.raises(NotFoundError) as exc_info:
            user_repo.get_by_id("nonexistent")

        assert exc_info.value.entity_type == "User"

    def test_find_by_email_case_insensitive(self, user_repo, test_user):
        found = user_repo.find_by_email("INVESTOR@example.com")
        assert found is not None
        assert found.id == test_user.id

    def test_underscore_email_is_not_a_wildcard(self, user_repo, db):
        """An underscore in one address must not match a different address."""
        first = user_repo.create(email="acb@example.com")
        db.commit()

        second = user_repo.create(email="a_b@example.com")
        db.commit()

        assert second.id != first.id
        assert user_repo.find_by_email("a_b@example.com").id == second.id
        assert user_repo.find_by_email("acb@example.com").id == first.id

    def test_find_by_email_percent_does_not_match(self, user_repo, test_user):
        assert user_repo.find_by_email("%@example.com") is None

    def test_unique_index_violation_raises_duplicate(self, user_repo, test_user, db):
        """A registration that slips past the lookup is still rejected as a duplicate."""
        with patch.object(UserRepository, "find_by_email", return_value=None):
            with pytest.raises(DuplicateError) as exc_info:
                user_repo.create(email=test_user.email)

        assert exc_info.value.field == "email"
        assert user_repo.find_by_email(test_user.email).id == test_user.id
