"""Fixtures for repository unit tests."""

import pytest

from stock_tracker.services.repositories import TransactionRepository, UserRepository


@pytest.fixture
def transaction_repo(db):
    return TransactionRepository(db)


@pytest.fixture
def user_repo(db):
    return UserRepository(db)
