"""Shared pytest fixtures for reimburse tests."""

import json
import tempfile
import os
import pytest

from reimburse.database.factories import create_sqlite_database
from reimburse.domain.ownership import OwnershipService
from reimburse.domain.reimbursement import ReimbursementService
from reimburse.domain.snapshot import parse_snapshot


SAMPLE_SNAPSHOT = {
    "accounts": [
        {"id": "acc-his", "name": "His Current"},
        {"id": "acc-hers", "name": "Her Current"},
        {"id": "acc-joint", "name": "Joint Account"},
        {"id": "acc-old", "name": "Closed Account", "deleted": True},
    ],
    "category_groups": [
        {
            "id": "grp-bills",
            "name": "Bills",
            "categories": [
                {"id": "cat-rent", "name": "Rent", "category_group_id": "grp-bills"},
                {"id": "cat-energy", "name": "Energy", "category_group_id": "grp-bills"},
            ],
        },
        {
            "id": "grp-personal",
            "name": "Personal",
            "categories": [
                {"id": "cat-his-fun", "name": "His Fun Money", "category_group_id": "grp-personal"},
                {"id": "cat-her-fun", "name": "Her Fun Money", "category_group_id": "grp-personal"},
            ],
        },
        {
            "id": "grp-internal",
            "name": "Internal Master Category",
            "categories": [
                {
                    "id": "cat-inflow",
                    "name": "Inflow: Ready to Assign",
                    "category_group_id": "grp-internal",
                },
            ],
        },
    ],
    "transactions": [
        {
            "id": "t1",
            "date": "2024-03-01",
            "amount": -1000000,
            "payee_name": "Landlord",
            "category_id": "cat-rent",
            "category_name": "Rent",
            "account_id": "acc-his",
        },
        {
            "id": "t2",
            "date": "2024-03-05",
            "amount": -80000,
            "payee_name": "Energy Co",
            "category_id": "cat-energy",
            "category_name": "Energy",
            "account_id": "acc-hers",
        },
        {
            "id": "t3",
            "date": "2024-03-10",
            "amount": -30000,
            "payee_name": "Bookshop",
            "category_id": "cat-her-fun",
            "category_name": "Her Fun Money",
            "account_id": "acc-his",
        },
        {
            "id": "t4",
            "date": "2024-03-12",
            "amount": -150000,
            "payee_name": "Department Store",
            "category_id": None,
            "category_name": "Split (Multiple Categories)...",
            "account_id": "acc-hers",
            "subtransactions": [
                {"id": "s1", "amount": -100000, "category_id": "cat-energy", "category_name": "Energy"},
                {"id": "s2", "amount": -50000, "category_id": "cat-his-fun", "category_name": "His Fun Money"},
            ],
        },
        {
            "id": "t5",
            "date": "2024-03-15",
            "amount": -200000,
            "payee_name": "Transfer : Joint Account",
            "category_id": None,
            "category_name": None,
            "account_id": "acc-his",
            "transfer_account_id": "acc-joint",
            "transfer_transaction_id": "t5-other",
        },
        {
            "id": "t6",
            "date": "2024-03-25",
            "amount": 3000000,
            "payee_name": "Employer",
            "category_id": "cat-inflow",
            "category_name": "Inflow: Ready to Assign",
            "account_id": "acc-his",
        },
        {
            "id": "t7",
            "date": "2024-02-20",
            "amount": -40000,
            "payee_name": "February Energy",
            "category_id": "cat-energy",
            "category_name": "Energy",
            "account_id": "acc-his",
        },
        {
            "id": "t8",
            "date": "2024-03-20",
            "amount": -9999,
            "payee_name": "Removed",
            "category_id": "cat-rent",
            "category_name": "Rent",
            "account_id": "acc-his",
            "deleted": True,
        },
    ],
}


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def ownership_service(temp_db):
    """Create an OwnershipService with a temporary database."""
    return OwnershipService(temp_db)


@pytest.fixture
def reimbursement_service(temp_db):
    """Create a ReimbursementService with a temporary database."""
    return ReimbursementService(temp_db)


@pytest.fixture
def snapshot_data():
    """Return a fresh copy of the sample snapshot document."""
    return json.loads(json.dumps(SAMPLE_SNAPSHOT))


@pytest.fixture
def sample_snapshot(snapshot_data):
    """Parsed sample snapshot."""
    return parse_snapshot(snapshot_data)


@pytest.fixture
def snapshot_file(tmp_path, snapshot_data):
    """Write the sample snapshot to a JSON file and return its path."""
    path = tmp_path / "budget.json"
    path.write_text(json.dumps(snapshot_data), encoding="utf-8")
    return path


@pytest.fixture
def configured_ownership(ownership_service):
    """Tag the sample accounts and categories.

    Rent is tagged directly; the rest of Bills inherits Shared from the
    group.
    """
    ownership_service.set_account_type("acc-his", "His")
    ownership_service.set_account_type("acc-hers", "Hers")
    ownership_service.set_account_type("acc-joint", "Shared")
    ownership_service.set_category_group_type("grp-bills", "Shared")
    ownership_service.set_category_type("cat-rent", "Shared")
    ownership_service.set_category_type("cat-his-fun", "His")
    ownership_service.set_category_type("cat-her-fun", "Hers")
    return ownership_service


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

