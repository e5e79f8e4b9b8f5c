"""Tests for the ownership configuration service."""

import pytest

from reimburse.domain.entities import Account, Category, OwnershipType
from reimburse.domain.errors import ValidationError
from reimburse.domain.ownership import normalize_ownership_type


@pytest.mark.parametrize(
    "value,expected",
    [
        ("His", OwnershipType.HIS),
        ("hers", OwnershipType.HERS),
        ("  SHARED ", OwnershipType.SHARED),
        ("unset", OwnershipType.UNSET),
    ],
)
def test_normalize_ownership_type(value, expected):
    assert normalize_ownership_type(value) == expected


def test_normalize_ownership_type_rejects_unknown_values():
    with pytest.raises(ValidationError, match="Invalid type 'Ours'"):
        normalize_ownership_type("Ours")


def test_set_and_get_account_types(ownership_service):
    result = ownership_service.set_account_type("acc1", "his")

    assert result == OwnershipType.HIS
    assert ownership_service.get_account_types() == {"acc1": "His"}


def test_set_account_type_overwrites(ownership_service):
    ownership_service.set_account_type("acc1", "His")
    ownership_service.set_account_type("acc1", "Shared")

    assert ownership_service.get_account_types() == {"acc1": "Shared"}


def test_set_invalid_type_stores_nothing(ownership_service):
    with pytest.raises(ValidationError):
        ownership_service.set_category_type("cat1", "Mine")

    assert ownership_service.get_category_types() == {}


def test_category_and_group_types_are_stored_separately(ownership_service):
    ownership_service.set_category_type("same-id", "Hers")
    ownership_service.set_category_group_type("same-id", "Shared")

    assert ownership_service.get_category_types() == {"same-id": "Hers"}
    assert ownership_service.get_category_group_types() == {"same-id": "Shared"}


def test_single_type_reads_default_to_unset(ownership_service):
    assert ownership_service.get_account_type("acc1") == "Unset"
    assert ownership_service.get_category_type("cat1") == "Unset"
    assert ownership_service.get_category_group_type("grp1") == "Unset"

    ownership_service.set_account_type("acc1", "his")
    ownership_service.set_category_type("cat1", "Hers")
    ownership_service.set_category_group_type("grp1", "SHARED")

    assert ownership_service.get_account_type("acc1") == "His"
    assert ownership_service.get_category_type("cat1") == "Hers"
    assert ownership_service.get_category_group_type("grp1") == "Shared"


def test_account_lookup_defaults_to_unset(ownership_service):
    ownership_service.set_account_type("acc1", "Hers")

    classify = ownership_service.account_type_lookup()

    assert classify("acc1") == "Hers"
    assert classify("unknown") == "Unset"


class TestCategoryTypeLookup:
    """Tests for category type resolution through groups."""

    categories = [
        Category(id="cat1", name="Rent", category_group_id="bills"),
        Category(id="cat2", name="Energy", category_group_id="bills"),
        Category(id="cat3", name="Hobby", category_group_id="fun"),
    ]

    def test_own_type_wins_over_group(self, ownership_service):
        ownership_service.set_category_group_type("bills", "Shared")
        ownership_service.set_category_type("cat1", "His")

        classify = ownership_service.category_type_lookup(self.categories)

        assert classify("cat1") == "His"
        assert classify("cat2") == "Shared"

    def test_unset_category_falls_back_to_group(self, ownership_service):
        ownership_service.set_category_group_type("bills", "Hers")
        ownership_service.set_category_type("cat2", "Unset")

        classify = ownership_service.category_type_lookup(self.categories)

        assert classify("cat2") == "Hers"

    def test_unset_everywhere(self, ownership_service):
        classify = ownership_service.category_type_lookup(self.categories)

        assert classify("cat3") == "Unset"

    def test_unknown_category_is_unset(self, ownership_service):
        ownership_service.set_category_type("ghost", "His")

        classify = ownership_service.category_type_lookup(self.categories)

        assert classify("ghost") == "Unset"

    def test_lookup_is_a_snapshot_of_the_store(self, ownership_service):
        classify = ownership_service.category_type_lookup(self.categories)
        ownership_service.set_category_type("cat3", "Hers")

        assert classify("cat3") == "Unset"
        assert ownership_service.category_type_lookup(self.categories)("cat3") == "Hers"


class TestValidateConfiguration:
    """Tests for validate_configuration."""

    accounts = [Account(id="acc1", name="Current"), Account(id="acc2", name="Savings")]
    categories = [
        Category(id="cat1", name="Rent", category_group_id="bills"),
        Category(id="cat2", name="Hobby", category_group_id="fun"),
    ]

    def test_reports_unset_accounts_then_categories(self, ownership_service):
        ownership_service.set_account_type("acc2", "Shared")

        warnings = ownership_service.validate_configuration(self.accounts, self.categories)

        assert [w.id for w in warnings] == ["account-acc1", "category-cat1", "category-cat2"]
        assert warnings[0].message == 'Account "Current" has no type set.'
        assert warnings[1].message == 'Category "Rent" has no type set.'

    def test_group_type_satisfies_its_categories(self, ownership_service):
        ownership_service.set_account_type("acc1", "His")
        ownership_service.set_account_type("acc2", "Hers")
        ownership_service.set_category_group_type("bills", "Shared")
        ownership_service.set_category_type("cat2", "Hers")

        warnings = ownership_service.validate_configuration(self.accounts, self.categories)

        assert warnings == []

    def test_explicit_unset_counts_as_missing(self, ownership_service):
        ownership_service.set_account_type("acc1", "Unset")

        warnings = ownership_service.validate_configuration(self.accounts[:1], [])

        assert [w.id for w in warnings] == ["account-acc1"]

    def test_nothing_to_validate(self, ownership_service):
        assert ownership_service.validate_configuration([], []) == []
