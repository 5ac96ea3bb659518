"""
Unit tests for Identifier and the ULID generator.
"""

import pytest

from codeflix.core.domain import DomainException, Identifier, generate_ulid
from codeflix.domains.catalog.domain.category import CategoryID
from codeflix.domains.catalog.domain.genre import GenreID

VALID_ULID = "01ARZ3NDEKTSV4RRFFQ69G5FAV"


@pytest.mark.unit
class TestIdentifierParsing:
    def test_from_string_normalizes_to_lowercase(self):
        identifier = CategoryID.from_string(VALID_ULID)

        assert identifier.get_value() == VALID_ULID.lower()
        assert str(identifier) == VALID_ULID.lower()

    def test_from_string_strips_whitespace(self):
        assert CategoryID.from_string(f"  {VALID_ULID} ").get_value() == VALID_ULID.lower()

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "not-a-ulid",
            "01ARZ3NDEKTSV4RRFFQ69G5FA",  # 25 chars
            "01ARZ3NDEKTSV4RRFFQ69G5FAVX",  # 27 chars
            "01ARZ3NDEKTSV4RRFFQ69G5FAU",  # U is not base32
            "81ARZ3NDEKTSV4RRFFQ69G5FAV",  # overflows 128 bits
        ],
    )
    def test_from_string_rejects_malformed_values(self, value):
        with pytest.raises(DomainException) as exc_info:
            CategoryID.from_string(value)

        assert exc_info.value.message == f"the Id {value} is invalid"

    def test_rejects_non_string(self):
        with pytest.raises(DomainException):
            CategoryID(12345)


@pytest.mark.unit
class TestIdentifierGeneration:
    def test_unique_generates_distinct_values(self):
        ids = {CategoryID.unique() for _ in range(100)}

        assert len(ids) == 100

    def test_unique_uses_injected_generator(self):
        identifier = GenreID.unique(lambda: VALID_ULID)

        assert identifier == GenreID.from_string(VALID_ULID)

    def test_generated_values_sort_by_creation(self):
        first = CategoryID.from_string("01ARZ3NDEKTSV4RRFFQ69G5FAV")
        later = CategoryID.from_string("01BX5ZZKBKACTAV9WEVGEMMVRZ")

        assert first < later
        assert sorted([later, first]) == [first, later]

    def test_generate_ulid_is_parseable(self):
        value = generate_ulid()

        assert Identifier.from_string(value).get_value() == value.lower()


@pytest.mark.unit
class TestIdentifierEquality:
    def test_equal_values_are_equal_and_hash_alike(self):
        a = CategoryID.from_string(VALID_ULID)
        b = CategoryID.from_string(VALID_ULID.lower())

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_identifier_types_are_never_equal(self):
        assert CategoryID.from_string(VALID_ULID) != GenreID.from_string(VALID_ULID)

    def test_identifiers_are_immutable(self):
        identifier = CategoryID.unique()

        with pytest.raises(AttributeError):
            identifier.value = VALID_ULID
