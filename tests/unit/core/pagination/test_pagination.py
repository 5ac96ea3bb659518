"""
Unit tests for Pagination and Range.
"""

import pytest

from codeflix.core.pagination import FIRST_PAGE, Pagination, PaginationException, Range, count_pages


# ============================================================================
# Construction
# ============================================================================


@pytest.mark.unit
class TestPaginationConstruction:
    def test_from_page_keeps_values(self):
        page = Pagination.from_page(2, 10, 100, list(range(10, 20)))

        assert page.page == 2
        assert page.per_page == 10
        assert page.total == 100
        assert page.data == list(range(10, 20))

    def test_page_beyond_total_pages_is_rejected(self):
        with pytest.raises(PaginationException) as exc_info:
            Pagination.from_page(20, 10, 50, [])

        assert "cannot exceed total pages" in str(exc_info.value)
        assert str(exc_info.value) == "Page number [20] cannot exceed total pages [5]."

    @pytest.mark.parametrize(
        "page, per_page, total, data, message",
        [
            (0, 10, 10, [], f"Page number must be equal or greater than {FIRST_PAGE}."),
            (-1, 10, 10, [], f"Page number must be equal or greater than {FIRST_PAGE}."),
            (1, 0, 10, [], "Items per page must be greater than 0."),
            (1, 10, -1, [], "Total items must be greater than or equal to 0."),
            (1, 10, 0, None, "Data cannot be null."),
        ],
    )
    def test_invalid_arguments_are_rejected(self, page, per_page, total, data, message):
        with pytest.raises(PaginationException) as exc_info:
            Pagination(page, per_page, total, data)

        assert str(exc_info.value) == message

    def test_pagination_exception_is_a_value_error(self):
        with pytest.raises(ValueError):
            Pagination(1, 0, 0, [])

    def test_empty_result_has_one_page(self):
        page = Pagination.from_page(1, 10, 0, [])

        assert page.total_pages == 1
        assert page.is_empty()
        assert page.is_first_page()
        assert page.is_last_page()

    def test_data_is_a_snapshot(self):
        items = [1, 2, 3]
        page = Pagination.from_page(1, 10, 3, items)

        items.append(4)

        assert page.data == [1, 2, 3]

    def test_is_immutable(self):
        page = Pagination.from_page(1, 10, 3, [1, 2, 3])

        with pytest.raises(AttributeError):
            page.page = 2

    def test_is_not_hashable_but_compares_by_value(self):
        page = Pagination.from_page(1, 10, 3, [1, 2, 3])

        with pytest.raises(TypeError):
            hash(page)
        assert page == Pagination.from_page(1, 10, 3, [1, 2, 3])


# ============================================================================
# Derived values
# ============================================================================


@pytest.mark.unit
class TestPaginationDerivedValues:
    @pytest.mark.parametrize(
        "total, per_page, expected",
        [(0, 10, 1), (1, 10, 1), (10, 10, 1), (11, 10, 2), (100, 10, 10), (101, 10, 11)],
    )
    def test_total_pages(self, total, per_page, expected):
        assert count_pages(total, per_page) == expected
        assert Pagination.from_page(1, per_page, total, []).total_pages == expected

    def test_bounds_of_middle_page(self):
        page = Pagination.from_page(2, 10, 100, list(range(10)))

        assert page.start == 10
        assert page.end == 19
        assert page.offset == 10
        assert page.limit == 10
        assert page.range == Range(10, 19)

    def test_end_is_clamped_to_last_item(self):
        page = Pagination.from_page(3, 10, 25, list(range(5)))

        assert page.start == 20
        assert page.end == 24

    def test_end_is_floored_at_zero(self):
        page = Pagination.from_page(1, 10, 0, [])

        assert page.start == 0
        assert page.end == 0

    def test_neighbour_pages_are_clamped(self):
        first = Pagination.from_page(1, 10, 30, list(range(10)))
        middle = Pagination.from_page(2, 10, 30, list(range(10)))
        last = Pagination.from_page(3, 10, 30, list(range(10)))

        assert first.previous_page == 1
        assert first.next_page == 2
        assert middle.previous_page == 1
        assert middle.next_page == 3
        assert last.previous_page == 2
        assert last.next_page == 3

    def test_navigation_flags(self):
        first = Pagination.from_page(1, 10, 30, list(range(10)))
        middle = Pagination.from_page(2, 10, 30, list(range(10)))
        last = Pagination.from_page(3, 10, 30, list(range(10)))

        assert (first.has_previous(), first.has_next_page()) == (False, True)
        assert (middle.has_previous(), middle.has_next_page()) == (True, True)
        assert (last.has_previous(), last.has_next_page()) == (True, False)
        assert first.is_first_page() and not first.is_last_page()
        assert last.is_last_page() and not last.is_first_page()

    def test_items_count_and_emptiness(self):
        page = Pagination.from_page(1, 10, 2, ["a", "b"])

        assert page.items_count == 2
        assert page.is_not_empty()
        assert not page.is_empty()


# ============================================================================
# Range construction and mapping
# ============================================================================


@pytest.mark.unit
class TestPaginationFromRange:
    def test_from_range_object(self):
        page = Pagination.from_range(Range(10, 19), 100, list(range(10)))

        assert page.page == 2
        assert page.per_page == 10

    def test_from_range_bounds(self):
        page = Pagination.from_range(20, 29, 100, list(range(10)))

        assert page.page == 3
        assert page.per_page == 10
        assert page.range == Range(20, 29)

    @pytest.mark.parametrize("start, end, total", [(0, 9, 100), (10, 19, 100), (40, 49, 45), (0, 4, 0)])
    def test_from_range_agrees_with_from_page(self, start, end, total):
        per_page = end - start + 1
        by_range = Pagination.from_range(Range.of(start, end), total, [])
        by_page = Pagination.from_page(start // per_page + 1, per_page, total, [])

        assert by_range == by_page

    def test_range_size(self):
        assert Range(0, 9).size == 10


@pytest.mark.unit
class TestPaginationMap:
    def test_map_preserves_metadata_and_order(self):
        page = Pagination.from_page(2, 3, 9, [1, 2, 3])

        mapped = page.map(lambda n: f"item-{n}")

        assert (mapped.page, mapped.per_page, mapped.total) == (2, 3, 9)
        assert mapped.data == ["item-1", "item-2", "item-3"]
        assert page.data == [1, 2, 3]

    def test_map_composes(self):
        page = Pagination.from_page(1, 5, 3, [1, 2, 3])

        def f(n):
            return n * 10

        def g(n):
            return n + 1

        assert page.map(f).map(g).data == page.map(lambda n: g(f(n))).data
