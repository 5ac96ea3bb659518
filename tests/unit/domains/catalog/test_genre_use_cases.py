"""
Unit tests for Genre Use Cases.

Tests:
- CreateGenreUseCase
- UpdateGenreUseCase
- DeleteGenreUseCase
- GetGenreByIdUseCase
- ListGenresUseCase
"""

from unittest.mock import create_autospec

import pytest

from codeflix.core.domain import DomainException, NotFoundException, NotificationException
from codeflix.core.pagination import Pagination, SearchQuery
from codeflix.core.validation import Error
from codeflix.domains.catalog.application.ports import ICategoryGateway, IGenreGateway
from codeflix.domains.catalog.application.use_cases.genre import (
    CreateGenreCommand,
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GenreListOutput,
    GenreOutput,
    GetGenreByIdUseCase,
    ListGenresUseCase,
    UpdateGenreCommand,
    UpdateGenreUseCase,
)
from codeflix.domains.catalog.domain.category import Category, CategoryID
from codeflix.domains.catalog.domain.genre import NULL_NAME_ERROR, Genre, GenreID


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def mock_category_gateway():
    """Create a mock category gateway."""
    return create_autospec(ICategoryGateway, instance=True)


@pytest.fixture
def mock_genre_gateway():
    """Create a mock genre gateway."""
    gateway = create_autospec(IGenreGateway, instance=True)
    gateway.create.side_effect = lambda genre: genre
    gateway.update.side_effect = lambda genre: genre
    return gateway


# ============================================================================
# Constructors
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.parametrize("use_case_class", [CreateGenreUseCase, UpdateGenreUseCase])
def test_use_cases_reject_missing_gateways(use_case_class, mock_category_gateway, mock_genre_gateway):
    with pytest.raises(ValueError, match="category_gateway must not be null"):
        use_case_class(None, mock_genre_gateway)
    with pytest.raises(ValueError, match="genre_gateway must not be null"):
        use_case_class(mock_category_gateway, None)


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.parametrize("use_case_class", [DeleteGenreUseCase, GetGenreByIdUseCase, ListGenresUseCase])
def test_single_gateway_use_cases_reject_missing_gateway(use_case_class):
    with pytest.raises(ValueError, match="genre_gateway must not be null"):
        use_case_class(None)


# ============================================================================
# CreateGenreUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
def test_create_genre_without_categories(mock_category_gateway, mock_genre_gateway):
    # Arrange
    use_case = CreateGenreUseCase(mock_category_gateway, mock_genre_gateway)

    # Act
    output = use_case.execute(CreateGenreCommand.with_("Ação", True, []))

    # Assert
    created = mock_genre_gateway.create.call_args.args[0]
    assert output.id == created.id.get_value()
    assert created.name == "Ação"
    assert created.active is True
    assert created.categories == ()
    mock_category_gateway.exists_by_ids.assert_not_called()


@pytest.mark.unit
@pytest.mark.use_case
def test_create_genre_with_existing_categories(mock_category_gateway, mock_genre_gateway):
    # Arrange
    cat_a, cat_b = CategoryID.unique(), CategoryID.unique()
    mock_category_gateway.exists_by_ids.return_value = [cat_a, cat_b]
    use_case = CreateGenreUseCase(mock_category_gateway, mock_genre_gateway)

    # Act
    use_case.execute(CreateGenreCommand.with_("Ação", None, [cat_a.get_value(), cat_b.get_value()]))

    # Assert
    mock_category_gateway.exists_by_ids.assert_called_once_with([cat_a, cat_b])
    created = mock_genre_gateway.create.call_args.args[0]
    assert created.categories == (cat_a, cat_b)
    assert created.active is True


@pytest.mark.unit
@pytest.mark.use_case
def test_create_genre_reports_missing_category(mock_category_gateway, mock_genre_gateway):
    """A genre referencing one unknown category reports exactly one error naming it."""
    # Arrange
    cat_a, cat_b = CategoryID.unique(), CategoryID.unique()
    mock_category_gateway.exists_by_ids.return_value = [cat_a]
    use_case = CreateGenreUseCase(mock_category_gateway, mock_genre_gateway)

    # Act
    with pytest.raises(NotificationException) as exc_info:
        use_case.execute(CreateGenreCommand.with_("Ação", True, [cat_a.get_value(), cat_b.get_value()]))

    # Assert
    assert exc_info.value.message == "Could not create Aggregate Genre"
    assert exc_info.value.errors == [Error(f"Some categories could not be found: {cat_b.get_value()}")]
    mock_genre_gateway.create.assert_not_called()


@pytest.mark.unit
@pytest.mark.use_case
def test_create_genre_lists_every_missing_category(mock_category_gateway, mock_genre_gateway):
    cat_a, cat_b, cat_c = CategoryID.unique(), CategoryID.unique(), CategoryID.unique()
    mock_category_gateway.exists_by_ids.return_value = [cat_b]

    with pytest.raises(NotificationException) as exc_info:
        CreateGenreUseCase(mock_category_gateway, mock_genre_gateway).execute(
            CreateGenreCommand.with_("Ação", True, [cat_a.get_value(), cat_b.get_value(), cat_c.get_value()])
        )

    assert exc_info.value.errors == [
        Error(f"Some categories could not be found: {cat_a.get_value()}, {cat_c.get_value()}")
    ]


@pytest.mark.unit
@pytest.mark.use_case
def test_create_genre_accumulates_category_and_name_errors(mock_category_gateway, mock_genre_gateway):
    """Missing categories and an invalid name are both reported."""
    cat_a = CategoryID.unique()
    mock_category_gateway.exists_by_ids.return_value = []

    with pytest.raises(NotificationException) as exc_info:
        CreateGenreUseCase(mock_category_gateway, mock_genre_gateway).execute(
            CreateGenreCommand.with_(None, True, [cat_a.get_value()])
        )

    assert exc_info.value.errors == [
        Error(f"Some categories could not be found: {cat_a.get_value()}"),
        Error(NULL_NAME_ERROR),
    ]


@pytest.mark.unit
@pytest.mark.use_case
def test_create_genre_malformed_category_id(mock_category_gateway, mock_genre_gateway):
    with pytest.raises(DomainException, match="the Id 123 is invalid"):
        CreateGenreUseCase(mock_category_gateway, mock_genre_gateway).execute(
            CreateGenreCommand.with_("Ação", True, ["123"])
        )

    mock_genre_gateway.create.assert_not_called()


@pytest.mark.unit
@pytest.mark.use_case
def test_create_genre_gateway_failure_propagates(mock_category_gateway, mock_genre_gateway):
    mock_genre_gateway.create.side_effect = RuntimeError("Gateway error")

    with pytest.raises(RuntimeError, match="Gateway error"):
        CreateGenreUseCase(mock_category_gateway, mock_genre_gateway).execute(CreateGenreCommand.with_("Ação", True, []))


@pytest.mark.unit
@pytest.mark.use_case
def test_create_genre_against_in_memory_gateways(category_gateway, genre_gateway, movies_category):
    """End to end with real gateways: only the unknown category is reported."""
    category_gateway.create(movies_category)
    unknown = CategoryID.unique()
    use_case = CreateGenreUseCase(category_gateway, genre_gateway)

    with pytest.raises(NotificationException) as exc_info:
        use_case.execute(
            CreateGenreCommand.with_("Ação", True, [movies_category.id.get_value(), unknown.get_value()])
        )

    assert [e.message for e in exc_info.value.errors] == [f"Some categories could not be found: {unknown.get_value()}"]
    assert genre_gateway.count() == 0


# ============================================================================
# UpdateGenreUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
def test_update_genre_success(mock_category_gateway, mock_genre_gateway):
    # Arrange
    genre = Genre.new_genre("acao", True)
    cat_a = CategoryID.unique()
    mock_genre_gateway.find_by_id.return_value = genre
    mock_category_gateway.exists_by_ids.return_value = [cat_a]
    use_case = UpdateGenreUseCase(mock_category_gateway, mock_genre_gateway)

    # Act
    output = use_case.execute(UpdateGenreCommand.with_(genre.id.get_value(), "Ação", False, [cat_a.get_value()]))

    # Assert
    assert output.id == genre.id.get_value()
    updated = mock_genre_gateway.update.call_args.args[0]
    assert updated.name == "Ação"
    assert updated.active is False
    assert updated.deleted_at is not None
    assert updated.categories == (cat_a,)


@pytest.mark.unit
@pytest.mark.use_case
def test_update_genre_not_found(mock_category_gateway, mock_genre_gateway):
    mock_genre_gateway.find_by_id.return_value = None
    genre_id = GenreID.unique()

    with pytest.raises(NotFoundException) as exc_info:
        UpdateGenreUseCase(mock_category_gateway, mock_genre_gateway).execute(
            UpdateGenreCommand.with_(genre_id.get_value(), "Ação", True, [])
        )

    assert exc_info.value.message == f"Genre with ID {genre_id.get_value()} was not found"


@pytest.mark.unit
@pytest.mark.use_case
def test_update_genre_invalid_reports_all_errors(mock_category_gateway, mock_genre_gateway):
    # Arrange
    genre = Genre.new_genre("Ação", True)
    cat_a = CategoryID.unique()
    mock_genre_gateway.find_by_id.return_value = genre
    mock_category_gateway.exists_by_ids.return_value = []

    # Act
    with pytest.raises(NotificationException) as exc_info:
        UpdateGenreUseCase(mock_category_gateway, mock_genre_gateway).execute(
            UpdateGenreCommand.with_(genre.id.get_value(), None, True, [cat_a.get_value()])
        )

    # Assert
    assert exc_info.value.message == f"Could not update Aggregate Genre {genre.id.get_value()}"
    assert exc_info.value.errors == [
        Error(f"Some categories could not be found: {cat_a.get_value()}"),
        Error(NULL_NAME_ERROR),
    ]
    assert genre.name == "Ação"
    mock_genre_gateway.update.assert_not_called()


# ============================================================================
# DeleteGenreUseCase / GetGenreByIdUseCase / ListGenresUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
def test_delete_genre(mock_genre_gateway):
    genre_id = GenreID.unique()

    DeleteGenreUseCase(mock_genre_gateway).execute(genre_id.get_value())

    mock_genre_gateway.delete_by_id.assert_called_once_with(genre_id)


@pytest.mark.unit
@pytest.mark.use_case
def test_delete_genre_malformed_id_is_noop(mock_genre_gateway):
    DeleteGenreUseCase(mock_genre_gateway).execute("not-an-id")

    mock_genre_gateway.delete_by_id.assert_not_called()


@pytest.mark.unit
@pytest.mark.use_case
def test_get_genre_by_id(mock_genre_gateway):
    category = Category.new_category("Filmes")
    genre = Genre.new_genre("Ação", True, [category.id])
    mock_genre_gateway.find_by_id.return_value = genre

    output = GetGenreByIdUseCase(mock_genre_gateway).execute(genre.id.get_value())

    assert isinstance(output, GenreOutput)
    assert output.id == genre.id.get_value()
    assert output.name == "Ação"
    assert output.is_active is True
    assert output.categories == [category.id.get_value()]


@pytest.mark.unit
@pytest.mark.use_case
def test_get_genre_by_id_not_found(mock_genre_gateway):
    mock_genre_gateway.find_by_id.return_value = None

    with pytest.raises(NotFoundException, match="Genre with ID"):
        GetGenreByIdUseCase(mock_genre_gateway).execute(GenreID.unique().get_value())


@pytest.mark.unit
@pytest.mark.use_case
def test_get_genre_by_malformed_id_is_not_found(mock_genre_gateway):
    with pytest.raises(NotFoundException, match="Genre with ID abc was not found"):
        GetGenreByIdUseCase(mock_genre_gateway).execute("abc")


@pytest.mark.unit
@pytest.mark.use_case
def test_list_genres(mock_genre_gateway):
    genres = [Genre.new_genre("Ação"), Genre.new_genre("Drama")]
    mock_genre_gateway.find_all.return_value = Pagination.from_page(1, 2, 3, genres)

    page = ListGenresUseCase(mock_genre_gateway).execute(SearchQuery.of(1, 2, None, "name", "asc"))

    assert (page.page, page.per_page, page.total, page.total_pages) == (1, 2, 3, 2)
    assert all(isinstance(item, GenreListOutput) for item in page.data)
    assert [item.name for item in page.data] == ["Ação", "Drama"]
