"""Unit tests for the shared keyed repository."""
from decimal import Decimal

import pytest
from pydantic import Field, ValidationError

from crud_apps.core.entity import Entity
from crud_apps.core.exceptions import (
    DuplicateKeyError,
    InvalidValueError,
    NotFoundError,
    RepositoryError,
)
from crud_apps.core.repository import KeyedRepository


class Widget(Entity):
    name: str
    quantity: int


def make_repo(*widgets: Widget) -> KeyedRepository[Widget]:
    repo: KeyedRepository[Widget] = KeyedRepository(name="widgets")
    repo.extend(widgets)
    return repo


class TestAddAndList:
    """Tests for add and list_all."""

    def test_distinct_ids_are_all_listed(self):
        """Every entity added with a distinct id shows up in list_all."""
        widgets = [Widget(id=i, name=f"w{i}", quantity=i) for i in (3, 1, 2)]
        repo = make_repo(*widgets)

        assert repo.list_all() == widgets
        assert len(repo) == 3

    def test_duplicate_id_rejected_and_original_kept(self):
        """Adding an existing id raises and leaves the stored entity untouched."""
        original = Widget(id=1, name="bolt", quantity=4)
        repo = make_repo(original)

        with pytest.raises(DuplicateKeyError, match="Item with ID 1 already exists"):
            repo.add(Widget(id=1, name="nut", quantity=99))

        assert repo.get_by_id(1) == original
        assert len(repo) == 1

    def test_list_all_is_a_snapshot(self):
        """Mutating the returned list does not affect the repository."""
        repo = make_repo(Widget(id=1, name="bolt", quantity=4))
        listing = repo.list_all()
        listing.clear()

        assert len(repo.list_all()) == 1

    def test_extend_stops_at_first_duplicate(self):
        repo = make_repo(Widget(id=1, name="a", quantity=1))

        with pytest.raises(DuplicateKeyError):
            repo.extend([Widget(id=2, name="b", quantity=1), Widget(id=1, name="c", quantity=1)])

        assert 2 in repo
        assert repo.get_by_id(1).name == "a"


class TestGetAndRemove:
    """Tests for get_by_id and remove."""

    def test_get_missing_id_raises(self):
        repo = make_repo()

        with pytest.raises(NotFoundError, match="Item with ID 7 not found"):
            repo.get_by_id(7)

    def test_remove_then_get_raises(self):
        """A removed id can no longer be looked up."""
        repo = make_repo(Widget(id=5, name="gear", quantity=2))
        repo.remove(5)

        with pytest.raises(NotFoundError):
            repo.get_by_id(5)

    def test_remove_missing_id_raises(self):
        repo = make_repo()

        with pytest.raises(NotFoundError, match="not found for removal"):
            repo.remove(999)

    def test_errors_share_a_base_class(self):
        repo = make_repo()

        with pytest.raises(RepositoryError):
            repo.remove(1)


class TestUpdateQuantity:
    """Tests for update_quantity."""

    def test_update_replaces_field(self):
        repo = make_repo(Widget(id=1, name="bolt", quantity=4))

        updated = repo.update_quantity(1, 10)

        assert updated.quantity == 10
        assert repo.get_by_id(1).quantity == 10
        assert repo.get_by_id(1).name == "bolt"

    def test_update_does_not_touch_previously_returned_entity(self):
        """Entities handed out earlier keep their values after an update."""
        repo = make_repo(Widget(id=1, name="bolt", quantity=4))
        before = repo.get_by_id(1)

        repo.update_quantity(1, 10)

        assert before.quantity == 4

    def test_negative_value_rejected_and_quantity_unchanged(self):
        repo = make_repo(Widget(id=2, name="gear", quantity=10))

        with pytest.raises(InvalidValueError, match="Quantity cannot be negative"):
            repo.update_quantity(2, -5)

        assert repo.get_by_id(2).quantity == 10

    def test_negative_value_checked_before_missing_id(self):
        repo = make_repo()

        with pytest.raises(InvalidValueError):
            repo.update_quantity(42, -1)

    def test_missing_id_raises(self):
        repo = make_repo()

        with pytest.raises(NotFoundError, match="not found for update"):
            repo.update_quantity(42, 1)

    def test_zero_is_allowed(self):
        repo = make_repo(Widget(id=1, name="bolt", quantity=4))

        assert repo.update_quantity(1, 0).quantity == 0

    def test_custom_quantity_field(self):
        class Payment(Entity):
            amount: int

        repo: KeyedRepository[Payment] = KeyedRepository(quantity_field="amount")
        repo.add(Payment(id=1, amount=5))

        assert repo.update_quantity(1, 8).amount == 8

    def test_repository_without_quantity_field(self):
        repo: KeyedRepository[Widget] = KeyedRepository(quantity_field=None)
        repo.add(Widget(id=1, name="bolt", quantity=4))

        with pytest.raises(TypeError):
            repo.update_quantity(1, 3)

    def test_fractional_value_for_int_field_rejected(self):
        """A value the field type cannot hold is rejected and the stored entity kept."""
        repo = make_repo(Widget(id=1, name="bolt", quantity=4))

        with pytest.raises(InvalidValueError, match="Invalid quantity value: 2.5"):
            repo.update_quantity(1, 2.5)

        assert repo.get_by_id(1).quantity == 4
        assert type(repo.get_by_id(1).quantity) is int

    def test_value_coerced_to_field_type(self):
        class Payment(Entity):
            amount: Decimal

        repo: KeyedRepository[Payment] = KeyedRepository(quantity_field="amount")
        repo.add(Payment(id=1, amount=Decimal("5.25")))

        updated = repo.update_quantity(1, 8)

        assert isinstance(updated.amount, Decimal)
        assert updated.amount == Decimal("8")

    def test_field_constraints_checked_on_update(self):
        class Seat(Entity):
            quantity: int = Field(..., le=10)

        repo: KeyedRepository[Seat] = KeyedRepository()
        repo.add(Seat(id=1, quantity=3))

        with pytest.raises(InvalidValueError):
            repo.update_quantity(1, 11)
        assert repo.get_by_id(1).quantity == 3


class TestEntity:
    """Tests for the frozen entity base."""

    def test_entities_are_frozen(self):
        widget = Widget(id=1, name="bolt", quantity=4)

        with pytest.raises(ValidationError):
            widget.quantity = 3


class TestToFrame:
    """Tests for the tabular view."""

    def test_frame_indexed_by_id(self):
        repo = make_repo(Widget(id=1, name="bolt", quantity=4), Widget(id=2, name="nut", quantity=6))

        df = repo.to_frame()

        assert list(df.index) == [1, 2]
        assert list(df.columns) == ["name", "quantity"]
        assert df.loc[2, "quantity"] == 6

    def test_empty_repository_gives_empty_frame(self):
        assert make_repo().to_frame().empty
