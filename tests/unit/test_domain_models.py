"""
Unit tests для domain models (MenuItem, OptionGroup, Selection, Cart, Order)

Проверяет:
1. Валидацию групп опций (default согласован с режимом и choices)
2. Структурное равенство Selection
3. Immutability (frozen=True)
4. Документ заказа (to_document)
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Cart,
    CartLine,
    MenuItem,
    MultiChoice,
    OptionGroup,
    Order,
    OrderLineItem,
    OrderStatus,
    Selection,
    SelectionError,
    SelectionMode,
    SingleChoice,
    validate_selection,
)


# =============================================================================
# OPTION GROUP / MENU ITEM
# =============================================================================


class TestOptionGroup:
    """Тесты для OptionGroup"""

    def test_single_requires_default(self) -> None:
        with pytest.raises(ValidationError, match="single default"):
            OptionGroup(type="size", name="Size", choices=("S", "L"), mode=SelectionMode.SINGLE)

    def test_single_default_must_be_choice(self) -> None:
        with pytest.raises(ValidationError, match="not a choice"):
            OptionGroup(
                type="size", name="Size", choices=("S", "L"), mode=SelectionMode.SINGLE, default="XL"
            )

    def test_multi_default_none_becomes_empty_set(self) -> None:
        group = OptionGroup(type="extras", name="Extras", choices=("a", "b"), mode=SelectionMode.MULTI)
        assert group.default == frozenset()

    @pytest.mark.parametrize("mode", [SelectionMode.MULTI, "multi"])
    def test_multi_explicit_none_default(self, mode) -> None:
        """Явный default=None для MULTI нормализуется до валидации модели"""
        group = OptionGroup.model_validate(
            {"type": "extras", "name": "Extras", "choices": ["a"], "mode": mode, "default": None}
        )
        assert group.default == frozenset()
        assert group.model_copy().default == frozenset()

    def test_single_none_default_not_normalized(self) -> None:
        with pytest.raises(ValidationError, match="single default"):
            OptionGroup(type="size", name="Size", choices=("S",), mode="single", default=None)

    def test_multi_rejects_single_label_default(self) -> None:
        with pytest.raises(ValidationError, match="set of default labels"):
            OptionGroup(
                type="extras", name="Extras", choices=("a", "b"), mode=SelectionMode.MULTI, default="a"
            )

    def test_multi_default_must_be_choices(self) -> None:
        with pytest.raises(ValidationError, match="not choices"):
            OptionGroup(
                type="extras",
                name="Extras",
                choices=("a", "b"),
                mode=SelectionMode.MULTI,
                default=frozenset({"a", "z"}),
            )

    def test_duplicate_choices_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate choices"):
            OptionGroup(
                type="size", name="Size", choices=("S", "S"), mode=SelectionMode.SINGLE, default="S"
            )


class TestMenuItem:
    """Тесты для MenuItem"""

    def test_option_group_lookup(self, burrito) -> None:
        assert burrito.option_group("size").mode == SelectionMode.SINGLE
        assert burrito.option_group("spice") is None

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MenuItem(id="x", name="X", price=Decimal("-1"), category="sides")

    def test_duplicate_group_types_rejected(self) -> None:
        group = OptionGroup(type="extras", name="Extras", choices=("a",), mode=SelectionMode.MULTI)
        with pytest.raises(ValidationError, match="duplicate option group"):
            MenuItem(id="x", name="X", price=Decimal("1"), category="sides", options=(group, group))

    def test_immutable(self, burrito) -> None:
        with pytest.raises(ValidationError):
            burrito.price = Decimal("1.00")


# =============================================================================
# SELECTION
# =============================================================================


class TestSelection:
    """Тесты для Selection"""

    def test_structural_equality(self) -> None:
        first = Selection(
            choices={
                "size": SingleChoice(value="Large"),
                "toppings": MultiChoice(values=frozenset(["cheese", "salsa"])),
            }
        )
        second = Selection(
            choices={
                "toppings": MultiChoice(values=frozenset(["salsa", "cheese"])),
                "size": SingleChoice(value="Large"),
            }
        )
        assert first == second
        assert first.identity_key() == second.identity_key()

    def test_single_and_multi_never_equal(self) -> None:
        single = Selection(choices={"extras": SingleChoice(value="a")})
        multi = Selection(choices={"extras": MultiChoice(values=frozenset({"a"}))})
        assert single.identity_key() != multi.identity_key()

    def test_discriminated_parse(self) -> None:
        selection = Selection.model_validate(
            {
                "choices": {
                    "size": {"mode": "single", "value": "Large"},
                    "toppings": {"mode": "multi", "values": ["salsa"]},
                }
            }
        )
        assert isinstance(selection.get("size"), SingleChoice)
        assert isinstance(selection.get("toppings"), MultiChoice)

    def test_replace_is_copy_on_write(self) -> None:
        original = Selection(choices={"size": SingleChoice(value="Regular")})
        updated = original.replace("size", SingleChoice(value="Large"))
        assert original.get("size").value == "Regular"
        assert updated.get("size").value == "Large"

    def test_to_document_and_describe(self) -> None:
        selection = Selection(
            choices={
                "size": SingleChoice(value="Large"),
                "toppings": MultiChoice(values=frozenset(["salsa", "cheese"])),
            }
        )
        assert selection.to_document() == {"size": "Large", "toppings": ["cheese", "salsa"]}
        assert selection.describe() == "Size: Large | Toppings: cheese, salsa"

    def test_empty_describe(self) -> None:
        assert Selection().describe() == ""

    def test_validate_selection_accepts_valid(self, burrito) -> None:
        selection = Selection(
            choices={
                "size": SingleChoice(value="Large"),
                "toppings": MultiChoice(),
            }
        )
        validate_selection(burrito, selection)

    def test_validate_selection_single_given_set(self, burrito) -> None:
        selection = Selection(
            choices={
                "size": MultiChoice(values=frozenset({"Large"})),
                "toppings": MultiChoice(),
            }
        )
        with pytest.raises(SelectionError, match="is SINGLE"):
            validate_selection(burrito, selection)


# =============================================================================
# CART / ORDER
# =============================================================================


class TestCartModels:
    """Тесты для Cart и CartLine"""

    def test_quantity_at_least_one(self) -> None:
        with pytest.raises(ValidationError):
            CartLine(item_id="x", name="X", unit_price=Decimal("1"), quantity=0)

    def test_with_quantity_returns_copy(self) -> None:
        line = CartLine(item_id="x", name="X", unit_price=Decimal("1"), quantity=1)
        assert line.with_quantity(4).quantity == 4
        assert line.quantity == 1

    def test_empty_cart(self) -> None:
        cart = Cart()
        assert cart.is_empty
        assert cart.item_count == 0


class TestOrder:
    """Тесты для Order"""

    @pytest.fixture
    def order(self) -> Order:
        return Order(
            owner_id="user-1",
            items=(
                OrderLineItem(
                    id="horchata",
                    name="Horchata",
                    price=Decimal("2.50"),
                    quantity=2,
                ),
            ),
            subtotal=Decimal("5.00"),
            tax=Decimal("0.40"),
            total=Decimal("5.40"),
        )

    def test_defaults(self, order) -> None:
        assert order.status == OrderStatus.PENDING
        assert order.created_at is None
        assert order.order_id is None

    def test_to_document(self, order) -> None:
        assert order.to_document() == {
            "userId": "user-1",
            "items": [
                {"id": "horchata", "name": "Horchata", "price": 2.5, "quantity": 2, "options": {}}
            ],
            "subtotal": 5.0,
            "tax": 0.4,
            "total": 5.4,
            "status": "pending",
        }

    def test_populate_by_alias(self) -> None:
        order = Order.model_validate(
            {
                "userId": "user-2",
                "items": [{"id": "a", "name": "A", "price": 1, "quantity": 1}],
                "subtotal": 1,
                "tax": 0,
                "total": 1,
            }
        )
        assert order.owner_id == "user-2"

    def test_confirmed(self, order) -> None:
        created = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        confirmed = order.confirmed("order-9", created)
        assert confirmed.order_id == "order-9"
        assert confirmed.created_at == created
        assert order.order_id is None

    def test_requires_items(self) -> None:
        with pytest.raises(ValidationError):
            Order(owner_id="u", items=(), subtotal=0, tax=0, total=0)

    def test_immutable(self, order) -> None:
        with pytest.raises(ValidationError):
            order.status = OrderStatus.READY
