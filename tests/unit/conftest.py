"""Общие fixtures: позиции меню для тестов корзины и checkout."""

from decimal import Decimal

import pytest

from src.core.domain import MenuItem, OptionGroup, SelectionMode


@pytest.fixture
def burrito() -> MenuItem:
    """Burrito: SINGLE size + MULTI toppings без default"""
    return MenuItem(
        id="burrito-carne",
        name="Carne Asada Burrito",
        description="Grilled steak, rice, beans",
        price=Decimal("9.50"),
        image="https://img.example/burrito.png",
        category="burritos",
        options=(
            OptionGroup(
                type="size",
                name="Size",
                choices=("Regular", "Large"),
                mode=SelectionMode.SINGLE,
                default="Regular",
            ),
            OptionGroup(
                type="toppings",
                name="Toppings",
                choices=("cheese", "salsa", "guacamole"),
                mode=SelectionMode.MULTI,
            ),
        ),
    )


@pytest.fixture
def taco() -> MenuItem:
    """Taco: MULTI toppings с default"""
    return MenuItem(
        id="taco-pastor",
        name="Al Pastor Taco",
        price=Decimal("3.25"),
        category="tacos",
        options=(
            OptionGroup(
                type="toppings",
                name="Toppings",
                choices=("cilantro", "onion", "pineapple"),
                mode=SelectionMode.MULTI,
                default=frozenset({"cilantro", "onion"}),
            ),
        ),
    )


@pytest.fixture
def horchata() -> MenuItem:
    """Напиток без опций"""
    return MenuItem(
        id="horchata",
        name="Horchata",
        price=Decimal("2.50"),
        category="drinks",
    )
