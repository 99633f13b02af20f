"""Pricing Calculator — subtotal, налог и итог корзины.

- subtotal = Σ (unit_price × quantity) по строкам
- tax = subtotal × tax_rate (tax_rate — конфигурация, по умолчанию 8%)
- total = subtotal + tax

Расчёт ведётся в Decimal без округления. Правило округления
(round-half-even до цента) применяется ОДИН раз в CartTotals.rounded():
subtotal и tax округляются по отдельности, total = их сумма,
чтобы чек всегда сходился.

Наценки за опции — точка расширения (в базовых данных каталога их нет).
"""

from dataclasses import dataclass
from decimal import Decimal

from src.core.domain.cart import Cart, CartLine
from src.core.math.money import ZERO, round_money, to_decimal


DEFAULT_TAX_RATE = Decimal("0.08")


@dataclass(frozen=True)
class PricingConfig:
    """Конфигурация ценообразования.

    tax_rate зависит от юрисдикции и передаётся явно.
    """

    tax_rate: Decimal = DEFAULT_TAX_RATE

    def __post_init__(self):
        rate = to_decimal(self.tax_rate)
        if rate < 0:
            raise ValueError(f"tax_rate cannot be negative: {rate}")
        object.__setattr__(self, "tax_rate", rate)


@dataclass(frozen=True)
class CartTotals:
    """Итоги корзины (точные или округлённые)."""

    subtotal: Decimal
    tax: Decimal
    total: Decimal

    def rounded(self) -> "CartTotals":
        """Округление до цента по правилу round-half-even"""
        subtotal = round_money(self.subtotal)
        tax = round_money(self.tax)
        return CartTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)


def line_extension(line: CartLine) -> Decimal:
    """Стоимость строки: unit_price × quantity"""
    return line.unit_price * line.quantity


def calculate_totals(cart: Cart, config: PricingConfig = PricingConfig()) -> CartTotals:
    """Расчёт итогов корзины (чистая функция, без округления).

    Args:
        cart: корзина
        config: конфигурация (ставка налога)

    Returns:
        CartTotals с точными значениями
    """
    subtotal = sum((line_extension(line) for line in cart.lines), ZERO)
    tax = subtotal * config.tax_rate
    return CartTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)
