"""
Money — денежная арифметика на Decimal

Все денежные величины в ядре — Decimal без округления.
Округление выполняется ОДИН раз при отображении или сохранении заказа,
никогда построчно (иначе ошибка округления накапливается по строкам корзины).

Правило округления: round-half-even (банковское) до наименьшей единицы валюты (цент).
"""

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Final, Union


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Наименьшая единица валюты (USD cent)
CENT: Final[Decimal] = Decimal("0.01")

ZERO: Final[Decimal] = Decimal("0")

CURRENCY_SYMBOL: Final[str] = "$"


Number = Union[Decimal, int, float, str]


# =============================================================================
# КОНВЕРСИЯ И ОКРУГЛЕНИЕ
# =============================================================================


def to_decimal(value: Number) -> Decimal:
    """
    Конверсия числа в Decimal.

    float конвертируется через str(), чтобы 9.5 стало Decimal("9.5"),
    а не двоичным приближением.

    Raises:
        ValueError: Если значение не число или NaN/Inf
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise ValueError(f"Amount must be a number, got bool: {value}")
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        try:
            result = Decimal(value)
        except (InvalidOperation, TypeError) as e:
            raise ValueError(f"Amount must be a number, got {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return result


def round_money(amount: Decimal) -> Decimal:
    """
    Округление до цента (round-half-even).

    Examples:
        >>> round_money(Decimal("0.805"))
        Decimal('0.80')
        >>> round_money(Decimal("0.815"))
        Decimal('0.82')
    """
    return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)


def format_currency(amount: Number) -> str:
    """
    Форматирование суммы для отображения: $1,234.50

    Округляет по тому же правилу, что и round_money.
    """
    value = round_money(to_decimal(amount))
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,.2f}"
