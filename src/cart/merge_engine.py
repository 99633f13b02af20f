"""Cart Line Identity & Merge Engine.

Правило идентичности: две строки — одна и та же строка корзины тогда и только
тогда, когда совпадает идентификатор MenuItem И структурно совпадает Selection
(MULTI без учёта порядка, SINGLE точное совпадение, совпадают все группы).

- Совпадение → количество существующей строки увеличивается
- Иначе → новая строка добавляется в конец (порядок вставки сохраняется)

Ограничений на количество и число строк нет (политика UI/каталога).
Все операции чистые: возвращают новый Cart.
"""

import logging

from src.core.domain.cart import Cart, CartLine
from src.core.domain.menu import MenuItem
from src.core.domain.selection import Selection, validate_selection

logger = logging.getLogger(__name__)


def is_same_line(line: CartLine, item_id: str, selection: Selection) -> bool:
    """Проверка идентичности строки корзины"""
    return line.item_id == item_id and line.selection.identity_key() == selection.identity_key()


def find_line(cart: Cart, item_id: str, selection: Selection) -> int:
    """Индекс совпадающей строки или -1"""
    for index, line in enumerate(cart.lines):
        if is_same_line(line, item_id, selection):
            return index
    return -1


def add_to_cart(cart: Cart, item: MenuItem, selection: Selection, quantity: int = 1) -> Cart:
    """Добавление настроенной позиции в корзину.

    Args:
        cart: текущая корзина
        item: позиция меню
        selection: выбор опций (проверяется против групп позиции)
        quantity: добавляемое количество (>= 1)

    Returns:
        Новая корзина

    Raises:
        ValueError: Если quantity < 1
        SelectionError: Если selection не соответствует группам позиции
    """
    if quantity < 1:
        raise ValueError(f"quantity must be >= 1, got {quantity}")
    validate_selection(item, selection)

    index = find_line(cart, item.id, selection)
    if index >= 0:
        existing = cart.lines[index]
        merged = existing.with_quantity(existing.quantity + quantity)
        logger.debug(
            "Merged item %s into line %d, quantity %d -> %d",
            item.id, index, existing.quantity, merged.quantity,
        )
        lines = cart.lines[:index] + (merged,) + cart.lines[index + 1:]
        return Cart(lines=lines)

    line = CartLine(
        item_id=item.id,
        name=item.name,
        image=item.image,
        unit_price=item.price,
        quantity=quantity,
        selection=selection,
    )
    logger.debug("Appended item %s as line %d", item.id, len(cart.lines))
    return Cart(lines=cart.lines + (line,))


def _check_index(cart: Cart, line_index: int) -> None:
    if not 0 <= line_index < len(cart.lines):
        raise IndexError(
            f"Cart line index {line_index} out of range (cart has {len(cart.lines)} lines)"
        )


def remove_item(cart: Cart, line_index: int) -> Cart:
    """Удаление ровно одной строки по индексу.

    Оставшиеся строки не перенумеровываются логически и не сливаются.

    Raises:
        IndexError: Если индекс вне диапазона
    """
    _check_index(cart, line_index)
    return Cart(lines=cart.lines[:line_index] + cart.lines[line_index + 1:])


def update_quantity(cart: Cart, line_index: int, new_quantity: int) -> Cart:
    """Изменение количества строки по индексу.

    Адресация по индексу: две строки могут иметь одинаковый item_id
    с разными опциями. new_quantity <= 0 эквивалентно remove_item.

    Raises:
        IndexError: Если индекс вне диапазона
    """
    if new_quantity <= 0:
        return remove_item(cart, line_index)

    _check_index(cart, line_index)
    line = cart.lines[line_index].with_quantity(new_quantity)
    return Cart(lines=cart.lines[:line_index] + (line,) + cart.lines[line_index + 1:])
