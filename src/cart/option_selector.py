"""Option Selector — разрешение групп опций позиции в конкретный Selection.

- initial_selection: Selection из default каждой группы
- toggle: MULTI переключает метку, SINGLE заменяет значение
- OptionSelector: сессия редактирования позиции (выбор + количество)

Ошибочного пути нет: неизвестная группа — no-op.
"""

from decimal import Decimal

from src.core.domain.menu import MenuItem, SelectionMode
from src.core.domain.selection import MultiChoice, Selection, SingleChoice


def initial_selection(item: MenuItem) -> Selection:
    """Selection из default каждой группы опций.

    MULTI default копируется в независимый frozenset, чтобы выбор
    не разделял состояние с default каталога.
    """
    choices = {}
    for group in item.options:
        if group.mode == SelectionMode.MULTI:
            choices[group.type] = MultiChoice(values=frozenset(group.default or ()))
        else:
            choices[group.type] = SingleChoice(value=group.default)
    return Selection(choices=choices)


def toggle(item: MenuItem, selection: Selection, group_type: str, value: str) -> Selection:
    """Переключение выбора в одной группе.

    Args:
        item: позиция меню (источник режима группы)
        selection: текущий выбор (не мутируется)
        group_type: тег группы
        value: метка варианта

    Returns:
        Новый Selection, в котором изменена только группа group_type
    """
    group = item.option_group(group_type)
    if group is None:
        return selection

    if group.mode == SelectionMode.MULTI:
        current = selection.get(group_type)
        labels = current.labels() if current is not None else frozenset()
        if value in labels:
            labels = labels - {value}
        else:
            labels = labels | {value}
        return selection.replace(group_type, MultiChoice(values=labels))

    return selection.replace(group_type, SingleChoice(value=value))


class OptionSelector:
    """Сессия настройки позиции перед добавлением в корзину.

    Хранит текущий Selection и количество (минимум 1).
    """

    def __init__(self, item: MenuItem, quantity: int = 1):
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")
        self.item = item
        self.selection = initial_selection(item)
        self.quantity = quantity

    def toggle(self, group_type: str, value: str) -> Selection:
        self.selection = toggle(self.item, self.selection, group_type, value)
        return self.selection

    def is_selected(self, group_type: str, value: str) -> bool:
        choice = self.selection.get(group_type)
        return choice is not None and value in choice.labels()

    def increment(self) -> int:
        self.quantity += 1
        return self.quantity

    def decrement(self) -> int:
        # Количество в диалоге не опускается ниже 1
        self.quantity = max(1, self.quantity - 1)
        return self.quantity

    def preview_price(self) -> Decimal:
        """Цена за единицу × количество, без налога"""
        return self.item.price * self.quantity
