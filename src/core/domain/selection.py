"""
Selection — Конкретный выбор опций для одной строки корзины

Tagged union по режиму группы:
- SingleChoice: одна метка (группа SINGLE)
- MultiChoice: множество меток (группа MULTI)

Равенство Selection структурное: dict сравнивается без учёта порядка ключей,
frozenset — без учёта порядка меток. Это правило идентичности строк корзины.
"""

from typing import Annotated, Any, Dict, Iterator, Literal, Optional, Union

from pydantic import BaseModel, Field

from .menu import MenuItem, SelectionMode


# =============================================================================
# CHOICES (tagged union)
# =============================================================================


class SingleChoice(BaseModel):
    """Выбор в SINGLE-группе"""

    mode: Literal["single"] = "single"
    value: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    def labels(self) -> frozenset[str]:
        return frozenset({self.value})

    def to_document(self) -> str:
        return self.value


class MultiChoice(BaseModel):
    """Выбор в MULTI-группе (возможно пустой)"""

    mode: Literal["multi"] = "multi"
    values: frozenset[str] = Field(default_factory=frozenset)

    model_config = {"frozen": True}

    def labels(self) -> frozenset[str]:
        return self.values

    def to_document(self) -> list[str]:
        # Детерминированный порядок для сохраняемого документа
        return sorted(self.values)


Choice = Annotated[Union[SingleChoice, MultiChoice], Field(discriminator="mode")]


# =============================================================================
# SELECTION
# =============================================================================


class SelectionError(ValueError):
    """Selection не соответствует группам опций позиции меню."""

    pass


class Selection(BaseModel):
    """
    Отображение: тег группы опций → выбор.

    Immutable (frozen=True). Все изменения создают новый экземпляр
    (copy-on-write), предыдущий Selection не мутируется.
    """

    choices: Dict[str, Choice] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def group_types(self) -> Iterator[str]:
        return iter(self.choices)

    def get(self, group_type: str) -> Optional[Union[SingleChoice, MultiChoice]]:
        return self.choices.get(group_type)

    def identity_key(self) -> frozenset:
        """
        Ключ структурного равенства: не зависит от порядка групп
        и от порядка меток внутри MULTI.
        """
        return frozenset(
            (group_type, choice.mode, choice.labels())
            for group_type, choice in self.choices.items()
        )

    def replace(self, group_type: str, choice: Union[SingleChoice, MultiChoice]) -> "Selection":
        """Новый Selection, в котором изменена только одна группа"""
        updated = dict(self.choices)
        updated[group_type] = choice
        return Selection(choices=updated)

    def to_document(self) -> Dict[str, Any]:
        """
        Представление для документа заказа: строка для SINGLE,
        отсортированный список для MULTI.
        """
        return {group_type: choice.to_document() for group_type, choice in self.choices.items()}

    def describe(self) -> str:
        """
        Строка для отображения в корзине.

        Example: "Size: Large | Toppings: cheese, salsa"
        """
        parts = []
        for group_type, choice in self.choices.items():
            label = group_type[:1].upper() + group_type[1:]
            value = choice.to_document()
            display = ", ".join(value) if isinstance(value, list) else value
            parts.append(f"{label}: {display}")
        return " | ".join(parts)


def validate_selection(item: MenuItem, selection: Selection) -> None:
    """
    Проверка инварианта Selection для позиции меню.

    Каждая группа опций позиции имеет ровно одну запись; SINGLE-записи
    никогда не множества и наоборот; все метки берутся из choices группы.

    Raises:
        SelectionError: Если инвариант нарушен
    """
    expected = {group.type for group in item.options}
    actual = set(selection.choices)

    missing = expected - actual
    if missing:
        raise SelectionError(f"Item '{item.id}': missing selection for {sorted(missing)}")

    extra = actual - expected
    if extra:
        raise SelectionError(f"Item '{item.id}': unknown option groups {sorted(extra)}")

    for group in item.options:
        choice = selection.choices[group.type]
        if group.mode == SelectionMode.SINGLE and not isinstance(choice, SingleChoice):
            raise SelectionError(
                f"Item '{item.id}': group '{group.type}' is SINGLE but got a set of labels"
            )
        if group.mode == SelectionMode.MULTI and not isinstance(choice, MultiChoice):
            raise SelectionError(
                f"Item '{item.id}': group '{group.type}' is MULTI but got a single label"
            )

        unknown = choice.labels() - set(group.choices)
        if unknown:
            raise SelectionError(
                f"Item '{item.id}': {sorted(unknown)} are not choices of group '{group.type}'"
            )
