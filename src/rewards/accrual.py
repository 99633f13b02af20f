"""
Rewards Accrual Model — прогресс к следующей награде

Ядро только отображает прогресс по заданному числу баллов:
- progress_percent = min(100, 100 × p / T)
- points_to_next   = T − (p mod T)

Начисление баллов ("1 балл за $1 суммы заказа") — политика внешнего
Profile Store, здесь не вычисляется.

Точное кратное порогу (p mod T == 0, p > 0) даёт points_to_next = T,
хотя уровень только что достигнут. Поведение сохранено как есть.
"""

from dataclasses import dataclass
from typing import Any, Dict, Final, Optional

from pydantic import BaseModel, Field


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Порог следующей награды (баллы)
REWARD_THRESHOLD_DEFAULT: Final[int] = 2000

# Правило начисления внешнего хранилища: баллов за $1 (справочно)
EARN_POINTS_PER_DOLLAR: Final[int] = 1


@dataclass(frozen=True)
class RewardsConfig:
    """Конфигурация программы лояльности.

    threshold > 0 — инвариант конфигурации, в расчётах не проверяется.
    """

    threshold: int = REWARD_THRESHOLD_DEFAULT


# =============================================================================
# РАСЧЁТЫ
# =============================================================================


def progress_percent(points: int, threshold: int = REWARD_THRESHOLD_DEFAULT) -> float:
    """
    Прогресс к награде в процентах, ограничен 100.

    Монотонно не убывает по points.

    Examples:
        >>> progress_percent(500)
        25.0
        >>> progress_percent(5000)
        100.0
    """
    return min(100.0, 100.0 * points / threshold)


def points_to_next(points: int, threshold: int = REWARD_THRESHOLD_DEFAULT) -> int:
    """
    Баллов до следующей награды.

    Examples:
        >>> points_to_next(0)
        2000
        >>> points_to_next(2500)
        1500
        >>> points_to_next(2000)
        2000
    """
    return threshold - (points % threshold)


def points_from_document(document: Optional[Dict[str, Any]]) -> int:
    """
    Число баллов из документа профиля.

    Отсутствие документа или поля value — ноль баллов, не ошибка.
    """
    if not document:
        return 0
    value = document.get("value")
    if not value:
        return 0
    return max(0, int(value))


# =============================================================================
# МОДЕЛИ
# =============================================================================


class RewardsProfile(BaseModel):
    """
    Профиль лояльности владельца.

    Баллы принадлежат внешнему Profile Store; профиль — только снапшот
    для вычисления производных значений отображения.
    """

    owner_id: str = Field(..., min_length=1, description="Владелец")
    points: int = Field(0, ge=0, description="Накопленные баллы")
    threshold: int = Field(REWARD_THRESHOLD_DEFAULT, gt=0, description="Порог следующей награды")

    model_config = {"frozen": True}

    def progress(self) -> "RewardsProgress":
        return RewardsProgress.compute(self.points, self.threshold)


class RewardsProgress(BaseModel):
    """Производные значения отображения прогресса"""

    points: int = Field(..., ge=0)
    threshold: int = Field(..., gt=0)
    percent: float = Field(..., ge=0, le=100)
    points_to_next: int = Field(..., gt=0)

    model_config = {"frozen": True}

    @classmethod
    def compute(cls, points: int, threshold: int = REWARD_THRESHOLD_DEFAULT) -> "RewardsProgress":
        return cls(
            points=points,
            threshold=threshold,
            percent=progress_percent(points, threshold),
            points_to_next=points_to_next(points, threshold),
        )

    @property
    def percent_label(self) -> str:
        """Подпись прогресс-бара: "42% Complete" """
        return f"{self.percent:.0f}% Complete"
