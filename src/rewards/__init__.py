"""Rewards — прогресс программы лояльности."""

from .accrual import (
    EARN_POINTS_PER_DOLLAR,
    REWARD_THRESHOLD_DEFAULT,
    RewardsConfig,
    RewardsProfile,
    RewardsProgress,
    points_from_document,
    points_to_next,
    progress_percent,
)
from .tracker import RewardsTracker

__all__ = [
    "EARN_POINTS_PER_DOLLAR",
    "REWARD_THRESHOLD_DEFAULT",
    "RewardsConfig",
    "RewardsProfile",
    "RewardsProgress",
    "RewardsTracker",
    "points_from_document",
    "points_to_next",
    "progress_percent",
]
