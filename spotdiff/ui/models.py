"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from spotdiff.core.journey import JourneyMap, MapNode
from spotdiff.core.levels import LevelConfig, is_completed, is_unlocked, parameters_for


@dataclass
class LevelState:
    """UI state for one journey node: parameters, unlock and completion status."""

    config: LevelConfig
    node: MapNode
    unlocked: bool
    completed: bool
    is_current: bool = False

    @property
    def level(self) -> int:
        return self.config.level

    @property
    def status_label(self) -> str:
        if self.completed:
            return "Completed"
        if self.unlocked:
            return "Available"
        return "Locked"


def build_level_states(journey: JourneyMap, current_level: int) -> List[LevelState]:
    return [
        LevelState(
            config=parameters_for(node.level),
            node=node,
            unlocked=is_unlocked(node.level, current_level),
            completed=is_completed(node.level, current_level),
            is_current=node.level == current_level,
        )
        for node in journey.nodes()
    ]
