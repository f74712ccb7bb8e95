from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

SCENARIO_MIN = 0
SCENARIO_MAX = 100


class ScenarioSource(str, Enum):
    SLIDER = "slider"
    PRESET = "preset"
    RESET = "reset"


ScenarioListener = Callable[[int, ScenarioSource], None]


def _normalize(value: float) -> int:
    return max(SCENARIO_MIN, min(SCENARIO_MAX, int(round(value))))


@dataclass
class ScenarioController:
    """Assumed score for blank components, shared by the slider and the preset buttons."""

    presets: tuple[int, ...] = (0, 50, 70, 85, 100)
    value: int = 0
    _listeners: list[ScenarioListener] = field(default_factory=list, repr=False, compare=False)

    def subscribe(self, listener: ScenarioListener) -> None:
        self._listeners.append(listener)

    def set_from_slider(self, value: float) -> int:
        return self._set(value, ScenarioSource.SLIDER)

    def set_from_preset(self, value: float) -> int:
        return self._set(value, ScenarioSource.PRESET)

    def reset(self) -> int:
        return self._set(SCENARIO_MIN, ScenarioSource.RESET)

    @property
    def active_preset(self) -> Optional[int]:
        return self.value if self.value in self.presets else None

    def _set(self, value: float, source: ScenarioSource) -> int:
        self.value = _normalize(value)
        logger.debug("Scenario value set to %s via %s", self.value, source.value)
        for listener in list(self._listeners):
            listener(self.value, source)
        return self.value
