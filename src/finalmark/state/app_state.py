from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from finalmark.core.models import CalculationInput
from finalmark.core.parsing import parse_target, parse_weight
from finalmark.state.registry import ComponentRegistry
from finalmark.state.scenario import ScenarioController


class TargetMode(str, Enum):
    NONE = "none"
    PRESET = "preset"
    CUSTOM = "custom"


@dataclass
class TargetSelection:
    mode: TargetMode = TargetMode.NONE
    preset: Optional[float] = None
    custom_text: str = ""

    @property
    def grade(self) -> Optional[float]:
        if self.mode is TargetMode.PRESET:
            return self.preset
        if self.mode is TargetMode.CUSTOM:
            return parse_target(self.custom_text)
        return None

    def clear(self) -> None:
        self.mode = TargetMode.NONE
        self.preset = None
        self.custom_text = ""


@dataclass
class CalculatorState:
    registry: ComponentRegistry = field(default_factory=ComponentRegistry)
    scenario: ScenarioController = field(default_factory=ScenarioController)
    target: TargetSelection = field(default_factory=TargetSelection)
    final_weight_text: str = ""

    @property
    def final_weight(self) -> float:
        return parse_weight(self.final_weight_text)

    @property
    def target_grade(self) -> Optional[float]:
        return self.target.grade

    @property
    def total_weight(self) -> float:
        return self.registry.total_weight(self.final_weight)

    @property
    def ready_for_auto_calculation(self) -> bool:
        return self.final_weight > 0 and self.target_grade is not None

    def build_input(self) -> CalculationInput:
        return CalculationInput(
            components=self.registry.snapshot(),
            final_weight=self.final_weight,
            target_grade=self.target_grade,
            scenario_value=self.scenario.value,
        )
