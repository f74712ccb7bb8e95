from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


@dataclass
class Component:
    id: int
    name: str = ""
    weight: float = 0.0
    score: Optional[float] = None

    @property
    def has_score(self) -> bool:
        return self.score is not None


@dataclass(frozen=True)
class CalculationInput:
    components: tuple[Component, ...] = field(default_factory=tuple)
    final_weight: float = 0.0
    target_grade: Optional[float] = None
    scenario_value: int = 0


class FailureKind(str, Enum):
    MISSING_FINAL_WEIGHT = "MissingFinalWeight"
    MISSING_TARGET_GRADE = "MissingTargetGrade"
    WEIGHT_MISMATCH = "WeightMismatch"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: str = ""
    kind: Optional[FailureKind] = None


@dataclass(frozen=True)
class Success:
    required_score: float
    current_weighted: float
    target_grade: float
    final_weight: float
    completed_weight: float

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    message: str
    kind: Optional[FailureKind] = None

    @property
    def success(self) -> bool:
        return False


CalculationResult = Union[Success, Failure]
