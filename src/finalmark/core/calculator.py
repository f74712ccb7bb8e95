from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable, Optional

from finalmark.core.models import (
    CalculationInput,
    CalculationResult,
    Component,
    Failure,
    FailureKind,
    Success,
    ValidationResult,
)

WEIGHT_TOLERANCE_LOW = 99.99
WEIGHT_TOLERANCE_HIGH = 100.01

MISSING_FINAL_WEIGHT_MESSAGE = "Please enter the final exam weight."
MISSING_TARGET_GRADE_MESSAGE = "Please select or enter a target grade."


def _weight_mismatch_message(total_weight: float) -> str:
    return f"Total weight is {total_weight:.1f}%. Weights must add up to exactly 100%."


def validate(
    components: Iterable[Component],
    final_weight: Optional[float],
    target_grade: Optional[float],
) -> ValidationResult:
    if not final_weight or math.isnan(final_weight) or final_weight <= 0:
        return ValidationResult(False, MISSING_FINAL_WEIGHT_MESSAGE, FailureKind.MISSING_FINAL_WEIGHT)

    if target_grade is None or math.isnan(target_grade):
        return ValidationResult(False, MISSING_TARGET_GRADE_MESSAGE, FailureKind.MISSING_TARGET_GRADE)

    total_weight = sum(c.weight for c in components) + final_weight
    if not WEIGHT_TOLERANCE_LOW <= total_weight <= WEIGHT_TOLERANCE_HIGH:
        return ValidationResult(False, _weight_mismatch_message(total_weight), FailureKind.WEIGHT_MISMATCH)

    return ValidationResult(True)


def apply_scenario(components: Iterable[Component], scenario_value: float) -> list[Component]:
    """Fill blank scores on weighted components with the assumed scenario score."""
    adjusted: list[Component] = []
    for c in components:
        if not c.has_score and c.weight > 0:
            adjusted.append(replace(c, score=scenario_value))
        else:
            adjusted.append(c)
    return adjusted


def weighted_progress(components: Iterable[Component]) -> tuple[float, float]:
    """
    Returns (current_weighted, completed_weight) over scored components.
    current_weighted = Σ(score * weight / 100)
    """
    current_weighted = 0.0
    completed_weight = 0.0
    for c in components:
        if c.has_score and c.weight > 0:
            current_weighted += (c.score * c.weight) / 100
            completed_weight += c.weight
    return current_weighted, completed_weight


def calculate(calc_input: CalculationInput) -> CalculationResult:
    validation = validate(calc_input.components, calc_input.final_weight, calc_input.target_grade)
    if not validation.is_valid:
        return Failure(validation.message, validation.kind)

    adjusted = apply_scenario(calc_input.components, calc_input.scenario_value)
    current_weighted, completed_weight = weighted_progress(adjusted)

    final_weight_fraction = calc_input.final_weight / 100
    required_score = (calc_input.target_grade - current_weighted) / final_weight_fraction

    return Success(
        required_score=required_score,
        current_weighted=current_weighted,
        target_grade=calc_input.target_grade,
        final_weight=calc_input.final_weight,
        completed_weight=completed_weight,
    )
