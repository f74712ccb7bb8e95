from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from finalmark.core.classify import Category, classify
from finalmark.core.models import CalculationResult, Failure

MAX_DISPLAY_SCORE = 999

STATUS_TEXT = {
    Category.SECURED: "You've already secured your target grade!",
    Category.ACHIEVABLE: "Achievable! Keep studying",
    Category.DIFFICULT: "Difficult but possible",
    Category.UNLIKELY: "Very unlikely - consider alternatives",
    Category.IMPOSSIBLE: "Not mathematically possible",
}


@dataclass(frozen=True)
class ResultView:
    show_results: bool
    error_message: Optional[str] = None
    score_text: str = ""
    headline: str = ""
    category: Optional[Category] = None
    status_text: str = ""
    current_weighted_text: str = ""
    target_text: str = ""
    final_weight_text: str = ""

    @property
    def show_error(self) -> bool:
        return self.error_message is not None


@dataclass(frozen=True)
class TotalWeightView:
    text: str
    tone: str  # "complete", "over" or "under"


def _format_number(value: float) -> str:
    """1 decimal at most, dropping a trailing .0 the way the score counter renders."""
    if not math.isfinite(value):
        return str(value)
    rounded = round(value, 1)
    return f"{rounded:g}" if rounded == int(rounded) else f"{rounded:.1f}"


def display_score(required_score: float) -> float:
    if required_score <= 0:
        return 0.0
    if not math.isfinite(required_score):
        return float(MAX_DISPLAY_SCORE)
    return min(required_score, MAX_DISPLAY_SCORE)


def present_result(result: Optional[CalculationResult]) -> ResultView:
    if result is None:
        return ResultView(show_results=False)
    if isinstance(result, Failure):
        return ResultView(show_results=False, error_message=result.message)

    category = classify(result.required_score)
    return ResultView(
        show_results=True,
        score_text=_format_number(display_score(result.required_score)),
        headline="Congratulations!" if category is Category.SECURED else "on your final exam",
        category=category,
        status_text=STATUS_TEXT[category],
        current_weighted_text=f"{result.current_weighted:.1f}%",
        target_text=f"{_format_number(result.target_grade)}%",
        final_weight_text=f"{_format_number(result.final_weight)}%",
    )


def present_total_weight(total: float) -> TotalWeightView:
    if total == 100:
        tone = "complete"
    elif total > 100:
        tone = "over"
    else:
        tone = "under"
    return TotalWeightView(text=f"{round(total, 2):g}", tone=tone)


def scenario_label(value: int) -> str:
    return f"{value}%"
