import math
import unittest

from finalmark.core.classify import Category
from finalmark.core.models import Failure, Success
from finalmark.ui.presenter import display_score, present_result, present_total_weight, scenario_label


def _success(required_score, current_weighted=51.0, target=85.0, final_weight=40.0):
    return Success(
        required_score=required_score,
        current_weighted=current_weighted,
        target_grade=target,
        final_weight=final_weight,
        completed_weight=60.0,
    )


class PresentResultTests(unittest.TestCase):
    def test_nothing_calculated_shows_placeholder(self):
        view = present_result(None)
        self.assertFalse(view.show_results)
        self.assertFalse(view.show_error)

    def test_failure_message_is_shown_verbatim(self):
        view = present_result(Failure("Total weight is 90.0%. Weights must add up to exactly 100%."))
        self.assertFalse(view.show_results)
        self.assertTrue(view.show_error)
        self.assertEqual(view.error_message, "Total weight is 90.0%. Weights must add up to exactly 100%.")

    def test_success_breakdown(self):
        view = present_result(_success(85.0))
        self.assertTrue(view.show_results)
        self.assertFalse(view.show_error)
        self.assertEqual(view.score_text, "85")
        self.assertEqual(view.category, Category.DIFFICULT)
        self.assertEqual(view.status_text, "Difficult but possible")
        self.assertEqual(view.headline, "on your final exam")
        self.assertEqual(view.current_weighted_text, "51.0%")
        self.assertEqual(view.target_text, "85%")
        self.assertEqual(view.final_weight_text, "40%")

    def test_secured_result(self):
        view = present_result(_success(-2.5, target=50.0))
        self.assertEqual(view.score_text, "0")
        self.assertEqual(view.headline, "Congratulations!")
        self.assertEqual(view.category, Category.SECURED)

    def test_fractional_score_keeps_one_decimal(self):
        self.assertEqual(present_result(_success(72.46)).score_text, "72.5")

    def test_display_score_is_capped(self):
        self.assertEqual(display_score(-10), 0)
        self.assertEqual(display_score(1500), 999)
        self.assertEqual(present_result(_success(1500)).category, Category.IMPOSSIBLE)

    def test_non_finite_scores_render_at_the_cap(self):
        for required in (math.nan, math.inf, 1e308):
            view = present_result(_success(required))
            self.assertEqual(view.score_text, "999")
            self.assertEqual(view.category, Category.IMPOSSIBLE)
        self.assertEqual(present_result(_success(-1e308)).score_text, "0")
        self.assertEqual(present_result(_success(-math.inf)).score_text, "0")


class TotalWeightTests(unittest.TestCase):
    def test_tones(self):
        self.assertEqual(present_total_weight(100).tone, "complete")
        self.assertEqual(present_total_weight(100.5).tone, "over")
        self.assertEqual(present_total_weight(60).tone, "under")

    def test_text_is_rounded_to_two_decimals(self):
        self.assertEqual(present_total_weight(33.333 + 40).text, "73.33")
        self.assertEqual(present_total_weight(100).text, "100")

    def test_scenario_label(self):
        self.assertEqual(scenario_label(70), "70%")


if __name__ == "__main__":
    unittest.main()
