from __future__ import annotations

import logging
from typing import Callable, Optional

from finalmark.config.settings import settings
from finalmark.core.calculator import calculate
from finalmark.core.models import CalculationResult
from finalmark.core.parsing import RawValue
from finalmark.state.app_state import CalculatorState, TargetMode
from finalmark.state.debounce import Debouncer, TimerFactory, thread_timer
from finalmark.state.registry import ComponentRegistry
from finalmark.state.scenario import ScenarioController, ScenarioListener, ScenarioSource

logger = logging.getLogger(__name__)

# None means "nothing calculated yet": the view shows its placeholder
ResultListener = Callable[[Optional[CalculationResult]], None]
TotalWeightListener = Callable[[float], None]


class CalculatorController:
    """
    Owns the calculator state and turns UI commands into recalculations.

    Every data-changing command schedules a debounced recalculation; the
    outputs (result, live total weight, scenario value) are pushed to
    subscribers as plain data.
    """

    def __init__(
        self,
        state: Optional[CalculatorState] = None,
        *,
        debounce_seconds: Optional[float] = None,
        initial_components: Optional[int] = None,
        timer_factory: TimerFactory = thread_timer,
    ) -> None:
        self.state = state or CalculatorState(scenario=ScenarioController(presets=settings.scenario_presets))
        self.initial_components = settings.initial_components if initial_components is None else initial_components
        delay = settings.debounce_seconds if debounce_seconds is None else debounce_seconds
        self._debouncer = Debouncer(self._auto_calculate, delay, timer_factory=timer_factory)

        self._result_listeners: list[ResultListener] = []
        self._total_listeners: list[TotalWeightListener] = []
        self.last_result: Optional[CalculationResult] = None

        self.state.scenario.subscribe(self._on_scenario_changed)

    @property
    def registry(self) -> ComponentRegistry:
        return self.state.registry

    @property
    def scenario(self) -> ScenarioController:
        return self.state.scenario

    @property
    def total_weight(self) -> float:
        return self.state.total_weight

    @property
    def recalculation_pending(self) -> bool:
        return self._debouncer.pending

    # subscriptions

    def subscribe_result(self, listener: ResultListener) -> None:
        self._result_listeners.append(listener)

    def subscribe_total_weight(self, listener: TotalWeightListener) -> None:
        self._total_listeners.append(listener)

    def subscribe_scenario(self, listener: ScenarioListener) -> None:
        self.state.scenario.subscribe(listener)

    # components

    def start(self) -> None:
        for _ in range(self.initial_components):
            self.registry.add()
        self._publish_total_weight()

    def add_component(self) -> int:
        component_id = self.registry.add()
        logger.debug("Added component %s", component_id)
        self._publish_total_weight()
        self._schedule()
        return component_id

    def remove_component(self, component_id: int) -> None:
        self.registry.remove(component_id)
        logger.debug("Removed component %s", component_id)
        self._publish_total_weight()
        self._schedule()

    def edit_component(self, component_id: int, field_name: str, raw_value: RawValue) -> None:
        if not self.registry.update(component_id, field_name, raw_value):
            logger.debug("Ignoring edit for missing component %s", component_id)
            return
        if field_name == "name":
            return
        if field_name == "weight":
            self._publish_total_weight()
        self._schedule()

    # final weight and target

    def set_final_weight(self, raw_value: RawValue) -> None:
        self.state.final_weight_text = "" if raw_value is None else str(raw_value)
        self._publish_total_weight()
        self._schedule()

    def select_target_preset(self, target: float) -> None:
        self.state.target.mode = TargetMode.PRESET
        self.state.target.preset = float(target)
        self._schedule()

    def select_custom_target(self) -> None:
        self.state.target.mode = TargetMode.CUSTOM
        self._schedule()

    def set_custom_target_text(self, raw_value: RawValue) -> None:
        self.state.target.mode = TargetMode.CUSTOM
        self.state.target.custom_text = "" if raw_value is None else str(raw_value)
        self._schedule()

    # scenario

    def set_scenario_from_slider(self, value: float) -> int:
        return self.state.scenario.set_from_slider(value)

    def set_scenario_from_preset(self, value: float) -> int:
        return self.state.scenario.set_from_preset(value)

    def _on_scenario_changed(self, value: int, source: ScenarioSource) -> None:
        if source is not ScenarioSource.RESET:
            self._schedule()

    # calculation

    def calculate_now(self) -> CalculationResult:
        self._debouncer.cancel()
        result = calculate(self.state.build_input())
        self._publish_result(result)
        return result

    def reset(self) -> None:
        logger.info("Resetting calculator")
        self._debouncer.cancel()
        self.registry.clear()
        self.state.final_weight_text = ""
        self.state.target.clear()
        self.state.scenario.reset()
        self._publish_result(None)
        self.start()

    def _schedule(self) -> None:
        self._debouncer.trigger()

    def _auto_calculate(self) -> None:
        if not self.state.ready_for_auto_calculation:
            logger.debug("Skipping recalculation: final weight or target missing")
            return
        self._publish_result(calculate(self.state.build_input()))

    def _publish_result(self, result: Optional[CalculationResult]) -> None:
        self.last_result = result
        if result is not None:
            logger.debug("Calculation result: %s", result)
        for listener in list(self._result_listeners):
            try:
                listener(result)
            except Exception:
                logger.exception("Result subscriber failed")

    def _publish_total_weight(self) -> None:
        total = self.state.total_weight
        for listener in list(self._total_listeners):
            try:
                listener(total)
            except Exception:
                logger.exception("Total weight subscriber failed")
