from typing import Dict, Optional
import flet as ft

from finalmark.config.settings import settings
from finalmark.controller import CalculatorController
from finalmark.core.classify import Category
from finalmark.core.models import CalculationResult
from finalmark.state.scenario import ScenarioSource
from finalmark.ui.presenter import present_result, present_total_weight, scenario_label


TONE_COLORS = {
    "complete": (ft.Colors.GREEN_50, ft.Colors.GREEN_800),
    "over": (ft.Colors.RED_50, ft.Colors.RED_800),
    "under": (ft.Colors.BLUE_50, ft.Colors.BLUE_700),
}

CATEGORY_COLORS = {
    Category.SECURED: ft.Colors.GREEN_600,
    Category.ACHIEVABLE: ft.Colors.BLUE_600,
    Category.DIFFICULT: ft.Colors.AMBER_700,
    Category.UNLIKELY: ft.Colors.ORANGE_800,
    Category.IMPOSSIBLE: ft.Colors.RED_600,
}

ACTIVE_BG = ft.Colors.BLUE_400


def _set_active(buttons: Dict, active_key) -> None:
    for key, button in buttons.items():
        button.bgcolor = ACTIVE_BG if key == active_key else None
        button.color = ft.Colors.WHITE if key == active_key else None


def build_calculator_view(page: ft.Page, controller: CalculatorController) -> ft.View:
    rows_column = ft.Column(spacing=10)
    row_map: Dict[int, ft.Row] = {}

    final_weight = ft.TextField(label="Final Exam Weight", suffix_text="%", width=200)
    custom_target = ft.TextField(label="Custom Target", suffix_text="%", width=160)
    total_weight_text = ft.Text(weight=ft.FontWeight.BOLD)
    total_weight_box = ft.Container(
        padding=8,
        border_radius=6,
        content=ft.Row(controls=[ft.Text("Total weight:"), total_weight_text, ft.Text("%")]),
    )

    scenario_value_text = ft.Text(scenario_label(controller.scenario.value), weight=ft.FontWeight.BOLD)
    scenario_slider = ft.Slider(min=0, max=100, divisions=100, value=controller.scenario.value, width=360)

    placeholder = ft.Text("Enter your grades to see the score you need on the final.")
    score_number = ft.Text(size=48, weight=ft.FontWeight.BOLD)
    results_message = ft.Text(size=16)
    status_text = ft.Text(weight=ft.FontWeight.BOLD)
    current_weighted = ft.Text()
    target_display = ft.Text()
    final_weight_display = ft.Text()
    results_content = ft.Column(
        visible=False,
        controls=[
            ft.Row(controls=[score_number, ft.Text("%", size=24)]),
            results_message,
            status_text,
            ft.Divider(),
            ft.Row(controls=[ft.Text("Current weighted score:"), current_weighted]),
            ft.Row(controls=[ft.Text("Target grade:"), target_display]),
            ft.Row(controls=[ft.Text("Final exam weight:"), final_weight_display]),
        ],
    )
    error_message = ft.Text(color=ft.Colors.RED_400)
    error_card = ft.Container(
        visible=False,
        padding=12,
        border_radius=6,
        bgcolor=ft.Colors.RED_50,
        content=ft.Row(controls=[ft.Icon(ft.Icons.ERROR_OUTLINE, color=ft.Colors.RED_400), error_message]),
    )

    target_buttons: Dict[object, ft.ElevatedButton] = {}
    scenario_buttons: Dict[int, ft.ElevatedButton] = {}

    def render_total_weight(total: float) -> None:
        view = present_total_weight(total)
        total_weight_text.value = view.text
        total_weight_box.bgcolor, total_weight_text.color = TONE_COLORS[view.tone]

    def render_result(result: Optional[CalculationResult]) -> None:
        view = present_result(result)
        error_card.visible = view.show_error
        error_message.value = view.error_message or ""
        placeholder.visible = not view.show_results
        results_content.visible = view.show_results
        if view.show_results:
            score_number.value = view.score_text
            results_message.value = view.headline
            status_text.value = view.status_text
            status_text.color = CATEGORY_COLORS[view.category]
            current_weighted.value = view.current_weighted_text
            target_display.value = view.target_text
            final_weight_display.value = view.final_weight_text
        page.update()

    def render_scenario(value: int, _source: ScenarioSource) -> None:
        scenario_value_text.value = scenario_label(value)
        scenario_slider.value = value
        _set_active(scenario_buttons, controller.scenario.active_preset)
        page.update()

    def build_component_row(component_id: int) -> ft.Row:
        def on_field_change(field_name: str):
            def handler(e):
                controller.edit_component(component_id, field_name, e.control.value)
                page.update()

            return handler

        def on_remove(_):
            controller.remove_component(component_id)
            row = row_map.pop(component_id, None)
            if row is not None:
                rows_column.controls.remove(row)
            page.update()

        return ft.Row(
            controls=[
                ft.TextField(label="Component Name", hint_text="e.g., Midterm 1", width=240, on_change=on_field_change("name")),
                ft.TextField(label="Weight", suffix_text="%", width=120, on_change=on_field_change("weight")),
                ft.TextField(label="Score", hint_text="Optional", suffix_text="%", width=120, on_change=on_field_change("score")),
                ft.IconButton(icon=ft.Icons.CLOSE, tooltip="Remove component", on_click=on_remove),
            ]
        )

    def render_rows() -> None:
        rows_column.controls.clear()
        row_map.clear()
        for component in controller.registry.components:
            row = build_component_row(component.id)
            row_map[component.id] = row
            rows_column.controls.append(row)

    def on_add(_):
        component_id = controller.add_component()
        row = build_component_row(component_id)
        row_map[component_id] = row
        rows_column.controls.append(row)
        page.update()

    def on_final_weight_change(e):
        controller.set_final_weight(e.control.value)
        page.update()

    def make_target_handler(target: int):
        def handler(_):
            _set_active(target_buttons, target)
            controller.select_target_preset(target)
            page.update()

        return handler

    def on_custom_target_click(_):
        _set_active(target_buttons, "custom")
        controller.select_custom_target()
        page.update()

    def on_custom_target_change(e):
        _set_active(target_buttons, "custom")
        controller.set_custom_target_text(e.control.value)
        page.update()

    def make_scenario_handler(value: int):
        def handler(_):
            controller.set_scenario_from_preset(value)

        return handler

    def on_reset(_):
        controller.reset()
        final_weight.value = ""
        custom_target.value = ""
        _set_active(target_buttons, None)
        render_rows()
        page.update()

    for target in settings.target_presets:
        target_buttons[target] = ft.ElevatedButton(f"{target}%", on_click=make_target_handler(target))
    target_buttons["custom"] = ft.ElevatedButton("Custom", on_click=on_custom_target_click)

    for value in controller.scenario.presets:
        scenario_buttons[value] = ft.ElevatedButton(scenario_label(value), on_click=make_scenario_handler(value))

    final_weight.on_change = on_final_weight_change
    custom_target.on_change = on_custom_target_change
    scenario_slider.on_change = lambda e: controller.set_scenario_from_slider(e.control.value)

    controller.subscribe_result(render_result)
    controller.subscribe_total_weight(render_total_weight)
    controller.subscribe_scenario(render_scenario)

    render_rows()
    render_total_weight(controller.total_weight)
    _set_active(scenario_buttons, controller.scenario.active_preset)

    return ft.View(
        route="/",
        controls=[
            ft.AppBar(title=ft.Text("FinalMark - Grade Calculator")),
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Text("Course Components", size=22, weight=ft.FontWeight.BOLD),
                        rows_column,
                        ft.Button("Add Component", icon=ft.Icons.ADD, on_click=on_add),
                        ft.Row(controls=[final_weight, total_weight_box]),
                        ft.Divider(),
                        ft.Text("Target Grade", size=20, weight=ft.FontWeight.BOLD),
                        ft.Row(controls=[*target_buttons.values(), custom_target], wrap=True),
                        ft.Divider(),
                        ft.Text("What-if Scenario", size=20, weight=ft.FontWeight.BOLD),
                        ft.Text("Assumed score for components without a score"),
                        ft.Row(controls=[scenario_slider, scenario_value_text]),
                        ft.Row(controls=list(scenario_buttons.values()), wrap=True),
                        ft.Row(
                            controls=[
                                ft.Button("Calculate", on_click=lambda _: controller.calculate_now()),
                                ft.TextButton("Reset", on_click=on_reset),
                            ]
                        ),
                        error_card,
                        ft.Divider(),
                        ft.Text("Required Final Score", size=20, weight=ft.FontWeight.BOLD),
                        placeholder,
                        results_content,
                    ],
                ),
            ),
        ],
    )
