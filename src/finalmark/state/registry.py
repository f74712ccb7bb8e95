from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from finalmark.core.models import Component
from finalmark.core.parsing import RawValue, parse_score, parse_weight

EDITABLE_FIELDS = ("name", "weight", "score")


@dataclass
class ComponentRegistry:
    components: list[Component] = field(default_factory=list)
    _next_id: int = 0

    def add(self) -> int:
        component_id = self._next_id
        self._next_id += 1
        self.components.append(Component(id=component_id))
        return component_id

    def remove(self, component_id: int) -> None:
        self.components = [c for c in self.components if c.id != component_id]

    def get(self, component_id: int) -> Optional[Component]:
        return next((c for c in self.components if c.id == component_id), None)

    def update(self, component_id: int, field_name: str, raw_value: RawValue) -> bool:
        """
        Apply a raw form edit. Returns False when the component no longer exists.
        """
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(f"Unsupported component field: {field_name}")

        component = self.get(component_id)
        if component is None:
            return False

        if field_name == "name":
            component.name = "" if raw_value is None else str(raw_value)
        elif field_name == "weight":
            component.weight = parse_weight(raw_value)
        else:
            component.score = parse_score(raw_value)
        return True

    def total_weight(self, final_weight: float) -> float:
        return sum(c.weight for c in self.components) + final_weight

    def snapshot(self) -> tuple[Component, ...]:
        return tuple(replace(c) for c in self.components)

    def clear(self) -> None:
        # the id counter survives a clear
        self.components = []

    def __len__(self) -> int:
        return len(self.components)
