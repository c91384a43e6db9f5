# cortexview/core/presentation.py
"""
What each layer row should look like for a given selection.

present() is the only place that decides labels, icons and which row shows
its details, so the widgets just apply the result.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from cortexview.core.layers import CorticalLayer, LayerColor

CHEVRON_EXPANDED = "fa5s.chevron-circle-down"
CHEVRON_COLLAPSED = "fa5s.chevron-circle-right"

HINT_EXPANDED = "Tap to collapse details."
HINT_COLLAPSED = "Tap to expand details."

# (icon, label) per detail line, in display order
DETAIL_CELL_TYPES = ("fa5s.users", "Key Cell Types")
DETAIL_TIMING = ("fa5s.calendar-alt", "Formation Timing (Mouse)")
DETAIL_MARKERS = ("fa5s.dna", "Key Genetic Markers")


@dataclass(frozen=True)
class DetailPresentation:
    icon: str
    label: str
    values: Tuple[str, ...]

    @property
    def text(self) -> str:
        return ", ".join(self.values)


@dataclass(frozen=True)
class RowPresentation:
    layer_id: str
    title: str
    subtitle: str
    color: LayerColor
    expanded: bool
    chevron: str
    accessible_name: str
    accessible_hint: str
    details: Tuple[DetailPresentation, ...] = ()


def details_for(layer: CorticalLayer) -> Tuple[DetailPresentation, ...]:
    return (
        DetailPresentation(*DETAIL_CELL_TYPES, values=tuple(layer.key_cell_types)),
        DetailPresentation(*DETAIL_TIMING, values=(layer.formation_timing_mouse,)),
        DetailPresentation(*DETAIL_MARKERS, values=tuple(layer.key_markers)),
    )


def present_row(layer: CorticalLayer, selected_id: Optional[str]) -> RowPresentation:
    expanded = selected_id is not None and selected_id == layer.id
    return RowPresentation(
        layer_id=layer.id,
        title=layer.name,
        subtitle=layer.common_name,
        color=layer.color,
        expanded=expanded,
        chevron=CHEVRON_EXPANDED if expanded else CHEVRON_COLLAPSED,
        accessible_name=f"{layer.name}: {layer.common_name}",
        accessible_hint=HINT_EXPANDED if expanded else HINT_COLLAPSED,
        details=details_for(layer) if expanded else (),
    )


def present(layers: Iterable[CorticalLayer], selected_id: Optional[str]) -> Tuple[RowPresentation, ...]:
    """One RowPresentation per layer, in dataset order."""
    return tuple(present_row(layer, selected_id) for layer in layers)
