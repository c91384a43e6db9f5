# cortexview/core/layers.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
import uuid

ROMAN_ORDER = ("I", "II", "III", "IV", "V", "VI")


class LayerColor(Enum):
    """Symbolic display colour; the UI theme maps each member to a real colour."""
    PURPLE = "purple"
    BLUE = "blue"
    CYAN = "cyan"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"


@dataclass(frozen=True)
class CorticalLayer:
    """
    One layer of the cerebral cortex and the biology shown for it.
    `formation_timing_mouse` is the developmental window in mouse embryos.
    """
    name: str
    common_name: str
    key_cell_types: Tuple[str, ...]
    formation_timing_mouse: str
    key_markers: Tuple[str, ...]
    color: LayerColor
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def numeral(self) -> str:
        """Roman numeral part of the formal name ("Layer IV" -> "IV")."""
        return self.name.rsplit(" ", 1)[-1]


# Anatomical order, outermost (I) to innermost (VI).
_CORTICAL_LAYERS: Tuple[CorticalLayer, ...] = (
    CorticalLayer(
        name="Layer I", common_name="Molecular Layer",
        key_cell_types=("Cajal-Retzius cells", "Pyramidal cells"),
        formation_timing_mouse="E10.5 - E12.5",
        key_markers=("Reelin", "T-box brain 1"),
        color=LayerColor.PURPLE,
    ),
    CorticalLayer(
        name="Layer II", common_name="External Granular Layer",
        key_cell_types=("Pyramidal neurons", "Stellate cells", "Astrocytes"),
        formation_timing_mouse="E13.5 - E16",
        key_markers=("SATB2", "CUX1"),
        color=LayerColor.BLUE,
    ),
    CorticalLayer(
        name="Layer III", common_name="External Pyramidal Layer",
        key_cell_types=("Pyramidal neurons", "Stellate cells"),
        formation_timing_mouse="E13.5 - E16",
        key_markers=("SATB2", "CUX1"),
        color=LayerColor.CYAN,
    ),
    CorticalLayer(
        name="Layer IV", common_name="Internal Granular Layer",
        key_cell_types=("Stellate cells", "Pyramidal neurons"),
        formation_timing_mouse="E11.5 - E14.5",
        key_markers=("TBR1", "OTX1"),
        color=LayerColor.GREEN,
    ),
    CorticalLayer(
        name="Layer V", common_name="Internal Pyramidal Layer",
        key_cell_types=("Pyramidal neurons", "Radial glia"),
        formation_timing_mouse="E11.5 - E14.5",
        key_markers=("TBR1", "CTIP2", "OTX1"),
        color=LayerColor.ORANGE,
    ),
    CorticalLayer(
        name="Layer VI", common_name="Multiform Layer",
        key_cell_types=("Pyramidal neurons", "Radial glia"),
        formation_timing_mouse="E11.5 - E14.5",
        key_markers=("TBR1", "OTX1"),
        color=LayerColor.RED,
    ),
)


def cortical_layers() -> Tuple[CorticalLayer, ...]:
    """The six layers in anatomical order. Always the same tuple."""
    return _CORTICAL_LAYERS


def layer_by_id(layer_id: Optional[str]) -> Optional[CorticalLayer]:
    for layer in _CORTICAL_LAYERS:
        if layer.id == layer_id:
            return layer
    return None
