"""Interactive explorer: grid mappers, mode state machine, hit testing."""

from colorgrid.explore.grid import GridParams, build_frame, color_at, legend
from colorgrid.explore.hits import ColorInfo, CoordinateColorTable, PointerOutcome
from colorgrid.explore.modes import Component, Mode
from colorgrid.explore.selection import SavedColors
from colorgrid.explore.session import ExplorerSession
from colorgrid.explore.state import Action, InteractionState

__all__ = [
    "GridParams",
    "build_frame",
    "color_at",
    "legend",
    "ColorInfo",
    "CoordinateColorTable",
    "PointerOutcome",
    "Component",
    "Mode",
    "SavedColors",
    "ExplorerSession",
    "Action",
    "InteractionState",
]
