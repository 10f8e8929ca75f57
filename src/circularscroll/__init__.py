"""Position controller for an infinitely circular scrolling list."""
from circularscroll.controller.dispatcher import MotionDispatcher, find_delta_to_center
from circularscroll.controller.input_translator import (
    ContinuousMove, GestureEnd, GesturePhase, InputSource, InputTranslator,
    PointerSample, PointerSession, select_input_source, translate,
)
from circularscroll.controller.position_ctrl import ListPositionController
from circularscroll.controller.projection import GeometryProvider, ScreenProjection
from circularscroll.model.geometry import ListGeometry, compute_geometry
from circularscroll.model.geometry_primitives import Axis, Vector
from circularscroll.model.list_box import Box, BoxPresentation, ListBox
from circularscroll.model.settings import ControlMode, ListSettings

__all__ = [
    "Axis",
    "Box",
    "BoxPresentation",
    "ContinuousMove",
    "ControlMode",
    "GeometryProvider",
    "GestureEnd",
    "GesturePhase",
    "InputSource",
    "InputTranslator",
    "ListBox",
    "ListGeometry",
    "ListPositionController",
    "ListSettings",
    "MotionDispatcher",
    "PointerSample",
    "PointerSession",
    "ScreenProjection",
    "Vector",
    "compute_geometry",
    "find_delta_to_center",
    "select_input_source",
    "translate",
]
