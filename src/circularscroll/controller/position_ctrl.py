"""
List Position Controller
========================
Calculates and assigns the position of every box of the list.

There are three controlling modes:
1. Free moving: the boxes follow the finger or mouse; where they stop is
   unknown.
2. Align to center: like free moving, but after every release the box closest
   to the center lands exactly on it.
3. Control by button: the boxes are moved one unit at a time by the step
   buttons; there is always a box at the center.

The controller is constructed once and passed to whoever needs it (boxes read
the geometry it hands them, step buttons call `next_content`/`last_content`).
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence, TYPE_CHECKING

from circularscroll.controller.dispatcher import MotionDispatcher
from circularscroll.controller.input_translator import (
    InputEvent, InputSource, InputTranslator, PointerSample, select_input_source
)
from circularscroll.model.geometry import ListGeometry, compute_geometry
from circularscroll.model.settings import ControlMode, ListSettings

if TYPE_CHECKING:
    from circularscroll.controller.projection import GeometryProvider
    from circularscroll.model.geometry_primitives import Vector
    from circularscroll.model.list_box import Box

logger = logging.getLogger(__name__)


class Toggleable(Protocol):
    def set_active(self, active: bool) -> None: ...


class ListPositionController:
    def __init__(
        self,
        boxes: Sequence[Box],
        provider: GeometryProvider,
        settings: Optional[ListSettings] = None,
        buttons: Sequence[Toggleable] = (),
        touch_device: bool = False
    ):
        self.settings = settings or ListSettings()
        self.boxes = tuple(boxes)
        self.buttons = tuple(buttons)
        self.provider = provider

        if self.settings.box_count is not None and len(self.boxes) != self.settings.box_count:
            msg = f"Expected {self.settings.box_count} boxes, got {len(self.boxes)}."
            logger.error(msg)
            raise ValueError(msg)

        self._geometry = compute_geometry(provider, self.settings, len(self.boxes))

        self.input_source: InputSource = select_input_source(touch_device)
        self.translator = InputTranslator(
            provider=provider,
            depth=self.settings.canvas_distance,
            axis=self.settings.axis,
            source=self.input_source,
            enabled=not self.settings.control_by_button,
        )
        self.dispatcher = MotionDispatcher(self.boxes, self.settings.axis, self.mode)

        # Boxes initialize their constants from here
        for box in self.boxes:
            attach = getattr(box, "attach", None)
            if attach is not None:
                attach(self._geometry, self.settings)

        # The buttons are only useful in button mode
        for button in self.buttons:
            button.set_active(self.settings.control_by_button)

        logger.info(
            f"List controller ready: {len(self.boxes)} boxes, mode '{self.mode}', "
            f"axis '{self.settings.axis}', input '{self.input_source}'"
        )

    # ------------------------------------------------------------------
    # Read-only geometry
    # ------------------------------------------------------------------
    @property
    def mode(self) -> ControlMode:
        return self.settings.mode

    @property
    def geometry(self) -> ListGeometry:
        return self._geometry

    @property
    def canvas_extent(self) -> Vector:
        return self._geometry.canvas_extent

    @property
    def unit_spacing(self) -> Vector:
        return self._geometry.unit_spacing

    @property
    def lower_bound(self) -> Vector:
        return self._geometry.lower_bound

    @property
    def upper_bound(self) -> Vector:
        return self._geometry.upper_bound

    @property
    def range_bound(self) -> Vector:
        return self._geometry.range_bound

    @property
    def shift_bound(self) -> Vector:
        return self._geometry.shift_bound

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def feed(self, sample: PointerSample) -> Optional[InputEvent]:
        """Process the input sample of one tick."""
        event = self.translator.feed(sample)
        self.dispatcher.dispatch(event)
        return event

    def next_content(self) -> None:
        """Move all boxes one unit forward (up or right)."""
        self.dispatcher.step(forward=True)

    def last_content(self) -> None:
        """Move all boxes one unit backward (down or left)."""
        self.dispatcher.step(forward=False)
