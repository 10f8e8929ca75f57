"""Headless demo: drag the list once and let it slide to rest.

Run with: python -m circularscroll [settings.json]
"""
import logging
import sys

from circularscroll.config import load_settings
from circularscroll.controller.input_translator import GesturePhase, PointerSample
from circularscroll.controller.position_ctrl import ListPositionController
from circularscroll.controller.projection import ScreenProjection
from circularscroll.logging_config import setup_logging
from circularscroll.model.geometry_primitives import Axis
from circularscroll.model.list_box import ListBox

logger = logging.getLogger("circularscroll.demo")

NUM_BOXES = 7


def log_positions(boxes: list[ListBox], axis: Axis) -> None:
    coords = ", ".join(f"{box.position.component(axis):7.3f}" for box in boxes)
    logger.info(f"[{coords}]")


def main() -> None:
    setup_logging(level=logging.INFO)

    settings = load_settings(sys.argv[1] if len(sys.argv) > 1 else None)
    projection = ScreenProjection()
    boxes = [ListBox(index=i) for i in range(NUM_BOXES)]
    ctrl = ListPositionController(boxes, projection, settings)
    log_positions(boxes, settings.axis)

    if settings.control_by_button:
        ctrl.next_content()
    else:
        # Drag upwards (rightwards) across a fifth of the screen
        width, height = projection.viewport_size()
        start = (width / 2.0, height / 2.0)
        ctrl.feed(PointerSample(GesturePhase.BEGIN, start))
        for step in range(1, 11):
            pos = (start[0] + step * width / 50.0, start[1] + step * height / 50.0)
            ctrl.feed(PointerSample(GesturePhase.MOVE, pos))
        ctrl.feed(PointerSample(GesturePhase.END, pos))
        log_positions(boxes, settings.axis)

    while any(box.is_sliding for box in boxes):
        for box in boxes:
            box.update()
    log_positions(boxes, settings.axis)


if __name__ == "__main__":
    main()
