"""Tests for fanning commands out to the boxes."""
import pytest

from circularscroll.controller.dispatcher import MotionDispatcher, find_delta_to_center
from circularscroll.controller.input_translator import ContinuousMove, GestureEnd
from circularscroll.model.geometry_primitives import Axis, Vector
from circularscroll.model.settings import ControlMode

from conftest import RecordingBox


class TestFindDeltaToCenter:
    def test_closest_box_wins(self, recording_boxes):
        # Coordinates -3, 1, 5 give deltas 3, -1, -5
        assert find_delta_to_center(recording_boxes, Axis.VERTICAL) == Vector(0.0, -1.0, 0.0)

    def test_horizontal_axis(self):
        boxes = [RecordingBox(c, Axis.HORIZONTAL) for c in (2.0, -0.5, 4.0)]
        assert find_delta_to_center(boxes, Axis.HORIZONTAL) == Vector(0.5, 0.0, 0.0)

    def test_only_active_axis_is_considered(self):
        boxes = [RecordingBox(), RecordingBox()]
        boxes[0]._position = Vector(0.1, 3.0)
        boxes[1]._position = Vector(9.0, -2.0)
        assert find_delta_to_center(boxes, Axis.VERTICAL) == Vector(0.0, 2.0, 0.0)

    def test_first_box_wins_on_tie(self):
        boxes = [RecordingBox(2.0), RecordingBox(-2.0)]
        assert find_delta_to_center(boxes, Axis.VERTICAL) == Vector(0.0, -2.0, 0.0)

        boxes.reverse()
        assert find_delta_to_center(boxes, Axis.VERTICAL) == Vector(0.0, 2.0, 0.0)

    def test_no_boxes_gives_zero(self):
        assert find_delta_to_center([], Axis.VERTICAL) == Vector.zero()


class TestMotionDispatcher:
    def test_continuous_move_forwarded_verbatim(self, recording_boxes):
        dispatcher = MotionDispatcher(recording_boxes, Axis.VERTICAL, ControlMode.FREE_MOVING)
        delta = Vector(0.0, 0.25)
        dispatcher.dispatch(ContinuousMove(delta))
        for box in recording_boxes:
            assert box.commands("move") == [delta]

    def test_zero_move_keeps_positions(self, recording_boxes):
        before = [box.position for box in recording_boxes]
        dispatcher = MotionDispatcher(recording_boxes, Axis.VERTICAL, ControlMode.FREE_MOVING)
        dispatcher.dispatch(ContinuousMove(Vector.zero()))
        assert [box.position for box in recording_boxes] == before

    def test_free_release_uses_raw_delta(self, recording_boxes):
        dispatcher = MotionDispatcher(recording_boxes, Axis.VERTICAL, ControlMode.FREE_MOVING)
        dispatcher.dispatch(GestureEnd(Vector(0.0, 0.7)))
        for box in recording_boxes:
            assert box.commands("slide") == [Vector(0.0, 0.7)]

    def test_aligned_release_ignores_raw_delta(self, recording_boxes):
        dispatcher = MotionDispatcher(recording_boxes, Axis.VERTICAL, ControlMode.ALIGN_TO_CENTER)
        dispatcher.dispatch(GestureEnd(Vector(0.0, 0.7)))
        for box in recording_boxes:
            assert box.commands("slide") == [Vector(0.0, -1.0, 0.0)]

    def test_no_event_does_nothing(self, recording_boxes):
        dispatcher = MotionDispatcher(recording_boxes, Axis.VERTICAL, ControlMode.FREE_MOVING)
        dispatcher.dispatch(None)
        assert all(not box.calls for box in recording_boxes)

    def test_unknown_event_rejected(self, recording_boxes):
        dispatcher = MotionDispatcher(recording_boxes, Axis.VERTICAL, ControlMode.FREE_MOVING)
        with pytest.raises(TypeError):
            dispatcher.dispatch("release")

    @pytest.mark.parametrize("forward", [True, False])
    def test_step(self, recording_boxes, forward):
        dispatcher = MotionDispatcher(recording_boxes, Axis.VERTICAL, ControlMode.BUTTON_CONTROLLED)
        dispatcher.step(forward=forward)
        for box in recording_boxes:
            assert box.commands("step") == [(1, forward)]

    def test_boxes_served_in_collection_order(self):
        order = []

        class OrderedBox(RecordingBox):
            def __init__(self, label):
                super().__init__()
                self.label = label

            def begin_slide(self, delta):
                order.append(self.label)

        boxes = [OrderedBox(label) for label in "abcd"]
        MotionDispatcher(boxes, Axis.VERTICAL, ControlMode.FREE_MOVING).release(Vector.zero())
        assert order == list("abcd")
