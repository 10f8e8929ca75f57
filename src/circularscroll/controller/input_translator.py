"""
Input Translation
=================
Converts raw pointer/touch samples into local-space deltas.

The host pushes one `PointerSample` per tick. `translate` is a pure function
from the previous session state and the new sample to the next session state
and the emitted event; `InputTranslator` owns the session between ticks.

Events:
    ContinuousMove: the pointer moved while pressed, shift everything now.
    GestureEnd: the pointer was released, carrying the last observed delta.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
import logging
from typing import Optional, Tuple, Union, TYPE_CHECKING

from circularscroll.model.geometry_primitives import Axis, Vector

if TYPE_CHECKING:
    from circularscroll.controller.projection import GeometryProvider

logger = logging.getLogger(__name__)


class GesturePhase(StrEnum):
    BEGIN = "begin"
    MOVE = "move"
    END = "end"


class InputSource(StrEnum):
    POINTER = "pointer"
    TOUCH = "touch"


def select_input_source(touch_device: bool) -> InputSource:
    """Mouse on devices without multi-touch, the first finger otherwise."""
    return InputSource.TOUCH if touch_device else InputSource.POINTER


@dataclass(frozen=True)
class PointerSample:
    phase: GesturePhase
    position: Tuple[float, float]  # Screen space, pixels
    source: InputSource = InputSource.POINTER


@dataclass(frozen=True)
class ContinuousMove:
    delta: Vector


@dataclass(frozen=True)
class GestureEnd:
    delta: Vector


InputEvent = Union[ContinuousMove, GestureEnd]


@dataclass(frozen=True)
class PointerSession:
    """Input position in world space. Only meaningful while `active`."""
    active: bool = False
    last_position: Vector = Vector.zero()
    current_position: Vector = Vector.zero()
    delta_position: Vector = Vector.zero()


def translate(
    session: PointerSession,
    sample: PointerSample,
    provider: GeometryProvider,
    depth: float,
    axis: Axis
) -> tuple[PointerSession, Optional[InputEvent]]:
    """
    Process one sample.

    The emitted delta is normalized by the parent scale and keeps only the
    `axis` component. Move or End without a preceding Begin emit nothing.
    """
    match sample.phase:
        case GesturePhase.BEGIN:
            start = provider.unproject(sample.position, depth)
            return PointerSession(active=True, last_position=start, current_position=start), None

        case GesturePhase.MOVE:
            if not session.active:
                logger.debug("Ignoring move sample outside of a gesture.")
                return session, None
            current = provider.unproject(sample.position, depth)
            delta = current - session.last_position
            session = replace(
                session,
                last_position=current,
                current_position=current,
                delta_position=delta,
            )
            return session, ContinuousMove(_normalize(delta, provider, axis))

        case GesturePhase.END:
            if not session.active:
                logger.debug("Ignoring end sample outside of a gesture.")
                return session, None
            return PointerSession(), GestureEnd(_normalize(session.delta_position, provider, axis))

    raise ValueError(f"Unknown gesture phase: {sample.phase}")


def _normalize(delta: Vector, provider: GeometryProvider, axis: Axis) -> Vector:
    return (delta / provider.parent_scale()).project(axis)


class InputTranslator:
    """Reads exactly one input source and keeps the pointer session between ticks."""

    def __init__(
        self,
        provider: GeometryProvider,
        depth: float,
        axis: Axis,
        source: InputSource,
        enabled: bool = True
    ):
        self.provider = provider
        self.depth = depth
        self.axis = axis
        self.source = source
        self.enabled = enabled
        self._session = PointerSession()

    @property
    def session(self) -> PointerSession:
        return self._session

    def feed(self, sample: PointerSample) -> Optional[InputEvent]:
        if not self.enabled:
            return None
        if sample.source != self.source:
            return None

        self._session, event = translate(
            self._session, sample, self.provider, self.depth, self.axis
        )
        return event
