"""Full judging pipeline: argument count → classify → message."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .classify import Outcome, PinError, Presence, column_presence, outcome_of
from .constants import MAX_REMAINED, MIN_REMAINED, NO_REMAINING

logger = logging.getLogger(__name__)


@dataclass
class FrameResult:
    """Result of judging one leave."""

    outcome: Outcome | PinError
    pins: list[str] = field(default_factory=list)
    columns: str | None = None

    @property
    def message(self) -> str:
        return self.outcome.message

    @property
    def is_error(self) -> bool:
        return isinstance(self.outcome, PinError)

    @property
    def is_split(self) -> bool:
        return self.outcome is Outcome.SPLIT


def outcome_for_count(count: int) -> Outcome | None:
    """Return the outcome decided by the argument count alone, if any."""
    if count > MAX_REMAINED:
        return Outcome.TOO_MANY_ARGUMENTS
    if count == MAX_REMAINED:
        return Outcome.GUTTER
    if count == MIN_REMAINED:
        return Outcome.ONLY_ONE_LEFT
    if count == NO_REMAINING:
        return Outcome.STRIKE
    return None


def evaluate(args: Sequence[str]) -> FrameResult:
    """Judge the standing pins given as raw command-line tokens.

    The argument count is checked before any token is parsed, so an
    eleventh (possibly malformed) token never reaches validation.

    Args:
        args: Raw pin tokens, in the order given.

    Returns:
        FrameResult whose ``message`` is the single line to print.
    """
    pins = list(args)
    early = outcome_for_count(len(pins))
    if early is not None:
        logger.debug("%d argument(s) → %s", len(pins), early.name)
        return FrameResult(outcome=early, pins=pins)

    presence = column_presence(pins)
    outcome = outcome_of(presence)
    columns = presence.bits if isinstance(presence, Presence) else None
    logger.debug("Pins %s → %s", " ".join(pins), outcome.name)
    return FrameResult(outcome=outcome, pins=pins, columns=columns)
