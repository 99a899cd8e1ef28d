"""Split classification: pin tokens → column presence → split decision.

A leave is a split when, looking at the seven columns of the rack, a
standing column is followed by one or more empty columns and then another
standing column.  A standing head pin rules a split out, so the scan stops
as soon as pin 1 is seen.

Invalid tokens are reported as :class:`PinError` values, never raised.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from .constants import (
    HEAD_PIN,
    INT_MAX,
    INT_MIN,
    MESSAGE_GUTTER,
    MESSAGE_ILLEGAL_VALUE,
    MESSAGE_ONLY_ONE,
    MESSAGE_PREFIX,
    MESSAGE_STRIKE,
    MESSAGE_TOO_BIG,
    MESSAGE_TOO_MANY,
    MESSAGE_TOO_SMALL,
    NUM_COLUMNS,
    NUM_PINS,
    PIN_COLUMNS,
    SPLIT_PATTERN,
)

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_SPLIT_RE = re.compile(SPLIT_PATTERN)


class PinError(enum.Enum):
    """Why a pin token was rejected.  The value is the user-facing message."""

    ILLEGAL_VALUE = MESSAGE_ILLEGAL_VALUE
    TOO_SMALL = MESSAGE_TOO_SMALL
    TOO_BIG = MESSAGE_TOO_BIG

    @property
    def message(self) -> str:
        return self.value


class Outcome(enum.Enum):
    """Every terminal result of judging one leave."""

    TOO_MANY_ARGUMENTS = "too_many_arguments"
    GUTTER = "gutter"
    ONLY_ONE_LEFT = "only_one_left"
    STRIKE = "strike"
    HEAD_PIN_STANDING = "head_pin_standing"
    SPLIT = "split"
    NOT_SPLIT = "not_split"

    @property
    def message(self) -> str:
        return _OUTCOME_MESSAGES[self]


def _verdict(split: bool) -> str:
    return MESSAGE_PREFIX + (" " if split else " not ") + "split"


_OUTCOME_MESSAGES: dict[Outcome, str] = {
    Outcome.TOO_MANY_ARGUMENTS: MESSAGE_TOO_MANY,
    Outcome.GUTTER: MESSAGE_GUTTER,
    Outcome.ONLY_ONE_LEFT: MESSAGE_ONLY_ONE,
    Outcome.STRIKE: MESSAGE_STRIKE,
    Outcome.HEAD_PIN_STANDING: _verdict(False),
    Outcome.SPLIT: _verdict(True),
    Outcome.NOT_SPLIT: _verdict(False),
}


@dataclass(frozen=True)
class Presence:
    """Which of the seven columns hold at least one standing pin."""

    columns: tuple[bool, ...]

    def __post_init__(self) -> None:
        if len(self.columns) != NUM_COLUMNS:
            raise ValueError(
                f"Presence needs {NUM_COLUMNS} columns, got {len(self.columns)}"
            )

    @property
    def bits(self) -> str:
        """Columns rendered left to right as ``'1'`` (standing) / ``'0'``."""
        return "".join("1" if c else "0" for c in self.columns)


@dataclass(frozen=True)
class HeadPinStanding:
    """Pin 1 is among the standing pins; the leave cannot be a split."""


def parse_pin(token: str) -> int | PinError:
    """Parse *token* as a pin number.

    Accepts an optional sign followed by ASCII digits, within the signed
    32-bit range.  Anything else is :attr:`PinError.ILLEGAL_VALUE`.  Values
    below 1 are :attr:`PinError.TOO_SMALL`, above 10 :attr:`PinError.TOO_BIG`.
    """
    if not _INTEGER_RE.fullmatch(token):
        return PinError.ILLEGAL_VALUE
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        return PinError.ILLEGAL_VALUE
    # 0 means "nothing standing" only as an empty argument list.
    if value < HEAD_PIN:
        return PinError.TOO_SMALL
    if value > NUM_PINS:
        return PinError.TOO_BIG
    return value


def column_of(pin: int) -> int:
    """Return the column index (0–6) that *pin* stands in."""
    try:
        return PIN_COLUMNS[pin]
    except KeyError:
        raise ValueError(f"No pin numbered {pin!r}; pins are 1–{NUM_PINS}.") from None


def column_presence(raw_pins: Sequence[str]) -> Presence | HeadPinStanding | PinError:
    """Scan *raw_pins* in order and mark the column of each standing pin.

    Stops at the first invalid token (returning its :class:`PinError`) or
    at the head pin (returning :class:`HeadPinStanding`); tokens after
    either are never looked at.
    """
    columns = [False] * NUM_COLUMNS
    for token in raw_pins:
        pin = parse_pin(token)
        if isinstance(pin, PinError):
            logger.debug("Rejected token %r: %s", token, pin.message)
            return pin
        if pin == HEAD_PIN:
            logger.debug("Head pin standing, skipping remaining tokens")
            return HeadPinStanding()
        col = column_of(pin)
        logger.debug("Pin %d → column %d", pin, col)
        columns[col] = True
    return Presence(tuple(columns))


def is_split(presence: Presence) -> bool:
    """True when a standing column, a gap, and another standing column occur."""
    return _SPLIT_RE.fullmatch(presence.bits) is not None


def outcome_of(presence: Presence | HeadPinStanding | PinError) -> Outcome | PinError:
    """Turn the result of :func:`column_presence` into an outcome."""
    if isinstance(presence, PinError):
        return presence
    if isinstance(presence, HeadPinStanding):
        return Outcome.HEAD_PIN_STANDING
    split = is_split(presence)
    logger.debug("Columns %s → %s", presence.bits, "split" if split else "not split")
    return Outcome.SPLIT if split else Outcome.NOT_SPLIT


def classify(raw_pins: Sequence[str]) -> Outcome | PinError:
    """Judge a leave of standing pins given as raw tokens.

    Returns:
        :attr:`Outcome.HEAD_PIN_STANDING`, :attr:`Outcome.SPLIT` or
        :attr:`Outcome.NOT_SPLIT`, or the :class:`PinError` of the first
        invalid token.
    """
    return outcome_of(column_presence(raw_pins))
