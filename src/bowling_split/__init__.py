"""Bowling split — tell whether a first-ball leave is a split.

Quick start::

    from bowling_split import evaluate

    result = evaluate(["7", "10"])
    print(result.message)  # remained pins are split

For the column scan only::

    from bowling_split import column_presence, is_split

    presence = column_presence(["4", "6"])
    print(presence.bits, is_split(presence))  # 0100010 True
"""

from bowling_split.classify import (
    HeadPinStanding,
    Outcome,
    PinError,
    Presence,
    classify,
    column_of,
    column_presence,
    is_split,
    outcome_of,
    parse_pin,
)
from bowling_split.constants import NUM_COLUMNS, NUM_PINS, PIN_COLUMNS
from bowling_split.pipeline import FrameResult, evaluate, outcome_for_count

__all__ = [
    # Pipeline
    "evaluate",
    "outcome_for_count",
    "FrameResult",
    # Classification
    "classify",
    "column_presence",
    "column_of",
    "is_split",
    "outcome_of",
    "parse_pin",
    "Outcome",
    "PinError",
    "Presence",
    "HeadPinStanding",
    # Constants
    "NUM_PINS",
    "NUM_COLUMNS",
    "PIN_COLUMNS",
]
