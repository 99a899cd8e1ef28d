"""Shared constants for pin layout and split classification.

Pin layout (viewed from the bowler, head pin nearest)::

    7   8   9   10
      4   5   6
        2   3
          1

Columns (vertical lanes through the rack), left to right::

    col:  0   1   2   3   4   5   6
    pin:  7   4  2,8 1,5 3,9  6  10
"""

NUM_PINS: int = 10
NUM_COLUMNS: int = 7

HEAD_PIN: int = 1

# Pin number -> column index.  Never mutated.
PIN_COLUMNS: dict[int, int] = {
    1: 3,
    2: 2,
    3: 4,
    4: 1,
    5: 3,
    6: 5,
    7: 0,
    8: 2,
    9: 4,
    10: 6,
}

# Argument counts that decide the outcome before any pin is parsed.
MAX_REMAINED: int = 10
MIN_REMAINED: int = 1
NO_REMAINING: int = 0

# A standing column, one or more empty columns, another standing column.
SPLIT_PATTERN: str = r".*10+1.*"

# Range accepted when parsing a token as an integer (signed 32-bit).
INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1

MESSAGE_TOO_MANY: str = "too many arguments"
MESSAGE_GUTTER: str = "Gutter!"
MESSAGE_ONLY_ONE: str = "there's only one left"
MESSAGE_STRIKE: str = "Strike!"
MESSAGE_PREFIX: str = "remained pins are"

MESSAGE_ILLEGAL_VALUE: str = "Illegal number"
MESSAGE_TOO_SMALL: str = "Number too small"
MESSAGE_TOO_BIG: str = "Number too big"
