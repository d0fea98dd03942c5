"""
Human time expression parsing.

Turns a single-term expression such as "2 hours", "+30 minutes",
"1.5 days ago" or "10 s from now" into a signed number of seconds.
Compound expressions ("1 hour 30 minutes") are rejected; callers that
need them must sum the parts themselves.
"""

from __future__ import annotations

import re
from decimal import Decimal

from ..domain.constants import UNIT_ALIASES, Direction
from ..domain.exceptions import InvalidTimeExpressionError
from ..domain.value_objects import ParsedTimeExpression

_UNIT_PATTERN = "|".join(sorted(UNIT_ALIASES, key=len, reverse=True))

TIME_EXPRESSION_REGEX = re.compile(
    rf"([+-])? ?([0-9]+|[0-9]+\.[0-9]+) ?({_UNIT_PATTERN})(?: (ago|from now))?",
    re.IGNORECASE | re.ASCII,
)


def parse_time_expression(expression: str) -> ParsedTimeExpression:
    """
    Parse `expression` into its sign / magnitude / unit / direction parts.

    Raises:
        InvalidTimeExpressionError
    """
    if not isinstance(expression, str):
        raise InvalidTimeExpressionError(
            f"Time expression must be a string, got {type(expression).__name__}"
        )

    match = TIME_EXPRESSION_REGEX.fullmatch(expression)
    if match is None:
        raise InvalidTimeExpressionError(f"Invalid time expression: {expression!r}")

    sign, magnitude, unit_text, direction = match.groups()

    unit = UNIT_ALIASES.get(unit_text.lower())
    if unit is None:
        raise InvalidTimeExpressionError(f"Unknown time unit: {unit_text!r}")

    return ParsedTimeExpression(
        sign=sign,
        magnitude=Decimal(magnitude),
        unit=unit,
        direction=Direction(direction.lower()) if direction else None,
    )


def parse_human_time(expression: str) -> int:
    """
    Convert a human time expression to seconds (negative for the past).

        parse_human_time("2 hours")      # 7200
        parse_human_time("30 mins ago")  # -1800
        parse_human_time("+1 day")       # 86400

    Raises:
        InvalidTimeExpressionError
    """
    return parse_time_expression(expression).seconds
