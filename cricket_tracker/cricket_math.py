# cricket_tracker/cricket_math.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

BALLS_PER_OVER = 6
OversLike = Union[str, int, float, None]


def to_int(value: object, default: int = 0) -> int:
    """
    Lenient integer coercion for user-entered numbers.

    - None, "", "abc", "nan" -> default
    - "12", " 12 ", "12.7", 12.7 -> 12 (truncates toward zero)
    - negative values -> default (counts are never negative)
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        sx = str(value).strip()
        if not sx or sx.lower() == "nan":
            return default
        n = int(float(sx))
    except (TypeError, ValueError, OverflowError):
        return default
    return n if n >= 0 else default


def overs_to_balls(overs: OversLike) -> int:
    """
    Converts cricket overs notation to balls.

    Supported inputs:
    - "3.2", "19.4", "7" (string overs notation)
    - 4 (int overs)
    - 3.2 (float) -> treated as "3.2"

    Rule: ".x" means x balls. Example: 3.2 = 3*6 + 2 = 20 balls.

    Unlike the strict innings parser this never raises: blank or garbage
    parts count as 0, and a balls part >= 6 ("3.9") is taken at face value
    (3*6 + 9 = 27) rather than rejected or carried into the next over.
    """
    if overs is None:
        return 0

    s = str(overs).strip()
    if not s:
        return 0

    if "." not in s:
        return to_int(s) * BALLS_PER_OVER

    ov_part, ball_part = s.split(".", 1)
    return to_int(ov_part) * BALLS_PER_OVER + to_int(ball_part)


def balls_to_overs(balls: int) -> str:
    """20 -> "3.2" (cricket notation, not a decimal)."""
    if balls <= 0:
        return "0.0"
    return f"{balls // BALLS_PER_OVER}.{balls % BALLS_PER_OVER}"


def balls_to_overs_float(balls: int) -> float:
    if balls <= 0:
        return 0.0
    return balls / 6.0


def effective_bowling_balls(bowl_balls: int, overs: OversLike) -> int:
    """Explicit ball count when non-zero, else derived from the overs string. Never both."""
    if bowl_balls:
        return bowl_balls
    return overs_to_balls(overs)


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Rounds .5 away from zero (15.25 -> 15.3), unlike round()'s banker's rounding.
    """
    try:
        quant = Decimal(1).scaleb(-digits)
        return float(Decimal(repr(value)).quantize(quant, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return float(value)


def strike_rate(runs: int, balls: int) -> float:
    """Runs per 100 balls, 1 dp. 0 balls -> 0."""
    if not balls:
        return 0.0
    return round_half_up(runs / balls * 100, 1)


def economy(runs_conceded: int, balls: int) -> float:
    """Runs per over, 2 dp. 0 balls -> 0."""
    overs = balls_to_overs_float(balls)
    if overs == 0.0:
        return 0.0
    return round_half_up(runs_conceded / overs, 2)


def percentage(part: float, whole: float, digits: int = 1) -> float:
    if not whole:
        return 0.0
    return round_half_up(part / whole * 100, digits)


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, value)))


def fmt_number(value: Optional[float]) -> str:
    """
    Renders a rounded metric without a trailing ".0" (50.0 -> "50", 45.5 -> "45.5").
    """
    if value is None:
        return "0"
    return f"{value:g}"
