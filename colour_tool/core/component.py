"""Component value helpers: parsing numbers with units, formatting, tolerant comparison.

Component values are normalized floats. Most channels live in [0.0, 1.0];
hues are a fraction of a full turn. Values may stray outside that range
(unclipped) so marginally out-of-gamut colours still round-trip.
"""

import math

# Unit suffixes and the divisor that turns them into a proportion / turn fraction.
# 'grad' must be tried before 'rad'.
_UNITS: list[tuple[str, float]] = [
    ('%', 100.0),
    ('°', 360.0),
    ('deg', 360.0),
    ('grad', 400.0),
    ('rad', 2.0 * math.pi),
]


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return math.nan


def parse_number(text: str, maximum: float | None = None, minimum: float | None = None) -> float:
    """Parse a component value, honouring %, °, deg, grad and rad suffixes.

    Without a unit the literal value is returned, unless `maximum` or `minimum`
    is given, in which case the value is rescaled as (v - min) / (max - min)
    with min defaulting to 0. Text that is not a number gives NaN.
    """
    text = text.strip()
    for suffix, divisor in _UNITS:
        if text.endswith(suffix):
            return _to_float(text[: -len(suffix)]) / divisor

    value = _to_float(text)
    if maximum is None and minimum is None:
        return value
    lo = minimum or 0.0
    hi = maximum or 0.0
    return (value - lo) / (hi - lo)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +inf."""
    return int(math.floor(value + 0.5))


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp to [lo, hi]. NaN passes through untouched."""
    if math.isnan(value):
        return value
    return max(lo, min(hi, value))


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    return 'Infinity' if value > 0 else '-Infinity'


def format_number(value: float, precision: float = 1) -> str:
    """Format `value` rounded to the nearest multiple of `precision`.

    precision >= 1 gives an integer. Smaller precisions print just enough
    decimals for that precision, then drop trailing zeros and a bare point.

        >>> format_number(0.5, 1e-3)
        '0.5'
    """
    if not math.isfinite(value):
        return _non_finite(value)
    if precision >= 1:
        return str(round_half_up(value))

    digits = math.trunc(-math.log10(precision))
    scaled = value / precision
    # Too large to scale: already a whole multiple of precision
    rounded = round_half_up(scaled) * precision + 0.0 if math.isfinite(scaled) else value
    text = f'{rounded:.{digits}f}'
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def numbers_equal(a: float, b: float, epsilon: float = 1e-6) -> bool:
    """True if a and b differ by less than epsilon. NaN is never equal to anything."""
    if a == b:
        return True
    return abs(a - b) < epsilon


def all_nan(*values: float) -> bool:
    """True if every value is NaN (the empty-colour test)."""
    return all(math.isnan(v) for v in values)
