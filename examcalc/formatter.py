"""Bounded-precision display formatting."""

import math

PRECISION = 12
LOWER_EXP = -6
UPPER_EXP = 15


def format_value(value: float) -> str:
    """Render ``value`` with 12 significant digits.

    Fixed notation while the decimal exponent lies in [-6, 15), exponential
    (``1.5e+20``) outside it. Trailing zeros are dropped.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value!r}")
    if value == 0:
        return "0"

    mantissa, exp_text = f"{value:.{PRECISION - 1}e}".split("e")
    exponent = int(exp_text)
    digits = mantissa.lstrip("-").replace(".", "").rstrip("0")
    sign = "-" if value < 0 else ""

    if LOWER_EXP <= exponent < UPPER_EXP:
        if exponent < 0:
            body = "0." + "0" * (-exponent - 1) + digits
        elif len(digits) <= exponent + 1:
            body = digits + "0" * (exponent + 1 - len(digits))
        else:
            body = f"{digits[:exponent + 1]}.{digits[exponent + 1:]}"
    else:
        body = digits[0]
        if len(digits) > 1:
            body += "." + digits[1:]
        body += f"e{'+' if exponent >= 0 else '-'}{abs(exponent)}"

    return sign + body
