"""Interest and utility bill calculations."""


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def compound_interest(principal: float, time: float, rate: float) -> float:
    """Return the amount after compounding rate percent over time periods."""
    return principal * (1 + rate / 100) ** time


def simple_interest(principal: int, time: int) -> int:
    """Return whole-unit simple interest: 8% above 10 years, 7% for 5 to 9, else 5%."""
    if time > 10:
        percent = 8
    elif 5 <= time < 10:
        percent = 7
    else:
        percent = 5
    return _truncating_div(principal * time * percent, 100)


_TIERS = ((50, 0.50), (150, 0.75), (250, 1.20))
_TOP_RATE = 1.50
_SURCHARGE = 0.2


def electricity_bill(units: int) -> int:
    """Return the whole-unit bill for the consumed units, by tiered rate plus surcharge."""
    rate = next((r for limit, r in _TIERS if units <= limit), _TOP_RATE)
    return int(units * _SURCHARGE + units * rate)