from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")

def to_decimal(x) -> Decimal:
    # go through str to avoid float binary artifacts
    if isinstance(x, Decimal):
        return x
    return Decimal(str(x or 0))

def quantize(x) -> Decimal:
    return to_decimal(x).quantize(CENT, rounding=ROUND_HALF_UP)

def non_negative(x) -> Decimal:
    d = to_decimal(x)
    return d if d > 0 else Decimal("0")

def money(x) -> float:
    return float(quantize(x))
