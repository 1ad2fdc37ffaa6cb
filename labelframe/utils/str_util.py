from labelframe.config import FRACTION_EPSILON, FRACTION_DENOMINATORS


def format_fraction(x: float) -> str:
    """
    Format ``x`` as a whole number or mixed fraction ("3", "1/2", "4 3/4")
    when it lands on one of the common denominators, else as "%.3f".
    """
    for denom in FRACTION_DENOMINATORS:
        product = x * denom
        remainder = abs(product - int(product + 0.5))
        if remainder < FRACTION_EPSILON:
            break
    else:
        return f"{x:.3f}"

    if denom == 1:
        return f"{x:.0f}"

    n = int(x * denom + 0.5)
    if n > denom:
        return f"{n // denom} {n % denom}/{denom}"
    return f"{n}/{denom}"
