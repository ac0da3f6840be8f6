"""Display formatting for prices."""

RUPEE_SYMBOL = "₹"


def format_indian_price(price: float) -> str:
    """
    Format a price in rupees with Indian digit grouping.

    The last three digits form one group and the rest are grouped in
    pairs, with no fractional part.

    Example:
        >>> format_indian_price(12345678)
        '₹1,23,45,678'
    """
    rounded = int(round(price))
    sign = "-" if rounded < 0 else ""
    digits = str(abs(rounded))

    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])

    return f"{sign}{RUPEE_SYMBOL}{digits}"
