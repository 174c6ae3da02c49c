# Display helpers for rupee amounts and returns (Indian numbering: lakh = 1e5, crore = 1e7)

LAKH = 1_00_000
CRORE = 1_00_00_000


def format_axis_tick(value: float) -> str:
    if value >= CRORE:
        return f"{value / CRORE:.1f}Cr"
    if value >= LAKH:
        return f"{value / LAKH:.1f}L"
    if value >= 1_000:
        return f"{value / 1_000:.0f}k"
    return f"{value:g}"


def group_indian(n: int) -> str:
    """12345678 -> '1,23,45,678' (last three digits, then pairs)."""
    sign = "-" if n < 0 else ""
    digits = str(abs(int(n)))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return sign + ",".join(pairs + [tail])


def format_inr(amount: float) -> str:
    return f"₹{group_indian(round(amount))}"


def format_pct(value: float) -> str:
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.1f}%"
