from decimal import Decimal

NANO = Decimal(10**9)


def to_nano(value: int | float | str | Decimal) -> int:
    amount = Decimal(str(value)) * NANO

    if amount != amount.to_integral_value():
        raise ValueError(f"Amount {value} has more than 9 decimal places")

    return int(amount)


def from_nano(value: int) -> Decimal:
    return Decimal(value) / NANO


def format_amount(value: Decimal) -> str:
    if value == 0:
        return "0"
    
    if value < Decimal("0.0001"):
        return "<0.0001"
    
    if value > Decimal("1"):
        return f"{value:.2f}".rstrip("0").rstrip(".")
    
    return f"{value:.4f}".rstrip("0").rstrip(".")
