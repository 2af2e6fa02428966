def format_currency(amount: float, symbol: str = "USD") -> str:
    """Format a float as currency string, e.g. '1,234.56 USD'."""
    return f"{amount:,.2f} {symbol}"


def format_signed(amount: float, is_expense: bool, symbol: str = "USD") -> str:
    """Expenses get '-', everything else '+'. amount is a magnitude."""
    sign = "-" if is_expense else "+"
    return f"{sign}{abs(amount):,.2f} {symbol}"
