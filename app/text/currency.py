# app/text/currency.py


def _group_thousands(amount: int) -> str:
    # pemisah ribuan gaya Indonesia: titik
    return f"{amount:,}".replace(",", ".")


def format_currency(amount: int, currency: str = "IDR") -> str:
    formatted = _group_thousands(amount)
    if currency == "IDR":
        return f"Rp {formatted}"
    if currency == "USD":
        return f"$ {formatted}"
    return f"{formatted} {currency}"
