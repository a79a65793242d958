from typing import Optional

from depo import messages

def format_stock(value: Optional[float]) -> str:
    """
    Formatuje stan magazynowy z dokladnie trzema miejscami po przecinku w zapisie tureckim.

    Przyklad: 1234.5 -> "1.234,500".
    
    Args:
        value: Ilosc na stanie.
    
    Returns:
        str: Sformatowana ilosc.
    """
    formatted = f"{value or 0:,.3f}"
    return formatted.replace(",", "_").replace(".", ",").replace("_", ".")

def or_placeholder(value: Optional[str], placeholder: str = messages.NO_SERIAL) -> str:
    """
    Zwraca wartosc albo znak zastepczy, gdy jej brak.
    """
    return placeholder if value is None else value
