"""Display formatting in the panel's tr-TR conventions."""

from decimal import Decimal

from aidpanel.models.enums import Currency

CURRENCY_SYMBOLS = {
    Currency.TRY: "₺",
    Currency.USD: "$",
    Currency.EUR: "€",
}


def format_number(value: Decimal, places: int = 2) -> str:
    """Format with ``.`` as thousands separator and ``,`` as decimal mark."""
    text = f"{abs(value):,.{places}f}"
    text = text.replace(",", "\x00").replace(".", ",").replace("\x00", ".")
    return f"-{text}" if value < 0 else text


def format_currency(amount: Decimal, currency: Currency = Currency.TRY) -> str:
    """Format an amount the way the panel shows money, e.g. ``₺1.250,00``."""
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    text = f"{symbol}{format_number(abs(amount))}"
    return f"-{text}" if amount < 0 else text


def format_quantity(quantity: Decimal, unit: str) -> str:
    """Format an in-kind quantity, e.g. ``10 kg`` or ``2.5 Litre``."""
    return f"{quantity.normalize():f} {unit}".strip()


def tr_lower(text: str) -> str:
    """Lower-case ``text`` with Turkish dotted/dotless i rules."""
    return text.replace("İ", "i").replace("I", "ı").lower()


def fold_case(text: str) -> str:
    """Search key: ``tr_lower`` with dotless ``ı`` folded to ``i``.

    ``Işık`` and ``Ibrahim`` both match a search typed with a plain ``i``.
    """
    return tr_lower(text).replace("ı", "i")
