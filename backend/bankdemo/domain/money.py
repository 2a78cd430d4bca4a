from __future__ import annotations

from decimal import Decimal, InvalidOperation


def _parse_decimal(value: str) -> Decimal:
    """
    Parse robuste depuis string.
    Autorise "12.34", "-12.34", "12", et optionnellement "12,34".
    """
    raw = value.strip()
    if raw == "":
        raise ValueError("Amount cannot be empty")

    # tolérance minimale pour les virgules françaises
    raw = raw.replace(",", ".")

    try:
        return Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid decimal amount: {value!r}") from exc


def parse_amount(value: Decimal | int | float | str) -> Decimal:
    """
    Convertit une saisie (console, test, appel direct) en Decimal.
    Pas d'arrondi : le montant est gardé tel quel.
    """
    # bool est un int : on le refuse explicitement
    if isinstance(value, bool):
        raise TypeError("Amount cannot be a bool")

    if isinstance(value, Decimal):
        dec = value
    elif isinstance(value, int):
        dec = Decimal(value)
    elif isinstance(value, float):
        # str() évite les artefacts binaires (0.1 -> 0.1000000000000000055...)
        dec = Decimal(str(value))
    elif isinstance(value, str):
        dec = _parse_decimal(value)
    else:
        raise TypeError(f"Unsupported amount type: {type(value).__name__}")

    if not dec.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return dec


def format_amount(amount: Decimal) -> str:
    """
    Rendu console : notation décimale, au moins un chiffre après la virgule.
    200 -> "200.0", 12.50 -> "12.5", -3 -> "-3.0"
    """
    if amount == 0:
        # normalize() de -0 garderait le signe
        return "0.0"

    text = format(amount.normalize(), "f")
    if "." not in text:
        text += ".0"
    return text
