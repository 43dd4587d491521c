"""Domain normalization helpers."""


def normalize_currency_code(code: str | None) -> str | None:
    """Normalize currency code values.

    Args:
        code: Raw currency code from a record or caller.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not code:
        return None
    cleaned = code.strip()
    return cleaned.upper() if cleaned else None


def normalize_identifier(value) -> str | None:
    """Normalize an optional record identifier.

    Args:
        value: Raw identifier (string, UUID, int or None).

    Returns:
        str | None: Stripped string form, or None when blank.
    """
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


__all__ = ["normalize_currency_code", "normalize_identifier"]
