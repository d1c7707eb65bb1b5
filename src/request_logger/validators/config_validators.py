def to_uppercase(value: str | None) -> str | None:
    """
    Converts a string to uppercase if it's not None.
    """
    if value is None:
        return None
    return value.upper()

def to_lowercase(value: str | None) -> str | None:
    """
    Converts a string to lowercase if it's not None.
    """
    if value is None:
        return None
    return value.lower()

def split_csv(value: str | None) -> tuple[str, ...]:
    """
    Splits a comma separated string into a tuple of stripped, non-empty items.
    """
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())

def is_true_flag(value: str | None) -> bool:
    """
    Returns True only for the literal string "true" (any case).
    """
    return to_lowercase(value) == "true"
