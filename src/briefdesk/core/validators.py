"""Input validators shared by schemas."""

import re

# Italian codice fiscale (16 chars) or partita IVA (11 digits)
CODICE_FISCALE_PATTERN = re.compile(r"^[A-Z]{6}[0-9]{2}[A-Z][0-9]{2}[A-Z][0-9]{3}[A-Z]$")
PARTITA_IVA_PATTERN = re.compile(r"^[0-9]{11}$")


def normalize_tax_code(code: str) -> str:
    """Strip whitespace and upper-case a tax code."""
    return "".join(code.split()).upper()


def is_valid_tax_code(code: str) -> bool:
    """Check a code against the codice fiscale or P.IVA format."""
    normalized = normalize_tax_code(code)
    return bool(
        CODICE_FISCALE_PATTERN.match(normalized) or PARTITA_IVA_PATTERN.match(normalized)
    )


def validate_tax_code(code: str) -> str:
    """Return the normalized tax code.

    Raises:
        ValueError: If the code is neither a codice fiscale nor a P.IVA.
    """
    if not is_valid_tax_code(code):
        raise ValueError("Tax code must be a valid codice fiscale or an 11-digit P.IVA")
    return normalize_tax_code(code)
