"""Pure formatting helpers for Brazilian addresses.

None of these functions validate their input or raise: blank values
degrade to an empty string, the input itself, or a partial result.
"""

ZIP_CODE_SEPARATORS = ("-", ".", " ")
NO_NUMBER = "S/N"  # sem número


def is_blank(value: str | None) -> bool:
    """Return True for ``None``, empty or whitespace-only strings."""
    return value is None or not value.strip()


def clean_zip_code(zip_code: str | None) -> str:
    """Strip separators from a zip code (``"01310-100"`` -> ``"01310100"``)."""
    if is_blank(zip_code):
        return ""

    for separator in ZIP_CODE_SEPARATORS:
        zip_code = zip_code.replace(separator, "")
    return zip_code.strip()


def format_brazilian_zip_code(zip_code: str | None) -> str | None:
    """Format a CEP as ``NNNNN-NNN``.

    Blank input is returned unchanged. Codes that do not clean down to
    exactly 8 characters are returned cleaned but without the hyphen.

    Parameters
    ----------
    zip_code : str | None
        Raw or already cleaned zip code.

    Returns
    -------
    str | None
        Display form of the zip code.
    """
    if is_blank(zip_code):
        return zip_code

    clean = clean_zip_code(zip_code)
    if len(clean) == 8:
        return f"{clean[:5]}-{clean[5:]}"
    return clean


def normalize_country_code(country_code: str | None) -> str:
    """Trim and uppercase a country code; blank input gives ``""``."""
    if is_blank(country_code):
        return ""
    return country_code.strip().upper()


def format_street_display(type: str | None, street: str) -> str:
    """Join street type and name, e.g. ``"Rua"`` + ``"Flores"``."""
    if is_blank(type):
        return street
    return f"{type} {street}"


def build_full_address(
    type: str | None,
    street: str,
    number: str | None,
    complement: str | None,
    district: str,
    city: str,
    state: str,
    country: str,
    zip_code: str,
) -> str:
    """Compose the single-line display form of an address.

    Layout::

        {type} {street}, {number|S/N}[ - {complement}], {district},
        {city} - {state}, {country}, CEP: {NNNNN-NNN}
    """
    address = format_street_display(type, street)

    if not is_blank(number):
        address += f", {number}"
    else:
        address += f", {NO_NUMBER}"

    if not is_blank(complement):
        address += f" - {complement}"

    address += (
        f", {district}, {city} - {state}, {country}, "
        f"CEP: {format_brazilian_zip_code(zip_code)}"
    )
    return address
