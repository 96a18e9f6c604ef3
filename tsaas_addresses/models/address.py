"""Address value object."""

import logging
from dataclasses import dataclass

from tsaas_addresses.exceptions import InvalidAddressError
from tsaas_addresses.formatting import (
    build_full_address,
    clean_zip_code,
    format_brazilian_zip_code,
    format_street_display,
    is_blank,
    normalize_country_code,
)

logger = logging.getLogger(__name__)

# Checked in this order; the first blank one is reported
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("street", "Street"),
    ("district", "District"),
    ("city", "City"),
    ("state", "State"),
    ("country", "Country"),
    ("country_code", "Country code"),
    ("zip_code", "ZipCode"),
)

OPTIONAL_FIELDS: tuple[str, ...] = (
    "type",
    "number",
    "municipality_ibge",
    "state_ibge",
    "complement",
)


@dataclass(frozen=True)
class Address:
    """Immutable postal address following Brazilian conventions.

    Values are validated and normalized once, at construction:

    - required fields must not be blank and are stored trimmed
    - blank optional fields are stored as ``None``
    - ``country_code`` is uppercased (``"br"`` -> ``"BR"``)
    - ``zip_code`` is stored without separators (``"01310-100"`` -> ``"01310100"``)

    Equality and hashing cover all twelve stored fields.

    Raises
    ------
    InvalidAddressError
        If a required field is ``None``, empty or whitespace-only.
    """

    street: str
    district: str
    city: str
    state: str
    country: str
    country_code: str
    zip_code: str
    type: str | None = None  # street type: Rua, Avenida...
    number: str | None = None
    municipality_ibge: str | None = None
    state_ibge: str | None = None
    complement: str | None = None

    def __post_init__(self) -> None:
        for name in OPTIONAL_FIELDS:
            value = getattr(self, name)
            object.__setattr__(self, name, None if is_blank(value) else value.strip())

        for name, label in REQUIRED_FIELDS:
            if is_blank(getattr(self, name)):
                logger.debug(
                    "Rejected address: %s is empty",
                    name,
                    extra={"extra": {"property_name": name}},
                )
                raise InvalidAddressError(f"{label} cannot be empty.", name)

        for name in ("street", "district", "city", "state", "country"):
            object.__setattr__(self, name, getattr(self, name).strip())
        object.__setattr__(self, "country_code", normalize_country_code(self.country_code))
        object.__setattr__(self, "zip_code", clean_zip_code(self.zip_code))

    @property
    def street_display(self) -> str:
        """Street type and name, e.g. ``"Rua Flores"``."""
        return format_street_display(self.type, self.street)

    def format_zip_code(self) -> str:
        """Return the zip code as ``NNNNN-NNN`` when it has 8 digits."""
        return format_brazilian_zip_code(self.zip_code)

    def full_address(self) -> str:
        """Return the single-line display form of the address."""
        return build_full_address(
            self.type,
            self.street,
            self.number,
            self.complement,
            self.district,
            self.city,
            self.state,
            self.country,
            self.zip_code,
        )

    def __str__(self) -> str:
        return self.full_address()
