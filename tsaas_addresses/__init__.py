"""Brazilian postal address value object and formatting helpers."""

from tsaas_addresses.exceptions import AddressError, InvalidAddressError
from tsaas_addresses.models.address import Address

__version__ = "0.1.0"

__all__ = ["Address", "AddressError", "InvalidAddressError"]
