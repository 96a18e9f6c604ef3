"""Plain-dict serialization for addresses."""

from dataclasses import fields
from typing import Any, Mapping

from tsaas_addresses.models.address import Address

FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(Address))


def to_dict(address: Address, include_display: bool = False) -> dict[str, Any]:
    """Convert an address to a dict of its stored fields.

    Parameters
    ----------
    address : Address
        Address to convert.
    include_display : bool
        Also include ``street_display``, ``formatted_zip_code`` and
        ``full_address``.

    Returns
    -------
    dict[str, Any]
        Serialized dictionary; absent optional fields are ``None``.
    """
    result: dict[str, Any] = {name: getattr(address, name) for name in FIELD_NAMES}
    if include_display:
        result["street_display"] = address.street_display
        result["formatted_zip_code"] = address.format_zip_code()
        result["full_address"] = address.full_address()
    return result


def from_dict(data: Mapping[str, Any]) -> Address:
    """Build an address from a dict produced by :func:`to_dict`.

    Unknown keys are ignored. Missing required keys surface as the
    usual :class:`~tsaas_addresses.exceptions.InvalidAddressError`.
    """
    return Address(**{name: data.get(name) for name in FIELD_NAMES})


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Address):
        return to_dict(value, include_display=True)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
