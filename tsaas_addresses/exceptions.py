"""Custom exception hierarchy for tsaas-addresses."""


class AddressError(Exception):
    """Base exception for all tsaas-addresses errors."""


class InvalidAddressError(AddressError):
    """Raised when an address is built from invalid field values.

    Parameters
    ----------
    message : str
        Human-readable description, e.g. ``"Street cannot be empty."``.
    property_name : str | None
        Name of the offending field (``"street"``, ``"zip_code"``...).
    """

    def __init__(
        self,
        message: str = "The address is invalid.",
        property_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.property_name = property_name


class ConfigurationError(AddressError):
    """Raised when configuration is invalid or missing."""
