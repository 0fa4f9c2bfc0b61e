"""Marketpay exceptions module."""


class MarketpayError(Exception):
    """Base exception for all marketpay exceptions."""


class MarketpayInvalidBackendError(MarketpayError):
    """Exception raised when a configured backend is invalid."""


class ShopRetrievalError(MarketpayError):
    """Exception raised when shops cannot be retrieved from the operator API."""


class ShopPaginationError(ShopRetrievalError):
    """Exception raised when the operator API returns an empty page before the total is reached."""


class ShopMappingError(MarketpayError):
    """Base exception for a shop that cannot be mapped to an account holder."""


class LegalEntityNotFoundError(ShopMappingError):
    """Exception raised when the shop has no legal entity additional field."""


class AmbiguousLegalEntityError(ShopMappingError):
    """Exception raised when the shop has more than one legal entity additional field."""


class InvalidLegalEntityError(ShopMappingError):
    """Exception raised when the legal entity value is not a known legal entity."""


class UnsupportedLegalEntityError(ShopMappingError):
    """Exception raised when the legal entity is known but cannot be mapped."""


class ContactInformationNotFoundError(ShopMappingError):
    """Exception raised when the shop has no contact information."""


class PaymentsApiError(MarketpayError):
    """
    Exception raised when the payments API rejects a request.

    The provider error payload is kept untouched in `error`.
    """

    def __init__(self, message, error=None, status_code=None):
        """Keep the provider payload and the HTTP status along with the message."""
        super().__init__(message)
        self.error = error
        self.status_code = status_code

    @property
    def error_messages(self) -> list[str]:
        """Human readable messages extracted from the provider payload."""
        if not self.error:
            return [str(self)]
        if isinstance(self.error, str):
            return [self.error]

        messages = []
        for field in self.error.get("invalidFields") or []:
            error_description = field.get("errorDescription") or field.get("message")
            if error_description:
                messages.append(error_description)
        if not messages and self.error.get("message"):
            messages.append(self.error["message"])
        return messages or [str(self)]
