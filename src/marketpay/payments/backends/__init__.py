"""Payments platform backends module."""

from dataclasses import asdict, dataclass, field
from enum import StrEnum


class LegalEntity(StrEnum):
    """Legal entity classification of an account holder."""

    BUSINESS = "Business"
    INDIVIDUAL = "Individual"
    NONPROFIT = "NonProfit"
    PARTNERSHIP = "Partnership"
    PUBLICCOMPANY = "PublicCompany"


class Gender(StrEnum):
    """Gender of an individual account holder."""

    MALE = "MALE"
    FEMALE = "FEMALE"
    UNKNOWN = "UNKNOWN"


@dataclass
class Name:
    """Name of an individual."""

    first_name: str | None = None
    last_name: str | None = None
    gender: Gender = Gender.UNKNOWN

    def to_payload(self) -> dict:
        """Return the payments API representation."""
        return {"firstName": self.first_name, "lastName": self.last_name, "gender": str(self.gender)}


@dataclass
class IndividualDetails:
    """Details of an individual account holder."""

    name: Name

    def to_payload(self) -> dict:
        """Return the payments API representation."""
        return {"name": self.name.to_payload()}


@dataclass
class AccountHolderDetails:
    """Details of an account holder."""

    email: str | None = None
    individual_details: IndividualDetails | None = None

    def to_payload(self) -> dict:
        """Return the payments API representation."""
        payload = {"email": self.email}
        if self.individual_details is not None:
            payload["individualDetails"] = self.individual_details.to_payload()
        return payload


@dataclass
class CreateAccountHolderRequest:
    """Account holder creation request built from a single shop."""

    account_holder_code: str
    legal_entity: LegalEntity
    account_holder_details: AccountHolderDetails = field(default_factory=AccountHolderDetails)

    def to_payload(self) -> dict:
        """Return the payments API representation."""
        return {
            "accountHolderCode": self.account_holder_code,
            "legalEntity": str(self.legal_entity),
            "accountHolderDetails": self.account_holder_details.to_payload(),
        }


@dataclass
class ShareholderContact:
    """Shareholder of a business account holder."""

    email: str
    shareholder_code: str | None = None
    firstname: str | None = None
    lastname: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "ShareholderContact":
        """Build the shareholder from its serialized form."""
        return cls(
            email=data["email"],
            shareholder_code=data.get("shareholder_code"),
            firstname=data.get("firstname"),
            lastname=data.get("lastname"),
        )

    def to_dict(self) -> dict:
        """Return a JSON serializable representation of the shareholder."""
        return asdict(self)


@dataclass
class PayoutErrorMessage:
    """Error reported by the payments platform for a failed payout."""

    code: str
    text: str

    def __str__(self):
        """Format the message as `(code) text`."""
        return f"({self.code}) {self.text}"
