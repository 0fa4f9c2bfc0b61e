"""Marketplace operator backends module."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import StrEnum


class AdditionalFieldType(StrEnum):
    """Type of a shop additional field as declared on the operator platform."""

    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    DECIMAL = "DECIMAL"
    LINK = "LINK"
    LIST = "LIST"
    MULTIPLE_VALUES_LIST = "MULTIPLE_VALUES_LIST"
    NUMERIC = "NUMERIC"
    REGEX = "REGEX"
    STRING = "STRING"
    TEXTAREA = "TEXTAREA"


@dataclass
class AdditionalFieldValue:
    """Typed key/value attribute attached to a shop."""

    code: str
    type: AdditionalFieldType | str
    value: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "AdditionalFieldValue":
        """Build the field from the operator API payload."""
        field_type = data.get("type", "")
        if field_type in AdditionalFieldType.__members__:
            field_type = AdditionalFieldType(field_type)
        return cls(code=data.get("code", ""), type=field_type, value=data.get("value"))


@dataclass
class ContactInformation:
    """Contact of the shop owner."""

    civility: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "ContactInformation":
        """Build the contact information from the operator API payload."""
        return cls(
            civility=data.get("civility"),
            firstname=data.get("firstname"),
            lastname=data.get("lastname"),
            email=data.get("email"),
        )


@dataclass
class ShopRecord:
    """A vendor account on the marketplace operator platform."""

    id: str
    name: str | None = None
    contact_information: ContactInformation | None = None
    additional_field_values: list[AdditionalFieldValue] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "ShopRecord":
        """
        Build a shop from the operator API payload.

        Accepts both the operator wire format (`shop_id`, `contact_informations`,
        `shop_additional_fields`) and the output of `to_dict`.

        Raises:
            KeyError: If the payload has no shop identifier

        """
        shop_id = data.get("shop_id", data.get("id"))
        if shop_id is None:
            raise KeyError("shop_id")
        contact = data.get("contact_informations", data.get("contact_information"))
        fields = data.get("shop_additional_fields", data.get("additional_field_values")) or []
        return cls(
            id=str(shop_id),
            name=data.get("shop_name", data.get("name")),
            contact_information=ContactInformation.from_dict(contact) if contact else None,
            additional_field_values=[AdditionalFieldValue.from_dict(value) for value in fields],
        )

    def to_dict(self) -> dict:
        """Return a JSON serializable representation of the shop."""
        return asdict(self)


@dataclass
class GetShopsRequest:
    """Parameters of a shop listing query."""

    paginate: bool = False
    offset: int = 0
    updated_since: datetime | None = None

    def to_params(self) -> dict:
        """Return the query string parameters."""
        params = {"paginate": str(self.paginate).lower(), "offset": self.offset}
        if self.updated_since is not None:
            params["updated_since"] = self.updated_since.isoformat()
        return params


@dataclass
class ShopsPage:
    """A page of shops and the total number of shops matching the query."""

    shops: list[ShopRecord]
    total_count: int
