"""Shop synchronization service."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from django.conf import settings

from marketpay.exceptions import (
    AmbiguousLegalEntityError,
    ContactInformationNotFoundError,
    InvalidLegalEntityError,
    LegalEntityNotFoundError,
    PaymentsApiError,
    ShopMappingError,
    ShopPaginationError,
    UnsupportedLegalEntityError,
)
from marketpay.mail.services import MailTemplateService
from marketpay.operator import operator_api
from marketpay.operator.backends import (
    AdditionalFieldType,
    AdditionalFieldValue,
    ContactInformation,
    GetShopsRequest,
    ShopRecord,
)
from marketpay.payments import payments_api
from marketpay.payments.backends import (
    AccountHolderDetails,
    CreateAccountHolderRequest,
    Gender,
    IndividualDetails,
    LegalEntity,
    Name,
)

logger = logging.getLogger(__name__)

# Code of the shop additional field holding the legal entity
LEGAL_ENTITY_FIELD_CODE = "adyen-legal-entity-type"

CIVILITY_TO_GENDER = MappingProxyType(
    {
        "Mr": Gender.MALE,
        "Mrs": Gender.FEMALE,
        "Miss": Gender.FEMALE,
    }
)


@dataclass
class ShopSyncReport:
    """Outcome of a synchronization run."""

    submitted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


def get_gender_from_civility(civility: str | None) -> Gender:
    """Map a contact civility to a gender, unknown civilities being UNKNOWN."""
    return CIVILITY_TO_GENDER.get(civility, Gender.UNKNOWN)


def is_list_with_code(additional_field: AdditionalFieldValue, code: str) -> bool:
    """Return True if the additional field is a list field with the given code."""
    return additional_field.type == AdditionalFieldType.LIST and code.lower() == (additional_field.code or "").lower()


class ShopService:
    """
    Create payments account holders from the updated shops of the operator.

    A run never stops on a failing shop: mapping and submission errors are
    logged and the next shop is processed. A failed shop is not retried by
    this service; it is submitted again only if a later run retrieves it.
    """

    def __init__(self, operator=None, payments=None, mail_template_service=None):
        """Use the configured operator and payments backends unless given."""
        self.operator = operator if operator is not None else operator_api
        self.payments = payments if payments is not None else payments_api
        self.mail_template_service = mail_template_service or MailTemplateService()

    def retrieve_updated_shops(self, updated_since: datetime | None = None) -> ShopSyncReport:
        """Create an account holder for each updated shop."""
        shops = self.get_updated_shops(updated_since)
        logger.debug("Retrieved shops: %d", len(shops))

        report = ShopSyncReport()
        for shop in shops:
            try:
                request = self.create_account_holder_request_from_shop(shop)
                response = self.payments.create_account_holder(request)
            except PaymentsApiError as e:
                logger.warning("Account holder creation failed for shop %s: %s", shop.id, e.error or e)
                report.failed.append(shop.id)
                self.notify_operator(shop, e.error_messages)
            except ShopMappingError as e:
                logger.warning("Shop %s cannot be mapped to an account holder: %s", shop.id, e)
                report.failed.append(shop.id)
            except Exception as e:  # noqa: BLE001
                logger.warning("Unexpected error while processing shop %s: %s", shop.id, e)
                report.failed.append(shop.id)
            else:
                logger.debug("Payments response for shop %s: %s", shop.id, response)
                report.submitted.append(shop.id)

        return report

    def notify_operator(self, shop: ShopRecord, errors: list[str]):
        """Forward provider errors to the operator when enabled in settings."""
        if not getattr(settings, "MARKETPAY_NOTIFY_OPERATOR_ON_ERROR", False):
            return
        try:
            self.mail_template_service.send_operator_email_with_errors(shop, errors)
        except Exception:  # noqa: BLE001
            logger.exception("Operator could not be notified of the errors of shop %s", shop.id)

    def get_updated_shops(self, updated_since: datetime | None = None) -> list[ShopRecord]:
        """
        Retrieve all the shops updated since `updated_since`.

        Pages are requested without server side pagination, the offset being
        advanced by the number of shops actually returned until it reaches the
        total count reported by the last page.

        Raises:
            ShopPaginationError: If a page is empty while the total is not reached

        """
        offset = 0
        total_count = 1
        shops = []

        while offset < total_count:
            request = GetShopsRequest(paginate=False, offset=offset, updated_since=updated_since)
            page = self.operator.get_shops(request)
            total_count = page.total_count

            if not page.shops and offset < total_count:
                raise ShopPaginationError(f"Empty page at offset {offset} while {total_count} shops are expected")

            shops.extend(page.shops)
            offset += len(page.shops)

        return shops

    def create_account_holder_request_from_shop(self, shop: ShopRecord) -> CreateAccountHolderRequest:
        """Map a shop to an account holder creation request."""
        legal_entity = self.get_legal_entity_from_shop(shop)

        if legal_entity != LegalEntity.INDIVIDUAL:
            raise UnsupportedLegalEntityError(f"{legal_entity} not supported")
        account_holder_details = AccountHolderDetails(
            individual_details=self.create_individual_details_from_shop(shop),
        )

        account_holder_details.email = self.get_contact_information_from_shop(shop).email

        return CreateAccountHolderRequest(
            account_holder_code=shop.id,
            legal_entity=legal_entity,
            account_holder_details=account_holder_details,
        )

    def get_legal_entity_from_shop(self, shop: ShopRecord) -> LegalEntity:
        """Read the legal entity from the shop additional fields."""
        additional_fields = [
            value for value in shop.additional_field_values if is_list_with_code(value, LEGAL_ENTITY_FIELD_CODE)
        ]
        if not additional_fields:
            raise LegalEntityNotFoundError("Legal entity not found")
        if len(additional_fields) > 1:
            raise AmbiguousLegalEntityError(f"{len(additional_fields)} legal entity fields found")

        additional_field = additional_fields[0]
        value = (additional_field.value or "").lower()
        for legal_entity in LegalEntity:
            if legal_entity.value.lower() == value:
                return legal_entity
        raise InvalidLegalEntityError(f"Invalid legal entity: {additional_field.value!r}")

    def get_contact_information_from_shop(self, shop: ShopRecord) -> ContactInformation:
        """Return the shop contact information."""
        if shop.contact_information is None:
            raise ContactInformationNotFoundError("Contact information not found")
        return shop.contact_information

    def create_individual_details_from_shop(self, shop: ShopRecord) -> IndividualDetails:
        """Build the individual details from the shop contact."""
        contact_information = self.get_contact_information_from_shop(shop)
        name = Name(
            first_name=contact_information.firstname,
            last_name=contact_information.lastname,
            gender=get_gender_from_civility(contact_information.civility),
        )
        return IndividualDetails(name=name)
