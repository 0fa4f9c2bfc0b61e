"""Mail tasks module."""

from celery import shared_task

from marketpay.mail.utils import (
    ACCOUNT_HOLDER_PAYOUT_FAILED_TITLE,
    ACCOUNT_HOLDER_VALIDATION_TITLE,
    BASE_URL,
    CALLBACK_SHOP_URL,
    ERRORS,
    OPERATOR_EMAIL_PAYOUT_FAILED_TEMPLATE,
    OPERATOR_EMAIL_WITH_ERRORS_TEMPLATE,
    PAYOUT_ERROR,
    SELLER_EMAIL_WITH_ERRORS_TEMPLATE,
    SHAREHOLDER,
    SHOP,
    get_mail_base_url,
    get_required_setting,
    get_shop_callback_url,
    send_templated_email,
)
from marketpay.operator.backends import ShopRecord
from marketpay.payments.backends import PayoutErrorMessage, ShareholderContact


def _shop_context(shop: ShopRecord) -> dict:
    """Build the variables shared by every shop email."""
    return {
        SHOP: shop,
        CALLBACK_SHOP_URL: get_shop_callback_url(shop.id),
        BASE_URL: get_mail_base_url(),
    }


def _shop_email(shop: ShopRecord) -> str | None:
    """Return the contact email of the shop, if any."""
    if shop.contact_information is None:
        return None
    return shop.contact_information.email


@shared_task
def send_shop_email_from_template(shop_data: dict, locale: str | None, template_name: str, title_key: str):
    """Send a templated email to the shop contact."""
    shop = ShopRecord.from_dict(shop_data)
    return send_templated_email(_shop_email(shop), template_name, title_key, _shop_context(shop), locale)


@shared_task
def send_shareholder_email_from_template(
    shareholder_data: dict,
    shop_id: str,
    locale: str | None,
    template_name: str,
    title_key: str,
):
    """Send a templated email to a shareholder of the shop."""
    shareholder = ShareholderContact.from_dict(shareholder_data)
    context = {
        SHAREHOLDER: shareholder,
        BASE_URL: get_mail_base_url(),
        CALLBACK_SHOP_URL: get_shop_callback_url(shop_id),
    }
    return send_templated_email(shareholder.email, template_name, title_key, context, locale)


@shared_task
def send_seller_email_with_errors(shop_data: dict, errors: list[str]):
    """Send the account holder validation errors to the shop contact."""
    shop = ShopRecord.from_dict(shop_data)
    context = {**_shop_context(shop), ERRORS: errors}
    return send_templated_email(
        _shop_email(shop), SELLER_EMAIL_WITH_ERRORS_TEMPLATE, ACCOUNT_HOLDER_VALIDATION_TITLE, context
    )


@shared_task
def send_operator_email_with_errors(shop_data: dict, errors: list[str]):
    """Send the account holder validation errors of a shop to the operator."""
    shop = ShopRecord.from_dict(shop_data)
    context = {**_shop_context(shop), ERRORS: errors}
    return send_templated_email(
        get_required_setting("MARKETPAY_OPERATOR_EMAIL"),
        OPERATOR_EMAIL_WITH_ERRORS_TEMPLATE,
        ACCOUNT_HOLDER_VALIDATION_TITLE,
        context,
    )


@shared_task
def send_operator_email_payout_failure(shop_data: dict, code: str, text: str):
    """Notify the operator that a payout to the shop has failed."""
    shop = ShopRecord.from_dict(shop_data)
    context = {**_shop_context(shop), PAYOUT_ERROR: str(PayoutErrorMessage(code=code, text=text))}
    return send_templated_email(
        get_required_setting("MARKETPAY_OPERATOR_EMAIL"),
        OPERATOR_EMAIL_PAYOUT_FAILED_TEMPLATE,
        ACCOUNT_HOLDER_PAYOUT_FAILED_TITLE,
        context,
    )
