"""Mail related tools."""

import logging
from smtplib import SMTPException

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.mail import EmailMessage
from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import render_to_string
from django.utils import translation
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)

# Template context variables
SHOP = "shop"
SHAREHOLDER = "shareholder"
CALLBACK_SHOP_URL = "callback_shop_url"
BASE_URL = "base_url"
ERRORS = "errors"
PAYOUT_ERROR = "payout_error"

# Templates. The account holder created and shareholder verification
# templates and titles are meant for the callers of the generic shop and
# shareholder notifications.
SELLER_EMAIL_WITH_ERRORS_TEMPLATE = "marketpay/emails/seller_email_with_errors.html"
OPERATOR_EMAIL_WITH_ERRORS_TEMPLATE = "marketpay/emails/operator_email_with_errors.html"
OPERATOR_EMAIL_PAYOUT_FAILED_TEMPLATE = "marketpay/emails/operator_email_payout_failed.html"
ACCOUNT_HOLDER_CREATED_TEMPLATE = "marketpay/emails/account_holder_created.html"
SHAREHOLDER_VERIFICATION_TEMPLATE = "marketpay/emails/shareholder_verification.html"

# Subject message keys
ACCOUNT_HOLDER_VALIDATION_TITLE = "email.account_holder.validation.title"
ACCOUNT_HOLDER_PAYOUT_FAILED_TITLE = "email.account_holder.payout_failed.title"
ACCOUNT_HOLDER_CREATED_TITLE = "email.account_holder.created.title"
SHAREHOLDER_VERIFICATION_TITLE = "email.shareholder.verification.title"

MESSAGES = {
    ACCOUNT_HOLDER_VALIDATION_TITLE: _("Your account holder information needs to be completed"),
    ACCOUNT_HOLDER_PAYOUT_FAILED_TITLE: _("A payout has failed"),
    ACCOUNT_HOLDER_CREATED_TITLE: _("Your payment account has been created"),
    SHAREHOLDER_VERIFICATION_TITLE: _("Your shareholder information needs to be verified"),
}


def get_required_setting(name):
    """Return a setting, failing loudly when it is missing or empty."""
    value = getattr(settings, name, None)
    if not value:
        raise ImproperlyConfigured(f"settings.{name} is not configured")
    return value


def get_shop_callback_url(shop_id: str) -> str:
    """Return the shop administration page URL on the operator platform."""
    env_url = get_required_setting("MARKETPAY_OPERATOR_ENV_URL").rstrip("/")
    return f"{env_url}/mmp/shop/account/shop/{shop_id}"


def get_mail_base_url() -> str:
    """Return the base URL exposed to the email templates."""
    return getattr(settings, "MARKETPAY_MAIL_BASE_URL", "")


def get_subject(title_key: str, locale: str) -> str:
    """Translate the subject registered under `title_key`."""
    message = MESSAGES.get(title_key)
    if message is None:
        logger.warning("No subject registered for key %r", title_key)
        return title_key
    with translation.override(locale):
        return str(message)


def render_email(template_name: str, context: dict, locale: str) -> str:
    """Render an email template in the given locale."""
    with translation.override(locale):
        return render_to_string(template_name, context)


def send_email(to: str, subject: str, content: str) -> bool:
    """Send an UTF-8 HTML email, logging instead of raising when the delivery fails."""
    message = EmailMessage(subject, content, settings.DEFAULT_FROM_EMAIL, [to])
    message.content_subtype = "html"
    message.encoding = "utf-8"

    try:
        message.send()
    except (SMTPException, OSError):
        logger.exception("Email could not be sent to user %r", to)
        return False

    logger.debug("Sent email to user %r", to)
    return True


def send_templated_email(to, template_name, title_key, context, locale=None) -> bool:
    """Render `template_name` with `context` and send it to `to`."""
    locale = locale or settings.LANGUAGE_CODE
    if not to:
        logger.warning("No recipient for email %r, nothing sent", template_name)
        return False

    try:
        content = render_email(template_name, context, locale)
    except (TemplateDoesNotExist, TemplateSyntaxError):
        logger.exception("Email template %r could not be rendered", template_name)
        return False

    subject = get_subject(title_key, locale)
    return send_email(to, subject, content)
