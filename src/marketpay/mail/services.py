"""Templated email dispatch."""

from marketpay.mail import tasks
from marketpay.operator.backends import ShopRecord
from marketpay.payments.backends import PayoutErrorMessage, ShareholderContact


class MailTemplateService:
    """
    Dispatch templated emails to shops, shareholders and the operator.

    Every method only enqueues a task: rendering and delivery happen in a
    worker and their failures are logged there, never reported back to the
    caller.
    """

    def send_shop_email_from_template(
        self, shop: ShopRecord, locale: str | None, template_name: str, title_key: str
    ) -> None:
        """Send `template_name` to the shop contact."""
        tasks.send_shop_email_from_template.delay(shop.to_dict(), locale, template_name, title_key)

    def send_shareholder_email_from_template(
        self,
        shareholder: ShareholderContact,
        shop_id: str,
        locale: str | None,
        template_name: str,
        title_key: str,
    ) -> None:
        """Send `template_name` to a shareholder of the shop `shop_id`."""
        tasks.send_shareholder_email_from_template.delay(
            shareholder.to_dict(), shop_id, locale, template_name, title_key
        )

    def send_seller_email_with_errors(self, shop: ShopRecord, errors: list[str]) -> None:
        """Send validation errors to the shop contact."""
        tasks.send_seller_email_with_errors.delay(shop.to_dict(), list(errors))

    def send_operator_email_with_errors(self, shop: ShopRecord, errors: list[str]) -> None:
        """Send validation errors of a shop to the operator."""
        tasks.send_operator_email_with_errors.delay(shop.to_dict(), list(errors))

    def send_operator_email_payout_failure(self, shop: ShopRecord, message: PayoutErrorMessage) -> None:
        """Notify the operator of a failed payout."""
        tasks.send_operator_email_payout_failure.delay(shop.to_dict(), message.code, message.text)
