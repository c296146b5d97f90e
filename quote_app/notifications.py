import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils.html import strip_tags

from .services import get_settings

logger = logging.getLogger(__name__)


def notify_admin(quote):
    """
    Mail the shop's admin address about a new quote request.
    Returns True when a message went out.
    """
    shop_settings = get_settings(quote.shop_id)
    if not shop_settings or not shop_settings.admin_email:
        logger.info(f"No admin email configured for {quote.shop_id}, skipping notification")
        return False

    context = {"quote": quote, "shop": quote.shop_id}

    try:
        html_message = render_to_string("quote_app/email/new_quote.html", context)
        plain_message = strip_tags(html_message)

        email_msg = EmailMultiAlternatives(
            subject=f"New quote request: {quote.title}",
            body=plain_message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[shop_settings.admin_email],
            reply_to=[quote.email] if quote.email else None,
        )
        email_msg.attach_alternative(html_message, "text/html")
        email_msg.send(fail_silently=False)
    except Exception as e:
        logger.error(f"Error sending quote notification for {quote.id}: {e}")
        return False

    return True
