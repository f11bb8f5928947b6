"""Order confirmation email.

Delivery is best effort: every failure is logged as a warning and swallowed
here, so callers can schedule it without awaiting or guarding it.
"""
import logging
from typing import Optional, Tuple
import httpx
from sevenpro.config import Settings
from sevenpro.core.errors import NotifierFailure
from sevenpro.schemas.order import OrderResponse

logger = logging.getLogger(__name__)

SUBJECT = "7 Pro - Your project request has been received"

BODY_TEMPLATE = """Hi {student_name},

Thank you for submitting your project request to 7 Pro - Student Project Center.

We will contact you within 1 hour on your mobile number: {mobile}

Project details:
Title : {project_title}
Domain: {project_domain}
Serial: {project_serial}

If you made any mistake in the details, just reply to this email or send us a WhatsApp message.

Regards,
7 Pro - Student Project Center
"""


def render_order_email(order: OrderResponse) -> Tuple[str, str]:
    text = BODY_TEMPLATE.format(
        student_name=order.student_name or "Student",
        mobile=order.mobile or "-",
        project_title=order.project_title or "-",
        project_domain=order.project_domain or "-",
        project_serial=order.project_serial or "-",
    )
    return SUBJECT, text


class Notifier:
    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._client = client
        self._owns_client = client is None

    @property
    def enabled(self) -> bool:
        return self.settings.mail_configured

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.email_timeout_seconds)
        return self._client

    async def send_order_confirmation(self, order: OrderResponse) -> bool:
        if not self.enabled or not order.email:
            return False
        subject, text = render_order_email(order)
        try:
            await self._deliver(order.email, subject, text)
        except Exception as e:
            logger.warning(f"Failed to send confirmation email to {order.email}: {e}")
            return False
        logger.info(f"Order confirmation email sent to: {order.email}")
        return True

    async def _deliver(self, to: str, subject: str, text: str) -> None:
        payload = {
            "from": self.settings.mail_sender,
            "to": [to],
            "subject": subject,
            "text": text,
        }
        headers = {
            "Authorization": f"Bearer {self.settings.email_pass}",
            "Content-Type": "application/json",
        }
        response = await self._get_client().post(self.settings.email_api_url, json=payload, headers=headers)
        if response.status_code >= 400:
            raise NotifierFailure(f"mail API responded {response.status_code}: {response.text[:200]}")

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
