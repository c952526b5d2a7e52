# storefront/services/mail_client.py
import resend
from requests import RequestException
from resend.exceptions import ResendError

from storefront.domain.errors import UpstreamFailure
from storefront.utils.retry import http_retry
from storefront.utils.settings import RESEND_API_KEY, MAIL_FROM
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def make_a_nice_email(text: str) -> str:
    return f"""
    <div className="email" style="
      border: 1px solid black;
      padding: 20px;
      font-family: sans-serif;
      line-height: 2;
      font-size: 20px;
    ">
      <h2>Hello There!</h2>
      <p>{text}</p>
      <p>😘, Sick Fits</p>
    </div>
    """


class MailClient:
    """Wysylka maili transakcyjnych przez Resend."""

    def __init__(self, api_key: str | None = None, sender: str | None = None):
        self.api_key = (api_key if api_key is not None else RESEND_API_KEY).strip()
        self.sender = sender or MAIL_FROM

    @http_retry()
    def _send(self, payload: dict):
        previous_api_key = getattr(resend, "api_key", None)
        resend.api_key = self.api_key
        try:
            return resend.Emails.send(payload)
        finally:
            resend.api_key = previous_api_key

    def send(self, to: str, subject: str, html: str) -> None:
        if not self.api_key:
            raise UpstreamFailure("Resend API key is not configured")

        payload = {"from": self.sender, "to": [to], "subject": subject, "html": html}
        logger.info(f"MailClient wysylka '{subject}'")
        try:
            response = self._send(payload)
        except (ResendError, RequestException) as e:
            logger.error(f"Nie udalo sie wyslac maila '{subject}': {e}")
            raise UpstreamFailure("Could not send email") from e

        if not isinstance(response, dict) or not response.get("id"):
            logger.error(f"Resend nie zwrocil id dla maila '{subject}': {response}")
            raise UpstreamFailure("Could not send email")
