# storefront/services/payment_client.py
from dataclasses import dataclass

import requests
from requests import RequestException

from storefront.domain.errors import PaymentDeclined, UpstreamFailure
from storefront.utils.retry import http_retry
from storefront.utils.settings import STRIPE_API_URL, STRIPE_SECRET, CURRENCY
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Charge:
    id: str
    amount: int


class PaymentClient:
    """
    Klient Stripe charges API.
    Idempotency-Key sprawia ze ponowienie tego samego checkoutu zwraca ten sam charge.
    """

    def __init__(self, base_url: str | None = None, secret: str | None = None, timeout: int = 10):
        self.base_url = (base_url or STRIPE_API_URL).rstrip("/")
        self.secret = secret if secret is not None else STRIPE_SECRET
        self.timeout = timeout

    @http_retry()
    def _post_charge(self, data: dict, idempotency_key: str) -> requests.Response:
        url = f"{self.base_url}/charges"
        logger.info(f"PaymentClient POST {url} amount={data['amount']}")
        return requests.post(
            url,
            data=data,
            auth=(self.secret, ""),
            headers={"Idempotency-Key": idempotency_key},
            timeout=self.timeout,
        )

    def charge(self, amount: int, source: str, idempotency_key: str, currency: str | None = None) -> Charge:
        data = {"amount": amount, "currency": currency or CURRENCY, "source": source}
        try:
            resp = self._post_charge(data, idempotency_key)
        except RequestException as e:
            raise UpstreamFailure(f"Payment gateway unavailable: {e}") from e

        if resp.status_code == 402:
            raise PaymentDeclined(_error_message(resp, "Card was declined"))
        if resp.status_code >= 400:
            raise UpstreamFailure(_error_message(resp, "Payment gateway error"))

        body = resp.json()
        return Charge(id=body["id"], amount=int(body["amount"]))


def _error_message(resp: requests.Response, default: str) -> str:
    try:
        return resp.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return f"{default} ({resp.status_code})"
