"""VNPay implementation of the PaymentGateway port.

Both directions use the same signing scheme: the ``vnp_*`` parameters
are sorted by key, URL-encoded with ``quote_plus`` and joined with ``&``;
that string is signed with HMAC-SHA512 under the merchant's hash secret
and sent as ``vnp_SecureHash``. VNPay amounts are expressed in 1/100 VND.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import uuid
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qsl, quote_plus, urlsplit

from storefront.domain.exceptions import InvalidAmountError, PaymentError, UnrecognizedError
from storefront.domain.gateway.payment_gateway import PaymentGateway
from storefront.domain.model.transaction import Transaction
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

VNPAY_VERSION = "2.1.0"
VNPAY_TIMEZONE = timezone(timedelta(hours=7))
VNPAY_DATE_FORMAT = "%Y%m%d%H%M%S"
PAYMENT_WINDOW = timedelta(minutes=15)

SUCCESS_CODE = "00"
REQUIRED_RESPONSE_KEYS = (
    "vnp_ResponseCode",
    "vnp_SecureHash",
    "vnp_Amount",
    "vnp_TxnRef",
    "vnp_TransactionNo",
)
DECLINE_MESSAGES = {
    "07": "Money was deducted but the transaction is suspected of fraud",
    "09": "The card or account has not registered for internet banking",
    "10": "Card or account authentication failed more than 3 times",
    "11": "The payment window has expired",
    "12": "The card or account is locked",
    "13": "Wrong one-time password (OTP)",
    "24": "The customer cancelled the transaction",
    "51": "Insufficient account balance",
    "65": "The account exceeded its daily transaction limit",
    "75": "The paying bank is under maintenance",
    "79": "Wrong payment password entered too many times",
    "99": "The payment failed for an unspecified reason",
}


def parse_callback(raw: str) -> dict[str, str]:
    """Extract callback parameters from a full return URL or a bare query string."""
    query = urlsplit(raw).query or raw
    return dict(parse_qsl(query, keep_blank_values=True))


class VnPayGateway(PaymentGateway):

    def __init__(
        self,
        tmn_code: str,
        hash_secret: str,
        pay_url: str,
        return_url: str,
        ip_address: str = "127.0.0.1",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._tmn_code = tmn_code
        self._hash_secret = hash_secret
        self._pay_url = pay_url
        self._return_url = return_url
        self._ip_address = ip_address
        self._clock = clock or (lambda: datetime.now(VNPAY_TIMEZONE))

    # --- PaymentGateway interface ---------------------------------------------

    def generate_url(self, amount: int, description: str) -> str:
        if amount < 0:
            raise InvalidAmountError(f"Payment amount cannot be negative, got {amount}")

        now = self._clock().astimezone(VNPAY_TIMEZONE)
        params = {
            "vnp_Version": VNPAY_VERSION,
            "vnp_Command": "pay",
            "vnp_TmnCode": self._tmn_code,
            "vnp_Amount": str(amount * 100),
            "vnp_CurrCode": "VND",
            "vnp_TxnRef": uuid.uuid4().hex[:12],
            "vnp_OrderInfo": description,
            "vnp_OrderType": "other",
            "vnp_Locale": "vn",
            "vnp_ReturnUrl": self._return_url,
            "vnp_IpAddr": self._ip_address,
            "vnp_CreateDate": now.strftime(VNPAY_DATE_FORMAT),
            "vnp_ExpireDate": (now + PAYMENT_WINDOW).strftime(VNPAY_DATE_FORMAT),
        }
        query = self.encode(params)
        return f"{self._pay_url}?{query}&vnp_SecureHash={self.sign(query)}"

    def parse_response(self, response: Mapping[str, str]) -> Transaction:
        fields = {k: v for k, v in response.items() if k.startswith("vnp_")}

        missing = [key for key in REQUIRED_RESPONSE_KEYS if key not in fields]
        if missing:
            raise UnrecognizedError(
                f"Unrecognized payment response: missing {', '.join(missing)}"
            )

        received_hash = fields.pop("vnp_SecureHash")
        fields.pop("vnp_SecureHashType", None)
        expected_hash = self.sign(self.encode(fields))
        if not hmac.compare_digest(received_hash.lower(), expected_hash):
            logger.warning("Rejected callback for %s: bad signature", fields["vnp_TxnRef"])
            raise PaymentError("Invalid payment signature")

        code = fields["vnp_ResponseCode"]
        if code != SUCCESS_CODE:
            if code in DECLINE_MESSAGES:
                raise PaymentError(DECLINE_MESSAGES[code])
            logger.warning("Unknown VNPay response code %r for %s", code, fields["vnp_TxnRef"])
            raise UnrecognizedError(f"Unrecognized payment response code: {code}")

        return Transaction(
            amount=Money(self._parse_amount(fields["vnp_Amount"])),
            content=fields.get("vnp_OrderInfo", ""),
            gateway_reference=fields["vnp_TransactionNo"],
            bank_code=fields.get("vnp_BankCode", ""),
            paid_at=self._parse_pay_date(fields.get("vnp_PayDate")),
        )

    # --- Signing --------------------------------------------------------------

    @staticmethod
    def encode(params: Mapping[str, str]) -> str:
        return "&".join(
            f"{quote_plus(key)}={quote_plus(str(value))}"
            for key, value in sorted(params.items())
        )

    def sign(self, data: str) -> str:
        return hmac.new(
            self._hash_secret.encode("utf-8"),
            data.encode("utf-8"),
            hashlib.sha512,
        ).hexdigest()

    # --- Parsing helpers ------------------------------------------------------

    @staticmethod
    def _parse_amount(raw: str) -> int:
        try:
            minor_units = int(raw)
        except ValueError as exc:
            raise UnrecognizedError(f"Unrecognized payment amount: {raw!r}") from exc
        if minor_units < 0 or minor_units % 100:
            raise UnrecognizedError(f"Unrecognized payment amount: {raw!r}")
        return minor_units // 100

    def _parse_pay_date(self, raw: str | None) -> datetime:
        if not raw:
            return self._clock()
        try:
            return datetime.strptime(raw, VNPAY_DATE_FORMAT).replace(tzinfo=VNPAY_TIMEZONE)
        except ValueError as exc:
            raise UnrecognizedError(f"Unrecognized payment date: {raw!r}") from exc
