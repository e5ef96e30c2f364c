"""Runtime settings read from the environment.

A ``.env`` file in the working directory is loaded first, so local
setups can keep gateway credentials out of the shell profile.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

VNPAY_SANDBOX_URL = "https://sandbox.vnpayment.vn/paymentv2/vpcpay.html"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:

    data_dir: Path
    vnpay_tmn_code: str
    vnpay_hash_secret: str
    vnpay_pay_url: str
    vnpay_return_url: str
    log_level: str
    log_format: str

    @staticmethod
    def from_env() -> Settings:
        load_dotenv()
        return Settings(
            data_dir=Path(os.getenv("STOREFRONT_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            vnpay_tmn_code=os.getenv("VNPAY_TMN_CODE", ""),
            vnpay_hash_secret=os.getenv("VNPAY_HASH_SECRET", ""),
            vnpay_pay_url=os.getenv("VNPAY_PAY_URL", VNPAY_SANDBOX_URL),
            vnpay_return_url=os.getenv("VNPAY_RETURN_URL", "http://localhost:8000/payment/return"),
            log_level=os.getenv("STOREFRONT_LOG_LEVEL", "INFO"),
            log_format=os.getenv("STOREFRONT_LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )
