import logging
from urllib.parse import quote, urlsplit

import requests

from ami_publisher.errors import StoreConnectError, StoreWriteError

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https")


class ConsulClient:
    def __init__(self, address: str, scheme: str = "", token: str = "", timeout: float = 10):
        scheme = scheme or "http"
        if scheme not in SUPPORTED_SCHEMES:
            raise StoreConnectError(f"Unsupported consul scheme {scheme!r}")
        try:
            parsed = urlsplit(f"{scheme}://{address}")
            valid = bool(parsed.hostname) and parsed.path in ("", "/") and parsed.port != 0
        except ValueError as e:
            raise StoreConnectError(f"Invalid consul address {address!r}: {e}") from e
        if not valid:
            raise StoreConnectError(f"Invalid consul address {address!r}")

        self.base_url: str = f"{scheme}://{parsed.netloc}"
        self.token: str = token
        self.timeout: float = timeout

    def put(self, key: str, value: bytes, datacenter: str | None = None) -> None:
        url = f"{self.base_url}/v1/kv/{quote(key)}"
        params = {"dc": datacenter} if datacenter else None
        headers = {"X-Consul-Token": self.token} if self.token else None
        try:
            response = requests.put(url=url, data=value, params=params, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Error putting key {key} into consul: {e}")
            raise StoreWriteError(key, str(e)) from e

        if response.status_code != 200:
            logger.error(f"Failed to put key {key} (status code {response.status_code})")
            raise StoreWriteError(key, f"status code {response.status_code}: {response.text.strip()}")
        if response.text.strip() == "false":
            raise StoreWriteError(key, "consul refused the write")
        logger.debug(f"Put {len(value)} bytes into {key} (dc={datacenter})")
