"""Request signing and webhook signature verification."""

import hashlib
import hmac
from typing import Any

from nexmo_sdk.config import SignatureMethod

_HMAC_DIGESTS = {
    "md5": hashlib.md5,
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}


class Signature:
    """Computes and checks the ``sig`` parameter of signed requests.

    The digest string is built from the params sorted by key as
    ``&key=value&key=value...``, with ``&`` and ``=`` inside values replaced
    by ``_``. The ``md5hash`` method hashes that string with the secret
    appended; the other methods compute an HMAC keyed with the secret and
    return upper-case hex.
    """

    def __init__(self, secret: str, method: SignatureMethod = "md5hash") -> None:
        if method != "md5hash" and method not in _HMAC_DIGESTS:
            raise ValueError(f"Unknown signature method: {method}")
        self._secret = secret
        self._method = method

    @property
    def method(self) -> str:
        return self._method

    def digest(self, params: dict[str, Any]) -> str:
        digest_string = "".join(
            f"&{key}={_clean(value)}"
            for key, value in sorted(params.items())
            if key != "sig"
        )

        if self._method == "md5hash":
            return hashlib.md5((digest_string + self._secret).encode("utf-8")).hexdigest()

        return hmac.new(
            self._secret.encode("utf-8"),
            digest_string.encode("utf-8"),
            _HMAC_DIGESTS[self._method],
        ).hexdigest().upper()

    def check(self, params: dict[str, Any]) -> bool:
        """Return True if ``params["sig"]`` matches the computed signature."""
        sig = params.get("sig")
        if not isinstance(sig, str):
            return False
        return hmac.compare_digest(sig, self.digest(params))


def _clean(value: Any) -> str:
    return str(value).replace("&", "_").replace("=", "_")
