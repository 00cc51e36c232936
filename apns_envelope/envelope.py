from binascii import unhexlify
from typing import Any, Union

from .apns_protocol import MAX_PAYLOAD_SIZE_BYTES, pack_frame
from .errors import InvalidDeviceToken, PayloadSerializationError, PayloadTooLarge
from .payload import Payload, dumps_payload

APS_KEY = "aps"


def decode_token(token_hex: str) -> bytes:
    try:
        return unhexlify(token_hex)
    except (ValueError, TypeError):
        raise InvalidDeviceToken(token_hex) from None


class Envelope:
    """
    One notification request for the binary gateway.

    The payload map is created on the first ``set`` and accepts any value
    ``json`` can serialize, plus ``Payload`` and ``PayloadAlert`` objects.
    An envelope is not thread-safe.
    """

    def __init__(self, device_token: str, *, identifier: int = 0, expiry: int = 0):
        self.identifier = identifier
        self.expiry = expiry
        self.device_token = device_token
        self._payload = None

    def __repr__(self):
        return "Envelope(identifier={}, expiry={}, device_token={!r}, payload={!r})".format(
            self.identifier, self.expiry, self.device_token, self._payload)

    def add_payload(self, payload: Union[Payload, str, Any]):
        # a bare string is shorthand for an alert
        if isinstance(payload, str):
            payload = Payload(alert=payload)
        self.set(APS_KEY, payload)

    def set(self, key: str, value: Any):
        if not isinstance(key, str):
            raise TypeError("payload keys must be str, not {}".format(
                type(key).__name__))
        if self._payload is None:
            self._payload = dict()
        self._payload[key] = value

    def get(self, key: str, default=None):
        if self._payload is None:
            return default
        return self._payload.get(key, default)

    def payload_json(self) -> bytes:
        try:
            return dumps_payload(self._payload or {})
        except (TypeError, ValueError, RecursionError) as exc:
            raise PayloadSerializationError(str(exc)) from exc

    def to_bytes(self) -> bytes:
        token = decode_token(self.device_token)
        payload = self.payload_json()
        if len(payload) > MAX_PAYLOAD_SIZE_BYTES:
            raise PayloadTooLarge(len(payload), MAX_PAYLOAD_SIZE_BYTES)
        return pack_frame(token, payload, self.identifier, self.expiry)


__all__ = ["Envelope", "decode_token"]
