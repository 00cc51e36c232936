"""
APNs legacy binary protocol related methods & constants

https://developer.apple.com/library/ios/
documentation/NetworkingInternet/Conceptual/RemoteNotificationsPG/Chapters/
CommunicatingWIthAPS.html
"""
import struct
from binascii import hexlify
from collections import namedtuple

from .errors import FrameError, FrameFieldOutOfRange

# fixed by Apple for the simple notification format
PUSH_COMMAND_VALUE = 1

MAX_PAYLOAD_SIZE_BYTES = 256

# |COMMAND|ID:4|EXPIRY:4|TOKEN-LEN:2|
FRAME_HEADER_FORMAT = "!BIIH"

LENGTH_FORMAT = "!H"

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1
UINT32_MAX = 2 ** 32 - 1
UINT16_MAX = 2 ** 16 - 1


Frame = namedtuple('Frame', ['command', 'identifier', 'expiry', 'token', 'payload'])


def bytes_format(length):
    return "{}s".format(length)


def frame_length(token_length: int, payload_length: int) -> int:
    return (struct.calcsize(FRAME_HEADER_FORMAT) + token_length +
            struct.calcsize(LENGTH_FORMAT) + payload_length)


def _check_range(field, value, low, high):
    if not isinstance(value, int) or isinstance(value, bool) or not low <= value <= high:
        raise FrameFieldOutOfRange(field, value)


def pack_frame(token: bytes, payload: bytes, identifier: int, expiry: int) -> bytes:
    _check_range('identifier', identifier, INT32_MIN, INT32_MAX)
    _check_range('expiry', expiry, 0, UINT32_MAX)
    _check_range('token length', len(token), 0, UINT16_MAX)
    _check_range('payload length', len(payload), 0, UINT16_MAX)
    # negative identifiers keep their two's-complement bit pattern
    frame_fmt = "!BIIH%dsH%ds" % (len(token), len(payload))
    return struct.pack(
        frame_fmt,
        PUSH_COMMAND_VALUE,
        identifier & UINT32_MAX,
        expiry,
        len(token), token,
        len(payload), payload)


def _read(data, offset, fmt):
    size = struct.calcsize(fmt)
    if len(data) < offset + size:
        raise FrameError("truncated at byte {}".format(offset))
    return struct.unpack_from(fmt, data, offset), offset + size


def unpack_frame(data: bytes) -> Frame:
    """
    Parse a simple notification frame back into its fields.

    The token is returned hex-encoded and the identifier signed, mirroring
    the values an ``Envelope`` is built from.
    """
    (command, identifier, expiry, token_length), offset = _read(
        data, 0, FRAME_HEADER_FORMAT)
    if command != PUSH_COMMAND_VALUE:
        raise FrameError("unexpected command {}".format(command))
    (token,), offset = _read(data, offset, bytes_format(token_length))
    (payload_length,), offset = _read(data, offset, LENGTH_FORMAT)
    (payload,), offset = _read(data, offset, bytes_format(payload_length))
    if offset != len(data):
        raise FrameError("{} trailing bytes".format(len(data) - offset))
    if identifier > INT32_MAX:
        identifier -= 2 ** 32
    return Frame(command, identifier, expiry, hexlify(token).decode(), payload)
