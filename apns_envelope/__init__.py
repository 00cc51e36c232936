from .apns_protocol import (Frame, MAX_PAYLOAD_SIZE_BYTES, PUSH_COMMAND_VALUE,
                            pack_frame, unpack_frame)
from .envelope import Envelope
from .errors import (ApnsEncodingError, InvalidDeviceToken, PayloadSerializationError,
                     PayloadTooLarge, FrameFieldOutOfRange, FrameError)
from .payload import Payload, PayloadAlert

__all__ = ['Envelope', 'Payload', 'PayloadAlert', 'Frame', 'pack_frame', 'unpack_frame',
           'MAX_PAYLOAD_SIZE_BYTES', 'PUSH_COMMAND_VALUE', 'ApnsEncodingError',
           'InvalidDeviceToken', 'PayloadSerializationError', 'PayloadTooLarge',
           'FrameFieldOutOfRange', 'FrameError']
