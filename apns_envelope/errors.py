class ApnsEncodingError(Exception):
    pass


class InvalidDeviceToken(ApnsEncodingError, ValueError):
    def __init__(self, token):
        super().__init__()
        self.token = token

    def __repr__(self):
        return "InvalidDeviceToken(token={!r})".format(self.token)

    def __str__(self):
        return "device token is not a valid hex string: {!r}".format(self.token)


class PayloadSerializationError(ApnsEncodingError, TypeError):
    def __init__(self, reason):
        super().__init__()
        self.reason = reason

    def __repr__(self):
        return "PayloadSerializationError(reason={!r})".format(self.reason)

    def __str__(self):
        return "payload is not serializable: {}".format(self.reason)


class PayloadTooLarge(ApnsEncodingError, ValueError):
    def __init__(self, size, limit):
        super().__init__()
        self.size = size
        self.limit = limit

    def __repr__(self):
        return "PayloadTooLarge(size={}, limit={})".format(self.size, self.limit)

    def __str__(self):
        return "payload is {} bytes, larger than the {} byte limit".format(
            self.size, self.limit)


class FrameFieldOutOfRange(ApnsEncodingError, ValueError):
    def __init__(self, field, value):
        super().__init__()
        self.field = field
        self.value = value

    def __repr__(self):
        return "FrameFieldOutOfRange(field={!r}, value={!r})".format(
            self.field, self.value)

    def __str__(self):
        return "{} does not fit its frame slot: {!r}".format(self.field, self.value)


class FrameError(ApnsEncodingError, ValueError):
    def __init__(self, reason):
        super().__init__()
        self.reason = reason

    def __repr__(self):
        return "FrameError(reason={!r})".format(self.reason)

    def __str__(self):
        return "malformed frame: {}".format(self.reason)
