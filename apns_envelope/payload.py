import json
from typing import Optional, List, Union


class PayloadAlert:
    def __init__(self,
                 body: Optional[str] = None,
                 action_localization_key: Optional[str] = None,
                 localization_key: Optional[str] = None,
                 localization_args: Optional[List[str]] = None,
                 launch_image: Optional[str] = None
                 ):
        self.body = body
        self.action_localization_key = action_localization_key
        self.localization_key = localization_key
        self.localization_args = localization_args
        self.launch_image = launch_image

    def __repr__(self):
        return "PayloadAlert({!r})".format(self.as_dict())

    def as_dict(self):
        result = dict()
        if self.body:
            result['body'] = self.body
        if self.action_localization_key:
            result['action-loc-key'] = self.action_localization_key
        if self.localization_key:
            result['loc-key'] = self.localization_key
        if self.localization_args:
            result['loc-args'] = self.localization_args
        if self.launch_image:
            result['launch-image'] = self.launch_image
        return result


class Payload:
    def __init__(self,
                 alert: Optional[Union[PayloadAlert, str]] = None,
                 badge: Optional[int] = None,
                 sound: Optional[str] = None):
        self.alert = alert
        self.badge = badge
        self.sound = sound

    def __repr__(self):
        return "Payload({!r})".format(self.as_dict())

    def as_dict(self):
        """
        Body of the ``aps`` dictionary.

        An unset alert is left out; an empty string alert is still sent.
        A zero badge and an empty sound are left out.
        """
        result = dict()
        if self.alert is not None:
            if isinstance(self.alert, PayloadAlert):
                alert = self.alert.as_dict()
            else:
                alert = self.alert
            result['alert'] = alert
        if self.badge:
            result['badge'] = self.badge
        if self.sound:
            result['sound'] = self.sound
        return result


class PayloadEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, (Payload, PayloadAlert)):
            return o.as_dict()
        return super().default(o)


def dumps_payload(data: dict) -> bytes:
    return json.dumps(data, cls=PayloadEncoder, separators=(',', ':'),
                      ensure_ascii=False, allow_nan=False).encode()


__all__ = ["Payload", "PayloadAlert", "PayloadEncoder", "dumps_payload"]
