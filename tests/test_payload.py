import json

import pytest

from apns_envelope import Payload, PayloadAlert
from apns_envelope.payload import PayloadEncoder, dumps_payload


def test_payload():
    p = Payload()
    assert p.alert is None
    assert p.badge is None
    assert p.as_dict() == {}


def test_payload_with_alert():
    p = Payload(alert="XoXo")
    assert p.as_dict() == {'alert': "XoXo"}


def test_payload_with_empty_alert():
    p = Payload(alert="")
    assert p.as_dict() == {'alert': ""}


def test_payload_with_badge():
    p = Payload(badge=5)
    assert p.as_dict()['badge'] == 5


def test_payload_zero_badge_omitted():
    p = Payload(alert="hi", badge=0)
    assert 'badge' not in p.as_dict()


def test_payload_with_sound():
    p = Payload(sound='default')
    assert p.as_dict()['sound'] == 'default'


def test_payload_empty_sound_omitted():
    p = Payload(sound='')
    assert 'sound' not in p.as_dict()


def test_payload_complete():
    p = Payload(alert='alert', badge=3, sound='terrible')
    assert p.as_dict() == {'alert': 'alert', 'badge': 3, 'sound': 'terrible'}


def test_payload_alert_dict():
    alert = PayloadAlert(body="Body", launch_image="image.png")
    assert alert.as_dict() == {'body': "Body", 'launch-image': "image.png"}


def test_payload_alert_in_payload():
    alert = PayloadAlert(body="Body")
    p = Payload(alert=alert)
    assert p.as_dict() == {'alert': {'body': "Body"}}


def test_payload_alert_complete():
    alert = PayloadAlert(body="Body",
                         action_localization_key="alk",
                         localization_key="blk", localization_args=["barg1", "barg2"],
                         launch_image="image.png")
    assert alert.as_dict() == {'body': "Body", 'action-loc-key': "alk",
                               'loc-key': "blk", 'loc-args': ["barg1", "barg2"],
                               'launch-image': "image.png"}


@pytest.mark.parametrize("field", ['body', 'action_localization_key', 'localization_key',
                                   'launch_image'])
def test_payload_alert_empty_string_omitted(field):
    alert = PayloadAlert(**{field: ''})
    assert alert.as_dict() == {}


def test_payload_alert_empty_args_omitted():
    alert = PayloadAlert(localization_key="GAME_PLAY_REQUEST_FORMAT", localization_args=[])
    assert alert.as_dict() == {'loc-key': "GAME_PLAY_REQUEST_FORMAT"}


def test_payload_alert_args_kept_as_given():
    args = ("Jenna", "Frank")
    alert = PayloadAlert(localization_key="GAME_PLAY_REQUEST_FORMAT", localization_args=args)
    assert alert.as_dict()['loc-args'] is args
    assert dumps_payload({'alert': alert}) == (
        b'{"alert":{"loc-key":"GAME_PLAY_REQUEST_FORMAT","loc-args":["Jenna","Frank"]}}')


def test_empty_payload_alert_still_sent():
    p = Payload(alert=PayloadAlert())
    assert p.as_dict() == {'alert': {}}


def test_encoder_nested_payload():
    data = {'aps': Payload(alert=PayloadAlert(body="Hi")), 'extra': [PayloadAlert(body="x")]}
    assert json.loads(json.dumps(data, cls=PayloadEncoder)) == {
        'aps': {'alert': {'body': "Hi"}}, 'extra': [{'body': "x"}]}


def test_encoder_rejects_unknown_type():
    with pytest.raises(TypeError):
        json.dumps({'when': object()}, cls=PayloadEncoder)


def test_dumps_payload_is_compact():
    assert dumps_payload({'aps': Payload(alert="hello")}) == b'{"aps":{"alert":"hello"}}'


def test_dumps_payload_keeps_utf8():
    data = dumps_payload({'aps': Payload(alert="привет")})
    assert data == '{"aps":{"alert":"привет"}}'.encode()


def test_dumps_payload_keeps_insertion_order():
    assert dumps_payload({'b': 1, 'a': 2}) == b'{"b":1,"a":2}'


def test_dumps_payload_mixed_key_types():
    assert dumps_payload({'custom': {1: "a", "b": 2}}) == b'{"custom":{"1":"a","b":2}}'


def test_dumps_payload_rejects_nan():
    with pytest.raises(ValueError):
        dumps_payload({'value': float('nan')})
