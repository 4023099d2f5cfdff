import pytest

from mailchimp.errors import Error, ValidationError
from mailchimp.helpers import serialize, urlencode, whitelist, handle_response
from tests.conftest import FakeResponse


def test_serialize_array():
    assert serialize([1, 2, 3, 4, 5, 6, 7, 8, 9, 0]) == '0=1&1=2&2=3&3=4&4=5&5=6&6=7&7=8&8=9&9=0'


def test_serialize_object():
    assert serialize({'first': 1, 'second': 2, 'third': 3}) == 'first=1&second=2&third=3'


def test_serialize_nested():
    message = {'subject': 'Hi', 'to_email': ['a@example.com', 'b@example.com']}
    assert serialize(message, 'message') == (
        'message[subject]=Hi'
        '&message[to_email][0]=a%40example.com'
        '&message[to_email][1]=b%40example.com'
    )


def test_serialize_skips_falsy_entries():
    assert serialize({'a': 1, 'b': 0, 'c': '', 'd': None, 'e': 'x'}) == 'a=1&e=x'


def test_serialize_encodes_like_encode_uri_component():
    assert serialize('a b&c/d!(e)*', 'q') == "q=a%20b%26c%2Fd!(e)*"


def test_serialize_booleans():
    assert serialize(True, 'track_opens') == 'track_opens=true'


def test_urlencode_keeps_falsy_top_level_values():
    assert urlencode({'apikey': 'key-dc', 'track_opens': False, 'tags': None}) == 'apikey=key-dc&track_opens=false'


def test_whitelist_drops_unknown_and_unset():
    given = {'name': 'folder', 'type': None, 'superflous': 'x'}
    assert whitelist(('name', 'type'), given) == {'name': 'folder'}


def test_handle_response_returns_decoded_body():
    assert handle_response(FakeResponse('{"total": 1}')) == {'total': 1}
    assert handle_response(FakeResponse('123')) == 123


def test_handle_response_bad_json():
    with pytest.raises(Error) as exc:
        handle_response(FakeResponse('<html>'))
    assert str(exc.value) == 'Error parsing JSON answer from MailChimp API: <html>'


def test_handle_response_error_envelope():
    body = '{"status": "error", "code": -100, "name": "ValidationError", "error": "bad email"}'
    with pytest.raises(ValidationError) as exc:
        handle_response(FakeResponse(body, 500))
    assert exc.value.code == -100
    assert str(exc.value) == 'bad email'


def test_handle_response_non_200_without_envelope():
    with pytest.raises(Error) as exc:
        handle_response(FakeResponse('[]', 502))
    assert 'unexpected error' in str(exc.value)
