from unittest import mock

import pytest

class FakeResponse(object):
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

@pytest.fixture(autouse=True)
def no_ambient_keys(monkeypatch, tmp_path):
    for name in ('MAILCHIMP_APIKEY', 'MANDRILL_APIKEY', 'MAILCHIMP_APPKEY'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('HOME', str(tmp_path))

@pytest.fixture
def respond():
    '''Make the client's session answer every request with the given bodies, in order'''
    def factory(client, *bodies, **kwargs):
        status_code = kwargs.get('status_code', 200)
        responses = [FakeResponse(body, status_code) for body in bodies]
        client.session.request = mock.Mock(side_effect=responses)
        return client.session.request
    return factory
