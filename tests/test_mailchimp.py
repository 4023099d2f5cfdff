import json
import logging
from unittest import mock
from urllib.parse import unquote

import pytest
import requests

from mailchimp import MailChimp, Error, APIConnectionError, UnknownMethodError, InvalidApiKeyError


def decode_body(call):
    return json.loads(unquote(call[1]['data']))


class TestConstruction:

    def test_without_key(self):
        with pytest.raises(Error) as exc:
            MailChimp()
        assert str(exc.value) == 'You have to provide an API key for this to work.'

    def test_without_key_but_with_parameters(self):
        with pytest.raises(Error):
            MailChimp({'version': '1.3'})

    def test_defaults_to_1_3(self):
        api = MailChimp('apiKey-dc')
        assert api.version == '1.3'
        assert api.datacenter == 'dc'
        assert api.uri == 'http://dc.api.mailchimp.com'

    def test_unsupported_version(self):
        with pytest.raises(Error) as exc:
            MailChimp('apiKey-dc', version='0.1')
        assert str(exc.value) == 'Version 0.1 of the MailChimp API is currently not supported.'

    def test_key_without_datacenter(self):
        assert MailChimp('apiKey').datacenter == 'us1'

    def test_secure(self):
        assert MailChimp('apiKey-us2', secure=True).uri == 'https://us2.api.mailchimp.com'

    def test_2_0_is_always_secure(self):
        assert MailChimp('apiKey-us2', version='2.0', secure=False).uri == 'https://us2.api.mailchimp.com'

    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setenv('MAILCHIMP_APIKEY', 'envKey-us3')
        assert MailChimp().apikey == 'envKey-us3'

    def test_key_from_file(self, tmp_path):
        (tmp_path / '.mailchimp.key').write_text('fileKey-us4\n')
        api = MailChimp()
        assert api.apikey == 'fileKey-us4'
        assert api.datacenter == 'us4'

    def test_proxy(self):
        api = MailChimp('apiKey-dc', proxy='http://proxy:3128')
        assert api.session.proxies == {'http': 'http://proxy:3128', 'https': 'http://proxy:3128'}


class TestVersion1_3:

    def setup_method(self):
        self.api = MailChimp('apiKey-dc', version='1.3')

    def test_folder_add(self, respond):
        request = respond(self.api, '123')
        assert self.api.folderAdd(name='foldername') == 123

        args, kwargs = request.call_args
        assert args == ('POST', 'http://dc.api.mailchimp.com/1.3/?method=folderAdd')
        assert decode_body(request.call_args) == {'apikey': 'apiKey-dc', 'name': 'foldername'}
        assert kwargs['headers']['user-agent'].startswith('MailChimp-Python/')

    def test_superfluous_arguments_are_discarded(self, respond):
        request = respond(self.api, '789')
        self.api.folderAdd({'name': 'foldername', 'type': 'autoresponder', 'superflous': 'superflous'})
        assert decode_body(request.call_args) == {'apikey': 'apiKey-dc', 'name': 'foldername', 'type': 'autoresponder'}

    def test_error_answer(self, respond):
        respond(self.api, '{"error":"You must specify a name value for the folderAdd method","code":-90}')
        with pytest.raises(Error) as exc:
            self.api.folderAdd()
        assert str(exc.value) == 'You must specify a name value for the folderAdd method'
        assert exc.value.code == -90

    def test_mapped_error(self, respond):
        respond(self.api, '{"error":"Invalid Mailchimp API Key: apiKey-dc","code":104}')
        with pytest.raises(InvalidApiKeyError):
            self.api.ping()

    def test_call_by_name(self, respond):
        respond(self.api, '"Everything\'s Chimpy!"')
        assert self.api.call('ping') == "Everything's Chimpy!"

    def test_unknown_method(self):
        with pytest.raises(UnknownMethodError) as exc:
            self.api.call('noSuchMethod')
        assert str(exc.value) == 'The API method noSuchMethod does not exist.'

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            self.api.noSuchMethod

    def test_connection_error(self):
        self.api.session.request = mock.Mock(side_effect=requests.ConnectionError('refused'))
        with pytest.raises(APIConnectionError) as exc:
            self.api.ping()
        assert str(exc.value) == 'Unable to connect to the MailChimp API endpoint because refused'

    @pytest.mark.parametrize('debug, level', [(True, logging.INFO), (False, logging.DEBUG)])
    def test_request_logging(self, respond, caplog, debug, level):
        api = MailChimp('apiKey-dc', debug=debug)
        respond(api, '"Everything\'s Chimpy!"')
        caplog.set_level(logging.DEBUG, logger='mailchimp')
        api.ping()
        records = [r for r in caplog.records if r.name == 'mailchimp']
        assert len(records) == 2
        assert records[0].getMessage().startswith('POST to http://dc.api.mailchimp.com/1.3/?method=ping: ')
        assert records[1].getMessage().startswith('Received 200 in ')
        assert records[1].getMessage().endswith('ms: "Everything\'s Chimpy!"')
        assert [r.levelno for r in records] == [level, level]

    def test_last_request(self, respond):
        respond(self.api, '[]')
        self.api.lists()
        assert self.api.last_request['url'] == 'http://dc.api.mailchimp.com/1.3/?method=lists'
        assert self.api.last_request['response_body'] == '[]'
        assert self.api.last_request['status_code'] == 200


class TestVersion1_2:

    def test_output_json_in_query(self, respond):
        api = MailChimp('apiKey-dc', version='1.2', user_agent='my-app/2.1')
        request = respond(api, '{"total": 0}')
        api.campaigns(filters={'status': 'sent'})

        args, kwargs = request.call_args
        assert args == ('POST', 'http://dc.api.mailchimp.com/1.2/?output=json&method=campaigns')
        assert decode_body(request.call_args) == {'apikey': 'apiKey-dc', 'filters': {'status': 'sent'}}
        assert kwargs['headers']['user-agent'].startswith('my-app/2.1 MailChimp-Python/')


class TestVersion2_0:

    def setup_method(self):
        self.api = MailChimp('apiKey-us2', version='2.0')

    def test_namespace_call(self, respond):
        request = respond(self.api, '{"total": 1, "data": []}')
        assert self.api.lists.list(start=0, limit=5) == {'total': 1, 'data': []}

        args, kwargs = request.call_args
        assert args == ('POST', 'https://us2.api.mailchimp.com/2.0/lists/list.json')
        assert json.loads(kwargs['data']) == {'apikey': 'apiKey-us2', 'start': 0, 'limit': 5}
        assert kwargs['headers']['content-type'] == 'application/json'

    def test_dashed_method(self, respond):
        request = respond(self.api, '{"cid": "abc"}')
        self.api.campaigns.send_test(cid='abc', test_emails=['a@example.com'])
        assert request.call_args[0][1] == 'https://us2.api.mailchimp.com/2.0/campaigns/send-test.json'

    def test_keyword_method(self, respond):
        request = respond(self.api, '{"complete": true}')
        self.api.folders.del_(fid=1, type='campaign')
        assert request.call_args[0][1] == 'https://us2.api.mailchimp.com/2.0/folders/del.json'

    def test_two_part_call(self, respond):
        request = respond(self.api, '{"msg": "Everything\'s Chimpy!"}')
        assert self.api.call('helper', 'ping') == {'msg': "Everything's Chimpy!"}
        assert request.call_args[0][1] == 'https://us2.api.mailchimp.com/2.0/helper/ping.json'

    def test_two_part_call_with_params(self, respond):
        request = respond(self.api, '{"cid": "abc"}')
        self.api.call('campaigns', 'send_test', {'cid': 'abc'})
        assert json.loads(request.call_args[1]['data']) == {'apikey': 'apiKey-us2', 'cid': 'abc'}

    def test_error_envelope(self, respond):
        respond(self.api, '{"status":"error","code":200,"name":"List_DoesNotExist","error":"Invalid MailChimp List ID: x"}', status_code=500)
        with pytest.raises(Error) as exc:
            self.api.lists.members(id='x')
        assert exc.value.name == 'List_DoesNotExist'

    def test_unknown_namespace_method(self):
        with pytest.raises(AttributeError):
            self.api.lists.nothing

    def test_methods(self):
        methods = self.api.methods()
        assert 'lists/subscribe' in methods
        assert methods == sorted(methods)
        assert 'subscribe' in dir(self.api.lists)
