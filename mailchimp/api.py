from urllib.parse import quote

from . import endpoints
from .client import Client
from .helpers import json, handle_response, SAFE

class MailChimp(Client):
    '''The MailChimp API, versions 1.1 to 2.0.

    The 1.x versions take every call on a single URL with the method name in
    the query string, 2.0 gives each method its own path and only speaks HTTPS::

        api = MailChimp('0123456789abcdef-us2', version='2.0')
        api.lists.subscribe(id='b1234346', email={'email': 'someone@example.com'})
        api.call('helper', 'ping')
    '''
    name = 'MailChimp API'
    default_version = '1.3'
    versions = {
        '1.1': endpoints.MAILCHIMP_1_1,
        '1.2': endpoints.MAILCHIMP_1_2,
        '1.3': endpoints.MAILCHIMP_1_3,
        '2.0': endpoints.MAILCHIMP_2_0,
    }

    def __init__(self, *args, **kwargs):
        Client.__init__(self, *args, **kwargs)
        if self.version == '2.0':
            self.secure = True

    def execute(self, method, params):
        final = {'apikey': self.apikey}
        final.update(params)
        if self.version == '2.0':
            url = '%s/%s/%s.json' % (self.uri, self.version, method)
            r = self.request('POST', url, data=json.dumps(final), headers={'content-type': 'application/json'})
        else:
            if self.version == '1.3':
                query = 'method=%s' % method
            else:
                query = 'output=json&method=%s' % method
            url = '%s/%s/?%s' % (self.uri, self.version, query)
            r = self.request('POST', url, data=quote(json.dumps(final), safe=SAFE))
        return handle_response(r)
