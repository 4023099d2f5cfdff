from urllib.parse import quote

from . import endpoints
from .client import Client
from .helpers import json, handle_response, SAFE

class MailChimpPartner(Client):
    '''The MailChimp Partner API, authenticated with an app key instead of an API key'''
    name = 'MailChimp Partner API'
    key_name = 'an app key'
    env_var = 'MAILCHIMP_APPKEY'
    key_files = ['~/.mailchimp-partner.key', '/etc/mailchimp-partner.key']
    default_version = '1.3'
    versions = {'1.3': endpoints.PARTNER_1_3}
    host = '%(dc)s.partner-api.mailchimp.com'

    def execute(self, method, params):
        final = {'app_key': self.apikey}
        final.update(params)
        url = '%s/%s/?method=%s' % (self.uri, self.version, method)
        r = self.request('POST', url, data=quote(json.dumps(final), safe=SAFE))
        return handle_response(r, self.name)
