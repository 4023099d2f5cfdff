from . import endpoints
from .client import Client
from .helpers import handle_response, urlencode

class MailChimpSTS(Client):
    '''The MailChimp STS API, a thin layer over Amazon SES.

    Parameters go out form-encoded, nested structures in ``a[b][c]`` style.
    '''
    name = 'MailChimp STS API'
    default_version = '1.0'
    versions = {'1.0': endpoints.STS_1_0}
    host = '%(dc)s.sts.mailchimp.com'

    def execute(self, method, params):
        final = {'apikey': self.apikey}
        final.update(params)
        url = '%s/%s/%s' % (self.uri, self.version, method)
        r = self.request('POST', url, data=urlencode(final), headers={'content-type': 'application/x-www-form-urlencoded'})
        return handle_response(r)
