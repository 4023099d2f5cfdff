from . import endpoints
from .client import Client
from .helpers import json, handle_response

class Mandrill(Client):
    '''The Mandrill transactional email API.

    Mandrill has no datacenters, every call goes to mandrillapp.com::

        m = Mandrill('your-mandrill-key')
        m.messages.send_template(template_name='welcome', template_content=[], message={...})
        m.call('users', 'ping')
    '''
    name = 'Mandrill API'
    env_var = 'MANDRILL_APIKEY'
    key_files = ['~/.mandrill.key', '/etc/mandrill.key']
    default_version = '1.0'
    versions = {'1.0': endpoints.MANDRILL_1_0}
    default_secure = True
    host = 'mandrillapp.com'

    def execute(self, method, params):
        final = {'key': self.apikey}
        final.update(params)
        url = '%s/api/%s/%s.json' % (self.uri, self.version, method)
        r = self.request('POST', url, data=json.dumps(final), headers={'content-type': 'application/json'})
        return handle_response(r, self.name)
