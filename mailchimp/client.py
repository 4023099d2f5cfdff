import requests, os.path, logging, sys, time

from .errors import Error, APIConnectionError, UnknownMethodError
from .helpers import whitelist

VERSION = '1.0.0'
USER_AGENT = 'MailChimp-Python/%s' % VERSION

logger = logging.getLogger('mailchimp')
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler(sys.stderr))

def method_name(name):
    '''Turn a Python attribute name into the remote spelling, e.g. send_template -> send-template, del_ -> del'''
    return name.rstrip('_').replace('_', '-')

class Namespace(object):
    '''A group of remote methods sharing a prefix, e.g. ``api.lists`` for ``lists/*``'''
    def __init__(self, master, section):
        self.master = master
        self.section = section

    def __getattr__(self, name):
        if name.startswith('__'):
            raise AttributeError(name)
        method = '%s/%s' % (self.section, method_name(name))
        if method not in self.master.endpoints:
            raise AttributeError('%s has no method %s' % (self.section, name))
        return self.master.endpoint(method)

    def __dir__(self):
        prefix = self.section + '/'
        return sorted(m[len(prefix):].replace('-', '_') for m in self.master.endpoints if m.startswith(prefix))

    def __repr__(self):
        return '<Namespace %s of %r>' % (self.section, self.master)

class Client(object):
    '''Shared plumbing for every API wrapper: configuration, the parameter
    whitelist, the HTTP round trip and its logging.

    Subclasses describe their API through class attributes (``versions``
    maps each supported version to its endpoint table, ``host`` is a pattern
    filled in with the datacenter) and implement ``execute``.
    '''
    name = 'MailChimp API'
    key_name = 'an API key'
    env_var = 'MAILCHIMP_APIKEY'
    key_files = ['~/.mailchimp.key', '/etc/mailchimp.key']
    versions = {}
    default_version = None
    default_secure = False
    host = '%(dc)s.api.mailchimp.com'

    def __init__(self, apikey=None, version=None, secure=None, user_agent=None, proxy=None, timeout=None, debug=False):
        '''Initialize the API client

        Args:
           apikey (str|None): your key.  If this is left as None, we will attempt to get it from the following locations::
               - the environment variable named by ``env_var``
               - the files listed in ``key_files``, first one wins
           version (str|None): the API version to talk to, default_version if left out
           secure (bool|None): use HTTPS instead of HTTP
           user_agent (str|None): prepended to the User-Agent header
           proxy (str|None): proxy URL used for both HTTP and HTTPS
           timeout (float|None): seconds to wait for the remote end
           debug (bool): set to True to log all the request and response information to the "mailchimp" logger at the INFO level.  When set to false, it will log at the DEBUG level.
        '''
        self.session = requests.session()
        if debug:
            self.level = logging.INFO
        else:
            self.level = logging.DEBUG
        self.last_request = None

        if apikey is None:
            if self.env_var in os.environ:
                apikey = os.environ[self.env_var]
            else:
                apikey = self.read_configs()

        if not apikey or not isinstance(apikey, str):
            raise Error('You have to provide %s for this to work.' % self.key_name)
        self.apikey = apikey

        if version is None:
            version = self.default_version
        if version not in self.versions:
            raise Error('Version %s of the %s is currently not supported.' % (version, self.name))
        self.version = version
        self.endpoints = self.versions[version]

        if '-' in apikey:
            self.datacenter = apikey.rsplit('-', 1)[1]
        else:
            self.datacenter = 'us1'
        self.secure = self.default_secure if secure is None else secure
        self.user_agent = '%s %s' % (user_agent, USER_AGENT) if user_agent else USER_AGENT
        self.timeout = timeout
        if proxy:
            self.session.proxies = {'http': proxy, 'https': proxy}

    @property
    def uri(self):
        scheme = 'https' if self.secure else 'http'
        return '%s://%s' % (scheme, self.host % {'dc': self.datacenter})

    def call(self, method, *args, **kwargs):
        '''Call a remote method by name.

        Both ``api.call('lists/subscribe', {'id': ...})`` and the two part form
        ``api.call('lists', 'subscribe', id=...)`` are accepted.
        '''
        args = list(args)
        if args and isinstance(args[0], str):
            method = '%s/%s' % (method, method_name(args.pop(0)))
        params = args.pop(0) if args else None
        return self.invoke(method, params, kwargs)

    def invoke(self, method, params=None, extra=None):
        if method not in self.endpoints:
            raise UnknownMethodError('The API method %s does not exist.' % method)
        given = dict(params or {})
        given.update(extra or {})
        return self.execute(method, whitelist(self.endpoints[method], given))

    def execute(self, method, params):
        '''Send the whitelisted params to the remote method and return the decoded answer'''
        raise NotImplementedError

    def endpoint(self, method):
        def call(params=None, **kwargs):
            return self.invoke(method, params, kwargs)
        call.__name__ = method_name(method.replace('/', '_'))
        call.__doc__ = 'Call %s with any of: %s' % (method, ', '.join(self.endpoints[method]) or 'no parameters')
        return call

    def methods(self):
        return sorted(self.endpoints)

    def __getattr__(self, name):
        endpoints = self.__dict__.get('endpoints')
        if endpoints is None or name.startswith('__'):
            raise AttributeError(name)
        if name in endpoints:
            return self.endpoint(name)
        section = method_name(name)
        for method in endpoints:
            if method.startswith(section + '/'):
                return Namespace(self, section)
        raise AttributeError('%s %s has no method %s' % (self.name, self.version, name))

    def request(self, verb, url, data=None, headers=None):
        '''Do the HTTP round trip, timing and logging it; transport failures become APIConnectionError'''
        headers = dict(headers or {})
        headers['user-agent'] = self.user_agent
        self.log('%s to %s: %s' % (verb, url, data))
        start = time.time()
        try:
            r = self.session.request(verb, url, data=data, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise APIConnectionError('Unable to connect to the %s endpoint because %s' % (self.name, e))

        complete_time = time.time() - start
        self.log('Received %s in %.2fms: %s' % (r.status_code, complete_time * 1000, r.text))
        self.last_request = {'url': url, 'request_body': data, 'response_body': r.text, 'status_code': r.status_code, 'response': r, 'time': complete_time}
        return r

    def read_configs(self):
        '''Try to read the key from a series of files if it's not provided in code'''
        for path in self.key_files:
            path = os.path.expanduser(path)
            if not os.path.isfile(path):
                continue
            with open(path, 'r') as f:
                apikey = f.read().strip()
            if apikey != '':
                return apikey

        return None

    def log(self, *args, **kwargs):
        '''Proxy access to the mailchimp logger, changing the level based on the debug setting'''
        logger.log(self.level, *args, **kwargs)

    def __repr__(self):
        return '<%s %s %s>' % (self.__class__.__name__, self.version, self.apikey)
