'''OAuth2 authorization against MailChimp.

The flow, in short:

 1) Instantiate MailChimpOAuth.
 2) Send the user to the MailChimp login form at ``get_authorize_uri()``.
 3) MailChimp redirects the user back to ``redirect_uri`` with a code. Either
    let MailChimpOAuth listen for that itself (``own_server=True``) or pass
    the query parameters of that request to ``handle_oauth_response``.
 4) The code is exchanged for an access token, the account metadata is
    fetched and the ``authed`` event fires with an API key usable with every
    other client in this package.

Events:

 * ``error`` -- receives an OAuthError; its ``data`` holds the parameters
   collected so far.
 * ``authed`` -- receives the API key and the collected parameters.
 * ``received_code``, ``received_access_token``, ``received_metadata`` --
   the intermediate steps, each receiving the collected parameters.
'''
import requests, ssl, threading
from http.server import HTTPServer, BaseHTTPRequestHandler
from urllib.parse import urlparse, parse_qsl, urlencode

from .client import logger, USER_AGENT
from .errors import Error, OAuthError
from .helpers import json

AUTHORIZE_URI = 'https://login.mailchimp.com/oauth2/authorize'
TOKEN_URI = 'https://login.mailchimp.com/oauth2/token'
METADATA_URI = 'https://login.mailchimp.com/oauth2/metadata'

class CallbackHandler(BaseHTTPRequestHandler):
    '''Answers the redirect MailChimp sends the user back with'''

    def do_GET(self):
        oauth = self.server.oauth
        query = dict(parse_qsl(urlparse(self.path).query))

        if 'code' not in query:
            self._send(500)
            oauth.missing_code(query)
            return

        if oauth.final_uri:
            self._send(302, {'Location': oauth.final_uri})
        else:
            self._send(204)
        oauth.emit('received_code', query)

    def __getattr__(self, name):
        # every verb but GET, including ones BaseHTTPRequestHandler would answer 501 to
        if name.startswith('do_'):
            return self._reject
        raise AttributeError(name)

    def _reject(self):
        self._send(500)
        self.server.oauth.emit('error', OAuthError('Received something other than a GET request.'))

    def _send(self, status, headers=None):
        self.send_response(status)
        self.send_header('Content-Type', 'text/plain')
        self.send_header('Content-Length', '0')
        for name, value in (headers or {}).items():
            self.send_header(name, value)
        self.end_headers()

    def log_message(self, format, *args):
        logger.debug('OAuth listener: ' + format, *args)

class MailChimpOAuth(object):
    def __init__(self, client_id=None, client_secret=None, redirect_uri=None, own_server=False, port=8100, add_port=False, final_uri=None, secure=None, timeout=None):
        '''Set up the authorization helper

        Args:
           client_id (str): the client id of your app registered with MailChimp
           client_secret (str): the client secret of that app
           redirect_uri (str): the redirect URI of that app; MailChimp has to be able to reach it
           own_server (bool): listen for the redirect ourselves instead of leaving it to your web app
           port (int): the port the listener binds to
           add_port (bool): append ``:port`` to ``redirect_uri``
           final_uri (str|None): where to send the user once the code arrived, otherwise the listener answers 204
           secure (dict|None): ``{'key': path, 'cert': path}`` to serve the listener over HTTPS
           timeout (float|None): seconds to wait for login.mailchimp.com
        '''
        if client_id is None:
            raise Error('You have to specify the client id for this to work.')
        if client_secret is None:
            raise Error('You have to specify the client secret for this to work.')
        if redirect_uri is None:
            raise Error('You have to specify a uri for this server as MailChimp needs to reach it from the outside.')

        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.own_server = own_server
        self.port = port
        self.add_port = add_port
        self.final_uri = final_uri
        self.secure = secure
        self.timeout = timeout

        self.session = requests.session()
        self.server = None
        self.api_key = None
        self.metadata = None
        self.error = None
        self._done = threading.Event()
        self._listeners = {}

        self.on('received_code', self.get_access_token)
        self.on('received_access_token', self.get_metadata)
        self.on('received_metadata', lambda params: self.emit('authed', params['api_key'], params))
        self.on('authed', self._authed)
        self.on('error', self._failed)

        if self.own_server:
            self.spawn_server()

    def on(self, event, listener):
        self._listeners.setdefault(event, []).append(listener)
        return listener

    def once(self, event, listener):
        def wrapper(*args):
            self.off(event, wrapper)
            return listener(*args)
        return self.on(event, wrapper)

    def off(self, event, listener):
        if listener in self._listeners.get(event, []):
            self._listeners[event].remove(listener)

    def emit(self, event, *args):
        '''Call every listener registered for event, in registration order'''
        listeners = list(self._listeners.get(event, []))
        for listener in listeners:
            listener(*args)
        return bool(listeners)

    def _authed(self, api_key, params):
        self.api_key = api_key
        self.metadata = params.get('metadata')
        self._done.set()

    def _failed(self, error):
        logger.error('[MailChimp] OAuth error: %s', error)

    def _abort(self, error):
        self.error = error
        self._done.set()
        self.emit('error', error)

    def wait(self, timeout=None):
        '''Block until the flow finished and return the API key.

        Raises the error that stopped the code, token, metadata chain, or the
        denial MailChimp redirected back with. Stray requests to the listener
        are reported through the error event but keep waiting.
        '''
        if not self._done.wait(timeout):
            raise OAuthError('Timed out waiting for the MailChimp authorization.')
        if self.api_key is None:
            raise self.error
        return self.api_key

    def get_redirect_uri(self):
        if self.add_port:
            return '%s:%s' % (self.redirect_uri, self.port)
        return self.redirect_uri

    def get_authorize_uri(self):
        '''The URI of the MailChimp login form the user has to be sent to'''
        params = [
            ('response_type', 'code'),
            ('client_id', self.client_id),
            ('redirect_uri', self.get_redirect_uri()),
        ]
        return '%s?%s' % (AUTHORIZE_URI, urlencode(params))

    def spawn_server(self):
        '''Start listening for the redirect in a background thread'''
        if self.secure and not (self.secure.get('key') and self.secure.get('cert')):
            raise Error('You have to specify the complete ssl credentials for this to work, with key and cert.')

        self.server = HTTPServer(('', self.port), CallbackHandler)
        self.server.oauth = self
        if self.secure:
            context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
            context.load_cert_chain(self.secure['cert'], self.secure['key'])
            self.server.socket = context.wrap_socket(self.server.socket, server_side=True)

        thread = threading.Thread(target=self.server.serve_forever, name='mailchimp-oauth')
        thread.daemon = True
        thread.start()
        logger.debug('OAuth listener running on port %d', self.server_port)
        return self.server

    @property
    def server_port(self):
        if self.server is None:
            return None
        return self.server.server_address[1]

    def close(self):
        if self.server is not None:
            self.server.shutdown()
            self.server.server_close()
            self.server = None

    def handle_oauth_response(self, params=None):
        '''Feed in the query parameters of the redirect when your own web app receives it'''
        params = dict(params or {})
        if 'code' in params:
            self.emit('received_code', params)
        else:
            self.missing_code(params)

    def missing_code(self, params):
        '''A redirect without a code only ends the flow when MailChimp says why, e.g. error=access_denied'''
        error = OAuthError('Received a request without a code.', params)
        if 'error' in params:
            self._abort(error)
        else:
            self.emit('error', error)

    def get_access_token(self, params=None):
        '''Exchange the code for an access token, then emits received_access_token or error'''
        params = params if params is not None else {}
        if not params.get('code'):
            self._abort(OAuthError('Code is required in Params', params))
            return

        data = [
            ('grant_type', 'authorization_code'),
            ('client_id', self.client_id),
            ('client_secret', self.client_secret),
            ('code', params['code']),
            ('redirect_uri', self.get_redirect_uri()),
        ]
        result = self._fetch('getAccessToken', params, 'POST', TOKEN_URI, data=data)
        if result is None:
            return

        if isinstance(result, dict) and 'access_token' in result:
            params['access_token'] = result['access_token']
            self.emit('received_access_token', params)
        else:
            self._abort(OAuthError('Answer from MailChimp API does not contain an access token.', params))

    def get_metadata(self, params=None):
        '''Fetch the account metadata and derive the API key, then emits received_metadata or error'''
        params = params if params is not None else {}
        if not params.get('access_token'):
            self._abort(OAuthError('access_token is required in Params', params))
            return

        headers = {'Authorization': 'OAuth %s' % params['access_token']}
        result = self._fetch('getMetadata', params, 'GET', METADATA_URI, headers=headers)
        if result is None:
            return

        if isinstance(result, dict) and 'dc' in result:
            params['metadata'] = result
            params['api_key'] = '%s-%s' % (params['access_token'], result['dc'])
            self.emit('received_metadata', params)
        else:
            self._abort(OAuthError('Answer from MailChimp API does not contain a datacenter pointer.', params))

    def _fetch(self, step, params, verb, url, data=None, headers=None):
        headers = dict(headers or {})
        headers['User-Agent'] = USER_AGENT
        try:
            r = self.session.request(verb, url, data=data, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug('[MailChimp] %s failed: %s', step, e)
            self._abort(OAuthError('Unable to connect to the MailChimp OAuth service.', params))
            return None

        try:
            return json.loads(r.text)
        except ValueError:
            logger.error('[MailChimp] Error parsing JSON answer from the MailChimp %s API. %s', step, r.text)
            self._abort(OAuthError('Error parsing JSON answer from the MailChimp %s API.' % step, params))
            return None
