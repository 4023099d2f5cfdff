import requests
try:
    import ujson as json
except ImportError:
    try:
        import simplejson as json
    except ImportError:
        import json
from urllib.parse import quote

from .errors import Error, cast_error, is_error

# characters encodeURIComponent leaves alone
SAFE = "-_.!~*'()"

def encode_component(value):
    if value is True:
        value = 'true'
    elif value is False:
        value = 'false'
    return quote(str(value), safe=SAFE)

def serialize(value, key=''):
    '''Recursively encode a value as application/x-www-form-urlencoded.

    Lists become ``key[0]=..&key[1]=..`` and dicts ``key[name]=..``; at the top
    level the index or the name is used as the key on its own. Falsy dict
    entries are left out.

    >>> serialize({'first': 1, 'second': 2})
    'first=1&second=2'
    '''
    if isinstance(value, (list, tuple)):
        output = []
        for index, val in enumerate(value):
            name = '%s[%d]' % (key, index) if key != '' else str(index)
            output.append(serialize(val, name))
        return '&'.join(output)
    elif isinstance(value, dict):
        output = []
        for name, val in value.items():
            if val:
                output.append(serialize(val, '%s[%s]' % (key, name) if key != '' else name))
        return '&'.join(output)
    elif value is None:
        return ''
    return '%s=%s' % (key, encode_component(value))

def urlencode(params):
    '''Form-encode each top level parameter on its own, leaving out the ones that encode to nothing'''
    encoded = (serialize(value, name) for name, value in params.items())
    return '&'.join(part for part in encoded if part != '')

def whitelist(available, given):
    '''Keep the parameters a remote method accepts, dropping anything unset or unknown'''
    return dict((name, given[name]) for name in available if given.get(name) is not None)

def handle_response(response, what='MailChimp API'):
    '''Decode a JSON response, turning error envelopes and non-200 answers into exceptions'''
    body = response.text
    try:
        result = json.loads(body)
    except ValueError:
        raise Error('Error parsing JSON answer from %s: %s' % (what, body))

    if response.status_code != requests.codes.ok or is_error(result):
        raise cast_error(result)
    return result
