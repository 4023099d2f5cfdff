'''Call any MailChimp, Export, STS, Partner or Mandrill API method from the shell.

Usage:
  mailchimp [options] <method> [<param>...]
  mailchimp [options] --methods
  mailchimp -h | --help

Parameters are given as name=value; values that parse as JSON are sent as
such, anything else is sent as a string.

Examples:
  mailchimp --api-version=2.0 lists/list limit=5
  mailchimp --api=mandrill messages/send message='{"text": "hi", "to": [{"email": "a@example.com"}]}'

Options:
  --api=<api>              mailchimp, export, sts, partner or mandrill [default: mailchimp]
  --api-version=<version>  the API version, the API's default one if left out
  --key=<key>              the API (or app) key, read from the environment or the key files if left out
  --secure                 use HTTPS
  --timeout=<seconds>      seconds to wait for the API
  --methods                list the methods of the API and exit
  --debug                  log requests and responses
  -h --help                show this help
'''
import sys

from docopt import docopt

from .api import MailChimp
from .errors import Error
from .export import MailChimpExport
from .helpers import json
from .mandrill import Mandrill
from .partner import MailChimpPartner
from .sts import MailChimpSTS

APIS = {
    'mailchimp': MailChimp,
    'export': MailChimpExport,
    'sts': MailChimpSTS,
    'partner': MailChimpPartner,
    'mandrill': Mandrill,
}

def parse_params(pairs):
    params = {}
    for pair in pairs:
        if '=' not in pair:
            raise Error('Parameters have to be given as name=value, got %r' % pair)
        name, value = pair.split('=', 1)
        try:
            params[name] = json.loads(value)
        except ValueError:
            params[name] = value
    return params

def build_client(args):
    if args['--api'] not in APIS:
        raise Error('Unknown API %s, pick one of %s' % (args['--api'], ', '.join(sorted(APIS))))
    timeout = float(args['--timeout']) if args['--timeout'] else None
    return APIS[args['--api']](
        args['--key'],
        version=args['--api-version'],
        secure=True if args['--secure'] else None,
        timeout=timeout,
        debug=args['--debug'],
    )

def main(argv=None):
    args = docopt(__doc__, argv=argv)
    try:
        client = build_client(args)
        if args['--methods']:
            for method in client.methods():
                print('%s  %s' % (method, ' '.join(client.endpoints[method])))
            return 0
        result = client.call(args['<method>'], parse_params(args['<param>']))
    except Error as e:
        sys.stderr.write('%s: %s\n' % (e.__class__.__name__, e))
        return 1

    print(json.dumps(result, indent=2))
    return 0
