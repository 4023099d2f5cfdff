'''Python clients for the MailChimp family of APIs.

    >>> import mailchimp
    >>> api = mailchimp.MailChimp('0123456789abcdef-us2', version='2.0')
    >>> api.helper.ping()
    {'msg': "Everything's Chimpy!"}
'''
from .client import VERSION as __version__, logger
from .errors import *
from .helpers import serialize
from .api import MailChimp
from .export import MailChimpExport
from .sts import MailChimpSTS
from .mandrill import Mandrill
from .partner import MailChimpPartner
from .oauth import MailChimpOAuth
