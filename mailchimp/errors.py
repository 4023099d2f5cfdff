class Error(Exception):
    '''Base class for everything the MailChimp APIs report back as a failure.

    ``code`` carries MailChimp's numeric error code and ``name`` the symbolic
    error name (only sent by API 2.0 and Mandrill), when either is known.
    '''
    def __init__(self, message='', code=None, name=None):
        Exception.__init__(self, message)
        self.code = code
        self.name = name

class APIConnectionError(Error):
    pass
class UnknownMethodError(Error):
    pass
class OAuthError(Error):
    def __init__(self, message='', data=None):
        Error.__init__(self, message)
        self.data = data

# MailChimp
class ValidationError(Error):
    pass
class ParseError(Error):
    pass
class MethodUnknownError(Error):
    pass
class InvalidParametersError(Error):
    pass
class RequestTimedOutError(Error):
    pass
class TooManyConnectionsError(Error):
    pass
class InvalidApiKeyError(Error):
    pass
class InvalidAppKeyError(Error):
    pass
class UserDoesNotExistError(Error):
    pass
class ListDoesNotExistError(Error):
    pass
class ListAlreadySubscribedError(Error):
    pass
class ListNotSubscribedError(Error):
    pass
class EmailNotExistsError(Error):
    pass
class CampaignDoesNotExistError(Error):
    pass

# Mandrill
class InvalidKeyError(Error):
    pass
class UnknownTemplateError(Error):
    pass
class InvalidTagNameError(Error):
    pass
class InvalidRejectError(Error):
    pass
class UnknownSenderError(Error):
    pass
class UnknownUrlError(Error):
    pass
class InvalidTemplateError(Error):
    pass
class UnknownWebhookError(Error):
    pass
class UnknownInboundDomainError(Error):
    pass
class UnknownExportError(Error):
    pass

ERROR_MAP = {
    'ValidationError': ValidationError,
    'Parse_Exception': ParseError,
    'ServerError_MethodUnknown': MethodUnknownError,
    'ServerError_InvalidParameters': InvalidParametersError,
    'Request_TimedOut': RequestTimedOutError,
    'Too_Many_Connections': TooManyConnectionsError,
    'Invalid_ApiKey': InvalidApiKeyError,
    'Invalid_AppKey': InvalidAppKeyError,
    'User_DoesNotExist': UserDoesNotExistError,
    'List_DoesNotExist': ListDoesNotExistError,
    'List_AlreadySubscribed': ListAlreadySubscribedError,
    'List_NotSubscribed': ListNotSubscribedError,
    'Email_NotExists': EmailNotExistsError,
    'Campaign_DoesNotExist': CampaignDoesNotExistError,
    'Invalid_Key': InvalidKeyError,
    'Unknown_Template': UnknownTemplateError,
    'Invalid_Tag_Name': InvalidTagNameError,
    'Invalid_Reject': InvalidRejectError,
    'Unknown_Sender': UnknownSenderError,
    'Unknown_Url': UnknownUrlError,
    'Invalid_Template': InvalidTemplateError,
    'Unknown_Webhook': UnknownWebhookError,
    'Unknown_InboundDomain': UnknownInboundDomainError,
    'Unknown_Export': UnknownExportError
}

# the 1.x APIs only send a numeric code, no name
CODE_MAP = {
    -32601: 'ServerError_MethodUnknown',
    -32602: 'ServerError_InvalidParameters',
    -100: 'ValidationError',
    -98: 'Request_TimedOut',
    -50: 'Too_Many_Connections',
    0: 'Parse_Exception',
    102: 'User_DoesNotExist',
    104: 'Invalid_ApiKey',
    106: 'Invalid_AppKey',
    200: 'List_DoesNotExist',
    214: 'List_AlreadySubscribed',
    215: 'List_NotSubscribed',
    232: 'Email_NotExists',
    300: 'Campaign_DoesNotExist'
}

def is_error(result):
    '''Tell whether a decoded response body is one of the error envelopes'''
    if not isinstance(result, dict):
        return False
    return result.get('status') == 'error' or 'error' in result

def cast_error(result):
    '''Take a result representing an error and cast it to a specific exception if possible (use a generic Error for unknown cases)'''
    if not is_error(result):
        return Error('We received an unexpected error: %r' % (result,))

    message = result.get('error') or result.get('message') or ''
    code = result.get('code')
    name = result.get('name')
    if name is None and code in CODE_MAP:
        name = CODE_MAP[code]

    cls = ERROR_MAP.get(name, Error)
    return cls(message, code=code, name=name)
