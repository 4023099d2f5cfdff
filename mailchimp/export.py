import requests

from . import endpoints
from .client import Client
from .errors import Error, cast_error, is_error
from .helpers import json, urlencode

class MailChimpExport(Client):
    '''The MailChimp Export API.

    Answers are streams of JSON documents, one per line: the first line of a
    list export holds the column headers, every following line a member.
    '''
    name = 'MailChimp Export API'
    default_version = '1.0'
    versions = {'1.0': endpoints.EXPORT_1_0}

    def execute(self, method, params):
        final = {'apikey': self.apikey}
        final.update(params)
        url = '%s/export/%s/%s/?%s' % (self.uri, self.version, method, urlencode(final))
        r = self.request('GET', url)

        rows = self.parse(r.text)
        if rows and is_error(rows[0]):
            raise cast_error(rows[0])
        if r.status_code != requests.codes.ok:
            raise Error('We received an unexpected error: %s %s' % (r.status_code, r.text))
        return rows

    def parse(self, body):
        rows = []
        for line in (body or '').splitlines():
            if not line.strip():
                continue
            try:
                rows.append(json.loads(line))
            except ValueError:
                raise Error('Error parsing JSON answer from %s: %s' % (self.name, line))
        return rows
