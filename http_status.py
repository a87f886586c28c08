#!/usr/bin/env python3
"""
HTTP status table for the generated Go client.
Phrases match Go's http.StatusText; constant names are the http.Status* identifiers.
"""

import re

# code: (phrase, Go constant suffix)
STATUS_TABLE = {
    100: ('Continue', 'Continue'),
    101: ('Switching Protocols', 'SwitchingProtocols'),
    102: ('Processing', 'Processing'),
    103: ('Early Hints', 'EarlyHints'),

    200: ('OK', 'OK'),
    201: ('Created', 'Created'),
    202: ('Accepted', 'Accepted'),
    203: ('Non-Authoritative Information', 'NonAuthoritativeInfo'),
    204: ('No Content', 'NoContent'),
    205: ('Reset Content', 'ResetContent'),
    206: ('Partial Content', 'PartialContent'),
    207: ('Multi-Status', 'MultiStatus'),
    208: ('Already Reported', 'AlreadyReported'),
    226: ('IM Used', 'IMUsed'),

    300: ('Multiple Choices', 'MultipleChoices'),
    301: ('Moved Permanently', 'MovedPermanently'),
    302: ('Found', 'Found'),
    303: ('See Other', 'SeeOther'),
    304: ('Not Modified', 'NotModified'),
    305: ('Use Proxy', 'UseProxy'),
    307: ('Temporary Redirect', 'TemporaryRedirect'),
    308: ('Permanent Redirect', 'PermanentRedirect'),

    400: ('Bad Request', 'BadRequest'),
    401: ('Unauthorized', 'Unauthorized'),
    402: ('Payment Required', 'PaymentRequired'),
    403: ('Forbidden', 'Forbidden'),
    404: ('Not Found', 'NotFound'),
    405: ('Method Not Allowed', 'MethodNotAllowed'),
    406: ('Not Acceptable', 'NotAcceptable'),
    407: ('Proxy Authentication Required', 'ProxyAuthRequired'),
    408: ('Request Timeout', 'RequestTimeout'),
    409: ('Conflict', 'Conflict'),
    410: ('Gone', 'Gone'),
    411: ('Length Required', 'LengthRequired'),
    412: ('Precondition Failed', 'PreconditionFailed'),
    413: ('Request Entity Too Large', 'RequestEntityTooLarge'),
    414: ('Request URI Too Long', 'RequestURITooLong'),
    415: ('Unsupported Media Type', 'UnsupportedMediaType'),
    416: ('Requested Range Not Satisfiable', 'RequestedRangeNotSatisfiable'),
    417: ('Expectation Failed', 'ExpectationFailed'),
    418: ("I'm a teapot", 'Teapot'),
    421: ('Misdirected Request', 'MisdirectedRequest'),
    422: ('Unprocessable Entity', 'UnprocessableEntity'),
    423: ('Locked', 'Locked'),
    424: ('Failed Dependency', 'FailedDependency'),
    425: ('Too Early', 'TooEarly'),
    426: ('Upgrade Required', 'UpgradeRequired'),
    428: ('Precondition Required', 'PreconditionRequired'),
    429: ('Too Many Requests', 'TooManyRequests'),
    431: ('Request Header Fields Too Large', 'RequestHeaderFieldsTooLarge'),
    451: ('Unavailable For Legal Reasons', 'UnavailableForLegalReasons'),

    500: ('Internal Server Error', 'InternalServerError'),
    501: ('Not Implemented', 'NotImplemented'),
    502: ('Bad Gateway', 'BadGateway'),
    503: ('Service Unavailable', 'ServiceUnavailable'),
    504: ('Gateway Timeout', 'GatewayTimeout'),
    505: ('HTTP Version Not Supported', 'HTTPVersionNotSupported'),
    506: ('Variant Also Negotiates', 'VariantAlsoNegotiates'),
    507: ('Insufficient Storage', 'InsufficientStorage'),
    508: ('Loop Detected', 'LoopDetected'),
    510: ('Not Extended', 'NotExtended'),
    511: ('Network Authentication Required', 'NetworkAuthenticationRequired'),
}

def status_text(code):
    """Return the standard phrase for a status code, or '' if unknown."""
    entry = STATUS_TABLE.get(code)
    return entry[0] if entry else ''

def http_status_name(code):
    """Turn a status code into an identifier: 400 -> BadRequest, 999 -> 999."""
    text = status_text(code)
    if not text:
        return str(code)
    # "Bad Request" -> "BadRequest"; also drops the '-' and "'" some phrases carry
    return re.sub(r'[^0-9A-Za-z_]', '', text)

def go_status_constant(code):
    """Return the Go expression for a status code: http.StatusNotFound, or the bare numeral."""
    entry = STATUS_TABLE.get(code)
    if entry is None:
        return str(code)
    return 'http.Status' + entry[1]
