"""
Standard HTTP response names.

Every standard status has a default response template registered in the
root expression under the name below, so ``response(NotFound)`` needs no
further configuration.
"""

Continue = "Continue"
SwitchingProtocols = "SwitchingProtocols"
OK = "OK"
Created = "Created"
Accepted = "Accepted"
NonAuthoritativeInfo = "NonAuthoritativeInfo"
NoContent = "NoContent"
ResetContent = "ResetContent"
PartialContent = "PartialContent"
MultipleChoices = "MultipleChoices"
MovedPermanently = "MovedPermanently"
Found = "Found"
SeeOther = "SeeOther"
NotModified = "NotModified"
UseProxy = "UseProxy"
TemporaryRedirect = "TemporaryRedirect"
BadRequest = "BadRequest"
Unauthorized = "Unauthorized"
PaymentRequired = "PaymentRequired"
Forbidden = "Forbidden"
NotFound = "NotFound"
MethodNotAllowed = "MethodNotAllowed"
NotAcceptable = "NotAcceptable"
ProxyAuthRequired = "ProxyAuthRequired"
RequestTimeout = "RequestTimeout"
Conflict = "Conflict"
Gone = "Gone"
LengthRequired = "LengthRequired"
PreconditionFailed = "PreconditionFailed"
RequestEntityTooLarge = "RequestEntityTooLarge"
RequestURITooLong = "RequestURITooLong"
UnsupportedMediaType = "UnsupportedMediaType"
RequestedRangeNotSatisfiable = "RequestedRangeNotSatisfiable"
ExpectationFailed = "ExpectationFailed"
Teapot = "Teapot"
UnprocessableEntity = "UnprocessableEntity"
TooManyRequests = "TooManyRequests"
InternalServerError = "InternalServerError"
NotImplemented = "NotImplemented"
BadGateway = "BadGateway"
ServiceUnavailable = "ServiceUnavailable"
GatewayTimeout = "GatewayTimeout"
HTTPVersionNotSupported = "HTTPVersionNotSupported"

STATUS_CODES = {
    Continue: 100,
    SwitchingProtocols: 101,
    OK: 200,
    Created: 201,
    Accepted: 202,
    NonAuthoritativeInfo: 203,
    NoContent: 204,
    ResetContent: 205,
    PartialContent: 206,
    MultipleChoices: 300,
    MovedPermanently: 301,
    Found: 302,
    SeeOther: 303,
    NotModified: 304,
    UseProxy: 305,
    TemporaryRedirect: 307,
    BadRequest: 400,
    Unauthorized: 401,
    PaymentRequired: 402,
    Forbidden: 403,
    NotFound: 404,
    MethodNotAllowed: 405,
    NotAcceptable: 406,
    ProxyAuthRequired: 407,
    RequestTimeout: 408,
    Conflict: 409,
    Gone: 410,
    LengthRequired: 411,
    PreconditionFailed: 412,
    RequestEntityTooLarge: 413,
    RequestURITooLong: 414,
    UnsupportedMediaType: 415,
    RequestedRangeNotSatisfiable: 416,
    ExpectationFailed: 417,
    Teapot: 418,
    UnprocessableEntity: 422,
    TooManyRequests: 429,
    InternalServerError: 500,
    NotImplemented: 501,
    BadGateway: 502,
    ServiceUnavailable: 503,
    GatewayTimeout: 504,
    HTTPVersionNotSupported: 505,
}
