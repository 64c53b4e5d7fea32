"""
Platform constants

Default endpoints and fixed wire paths for the mpx identity and access services.
"""

DEFAULT_ACCESS_URL = "http://access.auth.theplatform.com"
DEFAULT_IDENTITY_URL = "https://identity.auth.theplatform.com/idm"
DEFAULT_ACCOUNT = "http://access.auth.theplatform.com/data/Account/1"

AUTH_AGENT = "Python-MPX AuthClient"
JSON_CONTENT_TYPE = "application/json"

SIGN_IN_PATH = "/web/Authentication/signIn"
SIGN_OUT_PATH = "/web/Authentication/signOut"
SELF_PATH = "/web/Self/getSelf"
REGISTRY_PATH = "/web/Registry/resolveDomain"

# Identity endpoints speak schema 1.0, data services default to 1.1
IDENTITY_SCHEMA = "1.0"
ACCESS_SCHEMA = "1.1"
RESPONSE_FORM = "json"

EXCEPTION_KEY = "isException"


__all__ = [
    "DEFAULT_ACCESS_URL",
    "DEFAULT_IDENTITY_URL",
    "DEFAULT_ACCOUNT",
    "AUTH_AGENT",
    "JSON_CONTENT_TYPE",
    "SIGN_IN_PATH",
    "SIGN_OUT_PATH",
    "SELF_PATH",
    "REGISTRY_PATH",
    "IDENTITY_SCHEMA",
    "ACCESS_SCHEMA",
    "RESPONSE_FORM",
    "EXCEPTION_KEY",
]
