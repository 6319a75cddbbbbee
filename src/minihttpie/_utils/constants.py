# Request item separators
SEP_HEADER = ":"
SEP_QUERY = "=="
SEP_DATA = "="
SEP_DATA_RAW_JSON = ":="
SEP_GROUP_ALL_ITEMS = frozenset([SEP_HEADER, SEP_QUERY, SEP_DATA, SEP_DATA_RAW_JSON])

ESCAPE_CHAR = "\\"
ESCAPABLE_CHARS = frozenset([":", "=", ESCAPE_CHAR])

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
JSON_ACCEPT = "application/json, */*;q=0.5"
DEFAULT_CHARSET = "utf-8"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
HEADER_USER_AGENT = "User-Agent"

# Environment variables
ENV_TIMEOUT = "MINIHTTPIE_TIMEOUT"
ENV_DEFAULT_BODY_MODE = "MINIHTTPIE_DEFAULT_BODY_MODE"
ENV_FOLLOW_REDIRECTS = "MINIHTTPIE_FOLLOW_REDIRECTS"
ENV_VERIFY_SSL = "MINIHTTPIE_VERIFY_SSL"
ENV_CA_BUNDLE_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
ENV_CA_DIR = "SSL_CERT_DIR"

DOTENV_FILE = ".env"

PACKAGE_NAME = "minihttpie"
DEFAULT_TIMEOUT = 30.0
ALLOWED_URL_SCHEMES = frozenset(["http", "https"])
