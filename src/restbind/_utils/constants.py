# Environment
ENV_PREFIX = "RESTBIND_"
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_HOST = "Host"
HEADER_USER_AGENT = "User-Agent"

# Fields where a later value replaces an earlier one instead of being appended.
SINGLETON_HEADERS = frozenset(
    field.lower()
    for field in (
        HEADER_CONTENT_TYPE,
        HEADER_CONTENT_LENGTH,
        HEADER_AUTHORIZATION,
        HEADER_HOST,
        HEADER_USER_AGENT,
    )
)

# Logging / tracing
LOGGER_NAME = "restbind"
LOAD_SPAN_NAME = "restbind.load"
