"""Constants and environment variable names for pemkeys."""

# Environment variables read by the command line front end
ENV_LOG_LEVEL = "PEMKEYS_LOG_LEVEL"
ENV_LOG_FILE = "PEMKEYS_LOG_FILE"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# RFC 1421 framing
PEM_BEGIN = b"-----BEGIN "
PEM_END = b"-----END "
PEM_MARKER_TAIL = b"-----"

# RFC 1421 header announcing an encrypted legacy key
PROC_TYPE_HEADER = "Proc-Type"
PROC_TYPE_ENCRYPTED = "4,ENCRYPTED"

FINGERPRINT_PREFIX = "SHA256:"
