"""Application-level constants."""

from pathlib import Path

SECTION_CONTENT_TYPE = "section"

# Resolution modes accepted by the CLI
MODE_AUTO = "auto"
MODE_PATH = "path"
MODE_QUERY = "query"
RESOLVE_MODES = (MODE_AUTO, MODE_PATH, MODE_QUERY)

# Returned when no root section is configured or it has no usable parent
NO_ROOT_PARENT = -1

# Output keys
URL_KEY = "url"
CONTENT_TYPE_KEY = "content_type"
ID_KEY = "id"

OUTPUT_ROOT = Path("outputs")
LOG_FILENAME = "resolve.log"
