"""
Configuration settings for Screenly REST CLI
"""

import os

VERSION = "1.0.0"

# Screenly API
API_BASE_URL = "https://api.screenlyapp.com/api"
USER_AGENT = f"screenly-cli {VERSION}"

# Credentials
TOKEN_ENV_VAR = "API_TOKEN"
CREDENTIAL_FILENAME = ".screenly"

# Non-existent group used to verify a token: 404 means the token authenticated
VERIFY_PROBE_GROUP_ID = "11CF9Z3GZR0005XXKH00F8V20R"

# Playlist items are spaced this far apart so new items can be slotted
# between existing ones without renumbering
POSITION_MULTIPLIER = 100000

# Edge apps
DEFAULT_MANIFEST_FILENAME = "screenly.yml"
MANIFEST_FIELDS = [
    "id",
    "name",
    "version",
    "description",
    "icon",
    "author",
    "homepage_url",
]

# Output format options
OUTPUT_FORMATS = ["json", "human"]
DEFAULT_OUTPUT_FORMAT = "json"

# Logging settings
LOG_LEVEL = os.environ.get("SCREENLY_LOG_LEVEL", "WARNING")
LOG_FILE = os.environ.get("SCREENLY_LOG_FILE")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_ROTATION_SIZE = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5
