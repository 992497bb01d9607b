"""Application-wide constants."""

APP_TITLE = "requestie"
APP_SUBTITLE = "HTTP request collections"

# Fixed identifier the document is stored under.
APP_KEY = "app"

DEFAULT_REQUEST_NAME = "Request 1"
DEFAULT_REQUEST_URL = "https://example.com"
DEFAULT_HEADERS: list[tuple[str, str]] = [("Content-Type", "application/json")]
DEFAULT_ENVIRONMENT_NAME = "Default"

NEW_REQUEST_NAME = "New Request {n}"
NEW_ENVIRONMENT_NAME = "New Environment {n}"

HEADER_COLUMNS = ("#", "Name", "Value")
VALUE_COLUMNS = ("#", "Key", "Value")

HELP_TEXT = """\
 Sidebar
 ──────────────────────────────
 j / ↓        Move down
 k / ↑        Move up
 Enter        Open request / environment
 a            Add request
 e            Add environment
 x            Delete selected item

 Editing
 ──────────────────────────────
 r            Rename
 m            Change method
 u            Edit URL
 b            Edit body
 o            Add header / value row
 i / Enter    Edit highlighted row
 d d          Delete highlighted row
 Tab          Move focus

 General
 ──────────────────────────────
 ?            Toggle this help
 q            Save and quit\
"""
