"""
Application-wide constants.

API endpoints, CMS field slugs, LegiScan codes, and rate limit delays live here.
"""

# API Base URLs
LEGISCAN_BASE_URL = "https://api.legiscan.com/"
WEBFLOW_BASE_URL = "https://api.webflow.com/v2"

# Jurisdictions
FEDERAL_JURISDICTION = "US"
DEFAULT_STATE_JURISDICTION = "MN"

# Webflow CMS field slugs (bills collection)
FIELD_NAME = "name"
FIELD_SLUG = "slug"
FIELD_HOUSE_NUMBER = "house-file-number"
FIELD_SENATE_NUMBER = "senate-file-number"
FIELD_HOUSE_LINK = "house-file-link"
FIELD_SENATE_LINK = "senate-file-link"
FIELD_STATUS = "bill-status"
FIELD_TIMELINE = "timeline"
FIELD_SPONSORS = "sponsors"
FIELD_JURISDICTION = "jurisdiction"
FIELD_LEGISLATIVE_YEAR = "legislative-year"
FIELD_MANUAL_OVERRIDE = "manual-override"

# LegiScan bill status codes
STATUS_INTRODUCED = 1
STATUS_ENGROSSED = 2
STATUS_ENROLLED = 3
STATUS_PASSED = 4
STATUS_VETOED = 5
STATUS_FAILED = 6
IN_PROGRESS_STATUSES = (STATUS_INTRODUCED, STATUS_ENGROSSED, STATUS_ENROLLED)
FAILED_STATUSES = (STATUS_VETOED, STATUS_FAILED)

# LegiScan sponsor codes
SPONSOR_TYPE_PRIMARY = 1
SPONSOR_TYPE_JOINT = 3
ROLE_ID_REPRESENTATIVE = 1
ROLE_ID_SENATOR = 2

# Session cutoff (month, day) after which in-progress state bills count as tabled
SESSION_END_MONTH_DAY = (6, 1)

# Names that are treated as "not a real title yet"
PLACEHOLDER_NAMES = ("untitled", "tbd", "placeholder")

# Slugs
SLUG_MAX_LENGTH = 80

# Rate Limiting (seconds)
LEGISCAN_REQUEST_DELAY = 0.18   # between consecutive LegiScan lookups
RECORD_DELAY = 0.25             # between CMS records
PUBLISH_CHUNK_SIZE = 50         # item ids per publish request
PUBLISH_DELAY = 1.0             # between publish chunks

# Webflow pagination
WEBFLOW_PAGE_SIZE = 100

# Lookup report
LOOKUP_HISTORY_LIMIT = 10

# HTTP
HTTP_TIMEOUT = 30.0
