"""Constants for the transport.opendata.ch API adapter.

API Documentation: https://transport.opendata.ch/docs.html

No authentication required.
"""

# API endpoints
OPENDATA_BASE_URL = "https://transport.opendata.ch/v1"
OPENDATA_CONNECTIONS_URL = f"{OPENDATA_BASE_URL}/connections"  # GET /connections?from=...&to=...

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Longest excerpt of an error response body included in diagnostics
ERROR_BODY_EXCERPT_LENGTH = 200
