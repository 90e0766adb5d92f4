"""Shared constants used across the application."""

import re

# Project URL Constants
# ---------------------

PROJECT_URL_PATTERN = re.compile(r"/(?P<owner_type>orgs|users)/(?P<owner_name>[^/]+)/projects/(?P<project_number>\d+)")
"""Pattern to match the owner and number of a project in a URL on any GitHub host."""

PROJECT_URL_FORMAT = "<GitHub server domain name>/<orgs-or-users>/<ownerName>/projects/<projectNumber>"
"""Human-readable format of a project URL, used in error messages."""

# GraphQL Constants
# -----------------

MAX_PROJECT_FIELDS = 20
"""Number of project fields requested when looking up single-select fields."""
