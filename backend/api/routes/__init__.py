"""
HTTP routers. Client-facing error messages are shared by every router.
"""

INVALID_REQUEST_DETAIL = "Invalid request"
UPSTREAM_FAILURE_DETAIL = "Something went wrong. Try again later"
