"""Core constants shared by services and repositories."""

# Users list page size; pages are 1-based.
USERS_PAGE_SIZE = 10
DEFAULT_PAGE = 1

SECONDS_PER_HOUR = 3600.0
