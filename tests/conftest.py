"""Root pytest configuration for all tests."""

import logging

# atlassian-python-api logs every HTTP error at ERROR level; the unit tests
# provoke those on purpose through mocked clients.
logging.getLogger("atlassian").setLevel(logging.WARNING)
