"""Root conftest — shared test configuration."""

import os

# Pin settings before memolab.main calls get_settings() at import time.
# Never reach the real GitHub API from tests.
os.environ.setdefault("GITHUB_API_BASE_URL", "https://github.invalid")
os.environ.setdefault("GITHUB_USERNAME", "octocat")
os.environ.setdefault("CATALOG_SIZE", "200")
os.environ.setdefault("CATALOG_SEED", "7")
os.environ.setdefault("NOISE_SEED", "11")
os.environ.setdefault("NOISE_ITERATIONS_PER_UNIT", "10")
os.environ.setdefault("MAX_FIBONACCI_N", "25")
os.environ.setdefault("LOG_FORMAT", "text")
