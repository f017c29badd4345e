"""Global pytest configuration."""

import os

# Serve fixture feeds without simulated latency; set before any imports
os.environ["PUBLIC_DATA_API_KEY"] = ""
os.environ.setdefault("MOCK_FEED_DELAY_MS", "0")
os.environ.setdefault("REDIS_URL", "")
