"""Environment-driven defaults (.env supported)."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_HASH = os.getenv("TRUNCHASH_DEFAULT_HASH", "SHA-256")
DEFAULT_OUTPUT_BITS = int(os.getenv("TRUNCHASH_OUTPUT_BITS", "128"))
CHUNK_SIZE = int(os.getenv("TRUNCHASH_CHUNK_SIZE", "65536"))
LOG_LEVEL = os.getenv("TRUNCHASH_LOG_LEVEL", "INFO").upper()
