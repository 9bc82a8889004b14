"""
Runtime configuration for the settlement service and dashboard.

Values come from environment variables so the API and the Streamlit
dashboard can be pointed at each other without code changes.
"""
import os

API_HOST = os.getenv("SETTLE_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SETTLE_API_PORT", "8000"))

# Where the dashboard looks for the API
API_BASE_URL = os.getenv("SETTLE_API_BASE_URL", "http://localhost:8000")

LOG_LEVEL = os.getenv("SETTLE_LOG_LEVEL", "INFO").upper()
