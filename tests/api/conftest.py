"""
API Test Layer Configuration

API Contract Tests
- Drive the development backend in-process through httpx.ASGITransport
- The backend serves from a local adapter without simulated latency
- Validates the HTTP contract the remote adapter relies on

Usage:
    pytest tests/api -v                    # Run all API tests
    pytest tests/api -v -k "insights"      # Run insights API tests
"""

import os
import sys

# Add project root
sys.path.insert(
    0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)
