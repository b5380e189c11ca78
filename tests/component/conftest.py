"""
Component Test Layer Configuration

Adapters and views exercised with in-memory storage, a mocked HTTP
transport or AsyncMock adapters. No network, no real files outside tmp_path.

Usage:
    pytest tests/component -v
"""
import os
import sys

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
