"""
Unit Tests for the Insights Seed Derivation
"""

import pytest

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from campaign_dashboard.mock_api import insights_seed

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "campaign_id,expected",
    [
        ("1", 1),
        ("6", 6),
        ("42abc", 42),
        (" 7", 7),
        ("1738000000000", 1738000000000),
        ("abc", 1),
        ("", 1),
        ("0", 1),
        ("nonexistent-id", 1),
        ("+3", 3),
        ("-3", 1),
    ],
)
def test_insights_seed(campaign_id, expected):
    assert insights_seed(campaign_id) == expected
