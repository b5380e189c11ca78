"""
Fixed sample campaigns

Written to the local mock's campaign slot the first time it is read
while empty.
"""

from typing import Any, Dict, List

from .models import Campaign

SEED_CAMPAIGNS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Summer Sale 2026",
        "status": "active",
        "platform": "facebook",
        "budget": 5000,
        "startDate": "2026-02-01",
        "endDate": "2026-03-31",
        "description": "Promote summer collection with 30% discount",
        "targetAudience": "Ages 25-45, Fashion enthusiasts",
        "createdAt": "2026-01-15T10:00:00Z",
        "updatedAt": "2026-02-01T08:30:00Z",
    },
    {
        "id": "2",
        "name": "Brand Awareness Q1",
        "status": "active",
        "platform": "google",
        "budget": 8000,
        "startDate": "2026-01-01",
        "endDate": "2026-03-31",
        "description": "Increase brand visibility in target markets",
        "targetAudience": "Business professionals, B2B",
        "createdAt": "2025-12-20T14:00:00Z",
        "updatedAt": "2026-01-05T09:15:00Z",
    },
    {
        "id": "3",
        "name": "Product Launch - EcoBottle",
        "status": "paused",
        "platform": "instagram",
        "budget": 3500,
        "startDate": "2026-01-15",
        "endDate": "2026-02-28",
        "description": "Launch campaign for new sustainable water bottle",
        "targetAudience": "Eco-conscious millennials",
        "createdAt": "2026-01-10T11:00:00Z",
        "updatedAt": "2026-02-05T16:20:00Z",
    },
    {
        "id": "4",
        "name": "Holiday Retargeting",
        "status": "completed",
        "platform": "facebook",
        "budget": 2500,
        "startDate": "2025-12-01",
        "endDate": "2025-12-31",
        "description": "Retarget website visitors during holiday season",
        "targetAudience": "Previous site visitors",
        "createdAt": "2025-11-25T09:00:00Z",
        "updatedAt": "2026-01-02T10:00:00Z",
    },
    {
        "id": "5",
        "name": "LinkedIn Lead Gen",
        "status": "draft",
        "platform": "linkedin",
        "budget": 6000,
        "startDate": "2026-03-01",
        "endDate": "2026-05-31",
        "description": "B2B lead generation campaign",
        "targetAudience": "C-level executives, Decision makers",
        "createdAt": "2026-02-01T13:00:00Z",
        "updatedAt": "2026-02-03T15:00:00Z",
    },
    {
        "id": "6",
        "name": "Twitter Engagement",
        "status": "active",
        "platform": "twitter",
        "budget": 1500,
        "startDate": "2026-02-01",
        "endDate": "2026-02-28",
        "description": "Boost social media engagement and followers",
        "targetAudience": "Tech-savvy users, Early adopters",
        "createdAt": "2026-01-28T10:00:00Z",
        "updatedAt": "2026-02-01T12:00:00Z",
    },
]


def initial_campaigns() -> List[Campaign]:
    """Fresh copies of the seed records"""
    return [Campaign.model_validate(record) for record in SEED_CAMPAIGNS]


__all__ = ["SEED_CAMPAIGNS", "initial_campaigns"]
