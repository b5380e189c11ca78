"""
Campaign Dashboard

Data-access layer for a marketing campaign dashboard providing:
- Campaign CRUD through interchangeable remote (REST) and local-mock adapters
- Simulated per-campaign performance insights
- Dashboard metrics aggregated over the whole collection
- Headless views with loading, error, empty and loaded states
- In-process notification bus so views refresh after mutations

Port: 3000 (development backend)
"""

__version__ = "1.0.0"
__service__ = "campaign_dashboard"
