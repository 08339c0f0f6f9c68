from workconnect.services import policy
from workconnect.services.marketplace import MarketplaceService, filter_jobs, filter_workers

__all__ = [
    "MarketplaceService",
    "filter_jobs",
    "filter_workers",
    "policy",
]
