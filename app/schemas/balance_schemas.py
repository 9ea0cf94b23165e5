from app.schemas.base import CamelModel


class StoreBalanceResponse(CamelModel):
    """Aggregated amounts for one store, as 2dp decimal strings"""

    total_supplied: str
    total_remaining: str
    net_balance: str


class DashboardStatsResponse(CamelModel):
    """Aggregated amounts across every store visible to the caller"""

    total_stores: int
    total_supplied: str
    total_remaining: str
    net_balance: str
