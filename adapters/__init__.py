"""
어댑터 레이어

Bitfinex REST API 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import IRestDispatcher
from adapters.models import (
    RowModel,
    Currency,
    TradingTicker,
    FundingTicker,
    Candle,
    PublicTrade,
    Wallet,
    Order,
    Alert,
    UserInfo,
)

__all__ = [
    # Interfaces
    "IRestDispatcher",
    # Models
    "RowModel",
    "Currency",
    "TradingTicker",
    "FundingTicker",
    "Candle",
    "PublicTrade",
    "Wallet",
    "Order",
    "Alert",
    "UserInfo",
]
