"""
어댑터 공통 데이터 모델

Bitfinex API의 위치 기반 배열 응답을 필드 이름으로 접근하는 레코드로 변환.
각 모델은 FIELDS(필드 이름 -> 배열 인덱스) 스키마만 정의하고,
변환 자체는 RowModel이 기계적으로 수행.
"""

from typing import Any, ClassVar


class RowModel:
    """위치 기반 배열 -> 레코드

    서브클래스는 FIELDS만 정의. 배열이 짧으면 없는 필드는 None.

    사용 예시:
    ```python
    candle = Candle([1700000000000, 100, 101, 102, 99, 5.5])
    candle.close  # 101
    ```
    """

    FIELDS: ClassVar[dict[str, int]] = {}

    def __init__(self, row: list[Any]):
        self.raw = list(row)
        for name, index in self.FIELDS.items():
            setattr(self, name, self.raw[index] if index < len(self.raw) else None)

    def to_dict(self) -> dict[str, Any]:
        """필드 이름 기준 딕셔너리"""
        return {name: getattr(self, name) for name in self.FIELDS}

    def serialize(self) -> list[Any]:
        """원본 배열 형태로 되돌림"""
        return list(self.raw)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.raw == other.raw  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({fields})"


class Currency(RowModel):
    """통화 설정 (통화 목록 병합 결과)"""

    FIELDS = {
        "id": 0,
        "name": 1,
        "pool": 2,
        "explorer": 3,
        "symbol": 4,
        "wallet_fx": 5,
    }


class TradingTicker(RowModel):
    """거래쌍 티커 (심볼을 0번에 붙인 형태)"""

    FIELDS = {
        "symbol": 0,
        "bid": 1,
        "bid_size": 2,
        "ask": 3,
        "ask_size": 4,
        "daily_change": 5,
        "daily_change_perc": 6,
        "last_price": 7,
        "volume": 8,
        "high": 9,
        "low": 10,
    }


class FundingTicker(RowModel):
    """펀딩 티커 (심볼을 0번에 붙인 형태)"""

    FIELDS = {
        "symbol": 0,
        "frr": 1,
        "bid": 2,
        "bid_period": 3,
        "bid_size": 4,
        "ask": 5,
        "ask_period": 6,
        "ask_size": 7,
        "daily_change": 8,
        "daily_change_perc": 9,
        "last_price": 10,
        "volume": 11,
        "high": 12,
        "low": 13,
        "frr_amount_available": 16,
    }


class Candle(RowModel):
    """캔들"""

    FIELDS = {
        "mts": 0,
        "open": 1,
        "close": 2,
        "high": 3,
        "low": 4,
        "volume": 5,
    }


class PublicTrade(RowModel):
    """공개 체결 (거래쌍: price, 펀딩: rate + period)"""

    FIELDS = {
        "id": 0,
        "mts": 1,
        "amount": 2,
        "price": 3,
        "rate": 3,
        "period": 4,
    }


class Wallet(RowModel):
    """지갑 잔고"""

    FIELDS = {
        "type": 0,
        "currency": 1,
        "balance": 2,
        "unsettled_interest": 3,
        "balance_available": 4,
        "description": 5,
        "meta": 6,
    }


class Order(RowModel):
    """주문"""

    FIELDS = {
        "id": 0,
        "gid": 1,
        "cid": 2,
        "symbol": 3,
        "mts_create": 4,
        "mts_update": 5,
        "amount": 6,
        "amount_orig": 7,
        "type": 8,
        "type_prev": 9,
        "mts_tif": 10,
        "flags": 12,
        "status": 13,
        "price": 16,
        "price_avg": 17,
        "price_trailing": 18,
        "price_aux_limit": 19,
        "notify": 23,
        "hidden": 24,
        "placed_id": 25,
        "routing": 28,
        "meta": 31,
    }


class Alert(RowModel):
    """가격 알림"""

    FIELDS = {
        "key": 0,
        "type": 1,
        "symbol": 2,
        "price": 3,
    }


class UserInfo(RowModel):
    """계정 정보"""

    FIELDS = {
        "id": 0,
        "email": 1,
        "username": 2,
        "mts_account_create": 3,
        "verified": 4,
        "verification_level": 5,
        "timezone": 7,
        "locale": 8,
        "company": 9,
    }
