"""
Bitfinex 인증 유틸리티

nonce 생성, 요청 본문 정규화, HMAC-SHA384 서명.

서명 payload: /api/v2{path}{nonce}{body_json} (구분자 없음)
"""

import hashlib
import hmac
import json
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

from core.constants import BitfinexEndpoints, Headers
from core.errors import InvalidArgumentError
from core.types import AuthScheme


NonceFactory = Callable[[], str]


class NonceGenerator:
    """단조 증가 nonce 생성기

    벽시계 기준 마이크로초 값을 사용하고, 같은 틱(또는 시계 역행)에서는
    직전 값 + 1을 발급하여 항상 엄격히 증가.

    같은 자격 증명에 대해 서버는 이전보다 작거나 같은 nonce를 거부함.
    동시에 보낸 인증 요청의 도착 순서는 보장하지 않음 (호출자 책임).
    """

    def __init__(self, clock: Callable[[], int] | None = None):
        self._clock = clock or (lambda: time.time_ns() // 1000)
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> str:
        """다음 nonce 발급 (문자열)"""
        with self._lock:
            value = self._clock()
            if value <= self._last:
                value = self._last + 1
            self._last = value
            return str(value)

    def __call__(self) -> str:
        return self.next()


def omit_nil(payload: dict[str, Any]) -> dict[str, Any]:
    """None 값 필드 제거 (빈 문자열 등 falsy 값은 유지)"""
    return {k: v for k, v in payload.items() if v is not None}


def serialize_body(payload: dict[str, Any]) -> str:
    """요청 본문 JSON 직렬화

    서명 payload와 전송 본문은 반드시 같은 문자열이어야 함.

    Raises:
        InvalidArgumentError: NaN/Infinity 등 JSON으로 표현할 수 없는 값
    """
    try:
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"body is not valid JSON: {e}") from e


def build_signature_payload(path: str, nonce: str, body_json: str) -> str:
    """서명 대상 문자열 생성"""
    return f"{BitfinexEndpoints.SIGNATURE_PREFIX}{path}{nonce}{body_json}"


def generate_signature(secret: str, payload: str) -> str:
    """HMAC-SHA384 서명 생성

    Args:
        secret: API 시크릿
        payload: 서명 대상 문자열

    Returns:
        16진수(소문자) 서명 문자열 (96자)
    """
    return hmac.new(
        secret.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha384,
    ).hexdigest()


@dataclass(frozen=True)
class SignedEnvelope:
    """서명된 인증 요청 (요청마다 새로 생성, 재사용 금지)

    Attributes:
        path: API 경로 (예: /auth/r/orders)
        nonce: 요청 nonce
        body: 직렬화된 요청 본문 (JSON)
        signature: 서명 (token 인증이면 None)
    """

    path: str
    nonce: str
    body: str
    signature: str | None

    def headers(self, scheme: AuthScheme, api_key: str = "", auth_token: str = "") -> dict[str, str]:
        """인증 헤더 생성

        key 인증: nonce + apikey + signature
        token 인증: nonce + token
        """
        headers = {
            Headers.CONTENT_TYPE: "application/json",
            Headers.NONCE: self.nonce,
        }
        if scheme == AuthScheme.TOKEN:
            headers[Headers.TOKEN] = auth_token
        else:
            headers[Headers.API_KEY] = api_key
            headers[Headers.SIGNATURE] = self.signature or ""
        return headers


def sign_request(
    path: str,
    payload: dict[str, Any],
    nonce: str,
    api_secret: str,
    scheme: AuthScheme = AuthScheme.API_KEY,
) -> SignedEnvelope:
    """인증 요청 envelope 생성

    payload의 None 값 필드를 제거한 뒤 직렬화하고,
    key 인증일 때만 서명을 계산.
    """
    body = serialize_body(omit_nil(payload))

    signature = None
    if scheme == AuthScheme.API_KEY:
        signature = generate_signature(
            api_secret,
            build_signature_payload(path, nonce, body),
        )

    return SignedEnvelope(path=path, nonce=nonce, body=body, signature=signature)
