"""
Bitfinex 어댑터

Bitfinex v2 REST API 연동을 담당.
nonce/서명, 에러 분류, 응답 변환, 통화 설정 병합 지원.
"""

from adapters.bitfinex.rest_client import BitfinexRestClient
from adapters.bitfinex.auth import (
    NonceGenerator,
    SignedEnvelope,
    generate_signature,
    build_signature_payload,
    sign_request,
)
from adapters.bitfinex.errors import classify_http_error, enrich_nonce_message
from adapters.bitfinex.transform import ResponseTransformer, Transformer
from adapters.bitfinex.currency import gen_currency_list

__all__ = [
    "BitfinexRestClient",
    "NonceGenerator",
    "SignedEnvelope",
    "generate_signature",
    "build_signature_payload",
    "sign_request",
    "classify_http_error",
    "enrich_nonce_message",
    "ResponseTransformer",
    "Transformer",
    "gen_currency_list",
]
