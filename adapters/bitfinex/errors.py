"""
Bitfinex HTTP 에러 분류

HTTP 비정상 응답(상태 코드 + 원문 본문)을 ApiError로 변환.

본문 형태별 처리:
- JSON 파싱 실패: response = 원문 텍스트
- 길이 3 이상 배열 ["error", code, detail]: code = [1], response = [2]
- 그 외 JSON (객체, 짧은 배열, 스칼라): response = 파싱 결과 그대로
"""

import json

from core.constants import ErrorCodes
from core.errors import ApiError


def classify_http_error(status: int, status_text: str, raw_body: str) -> ApiError:
    """HTTP 에러 응답 -> ApiError

    Args:
        status: HTTP 상태 코드
        status_text: HTTP 상태 문구
        raw_body: 응답 본문 원문

    Returns:
        status/status_text가 항상 채워진 ApiError
    """
    message = f"HTTP code {status} {status_text or ''}"
    code = None

    try:
        parsed = json.loads(raw_body)
    except ValueError:
        response = raw_body
    else:
        if isinstance(parsed, list) and len(parsed) >= 3:
            code = parsed[1]
            response = parsed[2]
        else:
            response = parsed

    return ApiError(
        message,
        status=status,
        status_text=status_text,
        code=code,
        response=response,
    )


def is_nonce_too_small(error: ApiError) -> bool:
    """nonce too small 에러 여부

    구조화된 코드가 10114이거나, 메시지/응답 텍스트에 "nonce: small"이 포함된 경우.
    """
    if error.code == ErrorCodes.NONCE_TOO_SMALL:
        return True

    text = f"{error.message} {error.response if isinstance(error.response, str) else ''}"
    return ErrorCodes.NONCE_TOO_SMALL_TEXT in text


def enrich_nonce_message(error: ApiError) -> ApiError:
    """nonce too small 에러 메시지에 도움말 링크 추가

    에러 종류는 바꾸지 않고 메시지만 보강. 이미 보강된 경우 그대로 둠.
    """
    if is_nonce_too_small(error) and ErrorCodes.NONCE_HELP_URL not in error.message:
        error.message = f"{error.message} see {ErrorCodes.NONCE_HELP_URL} for help"
        error.args = (error.message,)
    return error
