"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class BitfinexEndpoints:
    """Bitfinex API 엔드포인트 (고정값)

    공식 문서: https://docs.bitfinex.com/docs/rest-general
    """

    API_URL: str = "https://api.bitfinex.com"

    # 요청 URL 접두사 ({url}/v2{path})
    URL_VERSION_PREFIX: str = "/v2"

    # 서명 payload 접두사 (/api/v2{path}{nonce}{body})
    SIGNATURE_PREFIX: str = "/api/v2"


class Defaults:
    """기본값 상수"""

    TIMEOUT_MS: int = 15000
    LOG_LEVEL: str = "INFO"


class ErrorCodes:
    """Bitfinex API 에러 코드"""

    RATE_LIMIT: int = 10010
    NONCE_TOO_SMALL: int = 10114

    # 코드 없이 메시지로만 오는 경우 대비
    NONCE_TOO_SMALL_TEXT: str = "nonce: small"
    NONCE_HELP_URL: str = (
        "https://github.com/bitfinexcom/bitfinex-api-node/blob/master/README.md#nonce-too-small"
    )


class Headers:
    """인증 요청 헤더 이름"""

    CONTENT_TYPE: str = "content-type"
    NONCE: str = "bfx-nonce"
    API_KEY: str = "bfx-apikey"
    SIGNATURE: str = "bfx-signature"
    TOKEN: str = "bfx-token"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    CLIENT_CONFIG_FILE: Path = CONFIG_DIR / "bitfinex.yaml"
