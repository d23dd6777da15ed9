"""
설정 로더

bitfinex.yaml 로드 및 클라이언트 설정 생성
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.errors import InvalidArgumentError
from core.constants import BitfinexEndpoints, Defaults, Paths
from core.types import AuthScheme


def _is_valid_timeout(value: Any) -> bool:
    """양의 정수 여부 (bool 제외)"""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class ClientConfig:
    """REST 클라이언트 설정

    불변 데이터 구조로 생성 후 변경 불가.
    timeout은 밀리초 단위 양의 정수여야 하며, 아니면 생성 시점에 즉시 실패.

    Attributes:
        url: API 베이스 URL
        api_key: API 키
        api_secret: API 시크릿
        auth_token: 인증 토큰 (있으면 api_key/api_secret보다 우선)
        company: 통화 설정 키 접미사 (예: "pub:list:currency:<company>")
        aff_code: 제휴 코드
        transform: 응답을 모델 인스턴스로 변환할지 여부
        timeout: 요청 타임아웃 (밀리초)
    """

    url: str = BitfinexEndpoints.API_URL
    api_key: str = ""
    api_secret: str = ""
    auth_token: str = ""
    company: str = ""
    aff_code: str | None = None
    transform: bool = False
    timeout: int = Defaults.TIMEOUT_MS

    def __post_init__(self) -> None:
        if not _is_valid_timeout(self.timeout):
            raise InvalidArgumentError("ERR_TIMEOUT_DATA_TYPE_ERROR")

    @property
    def has_credentials(self) -> bool:
        """인증 요청 가능 여부 (key + secret 또는 token)"""
        return bool((self.api_key and self.api_secret) or self.auth_token)

    @property
    def auth_scheme(self) -> AuthScheme:
        """사용할 인증 방식"""
        return AuthScheme.TOKEN if self.auth_token else AuthScheme.API_KEY

    @property
    def timeout_seconds(self) -> float:
        """httpx용 타임아웃 (초)"""
        return self.timeout / 1000


def build_client_config(
    url: str | None = None,
    api_key: str | None = None,
    api_secret: str | None = None,
    auth_token: str | None = None,
    company: str | None = None,
    aff_code: str | None = None,
    transform: bool = False,
    timeout: Any = None,
) -> ClientConfig:
    """옵션 값으로 ClientConfig 생성

    None/빈 값은 기본값으로 대체. timeout=None이면 기본 타임아웃 사용,
    그 외 값은 그대로 검증.

    Raises:
        InvalidArgumentError: timeout이 양의 정수가 아닌 경우
    """
    return ClientConfig(
        url=url or BitfinexEndpoints.API_URL,
        api_key=api_key or "",
        api_secret=api_secret or "",
        auth_token=auth_token or "",
        company=company or "",
        aff_code=aff_code,
        transform=bool(transform),
        timeout=Defaults.TIMEOUT_MS if timeout is None else timeout,
    )


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def load_client_config(path: Path | None = None) -> ClientConfig:
    """bitfinex.yaml 파일 로드

    예시:
        url: "https://api.bitfinex.com"
        api_key: "..."
        api_secret: "..."
        transform: true
        timeout: 30000

    Args:
        path: 설정 파일 경로 (None이면 기본 경로 사용)

    Returns:
        ClientConfig 인스턴스

    Raises:
        ConfigLoadError: 파일이 없거나 형식이 잘못된 경우
        InvalidArgumentError: timeout이 양의 정수가 아닌 경우
    """
    if path is None:
        path = Paths.CLIENT_CONFIG_FILE

    if not path.exists():
        raise ConfigLoadError(f"설정 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"설정 파일 파싱 실패: {e}") from e

    if data is None:
        raise ConfigLoadError("설정 파일이 비어 있습니다")

    if not isinstance(data, dict):
        raise ConfigLoadError("설정 파일 최상위는 mapping이어야 합니다")

    return build_client_config(
        url=data.get("url"),
        api_key=data.get("api_key"),
        api_secret=data.get("api_secret"),
        auth_token=data.get("auth_token"),
        company=data.get("company"),
        aff_code=data.get("aff_code"),
        transform=bool(data.get("transform", False)),
        timeout=data.get("timeout"),
    )
