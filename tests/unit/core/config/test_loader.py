"""
core/config/loader.py 테스트

bitfinex.yaml 로드, 검증, 클라이언트 설정 생성 테스트
"""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from core.config.loader import (
    ClientConfig,
    ConfigLoadError,
    build_client_config,
    load_client_config,
)
from core.constants import BitfinexEndpoints, Defaults
from core.errors import InvalidArgumentError
from core.types import AuthScheme


class TestClientConfig:
    """ClientConfig 데이터클래스 테스트"""

    def test_defaults(self) -> None:
        """기본값"""
        config = ClientConfig()

        assert config.url == BitfinexEndpoints.API_URL
        assert config.api_key == ""
        assert config.transform is False
        assert config.timeout == Defaults.TIMEOUT_MS
        assert config.aff_code is None

    def test_frozen(self) -> None:
        """불변성 확인"""
        config = ClientConfig()

        with pytest.raises(FrozenInstanceError):
            config.timeout = 1  # type: ignore[misc]

    @pytest.mark.parametrize("timeout", [1.5, "abc", float("nan"), 0, -1, True, None])
    def test_invalid_timeout(self, timeout) -> None:
        """양의 정수가 아니면 즉시 실패"""
        with pytest.raises(InvalidArgumentError, match="ERR_TIMEOUT_DATA_TYPE_ERROR"):
            ClientConfig(timeout=timeout)

    def test_invalid_timeout_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ClientConfig(timeout=-5)

    def test_timeout_seconds(self) -> None:
        assert ClientConfig(timeout=1500).timeout_seconds == 1.5

    def test_has_credentials(self) -> None:
        """key + secret 또는 token"""
        assert ClientConfig(api_key="k", api_secret="s").has_credentials
        assert ClientConfig(auth_token="t").has_credentials
        assert not ClientConfig(api_key="k").has_credentials
        assert not ClientConfig(api_secret="s").has_credentials
        assert not ClientConfig().has_credentials

    def test_auth_scheme(self) -> None:
        """token이 있으면 TOKEN 우선"""
        assert ClientConfig(api_key="k", api_secret="s").auth_scheme == AuthScheme.API_KEY
        assert ClientConfig(api_key="k", api_secret="s", auth_token="t").auth_scheme == AuthScheme.TOKEN


class TestBuildClientConfig:
    """build_client_config 테스트"""

    def test_none_uses_defaults(self) -> None:
        config = build_client_config()

        assert config == ClientConfig()

    def test_empty_url_uses_default(self) -> None:
        assert build_client_config(url="").url == BitfinexEndpoints.API_URL

    def test_values(self) -> None:
        config = build_client_config(
            url="https://x",
            api_key="k",
            api_secret="s",
            company="acme",
            aff_code="aff",
            transform=True,
            timeout=2000,
        )

        assert config.url == "https://x"
        assert config.company == "acme"
        assert config.aff_code == "aff"
        assert config.transform is True
        assert config.timeout == 2000

    def test_invalid_timeout(self) -> None:
        with pytest.raises(InvalidArgumentError):
            build_client_config(timeout="15000")


class TestLoadClientConfig:
    """load_client_config 함수 테스트"""

    def test_load_valid_file(self, temp_config_file: Path) -> None:
        """정상 파일 로드"""
        config = load_client_config(temp_config_file)

        assert config.url == "https://api-test.bitfinex.local"
        assert config.api_key == "test_api_key_abcde"
        assert config.api_secret == "test_api_secret_fghij"
        assert config.company == "acme"
        assert config.transform is True
        assert config.timeout == 30000

    def test_file_not_found(self, temp_dir: Path) -> None:
        """파일 없음 에러"""
        with pytest.raises(ConfigLoadError, match="찾을 수 없습니다"):
            load_client_config(temp_dir / "nonexistent.yaml")

    def test_empty_file(self, temp_dir: Path) -> None:
        """빈 파일 에러"""
        path = temp_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ConfigLoadError, match="비어 있습니다"):
            load_client_config(path)

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """YAML 파싱 실패"""
        path = temp_dir / "broken.yaml"
        path.write_text("url: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigLoadError, match="파싱 실패"):
            load_client_config(path)

    def test_not_mapping(self, temp_dir: Path) -> None:
        """최상위가 mapping이 아니면 에러"""
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigLoadError, match="mapping"):
            load_client_config(path)

    def test_minimal_file_uses_defaults(self, temp_dir: Path) -> None:
        """누락된 키는 기본값"""
        path = temp_dir / "minimal.yaml"
        path.write_text('api_key: "k"\n', encoding="utf-8")

        config = load_client_config(path)

        assert config.api_key == "k"
        assert config.url == BitfinexEndpoints.API_URL
        assert config.timeout == Defaults.TIMEOUT_MS
        assert config.transform is False

    def test_invalid_timeout_in_file(self, temp_dir: Path) -> None:
        """파일의 timeout도 동일하게 검증"""
        path = temp_dir / "bad_timeout.yaml"
        path.write_text("timeout: 1.5\n", encoding="utf-8")

        with pytest.raises(InvalidArgumentError):
            load_client_config(path)
