"""
pytest 공통 fixture 정의
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_config_file(temp_dir: Path) -> Path:
    """테스트용 bitfinex.yaml 파일 생성"""
    config_content = """# 테스트용 bitfinex.yaml
url: "https://api-test.bitfinex.local"
api_key: "test_api_key_abcde"
api_secret: "test_api_secret_fghij"
company: "acme"
transform: true
timeout: 30000
"""
    config_path = temp_dir / "bitfinex.yaml"
    config_path.write_text(config_content, encoding="utf-8")
    return config_path
