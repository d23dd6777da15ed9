"""
로깅 설정 유틸리티

Bitfinex 클라이언트 로거(adapters.bitfinex) 전용 설정.
루트 로거와 애플리케이션 핸들러는 건드리지 않음.

- 콘솔: Defaults.LOG_LEVEL
- 파일: Paths.LOGS_DIR/<process_name>.log (daily rotation) - log_to_file=True일 때만
- 요청 실패 로그의 extra 필드(path, status, code 등)는 메시지 뒤에 key=value로 출력

사용법:
    from core.logging import setup_logging
    setup_logging()
    setup_logging("DEBUG", log_to_file=True)
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Defaults, Paths


LOGGER_NAME = "adapters.bitfinex"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7

# rest_client가 extra로 넘기는 필드 (출력 순서)
CONTEXT_FIELDS = ("path", "status", "code", "timeout_ms", "error")

# 요청마다 연결 상세를 남기는 하위 라이브러리
NOISY_LOGGERS = ["httpcore", "httpx", "asyncio"]


class ContextFormatter(logging.Formatter):
    """extra 컨텍스트를 메시지 뒤에 덧붙이는 Formatter

    예: ... | Bitfinex API error | path='/auth/r/wallets' status=500 code=10114
    """

    def formatMessage(self, record: logging.LogRecord) -> str:
        message = super().formatMessage(record)
        context = " ".join(
            f"{name}={getattr(record, name)!r}"
            for name in CONTEXT_FIELDS
            if hasattr(record, name)
        )
        return f"{message} | {context}" if context else message


def setup_logging(
    level: int | str = Defaults.LOG_LEVEL,
    log_to_file: bool = False,
    log_dir: Path | None = None,
    process_name: str = "bitfinex",
    file_level: int | str = logging.DEBUG,
) -> logging.Logger:
    """클라이언트 로거 설정

    여러 번 호출해도 이전에 붙인 핸들러를 교체하므로 중복 출력 없음.

    Args:
        level: 콘솔 로그 레벨 (기본: Defaults.LOG_LEVEL)
        log_to_file: 파일 로그 사용 여부
        log_dir: 파일 로그 디렉토리 (None이면 Paths.LOGS_DIR)
        process_name: 로그 파일 이름
        file_level: 파일 로그 레벨 (요청 DEBUG 로그 포함)

    Returns:
        설정된 adapters.bitfinex Logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = ContextFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = None
    if log_to_file:
        directory = log_dir or Paths.LOGS_DIR
        directory.mkdir(parents=True, exist_ok=True)
        log_file = get_log_file_path(process_name, directory)

        file_handler = TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.suffix = "%Y-%m-%d"  # bitfinex.log.2026-02-21
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug(f"로깅 초기화 완료: console={level}, file={log_file}")
    return logger


def get_log_file_path(process_name: str, log_dir: Path) -> Path:
    """로그 파일 경로 반환"""
    return log_dir / f"{process_name}.log"
