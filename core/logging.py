"""
로깅 설정 유틸리티

Web 서버와 데이터 가져오기 스크립트가 공유하는 로깅 설정.
로그 시각은 회사 기준 시간(WIB)으로 기록한다.

사용법:
    from core.logging import setup_logging
    setup_logging("web")
"""

import logging
import sys
import time
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths
from core.utils.timezone import WIB_OFFSET_HOURS


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7  # 일 단위

# WARNING 미만은 버리는 외부 로거
NOISY_LOGGERS = (
    "httpcore",
    "httpx",            # TestClient 요청마다 출력
    "asyncio",
    "uvicorn.access",
    "multipart",
)


class WIBFormatter(logging.Formatter):
    """asctime을 WIB(UTC+7)로 출력하는 Formatter"""

    def converter(self, timestamp: float) -> time.struct_time:
        return time.gmtime(timestamp + WIB_OFFSET_HOURS * 3600)


def get_log_file_path(process_name: str, log_dir: Path | None = None) -> Path:
    """프로세스별 로그 파일 경로

    web은 logs/web/, 그 외 프로세스는 logs/ 바로 아래.
    """
    if log_dir is not None:
        return log_dir / f"{process_name}.log"
    if process_name == "web":
        return Paths.WEB_LOGS_DIR / f"{process_name}.log"
    return Paths.LOGS_DIR / f"{process_name}.log"


def _console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _daily_file_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    # 자정마다 롤링, 백업 이름: web.log.2026-02-21
    handler = TimedRotatingFileHandler(
        filename=path,
        when="midnight",
        interval=1,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    process_name: str,
    console_level: int = logging.INFO,
    file_level: int = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """루트 로거 초기화 (콘솔 + 일 단위 파일)

    여러 번 호출해도 핸들러가 중복되지 않는다.

    Args:
        process_name: 프로세스 이름 ("web", "import" 등)
        console_level: 콘솔 로그 레벨
        file_level: 파일 로그 레벨
        log_dir: 로그 디렉토리 (테스트에서 임시 디렉토리 지정)

    Returns:
        루트 Logger
    """
    log_file = get_log_file_path(process_name, log_dir)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = WIBFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    root_logger.addHandler(_console_handler(console_level, formatter))
    root_logger.addHandler(_daily_file_handler(log_file, file_level, formatter))

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(
        f"로깅 초기화: {process_name} "
        f"(console={logging.getLevelName(console_level)}, "
        f"file={log_file} {logging.getLevelName(file_level)}, "
        f"보관 {LOG_FILE_BACKUP_COUNT}일)"
    )
    return root_logger


def parse_log_level(level: str | int) -> int:
    """설정 파일의 로그 레벨 문자열을 logging 상수로 변환

    Raises:
        ValueError: 알 수 없는 레벨
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"알 수 없는 로그 레벨: {level}")
    return value
