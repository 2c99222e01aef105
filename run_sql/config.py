"""
Run SQL 설정 / 로깅

설정 파일(JSON)은 선택 사항입니다. 위치:
  - RUN_SQL_SETTINGS 환경변수
  - ~/.run_sql/settings.json
접속 정보(사용자/비밀번호)는 설정 파일에 저장하지 않습니다.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

SETTINGS_ENV = "RUN_SQL_SETTINGS"
SETTINGS_FILE = Path.home() / ".run_sql" / "settings.json"

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(module)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseModel):
    """실행 설정"""
    default_host: str = "localhost"
    title: str = "Run SQL"
    log_level: str = "INFO"
    log_file: Optional[str] = None


def settings_path() -> Path:
    env = os.getenv(SETTINGS_ENV)
    if env:
        return Path(env)
    return SETTINGS_FILE


def load_settings(path: Optional[Path] = None) -> Settings:
    """설정 파일을 읽어 Settings 를 만든다. 파일이 없으면 기본값."""
    path = path or settings_path()
    if not os.path.exists(path):
        return Settings()
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return Settings(**data)


def setup_logging(settings: Settings) -> logging.Logger:
    logger = logging.getLogger("run_sql")
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    if logger.handlers:
        return logger
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_file:
        try:
            file_handler = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not open log file {settings.log_file}: {e}")
    return logger
