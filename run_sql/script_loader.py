"""
SQL 스크립트 로더

- 인자 중 .sql 파일만 선택
- 헤더 주석(/* Database: MySQL */)에서 DB 종류 추출
- ';' 기준으로 SQL 문 분리 (문자열/주석 내부의 ';' 는 구분하지 않음)
"""

import logging
import re
from typing import List, Optional, Sequence, Tuple

from .errors import FileReadFailure
from .models import DatabaseKind

logger = logging.getLogger(__name__)

HEADER_PATTERN = re.compile(r"^/[*]+[\s*]*Database:\s*(MySQL|MariaDB|PostgresSQL)[\s*]+/", re.MULTILINE)

# 각 문장 앞뒤에서 제거할 문자 (줄바꿈 + 공백)
STATEMENT_STRIP_CHARS = "\r\n \t"


def select_sql_files(args: Sequence[str]) -> List[str]:
    return [a for a in args if a.endswith(".sql")]


def _read_text(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadFailure(path, e) from e


def read_script(path: str) -> str:
    """스크립트 파일 내용. 읽기 실패 시 빈 문자열 (대화상자 없음)"""
    try:
        return _read_text(path)
    except FileReadFailure as e:
        logger.warning(f"Script could not be read, running it as empty: {e}")
        return ""


def extract_database_kind(content: str) -> Tuple[Optional[DatabaseKind], str]:
    match = HEADER_PATTERN.search(content)
    if not match:
        return None, content
    kind = DatabaseKind.from_header(match.group(1))
    remaining = content.replace(match.group(0), "").strip("\n")
    logger.debug(f"Header directive selects {kind.value}")
    return kind, remaining


def split_statements(content: str) -> List[str]:
    statements = []
    for piece in content.split(";"):
        piece = piece.strip(STATEMENT_STRIP_CHARS)
        if piece:
            statements.append(piece)
    return statements


def load_script(path: str) -> Tuple[Optional[DatabaseKind], List[str]]:
    """파일을 읽어 (DB 종류 힌트, SQL 문 목록) 반환"""
    kind, content = extract_database_kind(read_script(path))
    statements = split_statements(content)
    logger.info(f"{path}: {len(statements)} statement(s)")
    return kind, statements
