"""
Run SQL - data model

DB 종류, 접속 정보, 실행 컨텍스트 등 실행 한 번 동안 공유되는 값들을 정의합니다.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


# ============================================================================
# 1. 열거형 정의
# ============================================================================

class DatabaseKind(str, Enum):
    """지원하는 DB 종류"""
    MYSQL = "MySQL"
    MARIADB = "MariaDB"
    POSTGRESQL = "PostgreSQL"

    @property
    def driver(self) -> str:
        if self is DatabaseKind.POSTGRESQL:
            return "postgres"
        return "mysql"

    @property
    def mysql_compatible(self) -> bool:
        return self.driver == "mysql"

    @classmethod
    def from_header(cls, name: str) -> "DatabaseKind":
        # scripts spell it "PostgresSQL" in the header
        if name == "PostgresSQL":
            return cls.POSTGRESQL
        return cls(name)

    @classmethod
    def from_label(cls, label: str) -> Optional["DatabaseKind"]:
        try:
            return cls(label)
        except ValueError:
            return None


class PromptStatus(str, Enum):
    """프롬프트 결과 상태"""
    VALUE = "value"
    CANCELLED = "cancelled"
    SKIPPED = "skipped"


class RunState(str, Enum):
    READY = "ready"
    CONNECTED = "connected"
    SWITCHING_DB = "switching_db"
    FAILED = "failed"
    DONE = "done"


# ============================================================================
# 2. Pydantic 모델 정의
# ============================================================================

class Answer(BaseModel):
    """모달 프롬프트 한 번의 응답. 취소되면 value 는 빈 문자열"""
    status: PromptStatus
    value: str = ""

    @classmethod
    def of(cls, value: Optional[str]) -> "Answer":
        if value is None:
            return cls(status=PromptStatus.CANCELLED)
        return cls(status=PromptStatus.VALUE, value=value)

    @classmethod
    def skipped(cls, value: str) -> "Answer":
        return cls(status=PromptStatus.SKIPPED, value=value)


class Credentials(BaseModel):
    """접속 정보 (저장하지 않음)"""
    username: str = ""
    password: str = Field(default="", repr=False)
    host: str = ""


class RunContext:
    """스크립트 실행 한 번의 상태: DB 종류, 접속 정보, 현재 연결"""

    def __init__(self, kind: Optional[DatabaseKind], credentials: Credentials, script_path: str = ""):
        self.kind = kind
        self.credentials = credentials
        self.script_path = script_path
        self.connection: Any = None
        self.state = RunState.READY
