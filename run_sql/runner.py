"""
SQL 문 순차 실행기

- 첫 실패에서 중단 (이후 문장은 실행하지 않음)
- "USE <db>" 문장은 해당 DB 로 새 연결을 만든 뒤 실행
"""

import logging
from typing import Optional, Sequence

from . import db_utils
from .errors import DbSwitchFailure, StatementExecutionFailure
from .models import RunContext, RunState

logger = logging.getLogger(__name__)

USE_PREFIX = "USE "


def use_target(statement: str) -> Optional[str]:
    """USE 문이면 대상 DB 이름 (백틱 제거), 아니면 None"""
    if not statement.startswith(USE_PREFIX):
        return None
    return statement[len(USE_PREFIX):].strip("`")


class StatementRunner:
    def __init__(self, context: RunContext, prompter, opener=db_utils.open_database, executor=db_utils.execute_statement):
        self.context = context
        self.prompter = prompter
        self.opener = opener
        self.executor = executor
        self.executed = 0

    def connect(self, dbname="") -> bool:
        conn = self.opener(self.context, dbname, self.prompter)
        if conn is None:
            self.context.state = RunState.FAILED
            return False
        self.context.connection = conn
        self.context.state = RunState.CONNECTED
        return True

    def switch_database(self, dbname):
        self.context.state = RunState.SWITCHING_DB
        conn = self.opener(self.context, dbname, self.prompter)
        self.context.state = RunState.CONNECTED
        if conn is None:
            raise DbSwitchFailure(dbname)
        self.context.connection = conn

    def run(self, statements: Sequence[str]) -> bool:
        if self.context.connection is None and not self.connect():
            return False
        for i, statement in enumerate(statements, 1):
            dbname = use_target(statement)
            if dbname is not None:
                try:
                    self.switch_database(dbname)
                except DbSwitchFailure as e:
                    # 이전 연결 유지
                    logger.warning(f"{e}, keeping the previous connection")
            try:
                self.executor(self.context.connection, statement)
            except StatementExecutionFailure as e:
                self.context.state = RunState.FAILED
                logger.error(f"[{i}/{len(statements)}] failed: {e}")
                self.prompter.error(f"SQL 실행 실패: {e}")
                return False
            self.executed += 1
            logger.debug(f"[{i}/{len(statements)}] OK")
        self.context.state = RunState.DONE
        return True
