"""Run SQL 오류 분류"""


class RunSqlError(Exception):
    """Run SQL 기본 예외"""


class FileReadFailure(RunSqlError):
    """스크립트 파일을 읽지 못함 (빈 내용으로 처리)"""

    def __init__(self, path, cause):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause


class ConnectionOpenFailure(RunSqlError):
    """DB 연결 실패"""


class DbSwitchFailure(ConnectionOpenFailure):
    """USE 문 처리 중 재연결 실패 (이전 연결로 계속 진행)"""

    def __init__(self, dbname):
        super().__init__(f"cannot switch to database {dbname!r}")
        self.dbname = dbname


class StatementExecutionFailure(RunSqlError):
    """SQL 문 실행 실패"""

    def __init__(self, statement, cause):
        super().__init__(str(cause))
        self.statement = statement
        self.cause = cause
