import pymysql
import pytest

from run_sql.models import Answer
from run_sql.prompts import Prompter


class FakePrompter(Prompter):
    """미리 정한 답을 돌려주고 호출 기록을 남기는 테스트용 Prompter"""

    def __init__(self, host="localhost", kind="MySQL", username="root", password="secret"):
        self.host = host
        self.kind = kind
        self.username = username
        self.password = password
        self.calls = []
        self.errors = []
        self.notifications = []

    def ask_text(self, label, title, default=""):
        self.calls.append(("text", title, default))
        return Answer.of(self.host)

    def ask_choice(self, label, items):
        self.calls.append(("choice", tuple(items)))
        return Answer.of(self.kind)

    def ask_login(self, title):
        self.calls.append(("login", title))
        return Answer.of(self.username), Answer.of(self.password)

    def error(self, message):
        self.errors.append(message)

    def notify(self, message):
        self.notifications.append(message)

    def asked(self, kind):
        return [c for c in self.calls if c[0] == kind]


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, statement):
        if statement in self.conn.failing:
            raise pymysql.err.ProgrammingError(1064, f"syntax error near {statement!r}")
        self.conn.executed.append(statement)


class FakeConnection:
    def __init__(self, dbname="", failing=()):
        self.dbname = dbname
        self.failing = set(failing)
        self.executed = []
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True


class FakeOpener:
    """db_utils.open_database 대체. 실패할 DB 이름을 지정할 수 있음"""

    def __init__(self, failing_statements=(), unreachable=()):
        self.failing_statements = failing_statements
        self.unreachable = set(unreachable)
        self.opened = []
        self.contexts = []

    def __call__(self, context, dbname, prompter):
        self.contexts.append(context)
        if dbname in self.unreachable:
            prompter.error(f"Cannot connect to the database: unknown database {dbname!r}")
            return None
        conn = FakeConnection(dbname, self.failing_statements)
        self.opened.append(conn)
        return conn

    def all_executed(self):
        return [s for conn in self.opened for s in conn.executed]


@pytest.fixture
def prompter():
    return FakePrompter()


@pytest.fixture
def opener():
    return FakeOpener()


@pytest.fixture
def write_script(tmp_path):
    def _write(content, name="script.sql"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def make_prompter():
    return FakePrompter


@pytest.fixture
def make_opener():
    return FakeOpener
