# Run SQL - .sql 스크립트를 대화상자로 입력받은 DB 에 실행
# 주요 기능:
# - MySQL, MariaDB, PostgreSQL 지원
# - 스크립트 헤더 주석으로 DB 종류 지정 (/* Database: MySQL */)
# - USE 문에서 해당 DB 로 재연결
# - 첫 오류에서 중단
#
# 실행: run-sql script.sql  (또는 python -m run_sql script.sql)

import logging
import sys

from . import db_utils
from .collector import collect_parameters
from .config import load_settings, setup_logging
from .runner import StatementRunner
from .script_loader import load_script, select_sql_files

logger = logging.getLogger(__name__)


def run_script(path, prompter, default_host="localhost", opener=db_utils.open_database, executor=db_utils.execute_statement):
    """스크립트 하나를 실행. 모든 문장이 성공하면 True"""
    kind, statements = load_script(path)
    context = collect_parameters(prompter, kind, default_host, path)
    runner = StatementRunner(context, prompter, opener, executor)
    try:
        if not runner.run(statements):
            return False
    finally:
        db_utils.close_database(context.connection, prompter)
    logger.info(f"{path}: {runner.executed} statement(s) executed")
    prompter.notify(f"SQL 스크립트 실행 완료: {path}")
    return True


def main(argv=None):
    argv = sys.argv if argv is None else argv
    files = select_sql_files(argv[1:])
    if not files:
        return 0

    settings = load_settings()
    setup_logging(settings)

    from PyQt5.QtWidgets import QApplication
    from .gui_main import QtPrompter

    app = QApplication.instance() or QApplication(argv)  # noqa: F841
    run_script(files[0], QtPrompter(settings.title), settings.default_host)
    return 0


if __name__ == "__main__":
    sys.exit(main())
