#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run SQL 패키지 - .sql 스크립트 실행기

모듈:
- script_loader: 스크립트 읽기, 헤더 DB 종류 추출, 문장 분리
- collector: 접속 정보 입력
- db_utils: 접속 문자열 / 연결 / 실행
- runner: 순차 실행 (USE 재연결, 첫 오류에서 중단)
- gui_main: PyQt5 대화상자
"""

from .models import (
    Answer,
    Credentials,
    DatabaseKind,
    PromptStatus,
    RunContext,
    RunState,
)

from .errors import (
    RunSqlError,
    FileReadFailure,
    ConnectionOpenFailure,
    DbSwitchFailure,
    StatementExecutionFailure,
)

from .script_loader import (
    select_sql_files,
    read_script,
    extract_database_kind,
    split_statements,
    load_script,
)

from .runner import StatementRunner, use_target

__all__ = [
    # models
    "Answer",
    "Credentials",
    "DatabaseKind",
    "PromptStatus",
    "RunContext",
    "RunState",

    # errors
    "RunSqlError",
    "FileReadFailure",
    "ConnectionOpenFailure",
    "DbSwitchFailure",
    "StatementExecutionFailure",

    # script_loader
    "select_sql_files",
    "read_script",
    "extract_database_kind",
    "split_statements",
    "load_script",

    # runner
    "StatementRunner",
    "use_target",
]

__version__ = "1.0.0"
