"""접속 정보 입력 (호스트 -> DB 종류 -> 사용자/비밀번호)"""

import logging
from typing import Optional

from .models import Answer, Credentials, DatabaseKind, RunContext

logger = logging.getLogger(__name__)

HOST_LABEL = "데이터베이스 호스트를 입력하세요:"
KIND_LABEL = "데이터베이스 종류를 선택하세요:"


def input_host(prompter, default="localhost") -> str:
    return prompter.ask_text(HOST_LABEL, "도메인", default).value


def input_database_kind(prompter, known: Optional[DatabaseKind]) -> Answer:
    if known is not None:
        return Answer.skipped(known.value)
    return prompter.ask_choice(KIND_LABEL, [k.value for k in DatabaseKind])


def input_login_data(prompter):
    username, password = prompter.ask_login("접속")
    username, password = username.value, password.value
    # 비밀번호를 비워 두면 사용자명과 같은 값으로 사용
    if username != "" and password == "":
        password = username
    return username, password


def collect_parameters(prompter, known_kind: Optional[DatabaseKind], default_host="localhost", script_path="") -> RunContext:
    """대화상자로 접속 정보를 받아 RunContext 생성. 취소된 항목은 빈 값으로 진행"""
    host = input_host(prompter, default_host)
    kind_answer = input_database_kind(prompter, known_kind)
    kind = DatabaseKind.from_label(kind_answer.value)
    username, password = input_login_data(prompter)
    logger.info(f"Target {kind.value if kind else '(none)'} on {host or '(default host)'} as {username or '(empty user)'}")
    return RunContext(kind, Credentials(username=username, password=password, host=host), script_path)
