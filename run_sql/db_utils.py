import logging

import pymysql
import psycopg2

from .errors import ConnectionOpenFailure, StatementExecutionFailure

logger = logging.getLogger(__name__)

MYSQL_DEFAULT_PORT = 3306

DRIVER_ERRORS = (pymysql.MySQLError, psycopg2.Error)
OPEN_ERRORS = (ConnectionOpenFailure, ValueError) + DRIVER_ERRORS


# DB 종류별 접속 문자열 (MySQL/MariaDB, PostgreSQL)
def build_connection_string(kind, username, password, host, dbname):
    if kind.mysql_compatible:
        if host != "":
            host = f"tcp({host})"
        return f"{username}:{password}@{host}/{dbname}"
    return f"postgres://{username}:{password}@{host}/{dbname}?sslmode=disable"


def _split_host(host):
    # "db.local:3307" -> ("db.local", 3307), "[::1]:3307" -> ("::1", 3307)
    if not host:
        return "localhost", MYSQL_DEFAULT_PORT
    if host.startswith("["):
        addr, sep, rest = host[1:].partition("]")
        if sep and rest.startswith(":") and rest[1:].isdigit():
            return addr, int(rest[1:])
        if sep and not rest:
            return addr, MYSQL_DEFAULT_PORT
        return host, MYSQL_DEFAULT_PORT
    # IPv6 주소 (대괄호 없음)는 포트 없이 사용
    if host.count(":") != 1:
        return host, MYSQL_DEFAULT_PORT
    name, _, port = host.partition(":")
    if port.isdigit():
        return name, int(port)
    return host, MYSQL_DEFAULT_PORT


def get_connection(kind, credentials, dbname):
    if kind is None:
        raise ConnectionOpenFailure("database type was not selected")
    masked = build_connection_string(kind, credentials.username, "***", credentials.host, dbname)
    logger.info(f"Connecting ({kind.value}): {masked}")
    if kind.mysql_compatible:
        host, port = _split_host(credentials.host)
        return pymysql.connect(
            host=host,
            port=port,
            user=credentials.username,
            password=credentials.password,
            database=dbname or None,
            autocommit=True,
        )
    conn = psycopg2.connect(
        build_connection_string(kind, credentials.username, credentials.password, credentials.host, dbname)
    )
    conn.autocommit = True
    return conn


def open_database(context, dbname, prompter):
    """연결 성공 시 핸들, 실패 시 오류 대화상자 후 None"""
    try:
        return get_connection(context.kind, context.credentials, dbname)
    except OPEN_ERRORS as e:
        logger.error(f"Connection failed: {e}")
        prompter.error(f"DB 연결 실패: {e}")
        return None


def execute_statement(conn, statement):
    try:
        with conn.cursor() as cur:
            cur.execute(statement)
    except DRIVER_ERRORS as e:
        raise StatementExecutionFailure(statement, e) from e


def close_database(conn, prompter):
    if conn is None:
        return
    try:
        conn.close()
    except DRIVER_ERRORS as e:
        logger.error(f"Closing the connection failed: {e}")
        prompter.error(str(e))
