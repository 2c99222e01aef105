from run_sql import main as main_module
from run_sql.main import main, run_script
from run_sql.models import DatabaseKind


def test_main_without_sql_files_does_nothing(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("should not run")

    monkeypatch.setattr(main_module, "run_script", fail)
    monkeypatch.setattr(main_module, "load_settings", fail)
    assert main(["run-sql"]) == 0
    assert main(["run-sql", "notes.txt", "data.csv"]) == 0


def test_header_kind_skips_prompt(write_script, prompter, opener):
    path = write_script("/* Database: MariaDB */\nSELECT 1;\n")
    assert run_script(path, prompter, opener=opener) is True
    assert prompter.asked("choice") == []
    assert opener.contexts[0].kind is DatabaseKind.MARIADB


def test_prompted_kind_used_for_whole_run(write_script, make_prompter, opener):
    p = make_prompter(kind="PostgreSQL")
    path = write_script("SELECT 1;\nUSE other;\nSELECT 2;\n")
    assert run_script(path, p, opener=opener) is True
    assert len(p.asked("choice")) == 1
    assert all(c.kind is DatabaseKind.POSTGRESQL for c in opener.contexts)


def test_success_notifies_once_and_closes(write_script, prompter, opener):
    path = write_script("CREATE TABLE a (id int);\nINSERT INTO a VALUES (1);\n")
    assert run_script(path, prompter, opener=opener) is True
    assert len(prompter.notifications) == 1
    assert path in prompter.notifications[0]
    assert prompter.notifications[0].startswith("SQL 스크립트 실행 완료")
    assert opener.opened[-1].closed is True


def test_failure_has_no_notification(write_script, prompter, make_opener):
    opener = make_opener(failing_statements={"S3"})
    path = write_script("S1;S2;S3;S4;S5;")
    assert run_script(path, prompter, opener=opener) is False
    assert opener.all_executed() == ["S1", "S2"]
    assert prompter.notifications == []
    assert opener.opened[-1].closed is True


def test_empty_credentials_still_attempt_connection(write_script, make_prompter, opener):
    p = make_prompter(username="", password="")
    path = write_script("SELECT 1;")
    run_script(path, p, opener=opener)
    creds = opener.contexts[0].credentials
    assert (creds.username, creds.password) == ("", "")


def test_username_used_as_password(write_script, make_prompter, opener):
    p = make_prompter(username="app", password="")
    run_script(write_script("SELECT 1;"), p, opener=opener)
    assert opener.contexts[0].credentials.password == "app"


def test_default_host_passed_to_prompt(write_script, prompter, opener):
    run_script(write_script("SELECT 1;"), prompter, "db.internal", opener=opener)
    assert prompter.asked("text") == [("text", "도메인", "db.internal")]
