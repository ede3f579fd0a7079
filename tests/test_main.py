import psycopg2

import main


def test_normalizes_and_prints_report(capsys):
    assert main.main(["R(A, B, C)", "A->B, B->C"]) == 0

    out = capsys.readouterr().out
    assert "[INFO] Relation R, detected candidate keys: AC, AB" in out
    assert "Final Relations: R_rest(A, B), R_B(B, C)" in out


def test_rejects_badly_formed_schema(capsys):
    assert main.main(["R[A, B]", "A->B"]) == 1
    assert "[ERROR] Please enter a valid relation schema" in capsys.readouterr().out


def test_reports_missing_dependencies(capsys):
    assert main.main(["R(A, B)", "nothing"]) == 1
    assert "[ERROR] No valid functional dependencies provided." in capsys.readouterr().out


def test_provided_keys_and_report_file(tmp_path, capsys):
    target = tmp_path / "out.txt"

    assert main.main(["R(A, B, C)", "A->B, B->C", "--keys", "A", "--report", str(target)]) == 0

    text = target.read_text(encoding="utf-8")
    assert "Violating Dependencies: B→C" in text
    assert f"[INFO] Report saved to {target}" in capsys.readouterr().out


def test_banner_names_the_supplied_keys(capsys):
    assert main.main(["R(A, B, C)", "A->B, B->C", "--keys", "A"]) == 0

    out = capsys.readouterr().out
    assert "[INFO] Relation R, candidate keys from --keys: A (auto-detected: AC, AB)" in out
    assert "detected candidate keys" not in out


def test_verify_flag(capsys):
    assert main.main(["R(A, B, C)", "AB->C, C->B", "--verify"]) == 0

    out = capsys.readouterr().out
    assert "Lost dependencies: AB→C" in out
    assert "Lossless join: yes" in out


def test_database_failure_exit_code(monkeypatch, capsys):
    def failing_check(*args, **kwargs):
        raise psycopg2.OperationalError("could not connect")

    monkeypatch.setattr(main, "run_join_check", failing_check)

    assert main.main(["R(A, B)", "A->B", "--join-check", "10"]) == 2
    assert "[ERROR] Database check failed: could not connect" in capsys.readouterr().out
