from normalizer import normalize
from report import format_report, save_report


def test_report_layout():
    report = format_report(normalize("R(A,B,C)", "A->B, B->C"))

    assert report.startswith("Normalization Results\n\n1NF:\nRelations: R(A, B, C)\nReasoning: First Normal Form")
    assert (
        "2NF:\n"
        "Relations: R(A, B, C)\n"
        "Violating Dependencies: A→B, B→C\n"
        "Decomposed Relations: R_A(A, B), R_B(B, C)\n"
        "Reasoning: To achieve Second Normal Form"
    ) in report
    assert (
        "3NF:\n"
        "Relations: R_A(A, B), R_B(B, C)\n"
        "Reasoning: The relation is already in 3NF as there are no transitive dependencies.\n\n"
    ) in report
    assert "Violating Dependencies: B→C\nDecomposed Relations: R_rest(A, B), R_B(B, C)\n" in report
    assert report.endswith("\n\nFinal Relations: R_rest(A, B), R_B(B, C)")


def test_error_report():
    report = format_report(normalize("R(A,B,C)", ""))

    assert "Error:\nRelations: \nReasoning: No valid functional dependencies" in report
    assert report.endswith("Final Relations: ")


def test_save_report(tmp_path):
    result = normalize("R(A,B)", "A->B")
    target = tmp_path / "report.txt"

    content = save_report(result, str(target))

    assert target.read_text(encoding="utf-8") == content
    assert content.endswith("Final Relations: R(A, B)")
