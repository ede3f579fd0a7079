from analyzer import NormalFormAnalyzer
from parsing import parse_fds


def test_partial_dependency_on_part_of_key():
    fds = parse_fds("AB->C")
    analyzer = NormalFormAnalyzer(("A", "B", "C", "D"), [("A", "B", "D")], fds)
    assert analyzer.find_partial_dependencies() == fds


def test_partial_dependency_listed_once_for_several_keys(fd):
    dep = fd("A", "D")
    analyzer = NormalFormAnalyzer(("A", "B", "C", "D"), [("A", "B"), ("A", "C")], [dep])
    assert analyzer.find_partial_dependencies() == [dep]


def test_whole_key_determinant_is_not_partial(fd):
    analyzer = NormalFormAnalyzer(("A", "B", "C"), [("A", "B")], [fd("AB", "C")])
    assert analyzer.find_partial_dependencies() == []


def test_dependent_inside_key_is_not_partial(fd):
    analyzer = NormalFormAnalyzer(("A", "B", "C"), [("A", "B")], [fd("A", "B")])
    assert analyzer.find_partial_dependencies() == []


def test_transitive_dependency_through_non_prime():
    fds = parse_fds("A->B, B->C")
    analyzer = NormalFormAnalyzer(("A", "B", "C"), [("A",)], fds)
    assert analyzer.find_transitive_dependencies() == [fds[1]]


def test_transitive_dependency_repeats_per_path():
    fds = parse_fds("A->B, A->B, B->C")
    analyzer = NormalFormAnalyzer(("A", "B", "C"), [("A",)], fds)

    found = analyzer.find_transitive_dependencies()

    assert found == [fds[2], fds[2]]
    assert found[0] is found[1]


def test_self_dependency_never_pairs_with_itself():
    analyzer = NormalFormAnalyzer(("A", "B"), [("A",)], parse_fds("A->A"))
    assert analyzer.find_transitive_dependencies() == []


def test_no_transitive_dependency_when_everything_is_prime():
    fds = parse_fds("A->B, B->C")
    analyzer = NormalFormAnalyzer(("A", "B", "C"), [("A", "C"), ("A", "B")], fds)
    assert analyzer.find_transitive_dependencies() == []


def test_bcnf_violation_for_non_superkey_determinant():
    fds = parse_fds("A->B, B->C")
    analyzer = NormalFormAnalyzer(("A", "B", "C"), [("A",)], fds)
    assert analyzer.find_bcnf_violations() == [fds[1]]


def test_bcnf_ignores_candidate_keys():
    fds = parse_fds("A->B, B->C")
    analyzer = NormalFormAnalyzer(("A", "B", "C"), [("X",)], fds)
    assert analyzer.find_bcnf_violations() == [fds[1]]


def test_prime_and_non_prime_attributes():
    analyzer = NormalFormAnalyzer(("A", "B", "C", "D"), [("A", "B", "D")], parse_fds("AB->C"))
    assert analyzer.prime_attributes == ("A", "B", "D")
    assert analyzer.non_prime_attributes == ("C",)


def test_analysis_report_lists_keys_and_violations():
    analyzer = NormalFormAnalyzer(("A", "B", "C"), [("A",)], parse_fds("A->B, B->C"))

    report = analyzer.get_analysis_report()

    assert "Candidate keys (1):\n  - A\n" in report
    assert "Transitive dependencies: B→C" in report
    assert "Partial dependencies: none" in report
