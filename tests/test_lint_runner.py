"""Engine-level behavior of `run_lint`, including property checks over generated lines."""

from hypothesis import given
from hypothesis import strategies as st
import pytest

from breadpy.diagnostics import Diagnostic, Severity
from breadpy.document import TextDocument
from breadpy.lint import LintOptions, MissingSemicolonRule, run_lint

_identifiers = st.from_regex(r"[a-z][a-z0-9_]{0,8}", fullmatch=True).filter(
    lambda name: name not in {"let", "const", "func"}
)
_rhs = st.from_regex(r"[a-z0-9 +*()]{1,12}", fullmatch=True).map(str.strip).filter(bool)
_source_text = st.text(alphabet=st.sampled_from(list("letcons funcx:=;{}()1 \n\t")), max_size=120)


def _codes(diagnostics: list[Diagnostic]) -> list[str]:
    return [diagnostic.code for diagnostic in diagnostics]


def test_untyped_declaration_fires_annotation_and_semicolon_rules() -> None:
    result = run_lint("let x = 5")

    assert _codes(result.diagnostics) == ["missing-type-annotation", "missing-semicolon"]
    annotation = result.diagnostics[0]
    assert annotation.severity == Severity.INFORMATION
    assert annotation.range.as_tuple() == (0, 0, 0, 9)


def test_typed_terminated_declaration_is_clean() -> None:
    assert run_lint("let x: Int = 5;").diagnostics == []


def test_legacy_function_keyword_line() -> None:
    result = run_lint("func add(a, b) { return a + b }")

    assert _codes(result.diagnostics) == ["deprecated-keyword"]
    assert result.diagnostics[0].severity == Severity.WARNING
    assert result.diagnostics[0].range.as_tuple() == (0, 0, 0, 4)


def test_ordering_is_by_rule_priority_then_line() -> None:
    source = "\n".join(
        [
            "let a = 1",
            "func f() {",
            "const b = 2",
            "func g() {",
        ]
    )

    result = run_lint(source)

    assert [(d.code, d.range.start.line) for d in result.diagnostics] == [
        ("deprecated-keyword", 1),
        ("deprecated-keyword", 3),
        ("missing-type-annotation", 0),
        ("missing-semicolon", 0),
        ("missing-semicolon", 2),
    ]


@pytest.mark.parametrize("line_break", ["\n", "\r\n", "\r"])
def test_lines_are_indexed_across_line_break_styles(line_break: str) -> None:
    result = run_lint(f"let a: Int = 1;{line_break}let b = 2;")

    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].range.as_tuple() == (1, 0, 1, 10)


def test_run_lint_accepts_document_snapshots() -> None:
    document = TextDocument(uri="file:///w/main.bread", text="const x = 1", version=3)

    result = run_lint(document)

    assert result.document is document
    assert _codes(result.diagnostics) == ["missing-semicolon"]
    assert result.has_errors is False


def test_unsaved_buffer_lints_like_saved_one() -> None:
    saved = TextDocument(uri="file:///w/main.bread", text="func f() {\nlet x = 5")
    unsaved = TextDocument(uri="file:///w/main.bread", text="func f() {\nlet x = 5", is_dirty=True)

    assert run_lint(unsaved).diagnostics == run_lint(saved).diagnostics


def test_run_lint_with_explicit_rules() -> None:
    result = run_lint("let x = 5", rules=(MissingSemicolonRule(),))

    assert _codes(result.diagnostics) == ["missing-semicolon"]


def test_run_lint_rejects_rules_with_options() -> None:
    with pytest.raises(ValueError, match="Pass either rules or options, not both"):
        run_lint("let x = 5", LintOptions(), rules=(MissingSemicolonRule(),))


def test_run_lint_rejects_invalid_rule_confidence() -> None:
    class BadRule:
        code = "bad-confidence"
        name = "badConfidence"
        category = "style"
        confidence = "sound"

        def run(self, line: str, line_index: int) -> list[Diagnostic]:
            return []

    with pytest.raises(ValueError, match="invalid confidence"):
        run_lint("let x = 5", rules=(BadRule(),))  # type: ignore[arg-type]


def test_run_lint_rejects_duplicate_codes() -> None:
    with pytest.raises(ValueError, match="reuses code"):
        run_lint("let x = 5", rules=(MissingSemicolonRule(), MissingSemicolonRule()))


@given(_source_text)
def test_run_lint_is_deterministic(text: str) -> None:
    assert run_lint(text).diagnostics == run_lint(text).diagnostics


@given(_identifiers, _rhs)
def test_untyped_let_gets_exactly_one_annotation_hint(name: str, rhs: str) -> None:
    line = f"let {name} = {rhs}"

    annotations = [d for d in run_lint(line).diagnostics if d.code == "missing-type-annotation"]

    assert len(annotations) == 1
    assert annotations[0].range.as_tuple() == (0, 0, 0, len(line))
    typed = f"let {name}: Int = {rhs}"
    assert not [d for d in run_lint(typed).diagnostics if d.code == "missing-type-annotation"]


@given(st.sampled_from(["let", "const"]), _identifiers, _rhs, st.text(alphabet=" \t", max_size=3))
def test_unterminated_declaration_gets_one_semicolon_hint(
    keyword: str, name: str, rhs: str, indent: str
) -> None:
    line = f"{indent}{keyword} {name} = {rhs}"

    hints = [d for d in run_lint(line).diagnostics if d.code == "missing-semicolon"]

    assert len(hints) == 1
    assert hints[0].range.as_tuple() == (0, len(line) - 1, 0, len(line) - 1)
    assert not [d for d in run_lint(line + ";").diagnostics if d.code == "missing-semicolon"]


@given(st.text(alphabet=st.sampled_from(list("ab (){}=;,+ ")), max_size=10), st.text(alphabet=st.sampled_from(list("ab (){}=;,+ ")), max_size=10))
def test_legacy_keyword_is_anchored_at_its_span(prefix: str, suffix: str) -> None:
    line = f"{prefix} func {suffix}"

    warnings = [d for d in run_lint(line).diagnostics if d.code == "deprecated-keyword"]

    start = len(prefix) + 1
    assert len(warnings) == 1
    assert warnings[0].range.as_tuple() == (0, start, 0, start + 4)
