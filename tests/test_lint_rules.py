from breadpy.diagnostics import Severity
from breadpy.lint import (
    DeprecatedKeywordRule,
    LintOptions,
    MissingSemicolonRule,
    MissingTypeAnnotationRule,
    default_lint_rules,
)


def test_deprecated_keyword_spans_exactly_the_keyword() -> None:
    diagnostics = DeprecatedKeywordRule().run("func add(a, b) { return a + b }", 0)

    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.code == "deprecated-keyword"
    assert diagnostic.severity == Severity.WARNING
    assert diagnostic.range.as_tuple() == (0, 0, 0, 4)
    assert diagnostic.message == "Use 'fn' instead of 'func' to declare functions"


def test_deprecated_keyword_requires_whole_word() -> None:
    rule = DeprecatedKeywordRule()

    assert rule.run("let funcs = 1;", 0) == []
    assert rule.run("let my_func = 1;", 0) == []
    assert rule.run("fn add(a, b) {", 0) == []


def test_deprecated_keyword_reports_first_occurrence_once_per_line() -> None:
    diagnostics = DeprecatedKeywordRule().run("  x = 1; func f() { func }", 4)

    assert len(diagnostics) == 1
    assert diagnostics[0].range.as_tuple() == (4, 9, 4, 13)


def test_deprecated_keyword_uses_configured_replacements() -> None:
    rule = DeprecatedKeywordRule(replacements={"def": "fn"})

    diagnostics = rule.run("def main() {", 2)

    assert [d.message for d in diagnostics] == ["Use 'fn' instead of 'def' to declare functions"]
    assert rule.run("func main() {", 2) == []


def test_missing_type_annotation_spans_declaration_to_end_of_line() -> None:
    line = "    let total = a + b"

    diagnostics = MissingTypeAnnotationRule().run(line, 1)

    assert len(diagnostics) == 1
    assert diagnostics[0].code == "missing-type-annotation"
    assert diagnostics[0].severity == Severity.INFORMATION
    assert diagnostics[0].range.as_tuple() == (1, 4, 1, len(line))
    assert diagnostics[0].message == "Consider adding type annotation for better code clarity"


def test_missing_type_annotation_is_suppressed_by_any_colon() -> None:
    rule = MissingTypeAnnotationRule()

    assert rule.run("let x: Int = 5;", 0) == []
    # A colon anywhere on the line counts, even inside a comment.
    assert rule.run("let x = 5; // note: untyped", 0) == []


def test_missing_type_annotation_ignores_const_and_non_declarations() -> None:
    rule = MissingTypeAnnotationRule()

    assert rule.run("const x = 5;", 0) == []
    assert rule.run("letter = 5;", 0) == []
    assert rule.run("let x;", 0) == []


def test_missing_semicolon_is_zero_width_at_last_character() -> None:
    diagnostics = MissingSemicolonRule().run("  const limit = 10   ", 3)

    assert len(diagnostics) == 1
    assert diagnostics[0].code == "missing-semicolon"
    assert diagnostics[0].severity == Severity.HINT
    assert diagnostics[0].range.as_tuple() == (3, 17, 3, 17)
    assert diagnostics[0].range.is_empty()
    assert diagnostics[0].message == "Consider adding semicolon for consistency"


def test_missing_semicolon_skips_terminated_and_block_lines() -> None:
    rule = MissingSemicolonRule()

    assert rule.run("let x = 5;", 0) == []
    assert rule.run("let f = fn() {", 0) == []
    assert rule.run("let items = { 1 }", 0) == []
    assert rule.run("return x", 0) == []
    assert rule.run("lettuce = 1", 0) == []
    assert rule.run("   ", 0) == []


def test_default_rules_follow_options() -> None:
    options = LintOptions(legacy_keywords={"proc": "fn"}, declaration_keywords=("var",), terminator=".")

    rules = default_lint_rules(options)

    assert [rule.code for rule in rules] == [
        "deprecated-keyword",
        "missing-type-annotation",
        "missing-semicolon",
    ]
    assert rules[0].run("proc main() {", 0)[0].range.as_tuple() == (0, 0, 0, 4)
    assert rules[2].run("var x = 1.", 0) == []
    assert len(rules[2].run("var x = 1", 0)) == 1
