import pytest
from nolint_linter.config import ALL_CHECKS, Check, RuleConfig
from nolint_linter.models import (
    ExtraLeadingSpace,
    NoExplanation,
    NotMachineReadable,
    NotSpecificTarget,
    ParseError,
    UnusedCandidate,
)
from nolint_linter.rules.nolintlint import NolintlintRule
from nolint_tree_sitter import Comment, CommentGroup, Position, SourceFile

EVERYTHING = ALL_CHECKS | {Check.UNUSED}


def lint(text, checks=EVERYTHING, exempt=(), rule_name="nolintlint"):
    config = RuleConfig(checks=checks, allow_no_explanation=exempt, rule_name=rule_name)
    comment = Comment(text=text, position=Position("test.go", 0, 1, 1))
    return NolintlintRule(config).check_comment(comment)


def kinds(issues):
    return [type(i) for i in issues]


def test_blanket_directive_with_all_checks():
    issues = lint("//nolint")

    assert kinds(issues) == [NotSpecificTarget, UnusedCandidate, NoExplanation]
    assert issues[1].expected_linter == ""


def test_extra_leading_space_and_machine_readable():
    issues = lint("//  nolint:errcheck // legacy", checks={Check.MACHINE_READABLE})
    assert kinds(issues) == [ExtraLeadingSpace, NotMachineReadable]

    issues = lint("//  nolint:errcheck // legacy", checks={Check.MACHINE_READABLE, Check.UNUSED, Check.EXPLANATION})
    assert kinds(issues) == [ExtraLeadingSpace, NotMachineReadable, UnusedCandidate]
    assert issues[2].expected_linter == "errcheck"


def test_exempt_linter_needs_no_explanation():
    assert lint("//nolint:errcheck", checks={Check.EXPLANATION}, exempt={"errcheck"}) == []


def test_one_non_exempt_linter_needs_explanation():
    issues = lint("//nolint:errcheck,unparam", checks={Check.EXPLANATION}, exempt={"errcheck"})
    assert kinds(issues) == [NoExplanation]


def test_blanket_directive_always_needs_explanation():
    issues = lint("//nolint", checks={Check.EXPLANATION}, exempt={"errcheck"})
    assert kinds(issues) == [NoExplanation]


@pytest.mark.parametrize(
    "text",
    [
        "//nolint:nolintlint",
        "//nolint:errcheck, nolintlint",
        "//   nolint:nolintlint",
        "//nolint:nolintlint,",
    ],
)
def test_self_exempt_directive_reports_nothing(text):
    assert lint(text) == []


def test_self_exemption_uses_configured_rule_name():
    assert lint("//nolint:selfrulename", rule_name="selfrulename") == []
    assert kinds(lint("//nolint:nolintlint", checks={Check.SPECIFIC}, rule_name="selfrulename")) == []
    assert kinds(lint("//nolint:nolintlint", checks={Check.EXPLANATION}, rule_name="selfrulename")) == [
        NoExplanation
    ]


def test_malformed_directive_reports_single_parse_error():
    assert kinds(lint("//nolint::")) == [ParseError]
    assert kinds(lint("//nolint:errcheck,")) == [ParseError]


def test_leading_space_reported_before_parse_error():
    issues = lint("//  nolint::", checks={Check.MACHINE_READABLE})
    assert kinds(issues) == [ExtraLeadingSpace, NotMachineReadable, ParseError]


@pytest.mark.parametrize("checks", [frozenset(), EVERYTHING])
def test_extra_leading_space_is_unconditional(checks):
    issues = lint("//  nolint:errcheck // why", checks=checks)
    assert ExtraLeadingSpace in kinds(issues)


@pytest.mark.parametrize("text", ["// nolint:errcheck // why", "//nolint:errcheck // why"])
def test_extra_leading_space_needs_two_characters(text):
    assert ExtraLeadingSpace not in kinds(lint(text))


def test_single_leading_space_is_not_machine_readable():
    assert kinds(lint("// nolint:errcheck // why", checks={Check.MACHINE_READABLE})) == [NotMachineReadable]
    assert lint("// nolint:errcheck // why", checks=frozenset()) == []


def test_not_specific_only_when_enabled():
    assert kinds(lint("//nolint // why", checks={Check.SPECIFIC})) == [NotSpecificTarget]
    assert lint("//nolint // why", checks={Check.EXPLANATION}) == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("//nolint", [""]),
        ("//nolint:foo", ["foo"]),
        ("//nolint:foo,bar // why", ["foo", "bar"]),
        ("//nolint:foo,foo", ["foo", "foo"]),
    ],
)
def test_one_unused_candidate_per_linter(text, expected):
    issues = lint(text, checks={Check.UNUSED})
    assert kinds(issues) == [UnusedCandidate] * len(expected)
    assert [i.expected_linter for i in issues] == expected


@pytest.mark.parametrize("text", ["//nolint:foo //", "//nolint:foo //  \t", "//nolint:foo"])
def test_blank_explanation_counts_as_missing(text):
    issues = lint(text, checks={Check.EXPLANATION})
    assert kinds(issues) == [NoExplanation]
    assert issues[0].full_directive_without_explanation == "//nolint:foo"


def test_explanation_satisfies_requirement():
    assert lint("//nolint:foo // because", checks={Check.EXPLANATION}) == []


@pytest.mark.parametrize(
    "text",
    ["// regular comment", "// nolint-style comment", "//nolintfoo", "/* nolint */"],
)
def test_ordinary_comments_untouched(text):
    assert lint(text) == []


def test_classification_is_idempotent():
    config = RuleConfig(checks=EVERYTHING)
    rule = NolintlintRule(config)
    comment = Comment(text="//  nolint:a,b //", position=Position("test.go", 0, 4, 2))

    assert rule.check_comment(comment) == rule.check_comment(comment)


def test_check_keeps_source_order_across_groups():
    def comment(text, line):
        return Comment(text=text, position=Position("test.go", 0, line, 1))

    source_file = SourceFile(
        path="test.go",
        comment_groups=[
            CommentGroup([comment("//nolint:nolintlint", 1), comment("//nolint", 2)]),
            CommentGroup([comment("// plain", 5)]),
            CommentGroup([comment("//nolint::", 7)]),
        ],
    )
    issues = NolintlintRule(RuleConfig(checks={Check.SPECIFIC})).check(source_file)

    assert kinds(issues) == [NotSpecificTarget, ParseError]
    assert [i.position.line for i in issues] == [2, 7]


def test_run_skips_non_file_nodes():
    source_file = SourceFile(
        path="a.go",
        comment_groups=[CommentGroup([Comment("//nolint", Position("a.go", 0, 1, 1))])],
    )
    rule = NolintlintRule(RuleConfig(checks={Check.SPECIFIC}))

    issues = rule.run("not a file", source_file, None)
    assert kinds(issues) == [NotSpecificTarget]


def test_default_config():
    rule = NolintlintRule()
    assert rule.rule_id == "nolintlint"
    assert rule.config.checks == ALL_CHECKS
    assert Check.UNUSED not in rule.config.checks
