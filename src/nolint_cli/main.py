import logging
from pathlib import Path

import typer
from nolint_linter.directive import DirectiveSyntaxError, is_candidate, parse_directive
from nolint_linter.engine import LinterEngine
from nolint_tree_sitter import UnsupportedLanguageError
from nolint_tree_sitter.node_types import LANGUAGE_BY_SUFFIX

from .config import DEFAULT_CONFIG_FILE, ConfigError, LintConfig
from .converters import internal_issue_to_lint_issue

app = typer.Typer(help="nolintlint - Check //nolint directives for syntax, specificity and explanations")

SEVERITY_RANK = {"ERROR": 4, "WARNING": 3, "STYLE": 2, "INFO": 1}


def collect_files(paths: list[Path]) -> list[Path]:
    """Expand directories into the source files they contain"""
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob("*") if p.suffix in LANGUAGE_BY_SUFFIX))
        else:
            files.append(path)
    return files


def _fail(message: str):
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=2)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def lint(
    paths: list[Path] = typer.Argument(..., help="Files or directories to lint"),
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to config file"),
    severity: str = typer.Option("STYLE", help="Minimum severity to show"),
    report_unused: bool = typer.Option(False, help="Report every directive as an unused-suppression candidate"),
):
    """Run linter on source files"""
    try:
        config = LintConfig(config_file)
    except ConfigError as e:
        _fail(str(e))

    engine = LinterEngine(config.to_rule_config(report_unused=report_unused))
    files = collect_files(paths)
    if not files:
        _fail("No source files found")

    all_issues = []
    for file_path in files:
        try:
            all_issues.extend(engine.analyze_file(file_path))
        except (OSError, UnsupportedLanguageError) as e:
            _fail(str(e))

    external_issues = [internal_issue_to_lint_issue(i) for i in all_issues]

    min_rank = SEVERITY_RANK.get(severity.upper(), 1)
    reported = [i for i in external_issues if SEVERITY_RANK[i.severity.value] >= min_rank]

    for issue in sorted(reported, key=lambda x: (x.file_path, x.line_number)):
        typer.echo(
            f"{issue.severity.value}: {issue.file_path}:{issue.line_number}:{issue.column}"
            f" [{issue.rule_id}] - {issue.message}"
        )

    typer.echo(f"\nTotal issues found: {len(external_issues)} ({len(reported)} reported)")

    if any(SEVERITY_RANK[i.severity.value] >= SEVERITY_RANK["WARNING"] for i in reported):
        raise typer.Exit(code=1)


@app.command()
def directives(
    paths: list[Path] = typer.Argument(..., help="Files or directories to scan"),
):
    """List nolint directives and how they parse"""
    engine = LinterEngine()

    for file_path in collect_files(paths):
        try:
            source_file = engine.load_file(file_path)
        except (OSError, UnsupportedLanguageError) as e:
            _fail(str(e))

        for comment in source_file.comments():
            if not is_candidate(comment.text):
                continue
            try:
                directive = parse_directive(comment)
            except DirectiveSyntaxError:
                typer.echo(f"{comment.position}: {comment.text!r} (malformed)")
                continue
            linters = ",".join(directive.linters) or "-"
            explanation = directive.explanation.strip() if directive.has_explanation else "-"
            typer.echo(
                f"{comment.position}: space={directive.leading_space_width}"
                f" linters={linters} explanation={explanation}"
            )


if __name__ == "__main__":
    app()
