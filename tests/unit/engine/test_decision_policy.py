from __future__ import annotations

from pathlib import Path

from classlint.config import LintConfig
from classlint.engine import AnalysisRun, Diagnostic
from classlint.extraction import ClassToken

SITE = {"type": "JSXAttribute"}


def _run(root: Path, **options: object) -> AnalysisRun:
    return AnalysisRun(LintConfig.from_options(options, root))


def _tokens(*values: str, dynamic: bool = False) -> list[ClassToken]:
    return [ClassToken(value, SITE, dynamic) for value in values]


def _names(diagnostics: list[Diagnostic]) -> list[tuple[str, ...]]:
    return [diagnostic.class_names for diagnostic in diagnostics]


def test_only_the_undefined_stylesheet_class_is_reported(tmp_path: Path) -> None:
    (tmp_path / "app.css").write_text(".btn {} .btn-primary {}\n", encoding="utf-8")

    diagnostics = _run(tmp_path).check_site(SITE, _tokens("btn", "btn-primary", "btn-danger"))

    assert _names(diagnostics) == [("btn-danger",)]
    assert diagnostics[0].site is SITE
    assert diagnostics[0].message_id == "undefinedClass"
    assert diagnostics[0].message == "CSS class 'btn-danger' is not defined in any CSS file"


def test_utilities_need_a_marker_when_required(tmp_path: Path) -> None:
    assert _names(_run(tmp_path).check_site(SITE, _tokens("flex"))) == [("flex",)]

    relaxed = _run(tmp_path, require_tailwind_config=False)
    assert relaxed.check_site(SITE, _tokens("flex")) == []


def test_marker_enables_utilities_unless_ignoring_is_off(tmp_path: Path) -> None:
    (tmp_path / "tailwind.config.js").write_text("module.exports = {}\n", encoding="utf-8")

    assert _run(tmp_path).check_site(SITE, _tokens("flex", "md:p-4")) == []
    strict = _run(tmp_path, ignore_tailwind=False)
    assert _names(strict.check_site(SITE, _tokens("flex"))) == [("flex",)]


def test_ignore_patterns_exempt_matching_tokens(tmp_path: Path) -> None:
    run = _run(tmp_path, ignore_class_patterns=["^legacy-"])

    diagnostics = run.check_site(SITE, _tokens("legacy-widget", "unknown-widget"))

    assert _names(diagnostics) == [("unknown-widget",)]


def test_scoped_module_prefixes_are_exempt(tmp_path: Path) -> None:
    assert _run(tmp_path).check_site(SITE, _tokens("module-header", "styles-card")) == []


def test_dynamic_tokens_follow_policy(tmp_path: Path) -> None:
    allowed = _run(tmp_path)
    assert allowed.check_site(SITE, _tokens("theme-", dynamic=True)) == []

    disallowed = _run(tmp_path, allow_dynamic_classes=False)
    assert _names(disallowed.check_site(SITE, _tokens("theme-", dynamic=True))) == [("theme-",)]


def test_placeholder_markers_follow_policy(tmp_path: Path) -> None:
    assert _run(tmp_path).check_site(SITE, _tokens("w-$size", "bg-{{color}}")) == []

    disallowed = _run(tmp_path, allow_dynamic_classes=False)
    assert _names(disallowed.check_site(SITE, _tokens("w-$size"))) == [("w-$size",)]


def test_dynamic_utility_shapes_follow_policy(tmp_path: Path) -> None:
    (tmp_path / "tailwind.config.js").write_text("module.exports = {}\n", encoding="utf-8")

    assert _run(tmp_path).check_site(SITE, _tokens("grow-[2]")) == []
    disallowed = _run(tmp_path, allow_dynamic_classes=False)
    assert _names(disallowed.check_site(SITE, _tokens("grow-[2]"))) == [("grow-[2]",)]


def test_multiple_undefined_tokens_share_one_diagnostic(tmp_path: Path) -> None:
    diagnostics = _run(tmp_path).check_site(SITE, _tokens("a", "b", "c"))

    assert _names(diagnostics) == [("a", "b", "c")]
    assert diagnostics[0].message_id == "undefinedClasses"
    assert diagnostics[0].message == "CSS classes a, b, c are not defined in any CSS file"


def test_repeated_undefined_token_is_listed_per_occurrence(tmp_path: Path) -> None:
    diagnostics = _run(tmp_path).check_site(SITE, _tokens("zz", "card", "zz"))

    assert _names(diagnostics) == [("zz", "zz")]
    assert diagnostics[0].message_id == "undefinedClasses"


def test_local_style_classes_count_as_defined(tmp_path: Path) -> None:
    run = _run(tmp_path)

    assert run.check_site(SITE, _tokens("panel"), local_classes=frozenset({"panel"})) == []
    assert run.verdict(ClassToken("panel", SITE), frozenset({"panel"})) == "local"


def test_empty_site_has_no_diagnostics(tmp_path: Path) -> None:
    assert _run(tmp_path).check_site(SITE, []) == []
