"""Tests for layout lint rules and the validator."""

import pytest

from declay.model.diagnostic import Diagnostic, Severity
from declay.parser import parse_markup
from declay.validation import ValidationError, validate, validate_or_raise
from declay.validation.rules import (
    check_border_positions,
    check_colors,
    check_duplicate_ids,
    check_grid_columns,
    check_sizes,
    check_unknown_tags,
    check_unsupported_selectors,
    check_unused_selectors,
)


def _doc(body: str, styles: str = ""):
    return parse_markup(f"<Layout>{styles}{body}</Layout>")


class TestCheckUnknownTags:
    def test_clean(self):
        assert check_unknown_tags(_doc("<VBox><Label>x</Label></VBox>")) == []

    def test_unknown_child(self):
        diags = check_unknown_tags(_doc("<VBox><Widget/></VBox>"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert diags[0].tag == "Widget"
        assert "inside <VBox>" in diags[0].message

    def test_unknown_root(self):
        diags = check_unknown_tags(_doc("<Widget/>"))
        assert "at the root" in diags[0].message

    def test_option_children_allowed(self):
        doc = _doc("<VBox><Select><Option>a</Option></Select><RadioGroup><Radio value='x'/></RadioGroup></VBox>")
        assert check_unknown_tags(doc) == []

    def test_option_outside_select_flagged(self):
        assert len(check_unknown_tags(_doc("<VBox><Option>a</Option></VBox>"))) == 1


class TestCheckDuplicateIds:
    def test_duplicates(self):
        diags = check_duplicate_ids(_doc('<VBox id="a"><Label id="a"/><Label id="b"/></VBox>'))
        assert len(diags) == 1
        assert diags[0].node_id == "a"
        assert diags[0].severity is Severity.WARNING


class TestSelectorRules:
    def test_unsupported(self):
        doc = _doc("<Label/>", '<Style selector="Label">color: red</Style>')
        diags = check_unsupported_selectors(doc)
        assert [d.selector for d in diags] == ["Label"]

    def test_id_with_dot_is_applied_not_flagged(self):
        doc = _doc('<Label id="a.b"/>', '<Style selector="#a.b">color: red</Style>')
        assert check_unsupported_selectors(doc) == []
        assert [d for d in validate(doc) if d.selector == "#a.b"] == []

    def test_unused(self):
        doc = _doc(
            '<Label id="l" class="used"/>',
            '<Style selector=".used">a: 1</Style><Style selector=".unused">a: 1</Style>'
            '<Style selector="#l">a: 1</Style><Style selector="#gone">a: 1</Style>',
        )
        diags = check_unused_selectors(doc)
        assert [d.selector for d in diags] == [".unused", "#gone"]
        assert all(d.severity is Severity.INFO for d in diags)


class TestAttributeRules:
    @pytest.mark.parametrize("columns, count", [("3", 0), ("0", 1), ("x", 1), ("-1", 1)])
    def test_grid_columns(self, columns, count):
        doc = _doc(f'<Grid columns="{columns}"><Spacer/></Grid>')
        assert len(check_grid_columns(doc)) == count

    def test_border_positions(self):
        doc = _doc('<Border><Label position="top"/><Label position="middle"/><Label/></Border>')
        diags = check_border_positions(doc)
        assert len(diags) == 1
        assert "middle" in diags[0].message


class TestResolvedStyleRules:
    def test_sizes(self):
        doc = _doc(
            '<VBox><Label class="a"/><Label style="width: 10px"/></VBox>',
            '<Style selector=".a">height: tall</Style>',
        )
        diags = check_sizes(doc)
        assert len(diags) == 1
        assert "height" in diags[0].message

    def test_overridden_bad_size_not_reported(self):
        doc = _doc('<Label class="a" style="width: 5"/>', '<Style selector=".a">width: wide</Style>')
        assert check_sizes(doc) == []

    def test_colors(self):
        doc = _doc('<VBox><Rectangle style="background-color: rgb(999,0,0)"/><Text style="color: red"/></VBox>')
        diags = check_colors(doc)
        assert len(diags) == 1
        assert diags[0].tag == "Rectangle"


class TestValidator:
    def test_fixture_diagnostics(self, fixtures_dir):
        doc = parse_markup((fixtures_dir / "lint.xml").read_bytes())
        rules = {d.rule for d in validate(doc)}
        assert rules == {
            "check_unknown_tags",
            "check_duplicate_ids",
            "check_unsupported_selectors",
            "check_unused_selectors",
            "check_grid_columns",
            "check_border_positions",
            "check_sizes",
            "check_colors",
        }

    def test_clean_fixture(self, fixtures_dir):
        doc = parse_markup((fixtures_dir / "login.xml").read_bytes())
        assert validate(doc) == []

    def test_extra_rules(self):
        def always(document):
            return [Diagnostic(rule="always", severity=Severity.INFO, message="hi")]

        diags = validate(_doc("<Spacer/>"), extra_rules=[always])
        assert [d.rule for d in diags] == ["always"]

    def test_validate_or_raise(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_or_raise(_doc("<Bogus/>"))
        assert len(exc_info.value.diagnostics) == 1

    def test_validate_or_raise_returns_warnings(self):
        diags = validate_or_raise(_doc('<Grid columns="0"><Spacer/></Grid>'))
        assert [d.severity for d in diags] == [Severity.WARNING]

    def test_diagnostic_str(self):
        diag = Diagnostic(rule="r", severity=Severity.WARNING, message="m", node_id="x")
        assert str(diag) == "WARNING [id=x]: m"
