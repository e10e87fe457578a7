"""Tests for the declay command-line interface."""

from click.testing import CliRunner

from declay import __version__
from declay.cli.main import cli


def _run(*args):
    return CliRunner().invoke(cli, list(args))


class TestVersion:
    def test_version(self):
        result = _run("--version")
        assert result.exit_code == 0
        assert __version__ in result.output


class TestValidateCommand:
    def test_clean_layout(self, fixtures_dir):
        result = _run("validate", str(fixtures_dir / "login.xml"))
        assert result.exit_code == 0
        assert "OK: login.xml is valid" in result.output

    def test_layout_with_errors(self, fixtures_dir):
        result = _run("validate", str(fixtures_dir / "lint.xml"))
        assert result.exit_code == 1
        assert "lint.xml: 1 error(s), 6 warning(s), 1 info" in result.output

    def test_diagnostics_grouped_by_rule_then_element(self, fixtures_dir):
        result = _run("validate", str(fixtures_dir / "lint.xml"))
        headings = [line for line in result.output.splitlines() if line and not line.startswith(" ")]
        assert headings[:6] == [
            "rule VBox > .title",
            "rule .unused",
            "<Widget>",
            "#dup",
            "<Grid>",
            "<Label>",
        ]
        assert "<Label #dup>" in headings
        assert "  ERROR   Unknown element <Widget> inside <VBox> will not be built. [check_unknown_tags]" in (
            result.output.splitlines()
        )

    def test_strict_fails_on_warnings(self, tmp_path):
        path = tmp_path / "warn.xml"
        path.write_text('<Layout><Grid columns="0"><Spacer/></Grid></Layout>')
        assert _run("validate", str(path)).exit_code == 0
        result = _run("validate", "--strict", str(path))
        assert result.exit_code == 1
        assert "<Grid>" in result.output

    def test_malformed_layout(self, fixtures_dir):
        result = _run("validate", str(fixtures_dir / "broken.xml"))
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_missing_file(self, tmp_path):
        result = _run("validate", str(tmp_path / "nope.xml"))
        assert result.exit_code == 2


class TestInspectCommand:
    def test_tree_and_build(self, fixtures_dir):
        result = _run("inspect", str(fixtures_dir / "login.xml"))
        assert result.exit_code == 0
        assert "Rules:  2" in result.output
        assert '<Label> #heading .title "Sign in"' in result.output
        assert "Built: 6 element(s) with ids" in result.output

    def test_styles_flag(self, fixtures_dir):
        result = _run("inspect", "--styles", str(fixtures_dir / "login.xml"))
        assert "style: font-weight: bold; font-size: 20;" in result.output

    def test_reports_skipped_children(self, fixtures_dir):
        result = _run("inspect", str(fixtures_dir / "lint.xml"))
        assert result.exit_code == 0
        assert "skipped <Widget> in <VBox>" in result.output

    def test_unknown_root_fails(self, tmp_path):
        path = tmp_path / "bad.xml"
        path.write_text("<Layout><Bogus/></Layout>")
        result = _run("inspect", str(path))
        assert result.exit_code == 1
        assert "Build error" in result.output

    def test_verbose_flag_accepted(self, fixtures_dir):
        result = _run("-v", "inspect", str(fixtures_dir / "login.xml"))
        assert result.exit_code == 0


class TestStylesCommand:
    def test_lists_rules(self, fixtures_dir):
        result = _run("styles", str(fixtures_dir / "lint.xml"))
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == ".unused { color: red; }"
        assert lines[1] == "VBox > .title { color: blue; } (unsupported)"

    def test_overridden_rules_marked(self, tmp_path):
        path = tmp_path / "dup.xml"
        path.write_text(
            '<Layout><Style selector=".a">x: 1</Style><Style selector=".a">x: 2</Style><Spacer/></Layout>'
        )
        result = _run("styles", str(path))
        assert result.output.splitlines() == [".a { x: 1; } (overridden)", ".a { x: 2; }"]

    def test_no_rules(self, tmp_path):
        path = tmp_path / "plain.xml"
        path.write_text("<Layout><Spacer/></Layout>")
        result = _run("styles", str(path))
        assert result.output.strip() == "No style rules."
