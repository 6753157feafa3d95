"""Integration tests for CLI commands.

End-to-end tests for the parse and summary commands, from command
invocation to rendered output.
"""

import csv
import io
import json

import pytest
from click.testing import CliRunner

from prelude_native.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.integration
class TestAppGroup:
    def test_help_lists_commands(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "parse" in result.output
        assert "summary" in result.output

    def test_parse_help(self, runner):
        result = runner.invoke(app, ["parse", "--help"])

        assert result.exit_code == 0
        assert "--dialect" in result.output
        assert "--format" in result.output
        assert "--output" in result.output


@pytest.mark.integration
class TestParseCommand:
    def test_json_to_stdout(self, runner, write_xml, canonical_subject_xml):
        path = write_xml(canonical_subject_xml)

        result = runner.invoke(app, ["parse", str(path)])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert [p["patientId"] for p in payload["patients"]] == ["ABC-001", "DEF-002"]
        assert payload["patients"][0]["whenCreated"] == "2023-04-15T16:09:02Z"

    def test_site_dialect(self, runner, write_xml, site_xml):
        path = write_xml(site_xml)

        result = runner.invoke(app, ["parse", str(path), "--dialect", "site"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert [s["name"] for s in payload["sites"]] == ["Some Site", "Another Site"]

    def test_csv_to_file(self, runner, write_xml, user_xml, tmp_path):
        path = write_xml(user_xml)
        output = tmp_path / "users.csv"

        result = runner.invoke(
            app,
            [
                "parse",
                str(path),
                "--dialect",
                "user",
                "--format",
                "csv",
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        rows = list(csv.DictReader(io.StringIO(output.read_text(encoding="utf-8"))))
        assert len(rows) == 1
        assert rows[0]["record"] == "1691421275437"
        assert rows[0]["field"] == "email"
        assert rows[0]["value"] == "jazz@artemis.com"

    def test_config_file_option(self, runner, write_xml, subject_export, tmp_path):
        path = write_xml(
            subject_export('<patient patientId="A"><form lastModified="soon"/></patient>')
        )
        config = tmp_path / "strict.toml"
        config.write_text("[parser]\nstrict_optional_datetimes = true\n")

        lenient = runner.invoke(app, ["parse", str(path)])
        strict = runner.invoke(app, ["parse", str(path), "--config", str(config)])

        assert lenient.exit_code == 0
        assert strict.exit_code == 1

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.xml")])

        assert result.exit_code == 1
        assert "was not found" in result.output

    def test_wrong_extension(self, runner, write_xml, canonical_subject_xml):
        path = write_xml(canonical_subject_xml, name="export.txt")

        result = runner.invoke(app, ["parse", str(path)])

        assert result.exit_code == 1
        assert "is not a XML file" in result.output

    def test_malformed_document(self, runner, write_xml):
        path = write_xml("<export_from_vision_EDC>\n<patient>\n</export_from_vision_EDC>")

        result = runner.invoke(app, ["parse", str(path)])

        assert result.exit_code == 1
        assert "line 3" in result.output

    def test_unknown_format_is_rejected(self, runner, write_xml, canonical_subject_xml):
        path = write_xml(canonical_subject_xml)

        result = runner.invoke(app, ["parse", str(path), "--format", "xpt"])

        assert result.exit_code == 2


@pytest.mark.integration
class TestSummaryCommand:
    def test_summary_table(self, runner, write_xml, canonical_subject_xml):
        path = write_xml(canonical_subject_xml)

        result = runner.invoke(app, ["summary", str(path)])

        assert result.exit_code == 0, result.output
        assert "Native Export Summary (subject)" in result.output
        assert "ABC-001" in result.output
        assert "Records: 2" in result.output

    def test_summary_site(self, runner, write_xml, site_xml):
        path = write_xml(site_xml)

        result = runner.invoke(app, ["summary", str(path), "--dialect", "site"])

        assert result.exit_code == 0, result.output
        assert "Another Site" in result.output

    def test_summary_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["summary", str(tmp_path / "missing.xml")])

        assert result.exit_code == 1
