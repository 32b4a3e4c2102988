"""End-to-end tests for the scriptblocks CLI."""

import json
import logging

import pytest
import structlog
import yaml
from typer.testing import CliRunner

from scriptblocks import __version__
from scriptblocks.cli.main import app
from scriptblocks.metrics import estimate_metrics
from scriptblocks.parser import parse, serialize
from tests.cli_fixtures import strip_ansi_codes

runner = CliRunner()


@pytest.fixture
def block_file(script_file, tmp_path):
    """A JSON block document for the living room script."""
    path = tmp_path / "living_room.json"
    result = runner.invoke(app, ["parse", str(script_file), "--json"])
    path.write_text(result.stdout, encoding="utf-8")
    return path


def write_script(tmp_path, text, name="script.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def write_blocks(tmp_path, blocks, name="blocks.json"):
    path = tmp_path / name
    path.write_text(json.dumps({"blocks": blocks}), encoding="utf-8")
    return path


class TestParseCommand:
    """scriptblocks parse."""

    def test_table_output(self, script_file):
        """Test the default table of blocks."""
        result = runner.invoke(app, ["parse", str(script_file)])

        assert result.exit_code == 0
        output = strip_ansi_codes(result.output)
        assert "Scene Heading" in output
        assert "Parenthetical" in output
        assert "INT. LIVING ROOM - NIGHT" in output

    def test_json_output(self, script_file):
        """Test that --json writes a block document."""
        result = runner.invoke(app, ["parse", str(script_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [block["type"] for block in data["blocks"]][:3] == [
            "scene_heading",
            "action",
            "character",
        ]
        assert all(block["id"] for block in data["blocks"])

    def test_csv_output(self, script_file):
        """Test CSV output."""
        result = runner.invoke(app, ["parse", str(script_file), "-f", "csv"])

        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == "index,type,id,text"

    def test_empty_script(self, tmp_path):
        """Test a script with no blocks."""
        result = runner.invoke(app, ["parse", str(write_script(tmp_path, ""))])

        assert result.exit_code == 0
        assert "No blocks" in result.output

    def test_missing_file(self, tmp_path):
        """Test a helpful error for a missing script."""
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        output = strip_ansi_codes(result.output)
        assert "Script file not found" in output
        assert "plain-text or Fountain" in output

    def test_missing_file_json(self, tmp_path):
        """Test that JSON mode reports errors as JSON."""
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.txt"), "--json"])

        assert result.exit_code == 1
        error = json.loads(result.stdout)
        assert error["success"] is False
        assert "Script file not found" in error["error"]
        assert error["code"] == 1


class TestSerializeCommand:
    """scriptblocks serialize."""

    def test_round_trip(self, block_file, living_room_script):
        """Test that parse --json then serialize reproduces the blocks."""
        result = runner.invoke(app, ["serialize", str(block_file)])

        assert result.exit_code == 0
        original = parse(living_room_script)
        assert parse(result.stdout).types_and_texts() == original.types_and_texts()
        assert result.stdout == serialize(original) + "\n"

    def test_output_file(self, block_file, tmp_path):
        """Test writing to a file."""
        target = tmp_path / "out.txt"

        result = runner.invoke(app, ["serialize", str(block_file), "-o", str(target)])

        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8").startswith("INT. LIVING ROOM")

    def test_duplicate_ids_rejected(self, tmp_path):
        """Test that an invalid document is not serialized."""
        path = write_blocks(
            tmp_path,
            [
                {"id": "a", "type": "character", "text": "JOHN"},
                {"id": "a", "type": "dialogue", "text": "Hi."},
            ],
        )

        result = runner.invoke(app, ["serialize", str(path)])

        assert result.exit_code == 1
        assert "failed validation" in strip_ansi_codes(result.output)

    def test_invalid_json(self, tmp_path):
        """Test a file that is not JSON."""
        path = tmp_path / "broken.json"
        path.write_text("{ not json", encoding="utf-8")

        result = runner.invoke(app, ["serialize", str(path)])

        assert result.exit_code == 1
        assert "not valid JSON" in strip_ansi_codes(result.output)


class TestStatsCommand:
    """scriptblocks stats."""

    def test_table(self, script_file):
        """Test the summary table."""
        result = runner.invoke(app, ["stats", str(script_file)])

        assert result.exit_code == 0
        output = strip_ansi_codes(result.output)
        assert "Page Count" in output
        assert "Estimated Minutes" in output
        assert "Blocks" in output

    def test_json(self, script_file, living_room_script):
        """Test JSON metrics."""
        result = runner.invoke(app, ["stats", str(script_file), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == estimate_metrics(
            parse(living_room_script)
        ).model_dump(mode="json")

    def test_rate_overrides(self, script_file, living_room_script):
        """Test the per-run rate options."""
        result = runner.invoke(
            app,
            [
                "stats",
                str(script_file),
                "--words-per-page",
                "10",
                "--words-per-minute",
                "20",
                "--json",
            ],
        )

        assert result.exit_code == 0
        expected = estimate_metrics(
            parse(living_room_script), words_per_page=10, words_per_minute=20
        )
        assert json.loads(result.stdout)["page_count"] == expected.page_count
        assert json.loads(result.stdout)["estimated_minutes"] == (
            expected.estimated_minutes
        )

    def test_invalid_rate(self, script_file):
        """Test that a zero rate is a usage error."""
        result = runner.invoke(
            app, ["stats", str(script_file), "--words-per-page", "0"]
        )

        assert result.exit_code == 2

    def test_config_file_rates(self, script_file, tmp_path, living_room_script):
        """Test that --config supplies the rates."""
        config = tmp_path / "config.yaml"
        config.write_text(yaml.safe_dump({"words_per_page": 10}), encoding="utf-8")

        result = runner.invoke(
            app, ["--config", str(config), "stats", str(script_file), "--json"]
        )

        assert result.exit_code == 0
        expected = estimate_metrics(parse(living_room_script), words_per_page=10)
        assert json.loads(result.stdout)["page_count"] == expected.page_count


class TestExportCommand:
    """scriptblocks export."""

    def test_stdout(self, tmp_path):
        """Test Fountain output on stdout."""
        path = write_script(tmp_path, "INT. HOUSE - DAY\n\nJOHN\nHello.")

        result = runner.invoke(app, ["export", str(path)])

        assert result.exit_code == 0
        assert result.stdout == "INT. HOUSE - DAY\n\nJOHN\nHello.\n"

    def test_output_file(self, script_file, tmp_path):
        """Test writing the Fountain file."""
        target = tmp_path / "living_room.fountain"

        result = runner.invoke(app, ["export", str(script_file), "-o", str(target)])

        assert result.exit_code == 0
        fountain = target.read_text(encoding="utf-8")
        assert fountain.startswith("INT. LIVING ROOM - NIGHT\n\n")
        assert fountain.endswith("> THE END <\n")

    def test_missing_file(self, tmp_path):
        """Test a missing script."""
        result = runner.invoke(app, ["export", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1


class TestOutlineCommands:
    """scriptblocks scenes and characters."""

    def test_scenes_json(self, script_file):
        """Test the scene outline as JSON."""
        result = runner.invoke(app, ["scenes", str(script_file), "--json"])

        assert result.exit_code == 0
        scenes = json.loads(result.stdout)
        assert [scene["location"] for scene in scenes] == ["LIVING ROOM", "PORCH"]
        assert all(scene["block_id"] for scene in scenes)

    def test_scenes_table(self, script_file):
        """Test the scene table."""
        result = runner.invoke(app, ["scenes", str(script_file)])

        assert result.exit_code == 0
        output = strip_ansi_codes(result.output)
        assert "PORCH" in output
        assert "Block Id" not in output

    def test_characters_csv(self, script_file):
        """Test the character roster as CSV."""
        result = runner.invoke(app, ["characters", str(script_file), "-f", "csv"])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert lines[0] == "name,cue_count,dialogue_blocks,word_count"
        assert lines[1].startswith("MARY,")
        assert lines[2].startswith("JOHN,")

    def test_characters_markdown(self, script_file):
        """Test the character roster as markdown."""
        result = runner.invoke(
            app, ["characters", str(script_file), "--format", "markdown"]
        )

        assert result.exit_code == 0
        assert "| Name | Cue Count |" in result.stdout


class TestValidateCommand:
    """scriptblocks validate."""

    def test_valid(self, block_file):
        """Test a valid document."""
        result = runner.invoke(app, ["validate", str(block_file)])

        assert result.exit_code == 0
        assert "no errors" in strip_ansi_codes(result.output)

    def test_duplicates(self, tmp_path):
        """Test that duplicate ids fail validation."""
        path = write_blocks(
            tmp_path,
            [
                {"id": "a", "type": "action", "text": "One."},
                {"id": "a", "type": "action", "text": "Two."},
            ],
        )

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "used 2 times" in strip_ansi_codes(result.output)

    def test_repair(self, tmp_path):
        """Test that --repair writes fixed ids."""
        path = write_blocks(
            tmp_path,
            [
                {"id": "a", "type": "action", "text": "One."},
                {"id": "a", "type": "action", "text": "Two."},
            ],
        )
        target = tmp_path / "repaired.json"

        result = runner.invoke(
            app, ["validate", str(path), "--repair", "-o", str(target)]
        )

        assert result.exit_code == 0
        ids = [block["id"] for block in json.loads(target.read_text())["blocks"]]
        assert ids[0] == "a"
        assert ids[1] != "a"

    def test_json(self, tmp_path):
        """Test the JSON validation report."""
        path = write_blocks(tmp_path, [{"id": "a", "type": "shot", "text": "CLOSE"}])

        result = runner.invoke(app, ["validate", str(path), "--json"])

        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["is_valid"] is True
        assert len(report["warnings"]) == 1

    def test_not_a_document(self, tmp_path):
        """Test JSON that is not a block document."""
        path = tmp_path / "wrong.json"
        path.write_text(json.dumps({"blocks": [{"kind": "x"}]}), encoding="utf-8")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid block document" in strip_ansi_codes(result.output)


class TestGlobalOptions:
    """Version, help and global options."""

    def test_version(self):
        """Test the version command."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"scriptblocks v{__version__}" in result.output

    def test_version_json(self):
        """Test the version command as JSON."""
        result = runner.invoke(app, ["version", "--json"])

        assert json.loads(result.stdout) == {
            "name": "scriptblocks",
            "version": __version__,
        }

    def test_no_args_shows_help(self):
        """Test that running without a command shows usage."""
        result = runner.invoke(app, [])

        assert "Usage" in strip_ansi_codes(result.output)

    def test_missing_config_file(self, script_file, tmp_path):
        """Test that an explicit missing config file is an error."""
        result = runner.invoke(
            app, ["--config", str(tmp_path / "nope.yaml"), "stats", str(script_file)]
        )

        assert result.exit_code == 1
        assert "not found" in strip_ansi_codes(result.output)

    def test_verbose(self, script_file):
        """Test that --verbose still runs the command."""
        result = runner.invoke(app, ["--verbose", "stats", str(script_file), "--json"])

        assert result.exit_code == 0

    def test_callback_configures_logging(self, script_file):
        """Test that the CLI, not the library, sets up logging."""
        result = runner.invoke(app, ["--debug", "stats", str(script_file), "--json"])

        assert result.exit_code == 0
        assert structlog.is_configured()
        assert logging.getLogger().level == logging.DEBUG

    def test_broken_project_config_reported(self, script_file, tmp_path, monkeypatch):
        """Test that a bad config file in the working directory is a CLI error."""
        (tmp_path / "scriptblocks.yaml").write_text("wpm: 200\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["stats", str(script_file)])

        assert result.exit_code == 1
        assert "wpm" in strip_ansi_codes(result.output)
