"""Tests for TAS CLI commands."""

from typer.testing import CliRunner

from src.cli.main import app


runner = CliRunner()


class TestInspect:
    """Tests for 'tas inspect' and 'tas line inspect'."""

    def test_action_line(self):
        """Should show the parsed actions and canonical form."""
        result = runner.invoke(app, ["inspect", "15rj"])

        assert result.exit_code == 0
        assert "RIGHT" in result.output
        assert "JUMP" in result.output
        assert "15,R,J" in result.output

    def test_command_line(self):
        """Should show command arguments."""
        result = runner.invoke(app, ["line", "inspect", "console load 1"])

        assert result.exit_code == 0
        assert "console" in result.output
        assert "load" in result.output

    def test_comment_line(self):
        """Should report the line kind for non-action, non-command lines."""
        result = runner.invoke(app, ["line", "inspect", "# note"])

        assert result.exit_code == 0
        assert "Comment line" in result.output

    def test_strict_floats_rejects_invalid_angle(self):
        """Should fail on invalid feather numbers with --strict-floats."""
        result = runner.invoke(app, ["line", "inspect", "1,F,1.2.3", "--strict-floats"])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestScriptCheck:
    """Tests for 'tas script check'."""

    def test_clean_script(self, write_script):
        """Should pass a canonical script."""
        path = write_script("# level 1", "  15,R,J", "console load 1", "", "   1,F,45")

        result = runner.invoke(app, ["script", "check", str(path)])

        assert result.exit_code == 0
        assert "Warning" not in result.output

    def test_non_canonical_line_warns(self, write_script):
        """Should warn about sloppy lines without failing."""
        path = write_script("15rj")

        result = runner.invoke(app, ["script", "check", str(path)])

        assert result.exit_code == 0
        assert "Warning" in result.output

    def test_invalid_float_fails(self, write_script):
        """Should fail on invalid feather numbers."""
        path = write_script("  15,R,J", "1,F,1.2.3")

        result = runner.invoke(app, ["script", "check", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_file(self, tmp_path):
        """Should fail when the script does not exist."""
        result = runner.invoke(app, ["script", "check", str(tmp_path / "missing.tas")])

        assert result.exit_code == 1

    def test_non_utf8_file(self, tmp_path):
        """Should fail cleanly when the script is not UTF-8."""
        path = tmp_path / "binary.tas"
        path.write_bytes(b"\xff\xfe")

        result = runner.invoke(app, ["script", "check", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert "UTF-8" in result.output

    def test_frame_count_over_limit_warns(self, write_script):
        """Should warn about frame counts wider than the frame column."""
        path = write_script("10000,R")

        result = runner.invoke(app, ["script", "check", str(path)])

        assert result.exit_code == 0
        assert "exceeds" in result.output
        assert "Error" not in result.output


class TestScriptFormat:
    """Tests for 'tas script format'."""

    def test_prints_formatted_script(self, write_script):
        """Should print every action line in canonical form."""
        path = write_script("15rj", "# keep me", "console load 1", "1F400")

        result = runner.invoke(app, ["script", "format", str(path)])

        assert result.exit_code == 0
        assert result.output == "  15,R,J\n# keep me\nconsole load 1\n   1,F,360\n"
        assert path.read_text(encoding="utf-8") == "15rj\n# keep me\nconsole load 1\n1F400\n"

    def test_write_in_place(self, write_script):
        """Should rewrite the file with --write."""
        path = write_script("15rj", "", "10Pba,R")

        result = runner.invoke(app, ["script", "format", str(path), "--write"])

        assert result.exit_code == 0
        assert path.read_text(encoding="utf-8") == "  15,R,J\n\n  10,R,PAB\n"

    def test_non_utf8_file(self, tmp_path):
        """Should fail cleanly when the script is not UTF-8."""
        path = tmp_path / "binary.tas"
        path.write_bytes(b"\xff\xfe")

        result = runner.invoke(app, ["script", "format", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.output
