"""Tests for the cinnamon command line."""

import shutil

import pytest
from typer.testing import CliRunner

from cinnamon import __version__
from cinnamon.cli import app

runner = CliRunner()


@pytest.fixture
def script(tmp_path):
    def write(text):
        path = tmp_path / "script.cin"
        path.write_text(text)
        return str(path)

    return write


class TestCli:
    """Test the cinnamon command."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"cinnamon {__version__}" in result.output

    def test_comment_only_script(self, script):
        result = runner.invoke(app, [script("# nothing to do\n")])
        assert result.exit_code == 0
        assert result.output == ""

    def test_dump_ast(self, script):
        result = runner.invoke(app, ["--dump-ast", script('echo foo "a b";')])
        assert result.exit_code == 0
        assert result.output == "Command echo 'foo' 'a b'\n"

    def test_dump_nested(self, script):
        result = runner.invoke(app, ["--dump-ast", script("# c\nwhile p {if q {a;} else {b;}}")])
        assert result.exit_code == 0
        assert result.output == (
            "Comment ' c'\n"
            "While p\n"
            "  Block\n"
            "    If q\n"
            "      Block\n"
            "        Command a\n"
            "    Else\n"
            "      Block\n"
            "        Command b\n"
        )

    def test_parse_error(self, script):
        result = runner.invoke(app, [script('echo "unterminated;')])
        assert result.exit_code == 2
        assert "cinnamon: failed to parse" in result.output

    def test_dump_parse_error(self, script):
        result = runner.invoke(app, ["--dump-ast", script("{")])
        assert result.exit_code == 2
        assert "cinnamon: failed to parse" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.cin")])
        assert result.exit_code == 1
        assert "cinnamon:" in result.output

    def test_missing_program(self, script):
        result = runner.invoke(app, [script("cinnamonnosuchprogram42;")])
        assert result.exit_code == 127
        assert "cinnamonnosuchprogram42" in result.output

    @pytest.mark.skipif(shutil.which("false") is None, reason="requires false on PATH")
    def test_failing_script_exit_code(self, script):
        result = runner.invoke(app, [script("false;")])
        assert result.exit_code == 1
