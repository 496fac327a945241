"""Tests for the command-line interface."""

from pathlib import Path

import pytest

from jsdoc_scaffold.cli import (
    EXIT_OK,
    EXIT_PATH_ERROR,
    EXIT_USAGE,
    _log_level,
    main,
    parse_args,
)
from jsdoc_scaffold.errors import MalformedArgumentsError

ADD_JS = "function add(x, y) {\n  return x + y\n}\n"


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A small source tree, with the working directory set to tmp_path."""
    monkeypatch.chdir(tmp_path)
    src = tmp_path / "src"
    (src / "node_modules").mkdir(parents=True)
    (src / "util.js").write_text(ADD_JS)
    (src / "node_modules" / "skip.js").write_text(ADD_JS)
    return tmp_path


class TestParseArgs:
    """Flag/value pair parsing."""

    def test_defaults(self):
        """Only a path: default options."""
        path, options = parse_args(["src"])

        assert path == Path("src")
        assert options.output == Path("out")
        assert options.suffixes == (".js", ".ts")
        assert options.excludes == ("node_modules",)

    def test_long_flags(self):
        """Long flags set every option."""
        _, options = parse_args(
            [
                "src",
                "--suffix",
                ".js,.jsx",
                "--output",
                "build",
                "--exclude",
                "dist,vendor",
            ]
        )

        assert options.suffixes == (".js", ".jsx")
        assert options.output == Path("build")
        assert options.excludes == ("dist", "vendor")

    def test_short_flags(self):
        """Short flags are equivalent."""
        _, options = parse_args(["src", "-s", ".ts", "-o", "build", "-e", "dist"])

        assert options.suffixes == (".ts",)
        assert options.output == Path("build")
        assert options.excludes == ("dist",)

    def test_last_value_wins(self):
        """A repeated flag overrides the earlier value."""
        _, options = parse_args(["src", "-o", "first", "--output", "second"])

        assert options.output == Path("second")

    @pytest.mark.parametrize(
        "args",
        [[], ["src", "-o"], ["src", "-o", "out", "-s"]],
    )
    def test_even_argument_count(self, args):
        """A missing path or a flag without a value is rejected."""
        with pytest.raises(MalformedArgumentsError):
            parse_args(args)

    def test_unknown_flag(self):
        """Unrecognized flags are rejected."""
        with pytest.raises(MalformedArgumentsError, match="Unknown option: -x"):
            parse_args(["src", "-x", "1"])

    def test_invalid_exclude_pattern(self):
        """Exclude patterns must be valid regular expressions."""
        with pytest.raises(MalformedArgumentsError, match="Invalid exclude pattern"):
            parse_args(["src", "-e", "("])


class TestMain:
    """End-to-end runs through main()."""

    def test_default_run(self, project, capsys):
        """Defaults write to ./out and skip node_modules."""
        assert main(["src"]) == EXIT_OK

        result = (project / "out" / "src" / "util.js").read_text()
        assert result.endswith("*/\n" + ADD_JS)
        assert not (project / "out" / "src" / "node_modules").exists()
        assert "Done! 1 comment(s) added to 1 file(s)" in capsys.readouterr().out

    def test_output_flag(self, project):
        """-o selects the output root."""
        assert main(["src", "-o", "annotated"]) == EXIT_OK

        assert (project / "annotated" / "src" / "util.js").exists()

    def test_exclude_flag_replaces_default(self, project):
        """-e replaces the default exclude list."""
        assert main(["src", "-e", "util"]) == EXIT_OK

        assert (project / "out" / "src" / "node_modules" / "skip.js").exists()
        assert not (project / "out" / "src" / "util.js").exists()

    @pytest.mark.parametrize(
        "args",
        [[], ["src", "-o"], ["src", "--bogus", "value"]],
    )
    def test_malformed_shows_help(self, project, capsys, args):
        """Malformed arguments print usage and process nothing."""
        assert main(args) == EXIT_USAGE

        assert capsys.readouterr().out.startswith("Usage: jsdoc-scaffold")
        assert not (project / "out").exists()

    def test_missing_path(self, project, capsys):
        """A path access error ends the run with a non-zero exit code."""
        assert main(["does-not-exist.js"]) == EXIT_PATH_ERROR

        assert "Done!" not in capsys.readouterr().out


class TestLogLevel:
    """JSDOC_SCAFFOLD_LOG_LEVEL handling."""

    def test_default(self, monkeypatch):
        """INFO when the variable is unset."""
        monkeypatch.delenv("JSDOC_SCAFFOLD_LOG_LEVEL", raising=False)
        assert _log_level() == "INFO"

    def test_known_level(self, monkeypatch):
        """Level names are case-insensitive."""
        monkeypatch.setenv("JSDOC_SCAFFOLD_LOG_LEVEL", "debug")
        assert _log_level() == "DEBUG"

    def test_unknown_level_falls_back(self, monkeypatch):
        """An unknown name falls back to INFO instead of failing."""
        monkeypatch.setenv("JSDOC_SCAFFOLD_LOG_LEVEL", "foo")
        assert _log_level() == "INFO"

    def test_unknown_level_does_not_abort_run(self, project, monkeypatch):
        """The run still completes with an unknown level name."""
        monkeypatch.setenv("JSDOC_SCAFFOLD_LOG_LEVEL", "foo")

        assert main(["src"]) == EXIT_OK
        assert (project / "out" / "src" / "util.js").exists()
