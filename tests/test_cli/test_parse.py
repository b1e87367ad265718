"""Tests for CLI parse command."""

import pytest
from click.testing import CliRunner

from when.cli.main import cli

NOW = "2006-01-02T15:04:05-07:00"


@pytest.fixture
def runner(isolated_home):
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(cli, ["parse", "--now", NOW, *args])


class TestParseHelp:
    def test_help_output(self, runner):
        result = runner.invoke(cli, ["parse", "--help"])
        assert result.exit_code == 0
        assert "--utc" in result.output
        assert "--zones" in result.output
        assert "--rfc-3339" in result.output
        assert "--seconds" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0


class TestParseOutput:
    """Tests for the output formats."""

    def test_rfc3339_in_zone(self, runner):
        result = invoke(runner, "--rfc-3339", "-l", "America/Vancouver", "tomorrow", "at", "noon")
        assert result.exit_code == 0
        assert result.output.strip() == "2006-01-03T11:00:00-08:00"

    def test_utc_with_format(self, runner):
        result = invoke(runner, "--utc", "-f", "%Y-%m-%d %H:%M:%S", "now")
        assert result.exit_code == 0
        assert result.output.strip() == "2006-01-02 22:04:05"

    def test_default_format(self, runner):
        result = invoke(runner, "-u", "2006-01-02")
        assert result.exit_code == 0
        assert result.output.strip() == "Mon Jan 02 07:00 UTC"

    def test_seconds(self, runner):
        result = invoke(runner, "--seconds", "now")
        assert result.exit_code == 0
        assert result.output.strip() == "1136239445"

    def test_quoted_phrase(self, runner):
        result = invoke(runner, "-u", "--rfc-3339", "2nd Tuesday of March at noon")
        assert result.exit_code == 0
        assert result.output.strip() == "2006-03-14T19:00:00+00:00"

    def test_empty_phrase_is_now(self, runner):
        result = invoke(runner, "-u", "--rfc-3339")
        assert result.exit_code == 0
        assert result.output.strip() == "2006-01-02T22:04:05+00:00"

    def test_negative_short_term(self, runner):
        result = invoke(runner, "-u", "--rfc-3339", "now", "-2d")
        assert result.exit_code == 0
        assert result.output.strip() == "2005-12-31T22:04:05+00:00"

    def test_multiple_zones(self, runner):
        result = invoke(runner, "--rfc-3339", "-l", "UTC;Asia/Tokyo", "noon")
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "2006-01-02T19:00:00+00:00",
            "2006-01-03T04:00:00+09:00",
        ]

    def test_unknown_zone_is_skipped(self, runner):
        result = invoke(runner, "--rfc-3339", "-l", "Nowhere/Bogus;UTC", "noon")
        assert result.exit_code == 0
        assert "Nowhere/Bogus" in result.output
        assert "2006-01-02T19:00:00+00:00" in result.output

    def test_verbose(self, runner):
        result = runner.invoke(cli, ["-v", "parse", "--now", NOW, "-u", "noon"])
        assert result.exit_code == 0


DOCUMENTED_PHRASES = [
    # cli and parse --help
    "4th of next month",
    "2nd Tuesday of March at noon",
    "1y 2M from now",
    "on Tuesday at noon",
    "1y 2M from Jan 5th at 4pm",
    # README
    "quarter past 3 in the afternoon",
    "last day of next month",
    "7 weeks from Jan 5th at 4pm + 5 days",
    "1y2M3w4d5h6m7s",
    "one year and two months",
    "3 weeks, 4 days",
    "3 days ago",
    "2 days before March 14th at noon",
    "2 days from tomorrow",
    "2 days after tomorrow",
    "noon",
    "midnight",
    "3pm",
    "15:04:05",
    "3 o'clock in the afternoon",
    "quarter to 4pm",
    "half past 4pm",
    "today",
    "tomorrow",
    "2006-01-02",
    "Sunday",
    "March 14th",
    "2nd Tuesday of March",
    "2nd last day of the month",
    "last Saturday",
    "now + 2 days",
    "tomorrow at noon - 30 minutes",
]


class TestDocumentedPhrases:
    @pytest.mark.parametrize("phrase", DOCUMENTED_PHRASES)
    def test_phrase_resolves(self, runner, phrase):
        result = invoke(runner, "-u", "--rfc-3339", phrase)
        assert result.exit_code == 0, result.output


class TestParseErrors:
    def test_parse_error_exits_nonzero(self, runner):
        result = invoke(runner, "at", "noon", "tomorrow", "at", "4pm")
        assert result.exit_code == 1
        assert "unexpected token" in result.output

    def test_lex_error_exits_nonzero(self, runner):
        result = invoke(runner, "3", "%")
        assert result.exit_code == 1
        assert "invalid character" in result.output

    def test_bad_reference_time(self, runner):
        result = runner.invoke(cli, ["parse", "--now", "yesterday-ish", "noon"])
        assert result.exit_code == 2
        assert "ISO 8601" in result.output


class TestParseConfig:
    """Tests for config defaults and aliases."""

    def test_config_defaults_apply(self, runner, sample_config):
        result = runner.invoke(cli, ["-c", str(sample_config), "parse", "--now", NOW, "noon"])
        assert result.exit_code == 0
        assert result.output.strip() == "2006-01-02 19:00:00"

    def test_options_override_config(self, runner, sample_config):
        result = runner.invoke(
            cli, ["-c", str(sample_config), "parse", "--now", NOW, "-f", "%H:%M", "noon"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "19:00"

    def test_alias(self, runner, sample_config):
        result = runner.invoke(cli, ["-c", str(sample_config), "parse", "--now", NOW, "standup"])
        assert result.exit_code == 0
        assert result.output.strip() == "2006-01-03 16:30:00"

    def test_discovered_config(self, runner, isolated_home):
        (isolated_home / "when.toml").write_text('[defaults]\nutc = true\nrfc3339 = true\n')
        result = invoke(runner, "noon")
        assert result.exit_code == 0
        assert result.output.strip() == "2006-01-02T19:00:00+00:00"

    def test_invalid_config(self, runner, isolated_home):
        (isolated_home / "when.toml").write_text("[defaults\n")
        result = invoke(runner, "noon")
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output
