"""CLI commands via click's test runner."""

import json

from click.testing import CliRunner

from fixflow.cli.main import main

SESSION = {
    "user": {
        "id": "u1",
        "role": "OWNER",
        "company": {
            "name": "Sparkle Cleaning",
            "subscription": {"status": "TRIALING", "trial_end": "2000-01-01T00:00:00Z"},
        },
    },
}


def test_language_set_and_show(cli_env):
    runner = CliRunner()
    result = runner.invoke(main, ["language", "set", "fi"])
    assert result.exit_code == 0, result.output
    result = runner.invoke(main, ["language", "show"])
    assert result.output.strip() == "fi"


def test_language_set_unsupported(cli_env):
    runner = CliRunner()
    result = runner.invoke(main, ["language", "set", "xx"])
    assert result.exit_code == 1
    assert runner.invoke(main, ["language", "show"]).output.strip() == "en"


def test_language_list(cli_env):
    result = CliRunner().invoke(main, ["language", "list"])
    assert result.exit_code == 0
    assert "Finnish" in result.output


def test_translate_identity_needs_no_host(cli_env):
    result = CliRunner().invoke(main, ["translate", "Hello"])
    assert result.exit_code == 0
    assert result.output.strip().endswith("Hello")


def test_translate_fails_open(cli_env):
    runner = CliRunner()
    runner.invoke(main, ["language", "set", "fi"])
    result = runner.invoke(main, ["translate", "Hello"])
    assert result.exit_code == 0
    assert "Translation failed" in result.output
    assert result.output.strip().endswith("Hello")


def test_trial_json(cli_env, tmp_path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps(SESSION))
    result = CliRunner().invoke(main, ["trial", str(path), "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "status": "TRIALING",
        "daysRemaining": 0,
        "trialEndDate": "2000-01-01T00:00:00+00:00",
    }


def test_trial_banner(cli_env):
    result = CliRunner().invoke(main, ["trial", "-"], input=json.dumps(SESSION))
    assert result.exit_code == 0
    assert "Trial Ending Soon!" in result.output


def test_trial_invalid_session(cli_env):
    result = CliRunner().invoke(main, ["trial", "-"], input="[]")
    assert result.exit_code == 1


def test_nav(cli_env):
    result = CliRunner().invoke(main, ["nav", "technician"])
    assert result.exit_code == 0
    assert "My Jobs" in result.output


def test_plans(cli_env):
    result = CliRunner().invoke(main, ["plans"])
    assert result.exit_code == 0
    assert "Team Plan" in result.output
