"""End-to-end tests: pytest-bdd run with the bddprogress plugin enabled."""

import pytest

FEATURE = """\
@auth
Feature: Login
    Users sign in with a password.

    @smoke
    Scenario: Valid login
        Given a registered user
        When the user logs in with
            | name | password |
            | ann  | secret   |
        Then the dashboard is shown

    Scenario: Wrong password
        Given a registered user
        When the user logs in with a wrong password
        Then the dashboard is shown
"""

STEPS = """\
from pytest_bdd import given, scenarios, then, when

scenarios("login.feature")


@given("a registered user")
def registered_user(bdd_progress):
    bdd_progress.comment("user ann created")


@when("the user logs in with")
def log_in():
    pass


@when("the user logs in with a wrong password")
def log_in_wrong():
    pass


@then("the dashboard is shown")
def dashboard(request):
    assert "Wrong" not in request.node.name.replace("_", " ").title(), "login rejected"
"""

PLUGIN = "bddprogress.presentation.pytest_plugin"


@pytest.fixture
def bdd_project(pytester: pytest.Pytester) -> pytest.Pytester:
    """Project with one feature file and its step definitions."""
    pytester.makefile(".feature", login=FEATURE)
    pytester.makepyfile(test_login=STEPS)
    return pytester


class TestPluginOutput:
    """Tests for terminal progress output."""

    def test_progress_lines(self, bdd_project: pytest.Pytester) -> None:
        """Feature, scenario and step lines are written to the terminal."""
        result = bdd_project.runpytest_subprocess("-p", PLUGIN, "--bdd-progress")

        result.assert_outcomes(passed=1, failed=1)
        result.stdout.fnmatch_lines(
            [
                "FEATURE: [auth] Login",
                "*Users sign in with a password.",
                "SCENARIO: *Valid login",
                "    GIVEN a registered user (STEP 1)",
                "        => /[*] user ann created [*]/",
                "=> (Passed after *) (STEP 1)",
                "    WHEN the user logs in with (STEP 2)",
                "=> (Passed after *) (STEP 2)",
                "        table:",
                "*name*password*",
                "*ann*secret*",
                "  SCENARIO RESULT: Passed after *",
                "SCENARIO: *Wrong password",
                "=> (Failed after *) (STEP 3)",
                "  SCENARIO RESULT: Failed after *",
                "    Step 3: AssertionError: login rejected*",
                "FEATURE FINISHED: Login",
            ]
        )

    def test_ini_options_apply(self, bdd_project: pytest.Pytester) -> None:
        """Ini options configure the formatter."""
        bdd_project.makeini(
            """
            [pytest]
            bdd_progress = true
            bdd_progress_step_word_on_start = prefix
            bdd_progress_write_success_for_basic_steps = false
            """
        )

        result = bdd_project.runpytest_subprocess("-p", PLUGIN)

        result.stdout.fnmatch_lines(["    STEP 1: GIVEN a registered user"])
        result.stdout.no_fnmatch_line("=> (Passed after *")

    def test_disabled_by_default(self, bdd_project: pytest.Pytester) -> None:
        """Without --bdd-progress nothing is written, fixture still works."""
        result = bdd_project.runpytest_subprocess("-p", PLUGIN)

        result.assert_outcomes(passed=1, failed=1)
        result.stdout.no_fnmatch_line("FEATURE: *")
        result.stdout.no_fnmatch_line("*SCENARIO RESULT*")
