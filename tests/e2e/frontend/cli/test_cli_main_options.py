"""End-to-end CLI tests for the top-level `utilkit` command.

These tests exercise verbosity flags, logger-level overrides, debug
formatting, and the in-memory flight-recorder by invoking the `log-demo`
command under various CLI flags.
"""

import re
from pathlib import Path

from utilkit import __version__
from utilkit.entrypoints.cli.main import utilkit

# pylint: disable=unused-argument


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output string."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output string."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def test_version(runner):
    """--version reports the package version."""
    result = runner.invoke(utilkit, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands(runner):
    """The group help lists every subcommand."""
    result = runner.invoke(utilkit, ["--help"])
    assert result.exit_code == 0
    for name in ("demo", "validate-date", "guess", "unique-words", "factorial"):
        assert name in result.output


def test_default_shows_warning(registered_log_demo, runner, fs):
    """Default invocation shows WARNING and above but not INFO."""
    result = runner.invoke(utilkit, ["log-demo"])
    assert result.exit_code == 0
    assert_in_output("WARNING", result.output)
    assert_not_in_output("INFO", result.output)


def test_verbose_shows_info(registered_log_demo, runner, fs):
    """Single -v enables INFO-level console output (but not DEBUG)."""
    result = runner.invoke(utilkit, ["-v", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("INFO", result.output)
    assert_not_in_output("DEBUG", result.output)


def test_vv_shows_debug(registered_log_demo, runner, fs):
    """-vv enables DEBUG-level console output."""
    result = runner.invoke(utilkit, ["-vv", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("DEBUG", result.output)


def test_quiet_suppresses_warning(registered_log_demo, runner, fs):
    """-q hides WARNING and keeps ERROR."""
    result = runner.invoke(utilkit, ["-q", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("ERROR", result.output)
    assert_not_in_output("WARNING", result.output)


def test_logger_level_silences_debug(registered_log_demo, runner, fs):
    """-L overrides silence third-party DEBUG while keeping INFO+."""
    result = runner.invoke(
        utilkit, ["-vv", "-L", "some.thirdparty=INFO", "log-demo"]
    )
    assert result.exit_code == 0
    assert_not_in_output(
        "This is a debug-level third-party test message.", result.output
    )
    assert_in_output("This is an info-level third-party test message.", result.output)


def test_invalid_logger_level(runner, fs):
    """A malformed -L value is a usage error."""
    result = runner.invoke(utilkit, ["-L", "nope", "factorial", "3"])
    assert result.exit_code == 2
    assert "Expected NAME=LEVEL" in result.output


def test_debug_mode_shows_paths(registered_log_demo, runner, fs):
    """--debug includes file paths and line numbers in log output."""
    result = runner.invoke(utilkit, ["--debug", "log-demo"])
    assert result.exit_code == 0
    assert_in_output(r"conftest\.py:\d+\b", result.output)


def test_debug_mode_is_off_by_default(registered_log_demo, runner, fs):
    """By default, file paths are not included in log output."""
    result = runner.invoke(utilkit, ["log-demo"])
    assert result.exit_code == 0
    assert_not_in_output(r"conftest\.py:\d+\b", result.output)


def test_flight_recorder_flush_on_warning(registered_log_demo, runner, fs):
    """Buffered DEBUG logs are written to disk when a WARNING occurs."""
    log_path = "flight_recorder.log"
    result = runner.invoke(
        utilkit, ["--log-path", log_path, "-L", "some.thirdparty=INFO", "log-demo"]
    )
    assert result.exit_code == 0
    content = Path(log_path).read_text(encoding="utf-8")
    assert_in_output("This is a debug-level test message.", content)
    assert_not_in_output("This is a debug-level third-party test message.", content)
    assert_in_output("This is an info-level third-party test message.", content)
    assert_in_output("This is a critical-level test message.", content)
    # the last DEBUG line arrives after the final flush
    assert_not_in_output("This is a final debug-level test message.", content)


def test_flight_recorder_force_flush(registered_log_demo, runner, fs):
    """--force-flush writes the remaining buffer on exit."""
    log_path = "flight_recorder.log"
    result = runner.invoke(
        utilkit, ["--log-path", log_path, "--force-flush", "log-demo"]
    )
    assert result.exit_code == 0
    content = Path(log_path).read_text(encoding="utf-8")
    assert_in_output("This is a final debug-level test message.", content)


def test_flight_recorder_can_be_disabled(registered_log_demo, runner, fs):
    """--no-flight-recorder writes no log file."""
    log_path = "flight_recorder.log"
    result = runner.invoke(
        utilkit, ["--log-path", log_path, "--no-flight-recorder", "log-demo"]
    )
    assert result.exit_code == 0
    assert not Path(log_path).exists()


def test_log_path_from_env(registered_log_demo, runner, fs):
    """UTILKIT_LOG_PATH selects the flight recorder file."""
    result = runner.invoke(utilkit, ["log-demo"], env={"UTILKIT_LOG_PATH": "env.log"})
    assert result.exit_code == 0
    assert Path("env.log").exists()


def test_startup_logging(registered_log_demo, runner, fs):
    """The startup summary is logged and recorded by the flight recorder."""
    log_path = "startup.log"
    result = runner.invoke(utilkit, ["-v", "--log-path", log_path, "log-demo"])
    assert result.exit_code == 0
    assert_in_output(rf"UTILKIT {re.escape(__version__)}", result.output)
    content = Path(log_path).read_text(encoding="utf-8")
    assert_in_output(r"Python: \d+\.\d+", content)
    assert_in_output(r"Click: \d+", content)
