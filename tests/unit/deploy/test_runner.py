"""Unit tests for DeploymentRunner.

The process executor and logger are mocks, so these tests never spawn a
process. They pin down ordering, the progress lines, and stop-on-first-failure.
"""

import subprocess

import pytest
from unittest.mock import Mock, call

from radio_deploy.core.protocols import Logger, ProcessExecutor, ProcessResult
from radio_deploy.deploy import (
    DeploymentRunner,
    Invocation,
    ProcessExecutionError,
    DeploymentError,
    build_invocations,
)


def make_plan():
    return [
        Invocation("cross", "build --target armv7-unknown-linux-gnueabihf"),
        Invocation("scp", "target/armv7-unknown-linux-gnueabihf/debug/radio host:./"),
        Invocation("scp", "radio.service host:./"),
    ]


class TestDeploymentRunnerInit:
    """Test DeploymentRunner initialization."""

    def test_init_stores_dependencies(self):
        process = Mock(spec=ProcessExecutor)
        logger = Mock(spec=Logger)

        runner = DeploymentRunner(process_executor=process, logger=logger)

        assert runner.process is process
        assert runner.log is logger
        assert runner.verbose is False


class TestDeploymentRunnerRun:
    """Test DeploymentRunner.run() sequencing."""

    def setup_method(self):
        self.process = Mock(spec=ProcessExecutor)
        self.logger = Mock(spec=Logger)
        self.runner = DeploymentRunner(process_executor=self.process, logger=self.logger)

    def test_all_tasks_succeed(self):
        self.process.run.return_value = ProcessResult(returncode=0)
        plan = make_plan()

        result = self.runner.run(plan, target="host")

        assert result.completed == plan
        assert result.target == "host"
        assert self.process.run.call_args_list == [call(inv.argv) for inv in plan]

    def test_progress_lines_in_order(self):
        self.process.run.return_value = ProcessResult(returncode=0)

        self.runner.run(make_plan())

        assert self.logger.info.call_args_list == [
            call("Starting task: cross"),
            call("\tOK!"),
            call("Starting task: scp"),
            call("\tOK!"),
            call("Starting task: scp"),
            call("\tOK!"),
        ]

    def test_failure_stops_remaining_tasks(self):
        """Tasks 1..k succeed, k+1 fails: exactly k OK lines, nothing after."""
        self.process.run.side_effect = [
            ProcessResult(returncode=0),
            ProcessResult(returncode=1),
        ]

        with pytest.raises(ProcessExecutionError) as exc_info:
            self.runner.run(make_plan())

        assert self.process.run.call_count == 2
        ok_lines = [c for c in self.logger.info.call_args_list if c == call("\tOK!")]
        assert len(ok_lines) == 1
        assert self.logger.info.call_args_list[-1] == call("Starting task: scp")

        error = exc_info.value
        assert error.program == "scp"
        assert error.arguments == "target/armv7-unknown-linux-gnueabihf/debug/radio host:./"
        assert error.returncode == 1
        assert isinstance(error.cause, subprocess.CalledProcessError)

    def test_first_task_failure_runs_nothing_else(self):
        self.process.run.return_value = ProcessResult(returncode=101)

        with pytest.raises(ProcessExecutionError) as exc_info:
            self.runner.run(make_plan())

        self.process.run.assert_called_once()
        assert exc_info.value.program == "cross"
        assert exc_info.value.returncode == 101
        assert call("\tOK!") not in self.logger.info.call_args_list

    def test_program_not_found(self):
        missing = FileNotFoundError(2, "No such file or directory", "cross")
        self.process.run.side_effect = missing

        with pytest.raises(ProcessExecutionError) as exc_info:
            self.runner.run(make_plan())

        error = exc_info.value
        assert error.returncode is None
        assert error.cause is missing
        assert error.__cause__ is missing
        assert "could not be started" in str(error)

    def test_unbalanced_quotes_cannot_start(self):
        plan = [Invocation("scp", "'unclosed host:./"), *make_plan()]

        with pytest.raises(ProcessExecutionError) as exc_info:
            self.runner.run(plan)

        error = exc_info.value
        assert error.program == "scp"
        assert error.returncode is None
        assert isinstance(error.cause, ValueError)
        self.process.run.assert_not_called()

    def test_executor_value_error_cannot_start(self):
        rejected = ValueError("embedded null byte")
        self.process.run.side_effect = rejected

        with pytest.raises(ProcessExecutionError) as exc_info:
            self.runner.run([Invocation("scp", "a\x00b host:./")])

        assert exc_info.value.cause is rejected
        assert "could not be started" in str(exc_info.value)
        assert call("\tOK!") not in self.logger.info.call_args_list

    def test_error_is_a_deployment_error(self):
        self.process.run.return_value = ProcessResult(returncode=1)

        with pytest.raises(DeploymentError):
            self.runner.run(make_plan())

    def test_no_retry(self):
        self.process.run.return_value = ProcessResult(returncode=1)

        with pytest.raises(ProcessExecutionError):
            self.runner.run(make_plan())

        assert self.process.run.call_count == 1

    def test_empty_plan(self):
        result = self.runner.run([])

        assert result.completed == []
        self.process.run.assert_not_called()

    def test_running_twice_repeats_everything(self):
        self.process.run.return_value = ProcessResult(returncode=0)
        plan = make_plan()

        first = self.runner.run(plan)
        second = self.runner.run(plan)

        assert first.completed == second.completed == plan
        assert self.process.run.call_count == 6
        ok_lines = [c for c in self.logger.info.call_args_list if c == call("\tOK!")]
        assert len(ok_lines) == 6


class TestDeploymentRunnerVerbose:
    """Test verbose command echo."""

    def test_verbose_logs_command_line(self):
        process = Mock(spec=ProcessExecutor)
        process.run.return_value = ProcessResult(returncode=0)
        logger = Mock(spec=Logger)
        runner = DeploymentRunner(process_executor=process, logger=logger, verbose=True)

        runner.run([Invocation("scp", "radio.service pi@host:./")])

        logger.debug.assert_called_once_with("$ scp radio.service pi@host:./")

    def test_quiet_by_default(self):
        process = Mock(spec=ProcessExecutor)
        process.run.return_value = ProcessResult(returncode=0)
        logger = Mock(spec=Logger)
        runner = DeploymentRunner(process_executor=process, logger=logger)

        runner.run(build_invocations("pi@host"))

        logger.debug.assert_not_called()
