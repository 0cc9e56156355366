import os
import os.path as path

import pytest

from ferry.errors import InvalidStepError, StepFailedError, LocalIOError
from ferry.runner import ShellStepRunner


@pytest.fixture()
def runner():
    yield ShellStepRunner()


@pytest.fixture()
def make_script(tmpdir):
    """Create an executable shell script with the given body and return its path."""
    def make(name: str, body: str) -> str:
        script_path = path.join(str(tmpdir), name)
        with open(script_path, 'w') as file:
            file.write('#!/bin/sh\n' + body + '\n')
        os.chmod(script_path, 0o755)
        return script_path
    yield make


def test_success(runner):
    runner.run_step('true')


def test_output_is_not_captured(runner, capfd):
    runner.run_step('echo hello   ferry')
    assert capfd.readouterr().out == 'hello ferry\n'


def test_arguments_split_on_whitespace(runner, tmpdir):
    first, second = path.join(str(tmpdir), 'a'), path.join(str(tmpdir), 'b')
    runner.run_step('touch  {}\t{} '.format(first, second))
    assert path.exists(first) and path.exists(second)


def test_non_zero_exit(runner, make_script):
    script = make_script('exit2.sh', 'exit 2')

    with pytest.raises(StepFailedError) as error_info:
        runner.run_step(script)

    assert error_info.value.step == script
    assert error_info.value.return_code == 2
    assert error_info.value.signal is None
    assert 'non-zero status code 2' in str(error_info.value)


def test_killed_by_signal(runner, make_script):
    script = make_script('suicide.sh', 'kill -KILL $$')

    with pytest.raises(StepFailedError) as error_info:
        runner.run_step(script)

    assert error_info.value.return_code is None
    assert error_info.value.signal == 9
    assert 'terminated by signal 9' in str(error_info.value)


@pytest.mark.parametrize('step', ['', '   ', '\t\n'])
def test_invalid_step(runner, step):
    with pytest.raises(InvalidStepError):
        runner.run_step(step)


def test_missing_program(runner):
    with pytest.raises(LocalIOError) as error_info:
        runner.run_step('ferry-this-program-does-not-exist --help')
    assert isinstance(error_info.value.__cause__, FileNotFoundError)


def test_interrupted_step_is_killed(runner, mocker):
    process = mocker.MagicMock()
    process.wait.side_effect = [KeyboardInterrupt(), -9]
    mocker.patch('ferry.runner.shell_runner.subprocess.Popen', return_value=process)

    with pytest.raises(KeyboardInterrupt):
        runner.run_step('sleep 1000')

    process.kill.assert_called_once_with()
    assert process.wait.call_count == 2
