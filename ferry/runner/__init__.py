from .step_runner import StepRunner
from .shell_runner import ShellStepRunner

__all__ = ['StepRunner', 'ShellStepRunner']
