import click


__all__ = ['print_status', 'print_error', 'describe_error']


def print_status(prefix: str, message: str, indented: bool = False) -> None:
    """
    Print a status line to stderr, e.g. ``    Running `ls /tmp```.

    The prefix is printed in bold green and the message in bold.

    :param prefix: short status word
    :param message: status details
    :param indented: indent the line (used for the phases of a job)
    """
    indent = '    ' if indented else ''
    click.secho(indent + prefix, fg='green', bold=True, nl=False, err=True)
    click.secho(' ' + message, bold=True, err=True)


def describe_error(error: BaseException) -> str:
    """
    Render the message of the given error followed by the messages of all its causes.

    >>> try:
    ...     raise RuntimeError('upload failed') from ValueError('bad token')
    ... except RuntimeError as error:
    ...     print(describe_error(error))
    upload failed
      Caused by: bad token
    """
    lines = [str(error) or type(error).__name__]
    cause = error.__cause__
    while cause is not None:
        lines.append('  Caused by: {}'.format(str(cause) or type(cause).__name__))
        cause = cause.__cause__
    return '\n'.join(lines)


def print_error(error: BaseException) -> None:
    """Print the given error and its causes to stderr."""
    click.secho('Error:', fg='red', bold=True, nl=False, err=True)
    click.secho(' ' + describe_error(error), err=True)
