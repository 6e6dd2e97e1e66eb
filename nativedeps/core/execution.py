import subprocess
from dataclasses import dataclass
from typing import List

from .config import EXIT_COMMAND_NOT_FOUND, EXIT_FAILURE, STDERR_FILENO
from .logger import LOG, cprint


@dataclass
class RunResult:
    ok: bool
    code: int
    out: str
    err: str


def exit_status(returncode: int) -> int:
    # subprocess reports death by signal N as -N; shells report 128 + N
    return 128 - returncode if returncode < 0 else returncode


def run_command(cmd: List[str], capture: bool = True, stdout_to_stderr: bool = False) -> RunResult:
    """Execute a command once and report its exit status.

    With ``capture=False`` the child inherits our stdout/stderr so the
    package manager can prompt and print progress directly to the user;
    ``out`` and ``err`` are then empty. ``stdout_to_stderr`` sends the
    child's stdout to our stderr instead, keeping stdout clean for
    machine-readable output.
    """
    cmd_str = ' '.join(cmd)
    if LOG.verbose:
        cprint(f"Running: {cmd_str}", "MUTED")

    try:
        if capture:
            proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
            result = RunResult(proc.returncode == 0, exit_status(proc.returncode), proc.stdout, proc.stderr)
        else:
            stdout = STDERR_FILENO if stdout_to_stderr else None
            proc = subprocess.run(cmd, stdout=stdout)
            result = RunResult(proc.returncode == 0, exit_status(proc.returncode), "", "")
    except FileNotFoundError as e:
        result = RunResult(False, EXIT_COMMAND_NOT_FOUND, "", f"Command not found: {e.filename or cmd[0]}")
    except OSError as e:
        result = RunResult(False, EXIT_FAILURE, "", f"Exception: {e}")

    if LOG.verbose and not result.ok:
        cprint(f"Command failed with exit code {result.code}", "ERROR")
        if result.err:
            cprint(f"Error output: {result.err[:500]}", "ERROR")

    return result
