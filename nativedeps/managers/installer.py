from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from nativedeps.core.config import EXIT_FAILURE
from nativedeps.core.environment import HostEnvironment
from nativedeps.core.execution import RunResult, run_command
from nativedeps.core.logger import LOG, cprint
from .catalog import get_catalog_entry
from .commands import build_install_command, elevate
from .detection import PackageManager, _manager_human
from .privilege import PrivilegeTool

Runner = Callable[[List[str]], RunResult]

FAILURE_UNSUPPORTED = "unsupported"
FAILURE_PRE_HOOK = "pre_hook"
FAILURE_INSTALL = "install"


@dataclass
class InstallResult:
    manager: PackageManager
    ok: bool
    code: int
    commands: List[List[str]] = field(default_factory=list)
    failure: Optional[str] = None


def _default_runner(cmd: List[str]) -> RunResult:
    # Package managers print their own progress and errors; let them through.
    return run_command(cmd, capture=False, stdout_to_stderr=LOG.json_mode)


def plan_commands(env: HostEnvironment, privilege: PrivilegeTool,
                  manager: PackageManager) -> List[Tuple[str, List[str]]]:
    """Return the (label, argv) steps needed to install the native dependencies."""
    entry = get_catalog_entry(manager)
    steps: List[Tuple[str, List[str]]] = []
    if entry.pre_hook is not None and entry.pre_hook.applies(env):
        steps.append((entry.pre_hook.description, elevate(privilege, entry.pre_hook.build())))
    steps.append((
        f"Install {len(entry.packages)} packages via {_manager_human(manager)}",
        build_install_command(privilege, manager, entry.packages),
    ))
    return steps


def install_dependencies(env: HostEnvironment, privilege: PrivilegeTool, manager: PackageManager,
                         runner: Optional[Runner] = None, dry_run: bool = False) -> InstallResult:
    """Run the pre-install hook (if any) and the install for ``manager``.

    Every step goes through the same privilege tool and runner. The first
    non-zero exit stops the run and its code is returned unchanged.
    """
    if not manager.supported:
        cprint("Unsupported distribution: no apt-get, dnf, zypper, pacman or xbps-install found.", "ERROR")
        return InstallResult(manager, ok=False, code=EXIT_FAILURE, failure=FAILURE_UNSUPPORTED)

    runner = runner or _default_runner
    steps = plan_commands(env, privilege, manager)
    result = InstallResult(manager, ok=True, code=0)

    for i, (label, cmd) in enumerate(steps, 1):
        is_install = i == len(steps)
        cprint(f"Step {i}/{len(steps)}: {label}", "INFO")
        cprint(f"  $ {' '.join(cmd)}", "MUTED")
        if dry_run:
            result.commands.append(cmd)
            continue

        res = runner(cmd)
        result.commands.append(cmd)
        if not res.ok:
            result.ok = False
            result.code = res.code
            result.failure = FAILURE_INSTALL if is_install else FAILURE_PRE_HOOK
            error_lines = res.err.strip().splitlines()
            if error_lines:
                cprint(error_lines[-1], "ERROR")
            what = "Dependency installation" if is_install else label
            cprint(f"{what} failed with exit code {res.code}", "ERROR")
            return result

    if dry_run:
        cprint("Dry run: nothing was executed.", "WARNING")
    else:
        cprint(f"Native dependencies installed via {_manager_human(manager)}", "SUCCESS")
    return result
