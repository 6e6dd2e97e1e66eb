import argparse
import json
import sys
from typing import List, Optional

from nativedeps.core.config import __version__, _os_type
from nativedeps.core.environment import HostEnvironment, SystemEnvironment
from nativedeps.core.execution import exit_status
from nativedeps.core.logger import LOG, cprint
from nativedeps.managers.detection import _manager_human, detect_available_managers, detect_package_manager
from nativedeps.managers.installer import InstallResult, Runner, install_dependencies
from nativedeps.managers.privilege import PrivilegeTool, resolve_privilege_tool


def create_parser() -> argparse.ArgumentParser:
    """Creates the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="nativedeps",
        description="Install the native libraries needed to build the application "
                    "using this distribution's package manager.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-q", "--quiet", action="store_true", help="Quiet mode (errors only)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary of the run")
    parser.add_argument("--dry-run", action="store_true", help="Show the commands without running them")
    return parser


def _print_detection(env: HostEnvironment, privilege: PrivilegeTool):
    cprint(f"Distribution: {env.distribution_name() or 'unknown'}", "MUTED")
    cprint(f"Privilege tool: {privilege.value or 'none'}", "MUTED")
    for manager, present in detect_available_managers(env).items():
        cprint(f"  {manager.binary}: {'found' if present else 'not found'}",
               "SUCCESS" if present else "MUTED")


def _summary(result: InstallResult, privilege: PrivilegeTool, dry_run: bool) -> dict:
    return {
        "version": __version__,
        "manager": result.manager.value,
        "privilege_tool": privilege.value or None,
        "dry_run": dry_run,
        "ok": result.ok,
        "exit_code": result.code,
        "failure": result.failure,
        "commands": result.commands,
    }


def main(argv: Optional[List[str]] = None, env: Optional[HostEnvironment] = None,
         runner: Optional[Runner] = None) -> int:
    """Detect the package manager, install the native dependencies, return the exit status."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Set logging modes
    LOG.quiet = args.quiet
    LOG.verbose = args.verbose
    LOG.json_mode = args.json

    env = env or SystemEnvironment()

    try:
        if _os_type() != "linux":
            cprint("Only Linux distributions are supported; detection will likely fail.", "WARNING")

        privilege = resolve_privilege_tool(env)
        if LOG.verbose:
            _print_detection(env, privilege)

        manager = detect_package_manager(env)
        if manager.supported:
            cprint(f"Detected package manager: {_manager_human(manager)}", "INFO")

        result = install_dependencies(env, privilege, manager, runner=runner, dry_run=args.dry_run)

        if LOG.json_mode:
            print(json.dumps(_summary(result, privilege, args.dry_run), indent=2))
        return exit_status(result.code)

    except KeyboardInterrupt:
        if not LOG.quiet:
            cprint("\nOperation cancelled by user.", "WARNING")
        return 1
    except Exception as e:
        cprint(f"Unexpected error: {e}", "ERROR")
        if LOG.verbose:
            import traceback
            traceback.print_exc()
        return 1


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
