from .config import __version__, OS_NAME
from .logger import LOG, cprint
from .execution import run_command, RunResult
from .environment import HostEnvironment, SystemEnvironment
from .errors import NativeDepsError, UnsupportedPlatformError

__all__ = [
    '__version__',
    'OS_NAME',
    'LOG',
    'cprint',
    'run_command',
    'RunResult',
    'HostEnvironment',
    'SystemEnvironment',
    'NativeDepsError',
    'UnsupportedPlatformError',
]
