import platform

# Version info
__version__ = "nativedeps 0.3.0"

# OS Detection
OS_NAME = platform.system()

# Manager binaries, probed in this order. The first one found wins.
MANAGER_DETECTION_ORDER = [
    "apt-get",
    "dnf",
    "zypper",
    "pacman",
    "xbps-install",
]

# Privilege escalation tools, probed in this order.
PRIVILEGE_TOOL_ORDER = ["sudo", "doas"]

# Exit status used for failures that have no underlying process code
EXIT_FAILURE = 1

# Shell convention for "command not found"
EXIT_COMMAND_NOT_FOUND = 127

STDERR_FILENO = 2


def _os_type() -> str:
    """Returns a simplified OS name for heuristics."""
    s = platform.system().lower()
    if s.startswith("win"): return "windows"
    if s == "darwin": return "macos"
    if s == "linux": return "linux"
    return "unknown"
