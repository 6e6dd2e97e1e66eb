from enum import Enum
from typing import Dict

from nativedeps.core.config import MANAGER_DETECTION_ORDER
from nativedeps.core.environment import HostEnvironment


class PackageManager(Enum):
    """System package managers, keyed by the binary that identifies them."""
    APT = "apt-get"
    DNF = "dnf"
    ZYPPER = "zypper"
    PACMAN = "pacman"
    XBPS = "xbps-install"
    UNSUPPORTED = None

    @property
    def binary(self) -> str:
        if self is PackageManager.UNSUPPORTED:
            raise ValueError("unsupported package manager has no binary")
        return self.value

    @property
    def supported(self) -> bool:
        return self is not PackageManager.UNSUPPORTED


SUPPORTED_MANAGERS = [PackageManager(binary) for binary in MANAGER_DETECTION_ORDER]


def _manager_human(manager: PackageManager) -> str:
    """Returns a human-readable name for a manager."""
    names = {
        PackageManager.APT: "APT", PackageManager.DNF: "DNF",
        PackageManager.ZYPPER: "Zypper", PackageManager.PACMAN: "Pacman",
        PackageManager.XBPS: "XBPS", PackageManager.UNSUPPORTED: "Unsupported",
    }
    return names[manager]


def detect_package_manager(env: HostEnvironment) -> PackageManager:
    """Return the first supported manager whose binary is on PATH.

    Binaries are only looked up, never executed. When a host carries more
    than one manager the earliest in MANAGER_DETECTION_ORDER wins.
    """
    for manager in SUPPORTED_MANAGERS:
        if env.has_binary(manager.binary):
            return manager
    return PackageManager.UNSUPPORTED


def detect_available_managers(env: HostEnvironment) -> Dict[PackageManager, bool]:
    """Detect every supported package manager, in priority order."""
    return {manager: env.has_binary(manager.binary) for manager in SUPPORTED_MANAGERS}
