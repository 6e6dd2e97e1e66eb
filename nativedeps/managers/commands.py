from typing import List, Sequence

from .detection import PackageManager
from .privilege import PrivilegeTool


# Install command handlers. Each returns the manager part of the argv,
# without the privilege prefix.
def _apt_install(pkgs: Sequence[str]) -> List[str]:
    return ["apt-get", "install", "-y", *pkgs]

def _dnf_install(pkgs: Sequence[str]) -> List[str]:
    return ["dnf", "install", "-y", *pkgs]

def _zypper_install(pkgs: Sequence[str]) -> List[str]:
    return ["zypper", "install", "-y", *pkgs]

def _pacman_install(pkgs: Sequence[str]) -> List[str]:
    return ["pacman", "-S", "--needed", "--noconfirm", *pkgs]

def _xbps_install(pkgs: Sequence[str]) -> List[str]:
    return ["xbps-install", "-Syu", *pkgs]


# Command handler mapping
INSTALL_HANDLERS = {
    PackageManager.APT: _apt_install,
    PackageManager.DNF: _dnf_install,
    PackageManager.ZYPPER: _zypper_install,
    PackageManager.PACMAN: _pacman_install,
    PackageManager.XBPS: _xbps_install,
}


def elevate(privilege: PrivilegeTool, cmd: Sequence[str]) -> List[str]:
    return privilege.prefix() + list(cmd)


def build_install_command(privilege: PrivilegeTool, manager: PackageManager,
                          packages: Sequence[str]) -> List[str]:
    """Build ``<privilege> <manager> <subcommand> <flags> <packages...>``."""
    handler = INSTALL_HANDLERS.get(manager)
    if handler is None:
        raise ValueError(f"No install command for {manager.name}")
    return elevate(privilege, handler(packages))
