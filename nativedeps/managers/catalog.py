"""Native packages needed to build the application, per package manager.

Package names are the identifiers each distribution uses; they are curated
independently and are not expected to line up across managers.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from nativedeps.core.environment import HostEnvironment
from nativedeps.core.errors import UnsupportedPlatformError
from .detection import PackageManager, SUPPORTED_MANAGERS, _manager_human


@dataclass(frozen=True)
class PreHook:
    """A setup step that must run before the main install on some hosts."""
    description: str
    applies: Callable[[HostEnvironment], bool]
    command: Tuple[str, ...]

    def build(self) -> List[str]:
        return list(self.command)


@dataclass(frozen=True)
class CatalogEntry:
    manager: PackageManager
    packages: Tuple[str, ...]
    pre_hook: Optional[PreHook] = None


def _is_not_fedora(env: HostEnvironment) -> bool:
    # RHEL, CentOS Stream, Rocky and friends ship the -devel packages in CRB
    return "Fedora" not in env.distribution_name()


ENABLE_CRB = PreHook(
    description="Enable the CRB repository",
    applies=_is_not_fedora,
    command=("dnf", "config-manager", "--set-enabled", "crb"),
)


CATALOG: Dict[PackageManager, CatalogEntry] = {
    PackageManager.APT: CatalogEntry(PackageManager.APT, (
        "libasound2-dev",
        "libfontconfig-dev",
        "libwayland-dev",
        "libxkbcommon-x11-dev",
        "libssl-dev",
        "libzstd-dev",
        "libvulkan1",
        "libgit2-dev",
    )),
    PackageManager.DNF: CatalogEntry(PackageManager.DNF, (
        "gcc",
        "g++",
        "alsa-lib-devel",
        "fontconfig-devel",
        "wayland-devel",
        "libxkbcommon-x11-devel",
        "openssl-devel",
        "libzstd-devel",
        "vulkan-loader",
        "libgit2-devel",
    ), pre_hook=ENABLE_CRB),
    PackageManager.ZYPPER: CatalogEntry(PackageManager.ZYPPER, (
        "alsa-devel",
        "fontconfig-devel",
        "wayland-devel",
        "libxkbcommon-x11-devel",
        "openssl-devel",
        "libzstd-devel",
        "vulkan-loader",
        "libgit2-devel",
    )),
    PackageManager.PACMAN: CatalogEntry(PackageManager.PACMAN, (
        "alsa-lib",
        "fontconfig",
        "wayland",
        "libgit2",
        "libxkbcommon-x11",
        "openssl",
        "zstd",
    )),
    PackageManager.XBPS: CatalogEntry(PackageManager.XBPS, (
        "alsa-lib-devel",
        "fontconfig-devel",
        "libxcb-devel",
        "libxkbcommon-devel",
        "libzstd-devel",
        "openssl-devel",
        "wayland-devel",
        "vulkan-loader",
    )),
}


def _validate_catalog():
    missing = [_manager_human(m) for m in SUPPORTED_MANAGERS if not CATALOG.get(m) or not CATALOG[m].packages]
    if missing:
        raise RuntimeError(f"No native dependencies defined for: {', '.join(missing)}")


_validate_catalog()


def get_catalog_entry(manager: PackageManager) -> CatalogEntry:
    """Return the catalog entry for a supported manager."""
    entry = CATALOG.get(manager)
    if entry is None:
        raise UnsupportedPlatformError()
    return entry


def get_dependency_set(manager: PackageManager) -> List[str]:
    """Return the ordered package names for a supported manager."""
    return list(get_catalog_entry(manager).packages)
