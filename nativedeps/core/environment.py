"""Host environment queries.

Everything the installer needs to know about the machine it runs on goes
through a ``HostEnvironment``: binary lookups on PATH and the distribution
name. The real implementation asks ``shutil.which`` and ``distro``; tests
substitute a fake.
"""

import shutil
from typing import Optional

import distro


class HostEnvironment:
    """Interface for the ambient facts the installer depends on."""

    def which(self, name: str) -> Optional[str]:
        """Return the resolved path of ``name`` on PATH, or None."""
        raise NotImplementedError

    def has_binary(self, name: str) -> bool:
        return self.which(name) is not None

    def distribution_name(self) -> str:
        """Return the human distribution name, e.g. "Fedora Linux"."""
        raise NotImplementedError


class SystemEnvironment(HostEnvironment):
    """Queries the real PATH and os-release data."""

    def __init__(self, path: Optional[str] = None):
        # None means "use the process PATH"
        self.path = path

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name, path=self.path)

    def distribution_name(self) -> str:
        return distro.name() or ""
