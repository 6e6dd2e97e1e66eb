from enum import Enum
from typing import List

from nativedeps.core.config import PRIVILEGE_TOOL_ORDER
from nativedeps.core.environment import HostEnvironment


class PrivilegeTool(Enum):
    SUDO = "sudo"
    DOAS = "doas"
    NONE = ""

    def prefix(self) -> List[str]:
        """Arguments to put in front of a command to run it elevated."""
        return [self.value] if self.value else []


def resolve_privilege_tool(env: HostEnvironment) -> PrivilegeTool:
    """Return sudo, then doas, or NONE when neither is installed.

    Absence is not an error: we may already be running as root.
    """
    for name in PRIVILEGE_TOOL_ORDER:
        if env.has_binary(name):
            return PrivilegeTool(name)
    return PrivilegeTool.NONE
