from .detection import (
    PackageManager,
    SUPPORTED_MANAGERS,
    _manager_human,
    detect_package_manager,
    detect_available_managers,
)
from .privilege import PrivilegeTool, resolve_privilege_tool
from .catalog import CATALOG, CatalogEntry, PreHook, get_catalog_entry, get_dependency_set
from .commands import INSTALL_HANDLERS, build_install_command
from .installer import InstallResult, install_dependencies, plan_commands

__all__ = [
    'PackageManager',
    'SUPPORTED_MANAGERS',
    '_manager_human',
    'detect_package_manager',
    'detect_available_managers',
    'PrivilegeTool',
    'resolve_privilege_tool',
    'CATALOG',
    'CatalogEntry',
    'PreHook',
    'get_catalog_entry',
    'get_dependency_set',
    'INSTALL_HANDLERS',
    'build_install_command',
    'InstallResult',
    'install_dependencies',
    'plan_commands',
]
