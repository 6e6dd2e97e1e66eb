"""
Tests for package manager and privilege tool detection.
"""

import pytest

from nativedeps.core.environment import SystemEnvironment
from nativedeps.managers.detection import (
    PackageManager,
    SUPPORTED_MANAGERS,
    detect_available_managers,
    detect_package_manager,
)
from nativedeps.managers.privilege import PrivilegeTool, resolve_privilege_tool

from conftest import FakeEnvironment

BINARIES = ["apt-get", "dnf", "zypper", "pacman", "xbps-install"]


# ── Manager Detector ────────────────────────────────────────────────


class TestManagerDetection:
    @pytest.mark.parametrize("binary, expected", [
        ("apt-get", PackageManager.APT),
        ("dnf", PackageManager.DNF),
        ("zypper", PackageManager.ZYPPER),
        ("pacman", PackageManager.PACMAN),
        ("xbps-install", PackageManager.XBPS),
    ])
    def test_single_binary(self, binary, expected):
        assert detect_package_manager(FakeEnvironment([binary])) is expected

    def test_priority_order(self):
        # Drop the winner one at a time and the next in line takes over
        for i, manager in enumerate(SUPPORTED_MANAGERS):
            env = FakeEnvironment(BINARIES[i:])
            assert detect_package_manager(env) is manager

    def test_apt_beats_pacman(self):
        assert detect_package_manager(FakeEnvironment(["pacman", "apt-get"])) is PackageManager.APT

    def test_none_present(self):
        env = FakeEnvironment(["sudo", "yum", "apk"])
        assert detect_package_manager(env) is PackageManager.UNSUPPORTED

    def test_stops_at_first_match(self):
        env = FakeEnvironment(BINARIES)
        detect_package_manager(env)
        assert env.lookups == ["apt-get"]

    def test_repeatable(self):
        env = FakeEnvironment(["zypper", "xbps-install"])
        assert {detect_package_manager(env) for _ in range(5)} == {PackageManager.ZYPPER}

    def test_available_listing(self):
        status = detect_available_managers(FakeEnvironment(["dnf", "pacman"]))
        assert list(status) == SUPPORTED_MANAGERS
        assert [m for m, ok in status.items() if ok] == [PackageManager.DNF, PackageManager.PACMAN]

    def test_unsupported_has_no_binary(self):
        assert not PackageManager.UNSUPPORTED.supported
        with pytest.raises(ValueError):
            PackageManager.UNSUPPORTED.binary


# ── Privilege Resolver ──────────────────────────────────────────────


class TestPrivilegeResolver:
    def test_sudo_preferred(self):
        assert resolve_privilege_tool(FakeEnvironment(["doas", "sudo"])) is PrivilegeTool.SUDO

    def test_doas_only(self):
        assert resolve_privilege_tool(FakeEnvironment(["doas"])) is PrivilegeTool.DOAS

    def test_neither(self):
        tool = resolve_privilege_tool(FakeEnvironment())
        assert tool is PrivilegeTool.NONE
        assert tool.prefix() == []

    def test_prefixes(self):
        assert PrivilegeTool.SUDO.prefix() == ["sudo"]
        assert PrivilegeTool.DOAS.prefix() == ["doas"]


# ── System environment ──────────────────────────────────────────────


class TestSystemEnvironment:
    def test_which_uses_given_path(self, tmp_path):
        tool = tmp_path / "pacman"
        tool.write_text("#!/bin/sh\nexit 0\n")
        tool.chmod(0o755)
        env = SystemEnvironment(path=str(tmp_path))
        assert env.has_binary("pacman")
        assert not env.has_binary("apt-get")
        assert detect_package_manager(env) is PackageManager.PACMAN

    def test_empty_path_is_unsupported(self, tmp_path):
        env = SystemEnvironment(path=str(tmp_path))
        assert detect_package_manager(env) is PackageManager.UNSUPPORTED
        assert resolve_privilege_tool(env) is PrivilegeTool.NONE

    def test_distribution_name_from_distro(self, monkeypatch):
        monkeypatch.setattr("nativedeps.core.environment.distro.name", lambda: "CentOS Stream")
        assert SystemEnvironment().distribution_name() == "CentOS Stream"
