"""
Shared test fixtures: a fake host environment and a recording runner.
"""

from typing import Dict, Iterable, List, Optional

import pytest

from nativedeps.core.environment import HostEnvironment
from nativedeps.core.execution import RunResult
from nativedeps.core.logger import LOG


class FakeEnvironment(HostEnvironment):
    def __init__(self, binaries: Iterable[str] = (), distribution: str = ""):
        self.binaries = set(binaries)
        self.distribution = distribution
        self.lookups: List[str] = []

    def which(self, name: str) -> Optional[str]:
        self.lookups.append(name)
        return f"/usr/bin/{name}" if name in self.binaries else None

    def distribution_name(self) -> str:
        return self.distribution


class RecordingRunner:
    """Records every argv and answers with a preset exit code per binary."""

    def __init__(self, codes: Optional[Dict[str, int]] = None):
        self.codes = codes or {}
        self.calls: List[List[str]] = []

    def __call__(self, cmd: List[str]) -> RunResult:
        self.calls.append(list(cmd))
        code = 0
        for word, c in self.codes.items():
            if word in cmd:
                code = c
        return RunResult(code == 0, code, "", "")


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    LOG.reset()
