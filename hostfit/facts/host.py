"""
Facts detected from the running host.
"""

import logging
import platform
import socket
from pathlib import Path
from typing import Any, Iterable

from hostfit.facts.base import FactSource
from hostfit.sentinels import ABSENT

logger = logging.getLogger(__name__)

OS_RELEASE = Path("/etc/os-release")

# os-release IDs mapped to the family name providers confine on
FAMILIES = {
    "debian": "Debian",
    "ubuntu": "Debian",
    "linuxmint": "Debian",
    "rhel": "RedHat",
    "centos": "RedHat",
    "fedora": "RedHat",
    "rocky": "RedHat",
    "almalinux": "RedHat",
    "amzn": "RedHat",
    "sles": "Suse",
    "opensuse": "Suse",
    "suse": "Suse",
    "arch": "Archlinux",
    "alpine": "Alpine",
    "gentoo": "Gentoo",
}


def parse_os_release(text: str) -> dict[str, str]:
    """Parse the KEY=value lines of an os-release file."""
    fields = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        fields[key.strip()] = value.strip().strip('"').strip("'")
    return fields


class HostFacts(FactSource):
    """
    Facts gathered from the local machine.

    Detection runs once, on first lookup. Provides:
    - kernel: Linux, Darwin, Windows, ...
    - operatingsystem: distribution name on Linux, kernel name elsewhere
    - operatingsystemrelease: distribution or kernel release
    - osfamily: Debian, RedHat, Suse, ... on Linux, kernel name elsewhere
    - architecture, hostname, pythonversion
    """

    def __init__(self, os_release: str | Path = OS_RELEASE):
        self.os_release = Path(os_release)
        self._facts: dict[str, Any] | None = None

    def _detect(self) -> dict[str, Any]:
        kernel = platform.system()
        facts: dict[str, Any] = {
            "kernel": kernel,
            "kernelrelease": platform.release(),
            "architecture": platform.machine(),
            "hostname": socket.gethostname().split(".")[0],
            "pythonversion": platform.python_version(),
            "operatingsystem": kernel,
            "operatingsystemrelease": platform.release(),
            "osfamily": kernel,
        }

        if kernel == "Linux" and self.os_release.exists():
            release = parse_os_release(self.os_release.read_text(encoding="utf-8"))
            os_id = release.get("ID", "").lower()
            if release.get("NAME"):
                facts["operatingsystem"] = release["NAME"].split()[0]
            if release.get("VERSION_ID"):
                facts["operatingsystemrelease"] = release["VERSION_ID"]

            candidates = [os_id] + release.get("ID_LIKE", "").lower().split()
            for candidate in candidates:
                if candidate in FAMILIES:
                    facts["osfamily"] = FAMILIES[candidate]
                    break

        logger.debug("Detected host facts: %s", facts)
        return facts

    @property
    def facts(self) -> dict[str, Any]:
        if self._facts is None:
            self._facts = self._detect()
        return self._facts

    def value(self, name: str) -> Any:
        return self.facts.get(str(name).lower(), ABSENT)

    def names(self) -> Iterable[str]:
        return list(self.facts)
