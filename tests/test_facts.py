"""
Tests for fact sources.
"""

import pytest

from hostfit import ABSENT, ConfigError
from hostfit.facts import HostFacts, LayeredFacts, StaticFacts, YamlFacts, normalize
from hostfit.facts.host import parse_os_release


class TestStaticFacts:
    """Dictionary-backed facts."""

    def test_lookup_is_case_insensitive(self):
        facts = StaticFacts({"OSFamily": "Debian"})

        assert facts.value("osfamily") == "Debian"
        assert facts.value("OSFAMILY") == "Debian"

    def test_unknown_fact_is_absent(self):
        assert StaticFacts().value("kernel") is ABSENT

    def test_to_dict(self):
        facts = StaticFacts({"kernel": "Linux", "osfamily": "Debian"})

        assert facts.to_dict() == {"kernel": "Linux", "osfamily": "Debian"}

    def test_normalize(self):
        assert normalize("Debian") == "debian"
        assert normalize(8) == "8"
        assert normalize(True) == "true"


class TestYamlFacts:
    """Facts loaded from YAML files."""

    def test_loads_mapping(self, tmp_path):
        path = tmp_path / "facts.yaml"
        path.write_text("osfamily: RedHat\noperatingsystemmajrelease: 8\n")

        facts = YamlFacts(path)

        assert facts.value("osfamily") == "RedHat"
        assert facts.value("operatingsystemmajrelease") == 8

    def test_empty_file(self, tmp_path):
        path = tmp_path / "facts.yaml"
        path.write_text("")

        assert list(YamlFacts(path).names()) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            YamlFacts(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "facts.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            YamlFacts(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "facts.yaml"
        path.write_text("osfamily: [unclosed\n")

        with pytest.raises(ConfigError):
            YamlFacts(path)


class TestLayeredFacts:
    """The first source with a value wins."""

    def test_first_non_blank_wins(self):
        facts = LayeredFacts(
            StaticFacts({"osfamily": "", "kernel": "Linux"}),
            StaticFacts({"osfamily": "Debian", "kernel": "Darwin"}),
        )

        assert facts.value("osfamily") == "Debian"
        assert facts.value("kernel") == "Linux"
        assert facts.value("virtual") is ABSENT
        assert sorted(facts.names()) == ["kernel", "osfamily"]


class TestHostFacts:
    """Facts detected from the machine."""

    def test_parse_os_release(self):
        release = parse_os_release('NAME="Ubuntu"\n# comment\nID=ubuntu\nID_LIKE=debian\nVERSION_ID="22.04"\n')

        assert release == {"NAME": "Ubuntu", "ID": "ubuntu", "ID_LIKE": "debian", "VERSION_ID": "22.04"}

    def test_detects_basic_facts(self, tmp_path):
        facts = HostFacts(os_release=tmp_path / "missing")

        for name in ("kernel", "architecture", "hostname", "pythonversion", "osfamily"):
            assert facts.value(name) is not ABSENT

    def test_linux_family_from_os_release(self, tmp_path, monkeypatch):
        release = tmp_path / "os-release"
        release.write_text('NAME="Rocky Linux"\nID="rocky"\nID_LIKE="rhel centos fedora"\nVERSION_ID="9.3"\n')
        monkeypatch.setattr("hostfit.facts.host.platform.system", lambda: "Linux")

        facts = HostFacts(os_release=release)

        assert facts.value("kernel") == "Linux"
        assert facts.value("operatingsystem") == "Rocky"
        assert facts.value("operatingsystemrelease") == "9.3"
        assert facts.value("osfamily") == "RedHat"
