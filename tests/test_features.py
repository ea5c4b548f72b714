"""
Tests for feature declarations and parameter support.
"""

import pytest

from hostfit import DevError, InvalidParameterError, Provider


class TestFeatureDeclaration:
    """Providers declare the features they support."""

    def test_has_features(self, context, package_type):
        @package_type.provide("apt", features=["versionable"])
        class Apt(Provider):
            pass

        Apt.has_feature("holdable")

        assert Apt.features() == {"versionable", "holdable"}

    def test_unknown_feature_is_rejected(self, context, package_type):
        @package_type.provide("apt")
        class Apt(Provider):
            pass

        with pytest.raises(DevError):
            Apt.has_features("flyable")

    def test_satisfies_is_set_containment(self, context, package_type):
        @package_type.provide("apt", features=["versionable", "holdable"])
        class Apt(Provider):
            pass

        assert Apt.satisfies() is True
        assert Apt.satisfies("versionable") is True
        assert Apt.satisfies("versionable", "holdable") is True
        assert Apt.satisfies("versionable", "purgeable") is False


class TestSupportsParameter:
    """supports_parameter() gates attributes on required features."""

    def test_no_required_features_always_supported(self, context, package_type):
        @package_type.provide("gem")
        class Gem(Provider):
            pass

        assert Gem.supports_parameter("ensure") is True
        assert Gem.supports_parameter("name") is True

    def test_required_feature_missing(self, context, package_type):
        @package_type.provide("gem")
        class Gem(Provider):
            pass

        assert Gem.supports_parameter("version") is False

    def test_required_feature_present(self, context, package_type):
        @package_type.provide("apt", features=["versionable"])
        class Apt(Provider):
            pass

        assert Apt.supports_parameter("version") is True

    def test_all_required_features_needed(self, context, package_type):
        @package_type.provide("apt", features=["versionable"])
        class Apt(Provider):
            pass

        assert Apt.supports_parameter("mark") is False

        Apt.has_features("holdable")

        assert Apt.supports_parameter("mark") is True

    def test_accepts_attribute_objects(self, context, package_type):
        @package_type.provide("gem")
        class Gem(Provider):
            pass

        assert Gem.supports_parameter(package_type.attr_class("version")) is False
        assert Gem.supports_parameter(package_type.attr_class("ensure")) is True

    def test_unknown_parameter_raises(self, context, package_type):
        @package_type.provide("gem")
        class Gem(Provider):
            pass

        with pytest.raises(InvalidParameterError) as excinfo:
            Gem.supports_parameter("colour")

        assert excinfo.value.parameter == "colour"
        assert excinfo.value.resource_type == "package"

    def test_unattached_provider_knows_no_parameters(self, context):
        class Loose(Provider):
            pass

        with pytest.raises(InvalidParameterError):
            Loose.supports_parameter("ensure")
