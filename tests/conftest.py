"""
Shared fixtures: fake collaborators installed into the hostfit context.
"""

import pytest

from hostfit.context import HostfitContext, use_context
from hostfit.errors import ExecutionFailure
from hostfit.execution import BinaryResolver, Executor
from hostfit.facts import StaticFacts
from hostfit.types import ResourceType


class FakeResolver(BinaryResolver):
    """Resolves only the names it was given."""

    def __init__(self, binaries=None):
        self.binaries = dict(binaries or {})
        self.calls = []

    def resolve(self, name_or_path):
        self.calls.append(name_or_path)
        return self.binaries.get(name_or_path)


class RecordingExecutor(Executor):
    """Records every argv and returns canned output."""

    def __init__(self, output="ok"):
        self.output = output
        self.calls = []
        self.fail_with = None

    def run(self, argv):
        self.calls.append(list(argv))
        if self.fail_with is not None:
            raise self.fail_with
        return self.output


class CountingFacts(StaticFacts):
    """Static facts that count lookups."""

    def __init__(self, facts=None):
        super().__init__(facts)
        self.lookups = []

    def value(self, name):
        self.lookups.append(name)
        return super().value(name)


@pytest.fixture
def facts():
    return CountingFacts({"osfamily": "Debian", "kernel": "Linux", "operatingsystem": "Ubuntu"})


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def context(facts, resolver, executor):
    """Install fake collaborators for the duration of a test."""
    with use_context(HostfitContext(facts=facts, resolver=resolver, executor=executor)) as ctx:
        yield ctx


@pytest.fixture
def package_type():
    """A small package resource type."""
    package = ResourceType("package")
    package.feature("versionable", "Can install a specific version.")
    package.feature("holdable", "Can pin a package.")
    package.newproperty("ensure")
    package.newproperty("version", required_features="versionable")
    package.newproperty("mark", required_features=["holdable", "versionable"])
    package.newparam("name")
    package.newparam("source")
    return package


@pytest.fixture
def failure():
    return ExecutionFailure(["/bin/false"], 1, "boom")
