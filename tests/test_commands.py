"""
Tests for command declaration, lookup and invocation.
"""

import pytest

from hostfit import (
    MISSING,
    ExecutionFailure,
    MissingCommandError,
    NoSuchCommandError,
    Provider,
)
from hostfit.providers import CommandMethod


class TestCommandDeclaration:
    """Commands are resolved once, when declared."""

    def test_mandatory_command_confines_on_existence(self, context, resolver):
        """A resolved mandatory command adds its path to the exists confine."""
        resolver.binaries["foo"] = "/bin/foo"

        class Example(Provider):
            pass

        Example.commands(foo="foo")

        assert Example.confines()["exists"] == ["/bin/foo"]
        assert Example.command("foo") == "/bin/foo"
        assert Example.registry().original_commands == {"foo": "foo"}

    def test_unresolved_mandatory_command_ignores_working_directory(self, context, tmp_path, monkeypatch):
        """A file named like the missing command does not make the provider suitable."""
        (tmp_path / "rpm").mkdir()
        monkeypatch.chdir(tmp_path)

        class Example(Provider):
            pass

        Example.commands(rpm="rpm")

        assert Example.suitable() is False
        assert Example.confines()["exists"] == [None]
        assert Example.registry().original_commands == {"rpm": "rpm"}

    def test_optional_command_does_not_confine(self, context, resolver):
        resolver.binaries["foo"] = "/bin/foo"

        class Example(Provider):
            pass

        Example.optional_commands(foo="foo")

        assert "exists" not in Example.confines()
        assert Example.command("foo") == "/bin/foo"

    def test_unresolved_optional_command_is_missing(self, context):
        class Example(Provider):
            pass

        Example.optional_commands({"foo": "foo"})

        assert Example.registry().commands["foo"] is MISSING
        assert Example.command("foo") is None
        assert Example.suitable() is True

    def test_declaration_never_raises_for_missing_binary(self, context):
        class Example(Provider):
            pass

        Example.commands(foo="foo", bar="/opt/bar")

        assert Example.command("foo") is None
        assert Example.command("bar") is None

    def test_mandatory_commands_accumulate_confines(self, context, resolver, tmp_path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.write_text("")
        second.write_text("")
        resolver.binaries.update({"first": str(first), "second": str(second)})

        class Example(Provider):
            pass

        Example.commands(first="first")
        Example.commands(second="second")

        assert Example.confines()["exists"] == [str(first), str(second)]
        assert Example.suitable() is True

    def test_binds_class_attribute(self, context, resolver):
        resolver.binaries["apt_get"] = "/usr/bin/apt-get"

        class Example(Provider):
            pass

        Example.commands(apt_get="apt_get")

        assert isinstance(vars(Example)["apt_get"], CommandMethod)

    def test_does_not_override_existing_attribute(self, context, resolver):
        resolver.binaries["query"] = "/usr/bin/query"

        class Example(Provider):
            def query(self):
                return "mine"

        Example.commands(query="query")

        assert Example().query() == "mine"
        assert Example.command("query") == "/usr/bin/query"

    def test_unbindable_names_are_still_runnable(self, context, resolver, executor):
        resolver.binaries["dpkg-query"] = "/usr/bin/dpkg-query"

        class Example(Provider):
            pass

        Example.commands({"dpkg-query": "dpkg-query"})
        Example.run_command("dpkg-query", "-W")

        assert executor.calls == [["/usr/bin/dpkg-query", "-W"]]


class TestCommandLookup:
    """command() walks the parent chain."""

    def test_child_inherits_parent_commands(self, context, resolver):
        resolver.binaries["dpkg"] = "/usr/bin/dpkg"

        class Dpkg(Provider):
            pass

        Dpkg.commands(dpkg="dpkg")

        class Apt(Dpkg):
            pass

        assert Apt.registry().parent is Dpkg.registry()
        assert Apt.command("dpkg") == "/usr/bin/dpkg"
        assert "exists" not in Apt.confines()

    def test_child_binding_shadows_parent(self, context, resolver):
        resolver.binaries.update({"/usr/bin/tool": "/usr/bin/tool", "/opt/bin/tool": "/opt/bin/tool"})

        class Parent(Provider):
            pass

        Parent.commands(tool="/usr/bin/tool")

        class Child(Parent):
            pass

        Child.commands(tool="/opt/bin/tool")

        assert Parent.command("tool") == "/usr/bin/tool"
        assert Child.command("tool") == "/opt/bin/tool"

    def test_undeclared_command_raises(self, context):
        class Example(Provider):
            pass

        with pytest.raises(NoSuchCommandError) as excinfo:
            Example.command("nope")

        assert excinfo.value.command == "nope"
        assert excinfo.value.provider == "example"

    def test_instance_lookup_matches_class(self, context, resolver):
        resolver.binaries["foo"] = "/bin/foo"

        class Example(Provider):
            pass

        Example.commands(foo="foo")

        assert Example().command("foo") == "/bin/foo"


class TestCommandInvocation:
    """Bound commands call the executor with the resolved path."""

    def test_class_and_instance_invocation(self, context, resolver, executor):
        resolver.binaries["foo"] = "/bin/foo"

        class Example(Provider):
            pass

        Example.commands(foo="foo")

        assert Example.foo() == "ok"
        assert Example().foo("-a", "b") == "ok"
        assert executor.calls == [["/bin/foo"], ["/bin/foo", "-a", "b"]]

    def test_inherited_command_invocation(self, context, resolver, executor):
        resolver.binaries["dpkg"] = "/usr/bin/dpkg"

        class Dpkg(Provider):
            pass

        Dpkg.commands(dpkg="dpkg")

        class Apt(Dpkg):
            pass

        Apt().dpkg("-l")

        assert executor.calls == [["/usr/bin/dpkg", "-l"]]

    def test_missing_command_fails_on_call(self, context, executor):
        class Example(Provider):
            pass

        Example.optional_commands(foo="foo")

        with pytest.raises(MissingCommandError) as excinfo:
            Example.foo("x")

        assert excinfo.value.command == "foo"
        assert executor.calls == []

    def test_execution_failure_propagates(self, context, resolver, executor, failure):
        resolver.binaries["foo"] = "/bin/foo"
        executor.fail_with = failure

        class Example(Provider):
            pass

        Example.commands(foo="foo")

        with pytest.raises(ExecutionFailure) as excinfo:
            Example().foo()

        assert excinfo.value is failure

    def test_run_command_unknown_name(self, context):
        class Example(Provider):
            pass

        with pytest.raises(NoSuchCommandError):
            Example.run_command("nope")
