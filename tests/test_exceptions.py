"""Tests for nodeinjector custom exceptions."""

import unittest

from nodeinjector.exceptions import (
    CannotConstruct,
    CyclicDependencyError,
    DuplicateNameError,
    InjectorError,
    NodeNotFound,
    RegistrationError,
    ResolutionError,
)


class TestDuplicateNameError(unittest.TestCase):
    def test_lists_every_name_sorted(self) -> None:
        err = DuplicateNameError({"zeta", "alpha"})
        self.assertEqual(err.names, ["alpha", "zeta"])
        self.assertIn("'alpha'", str(err))
        self.assertIn("'zeta'", str(err))

    def test_is_a_registration_error(self) -> None:
        self.assertTrue(issubclass(DuplicateNameError, RegistrationError))
        self.assertTrue(issubclass(RegistrationError, InjectorError))


class TestResolutionError(unittest.TestCase):
    def test_message_without_chain(self) -> None:
        err = ResolutionError("missing dep")
        self.assertEqual(str(err), "missing dep")
        self.assertEqual(err.chain, [])
        self.assertEqual(err.path, "")

    def test_chain_is_copied(self) -> None:
        chain = ["a", "b"]
        err = ResolutionError("boom", chain=chain)
        chain.append("c")
        self.assertEqual(err.chain, ["a", "b"])
        self.assertEqual(err.path, "a -> b")


class TestNodeNotFound(unittest.TestCase):
    def test_message_names_the_node(self) -> None:
        err = NodeNotFound("foo")
        self.assertEqual(
            str(err), "Node foo not found. Did you forget to add foo to the injector?"
        )
        self.assertEqual(err.name, "foo")
        self.assertEqual(err.chain, ["foo"])


class TestCannotConstruct(unittest.TestCase):
    def test_wrap_appends_one_line(self) -> None:
        err = CannotConstruct.wrap(NodeNotFound("db"), "repo")
        lines = str(err).splitlines()
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[-1], "Could not create node repo.")
        self.assertEqual(err.name, "repo")
        self.assertEqual(err.chain, ["repo", "db"])

    def test_wrap_accumulates(self) -> None:
        err = CannotConstruct.wrap(CannotConstruct.wrap(NodeNotFound("db"), "repo"), "service")
        self.assertEqual(
            str(err).splitlines()[1:],
            ["Could not create node repo.", "Could not create node service."],
        )
        self.assertEqual(err.path, "service -> repo -> db")


class TestCyclicDependencyError(unittest.TestCase):
    def test_message_shows_cycle(self) -> None:
        err = CyclicDependencyError(["a", "b", "a"])
        self.assertEqual(str(err), "Cyclic dependency detected: a -> b -> a")
        self.assertIsInstance(err, ResolutionError)


if __name__ == "__main__":
    unittest.main()
