"""Tests for parameter classification."""

import unittest

from nodeinjector.parameters import (
    ParameterDescriptor,
    ParameterKind,
    classify,
    required_keyword,
    required_positional,
)

POS = ParameterKind.REQUIRED_POSITIONAL
KW = ParameterKind.REQUIRED_KEYWORD
IGN = ParameterKind.IGNORABLE


class TestClassify(unittest.TestCase):
    def test_every_parameter_kind_in_declaration_order(self) -> None:
        def m(a, h, b=3, *c, d=4, e, **f):
            pass

        self.assertEqual(
            classify(m),
            [
                ParameterDescriptor("a", POS),
                ParameterDescriptor("h", POS),
                ParameterDescriptor("b", IGN),
                ParameterDescriptor("c", IGN),
                ParameterDescriptor("d", IGN),
                ParameterDescriptor("e", KW),
                ParameterDescriptor("f", IGN),
            ],
        )

    def test_positional_only_is_required_positional(self) -> None:
        def f(a, /, b, *, c):
            pass

        self.assertEqual([p.kind for p in classify(f)], [POS, POS, KW])

    def test_class_signature_excludes_self(self) -> None:
        class Bar:
            def __init__(self, foo, *, baz, qux=None):
                pass

        self.assertEqual(
            classify(Bar),
            [
                ParameterDescriptor("foo", POS),
                ParameterDescriptor("baz", KW),
                ParameterDescriptor("qux", IGN),
            ],
        )

    def test_class_without_init_has_no_parameters(self) -> None:
        class H:
            pass

        self.assertEqual(classify(H), [])

    def test_inherited_init_is_used(self) -> None:
        class Base:
            def __init__(self, db):
                self.db = db

        class Child(Base):
            pass

        self.assertEqual(classify(Child), [ParameterDescriptor("db", POS)])

    def test_bound_method_excludes_self(self) -> None:
        class Service:
            def run(self, job, retries=1):
                pass

        self.assertEqual(classify(Service().run), [ParameterDescriptor("job", POS), ParameterDescriptor("retries", IGN)])

    def test_no_signature_yields_empty_list(self) -> None:
        # Stands in for a builtin without a text signature.
        class Opaque:
            @property
            def __signature__(self):
                raise ValueError("no signature")

            def __call__(self):
                return 1

        self.assertEqual(classify(Opaque()), [])

    def test_lambda_with_only_variadics_is_all_ignorable(self) -> None:
        self.assertEqual([p.kind for p in classify(lambda *a, **k: None)], [IGN, IGN])


class TestRequiredHelpers(unittest.TestCase):
    def setUp(self) -> None:
        def target(x, y, z=0, *rest, k, opt=1, **extra):
            pass

        self.descriptors = classify(target)

    def test_required_positional_keeps_order(self) -> None:
        self.assertEqual(required_positional(self.descriptors), ["x", "y"])

    def test_required_keyword(self) -> None:
        self.assertEqual(required_keyword(self.descriptors), ["k"])


if __name__ == "__main__":
    unittest.main()
