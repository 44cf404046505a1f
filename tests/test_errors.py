import unittest

from optionalpy import OptionalError, InvalidArgument, IllegalState, of, empty


class TestErrors(unittest.TestCase):
    def test_common_base(self):
        for action in (lambda: of(None), lambda: empty().get()):
            with self.assertRaises(OptionalError):
                action()

    def test_messages(self):
        with self.assertRaises(InvalidArgument) as cm:
            of(None)
        self.assertEqual(str(cm.exception), "The passed value was None.")
        with self.assertRaises(IllegalState) as cm2:
            empty().get()
        self.assertEqual(str(cm2.exception), "The optional is not present.")

    def test_kinds_are_distinct(self):
        self.assertFalse(issubclass(IllegalState, InvalidArgument))
        self.assertFalse(issubclass(InvalidArgument, IllegalState))
