import unittest

from lcparse.grammar import pure


class PureGrammarTestCase(unittest.TestCase):

    def test_identifier_charset(self):
        should_start = ["x", "X", "_", "α", "é"]
        for case in should_start:
            self.assertTrue(pure.is_identifier_start(case), case)
            self.assertTrue(pure.is_identifier_char(case), case)

        should_continue = ["1", "0"]
        for case in should_continue:
            self.assertFalse(pure.is_identifier_start(case), case)
            self.assertTrue(pure.is_identifier_char(case), case)

        should_fail = ["λ", "\\", ".", "(", ")", " ", "#", "+"]
        for case in should_fail:
            self.assertFalse(pure.is_identifier_start(case), case)
            self.assertFalse(pure.is_identifier_char(case), case)

    def test_is_lambda(self):
        self.assertTrue(pure.is_lambda("λ"))
        self.assertTrue(pure.is_lambda("\\"))
        self.assertFalse(pure.is_lambda("l"))

    def test_normalize(self):
        cases = {"\\x.x": "λx.x", "λx.\\y.x y": "λx.λy.x y", "x y": "x y", "": ""}
        for case, expected in cases.items():
            self.assertEqual(expected, pure.normalize(case), case)


if __name__ == '__main__':
    unittest.main()
