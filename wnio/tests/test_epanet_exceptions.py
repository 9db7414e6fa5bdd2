import unittest
from os.path import abspath, dirname, join

import wnio.epanet.exceptions

testdir = dirname(abspath(__file__))
datadir = join(testdir, "networks_for_testing")


class TestEpanetExceptions(unittest.TestCase):

    def test_epanet_exception(self):
        try:
            raise wnio.epanet.exceptions.EpanetException(201, 'too few fields', 'in [PIPES]')
        except Exception as e:
            self.assertTupleEqual(e.args, ("(Error 201) syntax error ('too few fields') ['in [PIPES]']",))
        try:
            raise wnio.epanet.exceptions.EpanetException(999)
        except Exception as e:
            self.assertTupleEqual(e.args, ('(Error 999) unknown error',))
            self.assertEqual(e.code, 999)

    def test_error_codes(self):
        # only the codes the readers raise
        self.assertListEqual(sorted(wnio.epanet.exceptions.EN_ERROR_CODES), [201, 202, 302, 303, 304, 435, 436])

    def test_epanet_syntax_error(self):
        try:
            raise wnio.epanet.exceptions.ENSyntaxError(201, 'missing fields', line_num=38, line='P1 J1')
        except SyntaxError as e:
            self.assertTupleEqual(e.args, ("(Error 201) syntax error ('missing fields'), at line 38:\n   P1 J1",))

    def test_epanet_value_error(self):
        try:
            raise wnio.epanet.exceptions.ENValueError(202, 'abc')
        except ValueError as e:
            self.assertTupleEqual(e.args, ("(Error 202) illegal numeric value, 'abc'",))

    def test_file_not_found_error(self):
        try:
            raise wnio.epanet.exceptions.ENFileNotFoundError(304, 'sim.out')
        except FileNotFoundError as e:
            self.assertTupleEqual(e.args, ("(Error 304) cannot open binary output file 'sim.out'",))
            self.assertEqual(str(e), "(Error 304) cannot open binary output file 'sim.out'")
            self.assertEqual(e.path, 'sim.out')

    def test_invalid_format_error(self):
        try:
            raise wnio.epanet.exceptions.ENInvalidFormatError(435, 42)
        except ValueError as e:
            self.assertTupleEqual(e.args, ('(Error 435) invalid file - not created by EPANET, magic number 42',))

    def test_truncated_file_error(self):
        try:
            raise wnio.epanet.exceptions.ENTruncatedFileError(436, 'sim.out', 'prolog')
        except EOFError as e:
            self.assertTupleEqual(e.args, ("(Error 436) invalid file - binary output file is truncated, 'sim.out' ['prolog']",))

    def test_missing_inp_file(self):
        f = wnio.epanet.io.InpFile()
        inp_file = join(datadir, "not_a_file.inp")
        try:
            f.read(inp_file)
        except Exception as e:
            self.assertIsInstance(e, wnio.epanet.exceptions.ENFileNotFoundError)
            self.assertIsInstance(e, wnio.epanet.exceptions.EpanetException)
        else:
            self.fail('Failed to catch expected error for a missing INP file')

    def test_malformed_lines_not_raised(self):
        f = wnio.epanet.io.InpFile()
        wn = f.read(join(datadir, "net_small.inp"))
        self.assertEqual(len(wn.skipped), 5)
        for skipped in wn.skipped:
            self.assertIsInstance(skipped.error, wnio.epanet.exceptions.EpanetException)
            self.assertIn(skipped.error.code, (201, 202))


if __name__ == "__main__":
    unittest.main()
