import logging
import shutil
import tempfile
import unittest
from os.path import join

import wnio


class TestLogger(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.log_file = join(self.tmpdir, "wnio.log")

    def tearDown(self):
        wnio.stop_logging()
        shutil.rmtree(self.tmpdir)

    def test_start_logging(self):
        logger = wnio.start_logging(filename=self.log_file, console_level=logging.CRITICAL)
        self.assertIs(logger, logging.getLogger("wnio"))
        nhandlers = len(logger.handlers)
        # a second call does not add handlers
        wnio.start_logging(filename=self.log_file)
        self.assertEqual(len(logger.handlers), nhandlers)

        logging.getLogger("wnio.epanet.io").info("not in the file")
        logging.getLogger("wnio.epanet.io").warning("negative node count")
        wnio.stop_logging()

        with open(self.log_file) as f:
            text = f.read()
        self.assertIn("negative node count", text)
        self.assertIn("WARNING", text)
        self.assertNotIn("not in the file", text)

    def test_stop_logging(self):
        logger = wnio.start_logging(filename=self.log_file, console_level=logging.CRITICAL)
        wnio.stop_logging()
        self.assertListEqual([h for h in logger.handlers if not isinstance(h, logging.NullHandler)], [])
        self.assertEqual(logger.level, logging.NOTSET)


if __name__ == "__main__":
    unittest.main()
