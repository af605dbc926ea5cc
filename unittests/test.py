#! /usr/bin/env python
"""Runs unit tests on all tagkit modules"""

import unittest
import logging

import test_beans
import test_html
import test_parser
import test_tagtypes
import test_transform
import test_urlparser


all_tests = unittest.TestSuite()
all_tests.addTest(test_beans.suite())
all_tests.addTest(test_html.suite())
all_tests.addTest(test_parser.suite())
all_tests.addTest(test_tagtypes.suite())
all_tests.addTest(test_transform.suite())
all_tests.addTest(test_urlparser.suite())


def suite():
    global all_tests
    return all_tests


def load_tests(loader, tests, pattern):
    return suite()

if __name__ == "__main__":
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
