import unittest
import doctest

import utils

from dsn.document import construct as document_construct
from dsn.document import structure as document_structure
from dsn.layout import measure as layout_measure
from dsn.layout import structure as layout_structure
from dsn.layout import utils as layout_utils
from dsn.viewports import utils as viewports_utils

import test_document
import test_filehandler
import test_layout
import test_navigation
import test_viewports


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(utils))
    tests.addTests(doctest.DocTestSuite(document_structure))
    tests.addTests(doctest.DocTestSuite(document_construct))
    tests.addTests(doctest.DocTestSuite(layout_structure))
    tests.addTests(doctest.DocTestSuite(layout_measure))
    tests.addTests(doctest.DocTestSuite(layout_utils))
    tests.addTests(doctest.DocTestSuite(viewports_utils))

    for module in [test_document, test_filehandler, test_layout, test_navigation, test_viewports]:
        tests.addTests(loader.loadTestsFromModule(module))

    return tests


if __name__ == '__main__':
    unittest.main()
