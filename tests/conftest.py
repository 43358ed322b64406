"""
Configure unit tests for stackscape

Acknowledgements
----------------
Helpers and helpers() are informed by:
    https://stackoverflow.com/a/42156088/16327476
"""

import os
import pathlib
import pytest
import subprocess
import sys


def package_root(test_file):
    """Return package root from a unit test `__file__` attribute"""
    return pathlib.Path(test_file, '../..').resolve()


def package_src(test_file):
    """Return full pathname to stackscape src folder"""
    return package_root(test_file) / "src"


def data_file(test_file, fname):
    """Return full pathname to sample data"""
    return package_root(test_file) / "data" / fname


class Helpers:
    """
    Class containing unit test helper functions
    """

    def __init__(self, test_file):
        """
        Parameters
        ----------
        test_file: str
            `__file__` attribute of the unit test script

        Examples
        --------
        # In unit test:
        def test_mytest(helper_class):
            helpers = helper_class(__file__)
            helpers.data_file("energy_by_source.csv")
        """

        self.test_file = test_file


    @property
    def package_src(self):
        return package_src(self.test_file)


    def data_file(self, fname):
        return data_file(self.test_file, fname)


    def run_script(self, *, module, options=[], data=None, show=False):
        """
        Run module as a script, returning its exit code
        """
        # Use -s option to show a figure after creating it.
        OPTION_SHOW = "-s"

        if data is None:
            data = []
        elif isinstance(data, str):
            data = [data]

        # Make path to each named data file.
        data = [str(self.data_file(fname)) for fname in data]

        if isinstance(options, str):
            # Split option string into list of options.
            options = str.split(options)

        cli_options = data.copy()
        cli_options.extend(options)

        if show and OPTION_SHOW not in options:
            cli_options.append(OPTION_SHOW)

        # Make new environment with PYTHONPATH to our package.
        child_pythonpath = str(self.package_src)
        if "PYTHONPATH" in os.environ:
            # Include current PYTHON_PATH.
            child_pythonpath = os.pathsep.join([
                child_pythonpath,
                os.environ["PYTHONPATH"]
            ])
        child_environ = os.environ.copy()
        child_environ["PYTHONPATH"] = child_pythonpath

        # Run python as a sub-process, directed to our module.
        return_code = subprocess.call([sys.executable,
                                       "-m", module,
                                       *cli_options,
                                      ],
                                      env=child_environ)
        return return_code


@pytest.fixture
def helper_class():
    """
    To use helper function `XX`, in a test_*.py do this:
        ```
        def test_with_help(helper_class):
            helper_class(__file__).XX()
        ```
    """
    return Helpers
