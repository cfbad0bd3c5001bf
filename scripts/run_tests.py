import os
import logging
import sys
import argparse
from datetime import datetime

import unittest

base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, base_path)

from PySubInterchange.Helpers.Tests import create_logfile, end_logfile, separator
from tests.unit_tests import discover_tests

summary_lines = [
    "Test Summary:"
]

def format_summary_line(label: str, run: int, failures: int, errors: int, skipped: int, ok: bool) -> str:
    return f"  {label:<16}: run: {run:>3} failures: {failures:>3} errors: {errors:>3} skipped: {skipped:>3} status={'OK ' if ok else 'FAIL'}"

logging.getLogger().setLevel(logging.DEBUG)
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.WARNING)
console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
if console_handler not in logging.getLogger().handlers:
    logging.getLogger().addHandler(console_handler)

def run_unit_tests(results_path: str, test_name: str|None = None) -> bool:
    """Run the PySubInterchange unit tests, optionally only those in one test module.

    Returns True if every test succeeded, else False.
    """
    log_file = create_logfile(results_path, "unit_tests.log")

    start_stamp = datetime.now().strftime("%Y-%m-%d at %H:%M")
    logging.info(separator)
    logging.info("Running unit tests at " + start_stamp)
    logging.info(separator)

    runner = unittest.runner.TextTestRunner(verbosity=1)

    if test_name:
        tests = unittest.TestLoader().loadTestsFromName(f"tests.PySubInterchangeTests.{test_name}")
    else:
        tests = discover_tests(base_path)

    result = runner.run(tests)

    skipped = len(result.skipped) if hasattr(result, 'skipped') else 0
    summary_lines.append(format_summary_line('PySubInterchange', result.testsRun, len(result.failures), len(result.errors), skipped, result.wasSuccessful()))

    end_stamp = datetime.now().strftime("%Y-%m-%d at %H:%M")
    logging.info(separator)
    if result.wasSuccessful():
        logging.info("Completed unit tests successfully at " + end_stamp)
    else:
        logging.error("Completed unit tests with failures at " + end_stamp)
    logging.info(separator)

    end_logfile(log_file)
    return result.wasSuccessful()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run Python tests")
    parser.add_argument('test', nargs='?', help="Specify the name of a test module to run (without .py)", default=None)
    args = parser.parse_args()

    scripts_directory = os.path.dirname(os.path.abspath(__file__))
    root_directory = os.path.dirname(scripts_directory)
    results_directory = os.path.join(root_directory, 'test_results')

    if not os.path.exists(results_directory):
        os.makedirs(results_directory)

    overall_success : bool = run_unit_tests(results_directory, args.test)

    for line in summary_lines:
        if overall_success:
            print(line)
        else:
            logging.error(line)

    if not overall_success:
        print("*************************************************")
        print("*******     One or more tests failed!    ********")
        print("*************************************************")
        sys.exit(1)
