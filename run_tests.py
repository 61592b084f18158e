#!/usr/bin/env python3
"""
Test Runner for the Crop Advisor Engine
=======================================

Usage:
    python run_tests.py                 # all tests with coverage
    python run_tests.py scoring         # tests/test_scoring.py
    python run_tests.py test_advisor.py # a specific test file
"""

import sys
import subprocess
from pathlib import Path

ROOT = Path(__file__).parent


def install_test_dependencies():
    """Install test dependencies if not already installed."""
    try:
        import pytest
        import pytest_cov
        print("✓ Test dependencies already installed")
    except ImportError:
        print("Installing test dependencies...")
        subprocess.check_call([
            sys.executable, "-m", "pip", "install", "-e", ".[test]"
        ], cwd=ROOT)
        print("✓ Test dependencies installed")


def run_tests(test_path=None, coverage=True, verbose=True):
    """Run the test suite."""
    cmd = [sys.executable, "-m", "pytest"]

    if test_path:
        cmd.append(test_path)

    if coverage:
        cmd.extend(["--cov=src/crop_advisor", "--cov-report=term-missing"])

    if verbose:
        cmd.append("-v")

    cmd.extend(["--tb=short", "--strict-markers"])

    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=ROOT)

    return result.returncode == 0


def run_specific_test(test_file):
    """Run a specific test file."""
    test_path = f"tests/{test_file}"
    if not (ROOT / test_path).exists():
        print(f"❌ Test file {test_path} not found")
        return False

    print(f"Running specific test: {test_file}")
    return run_tests(test_path)


def main():
    print("🌱 Crop Advisor Test Runner")
    print("=" * 40)

    if not (ROOT / "src" / "crop_advisor").exists():
        print("❌ src/crop_advisor not found next to run_tests.py")
        sys.exit(1)

    install_test_dependencies()

    if len(sys.argv) > 1:
        test_target = sys.argv[1]
        if test_target.endswith(".py"):
            success = run_specific_test(test_target)
        else:
            success = run_specific_test(f"test_{test_target}.py")
    else:
        print("Running all tests...")
        success = run_tests()

    if success:
        print("✅ All tests passed!")
        sys.exit(0)
    else:
        print("❌ Some tests failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
