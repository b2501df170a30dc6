#!/usr/bin/env python3
"""
run_tests.py
------------
Auto-test runner for Skyguard.
Watches the package and tests for changes and re-runs pytest.

Usage:
    python run_tests.py                    # Start watching for changes
    python run_tests.py --run-once         # Run tests once and exit
    python run_tests.py --session-only     # Run only the session state machine tests
    python run_tests.py --unit-only        # Skip integration tests
"""

import argparse
import os
import subprocess
import sys
import time
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer


WATCHED_DIRS = ("skyguard", "tests")
SESSION_TESTS = [
    "tests/core/test_game_session.py",
    "tests/systems/test_world_simulation.py",
    "tests/systems/test_collision_manager.py",
]


class TestRunner(FileSystemEventHandler):
    """File system event handler that runs tests on file changes."""

    def __init__(self, args):
        self.args = args
        self.last_run = 0
        self.debounce_time = 1.0  # seconds between runs
        self.project_root = Path(__file__).parent

    def on_modified(self, event):
        """Re-run on .py changes inside the watched directories."""
        if event.is_directory:
            return

        file_path = Path(event.src_path)
        file_path_str = str(file_path).replace('\\', '/')
        if file_path.suffix not in ('.py', '.json', '.yaml'):
            return
        if not any(f"{d}/" in file_path_str for d in WATCHED_DIRS):
            return

        current_time = time.time()
        if current_time - self.last_run < self.debounce_time:
            return

        self.last_run = current_time
        self.run_tests()

    def build_command(self):
        cmd = [sys.executable, "-m", "pytest", "-v"]

        if self.args.session_only:
            cmd.extend(SESSION_TESTS)
        if self.args.unit_only:
            cmd.extend(["-m", "not integration"])

        if self.args.coverage:
            cmd.extend([
                "--cov=skyguard",
                "--cov-report=term-missing",
                "--cov-report=html",
                "--cov-fail-under=70"
            ])
        return cmd

    def run_tests(self):
        """Run the test suite. Returns True if every test passed."""
        print("\n" + "=" * 60)
        print("Running tests...")
        print("=" * 60)

        try:
            result = subprocess.run(self.build_command(), cwd=self.project_root, capture_output=False)
        except KeyboardInterrupt:
            print("\nTest execution interrupted")
            return False
        except OSError as e:
            print(f"Error running tests: {e}")
            return False

        if result.returncode == 0:
            print("All tests passed!")
            return True

        print("Some tests failed!")
        return False


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Auto-test runner for Skyguard")
    parser.add_argument("--run-once", action="store_true",
                        help="Run tests once and exit")
    parser.add_argument("--session-only", action="store_true",
                        help="Run only the session, world and collision tests")
    parser.add_argument("--unit-only", action="store_true",
                        help="Skip tests marked as integration")
    parser.add_argument("--coverage", action="store_true",
                        help="Generate coverage report")

    args = parser.parse_args()
    test_runner = TestRunner(args)

    if args.run_once:
        return 0 if test_runner.run_tests() else 1

    print("Starting file watcher...")
    print(f"Monitoring: {', '.join(d + '/' for d in WATCHED_DIRS)}")
    print("Press Ctrl+C to stop")

    test_runner.run_tests()

    observer = Observer()
    for directory in WATCHED_DIRS:
        if os.path.exists(directory):
            observer.schedule(test_runner, directory, recursive=True)

    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
        print("\nFile watcher stopped")

    observer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
