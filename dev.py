"""Development script to run checks (formatting, linting, tests) and the pipeline."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\nFailed: {step_name}")
        sys.exit(1)


def run_checks(*, fix: bool) -> None:
    """Run ruff and the test suite."""
    if fix:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes")
    else:
        run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
        run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
    run_command(["uv", "run", "pytest", "-q"], "Tests")


def main() -> None:
    """Run the development checks and optionally the main script."""
    parser = argparse.ArgumentParser(
        description="Run development checks and main script."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping main.py"
    )
    args = parser.parse_args()

    run_checks(fix=not args.ci)
    if args.ci:
        print("\nCI checks passed successfully. Skipping execution of main.py.")
        return

    run_command(
        ["uv", "run", "python", "main.py", "--skip-doxygen"],
        "Main Entry Point",
    )

    print("\nAll development checks and main script passed successfully.")


if __name__ == "__main__":
    main()
