"""Entry point for the task tracker CLI.

Usage:
    python -m task_tracker.interfaces.cli.main

Or via installed entry point:
    task-tracker <command>
"""

from task_tracker.interfaces.cli import app


def main() -> None:
    """Run the task tracker CLI application."""
    app()


if __name__ == "__main__":
    main()
