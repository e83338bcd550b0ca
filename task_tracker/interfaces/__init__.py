"""User-facing interfaces for the task tracker (command line)."""
