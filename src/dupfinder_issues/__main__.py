"""Allow ``python -m dupfinder_issues``."""

from .cli import run

run()
