"""Issues from JetBrains dupFinder logs.

Every duplicate reported by dupFinder becomes one issue per participating
fragment, describing the fragment's relation to all other fragments of the
duplicate as plain text, Markdown and HTML.
"""

from .config import DupFinderIssuesSettings, FileLinkSettings, load_settings
from .core.exceptions import ConfigurationError, DupFinderIssuesError, LogParseError
from .models import DuplicateCluster, Fragment, Issue, IssuePriority
from .parser import parse_log, parse_log_bytes
from .provider import (
    DupFinderIssuesProvider,
    provider_type_name,
    read_issues_from_content,
    read_issues_from_file,
)
from .synthesizer import synthesize

__version__ = "1.0.0"
__all__ = [
    "DupFinderIssuesProvider",
    "DupFinderIssuesSettings",
    "FileLinkSettings",
    "load_settings",
    "provider_type_name",
    "read_issues_from_file",
    "read_issues_from_content",
    "parse_log",
    "parse_log_bytes",
    "synthesize",
    "Fragment",
    "DuplicateCluster",
    "Issue",
    "IssuePriority",
    "DupFinderIssuesError",
    "LogParseError",
    "ConfigurationError",
]
