"""Report rendering for result events."""

from probekit.report.markdown import (
    get_matched_template,
    markdown_description,
    summary,
    to_markdown_table_string,
)

__all__ = [
    "get_matched_template",
    "markdown_description",
    "summary",
    "to_markdown_table_string",
]
