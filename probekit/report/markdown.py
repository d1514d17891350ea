"""Summary and Markdown rendering of result events.

The section order and formatting here are relied on by downstream issue
trackers, so changes to the layout are breaking changes.
"""

from datetime import datetime, timezone
from typing import List, Tuple

from probekit import __version__
from probekit.config import Classification, ResultEvent, SeverityLevel, TemplateInfo
from probekit.utils import is_not_blank, to_hex_or_string, to_string

RESPONSE_LIMIT = 5 * 1024
TRUNCATED_MARKER = ".... Truncated ...."

_CVSS_CALCULATORS = (
    ("CVSS:3.0", "https://www.first.org/cvss/calculator/3.0#"),
    ("CVSS:3.1", "https://www.first.org/cvss/calculator/3.1#"),
)


def summary(event: ResultEvent) -> str:
    """One line: ``Name (template[:matcher][:extractor]) found on host``."""
    return f"{event.info.name} ({get_matched_template(event)}) found on {event.host}"


def markdown_description(event: ResultEvent) -> str:
    """Describe a result event in Markdown."""
    template = get_matched_template(event)
    parts = [
        f"**Details**: **{template}**  matched at {event.host}",
        f"\n\n**Protocol**: {event.type.upper()}",
        f"\n\n**Full URL**: {event.matched}",
        f"\n\n**Timestamp**: {format_timestamp(event.timestamp)}",
        "\n\n**Template Information**\n\n| Key | Value |\n|---|---|\n",
        to_markdown_table_string(event.info),
    ]

    if event.request:
        parts.append(create_markdown_code_block("Request", to_hex_or_string(event.request), "http"))
    if event.response:
        parts.append(create_markdown_code_block("Response", truncate_response(event.response), "http"))

    if event.extracted_results or event.metadata:
        parts.append("\n**Extra Information**\n\n")
        if event.extracted_results:
            parts.append("**Extracted results**:\n\n")
            parts.extend(f"- {value}\n" for value in event.extracted_results)
            parts.append("\n")
        if event.metadata:
            parts.append("**Metadata**:\n\n")
            parts.extend(f"- {key}: {to_string(value)}\n" for key, value in event.metadata.items())
            parts.append("\n")

    interaction = event.interaction
    if interaction is not None:
        parts.append("**Interaction Data**\n---\n")
        parts.append(interaction.protocol)
        if interaction.q_type:
            parts.append(f" ({interaction.q_type})")
        parts.append(f" Interaction from {interaction.remote_address} at {interaction.unique_id}")
        if interaction.raw_request:
            parts.append(create_markdown_code_block("Interaction Request", interaction.raw_request, ""))
        if interaction.raw_response:
            parts.append(create_markdown_code_block("Interaction Response", interaction.raw_response, ""))

    if event.info.reference:
        parts.append("\nReferences: \n")
        parts.append("\n".join(f"- {item}" for item in event.info.reference))
    parts.append("\n")

    if event.curl_command:
        parts.append(f"\n**CURL Command**\n```\n{to_hex_or_string(event.curl_command)}\n```")

    parts.append(f"\n---\nGenerated by probekit v{__version__}")
    return "".join(parts)


def get_matched_template(event: ResultEvent) -> str:
    template = event.template_id
    if event.matcher_name:
        template += f":{event.matcher_name}"
    if event.extractor_name:
        template += f":{event.extractor_name}"
    return template


def format_timestamp(timestamp: datetime) -> str:
    """Render as e.g. ``Mon Jan 2 15:04:05 +0000 UTC 2006``."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return f"{timestamp:%a %b} {timestamp.day} {timestamp:%H:%M:%S %z %Z %Y}"


def truncate_response(response: str) -> str:
    data = response.encode("utf-8")
    if len(data) <= RESPONSE_LIMIT:
        return response
    return data[:RESPONSE_LIMIT].decode("utf-8", errors="ignore") + TRUNCATED_MARKER


def to_markdown_table_string(info: TemplateInfo) -> str:
    return "".join(f"| {key} | {value} |\n" for key, value in template_info_rows(info))


def template_info_rows(info: TemplateInfo) -> List[Tuple[str, str]]:
    """Table rows in display order, blank values dropped."""
    severity = "" if info.severity == SeverityLevel.UNKNOWN else info.severity.value
    rows = [
        ("Name", info.name),
        ("Authors", ", ".join(info.authors)),
        ("Tags", ", ".join(info.tags)),
        ("Severity", severity),
        ("Description", info.description),
        ("Remediation", info.remediation),
    ]
    if info.classification is not None:
        rows.extend(_classification_rows(info.classification))
    rows.extend((key, to_string(value)) for key, value in info.metadata.items())
    return [(key, value) for key, value in rows if is_not_blank(value)]


def _classification_rows(classification: Classification) -> List[Tuple[str, str]]:
    rows = []
    if classification.cvss_metrics:
        rows.append(("CVSS-Metrics", _cvss_metrics_link(classification.cvss_metrics)))
        rows.append(("CVSS-Score", f"{classification.cvss_score:.2f}"))

    cwe_links = []
    for value in classification.cwe_id:
        parts = value.split("-")
        if len(parts) != 2:
            continue
        cwe_links.append(f"[{value.upper()}](https://cwe.mitre.org/data/definitions/{parts[1]}.html)")
    if cwe_links:
        rows.append(("CWE-ID", ",".join(cwe_links)))

    cve_links = [
        f"[{value.upper()}](https://cve.mitre.org/cgi-bin/cvename.cgi?name={value})"
        for value in classification.cve_id
    ]
    if cve_links:
        rows.append(("CVE-ID", ",".join(cve_links)))
    return rows


def _cvss_metrics_link(metrics: str) -> str:
    for marker, prefix in _CVSS_CALCULATORS:
        if marker in metrics:
            return f"[{metrics}]({prefix}{metrics})"
    return metrics


def create_markdown_code_block(title: str, content: str, language: str) -> str:
    return f"\n**{title}**\n```{language}\n{content}\n```\n"
