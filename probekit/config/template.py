"""Template configuration models.

These are the author-facing shapes a template loader produces. They are
frozen once built and carry no execution state.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from probekit.config.common import RecursionMode, SeverityLevel


def _split_string_list(value: Any) -> Any:
    # Template authors write either "a, b" or a YAML list.
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


class Classification(BaseModel):
    """Vulnerability classification attached to a template."""

    cvss_metrics: str = Field(default="", alias="cvss-metrics")
    cvss_score: float = Field(default=0.0, alias="cvss-score")
    cwe_id: List[str] = Field(default_factory=list, alias="cwe-id")
    cve_id: List[str] = Field(default_factory=list, alias="cve-id")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("cwe_id", "cve_id", mode="before")
    @classmethod
    def _split_ids(cls, value):
        return _split_string_list(value)


class TemplateInfo(BaseModel):
    name: str = ""
    authors: List[str] = Field(default_factory=list, alias="author")
    tags: List[str] = Field(default_factory=list)
    severity: SeverityLevel = SeverityLevel.UNKNOWN
    description: str = ""
    remediation: str = ""
    reference: List[str] = Field(default_factory=list)
    classification: Optional[Classification] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("authors", "tags", "reference", mode="before")
    @classmethod
    def _split_lists(cls, value):
        return _split_string_list(value)

    @field_validator("severity", mode="before")
    @classmethod
    def _normalize_severity(cls, value):
        if isinstance(value, str):
            return value.strip().lower() or SeverityLevel.UNKNOWN
        return value


class DNSRequestConfig(BaseModel):
    """A DNS request as written in a template, before compilation.

    ``request_type`` and ``dns_class`` stay plain strings here; the
    compiler is the one place that validates them.
    """

    id: str = ""
    name: str
    request_type: str = Field(alias="type")
    dns_class: str = Field(default="inet", alias="class")
    retries: int = 0
    recursion: RecursionMode = RecursionMode.UNSET

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("retries", mode="before")
    @classmethod
    def _retries_unset(cls, value):
        return 0 if value is None else value

    @field_validator("recursion", mode="before")
    @classmethod
    def _recursion_from_bool(cls, value: Union[bool, str, None, RecursionMode]):
        if value is None:
            return RecursionMode.UNSET
        if isinstance(value, bool):
            return RecursionMode.FORCE_TRUE if value else RecursionMode.FORCE_FALSE
        return value
