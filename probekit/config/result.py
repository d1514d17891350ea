"""Result models produced by protocol modules."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from probekit.config.template import TemplateInfo


class Interaction(BaseModel):
    """Out-of-band callback correlated to a probe. Passed through untouched."""

    protocol: str = ""
    q_type: str = ""
    remote_address: str = ""
    unique_id: str = ""
    raw_request: str = ""
    raw_response: str = ""

    model_config = {"frozen": True}


class ResultEvent(BaseModel):
    """One completed probe, as seen by matching and reporting."""

    template_id: str
    template_path: Optional[str] = None
    info: TemplateInfo = Field(default_factory=TemplateInfo)
    matcher_name: str = ""
    extractor_name: str = ""
    type: str
    host: str
    matched: str = ""
    extracted_results: List[str] = Field(default_factory=list)
    request: str = ""
    response: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)
    ip: str = ""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    interaction: Optional[Interaction] = None
    curl_command: str = ""

    model_config = {"frozen": True}
