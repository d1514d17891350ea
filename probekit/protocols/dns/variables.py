"""Variables derived from a DNS target."""

from typing import Dict

VARIABLE_KEYS = ("FQDN", "RDN", "DN", "TLD", "SD")


def generate_variables(domain: str) -> Dict[str, str]:
    """Split a domain into the placeholder values DNS templates use.

    The last label is always taken as the TLD, so multi-label public
    suffixes such as ``co.uk`` are split as ``DN=co``, ``TLD=uk``.
    """
    parts = domain.split(".")
    if len(parts) < 2:
        return {"FQDN": domain, "RDN": "", "DN": "", "TLD": domain, "SD": ""}

    tld = parts[-1]
    dn = parts[-2]
    return {
        "FQDN": domain,
        "RDN": f"{dn}.{tld}",
        "DN": dn,
        "TLD": tld,
        "SD": ".".join(parts[:-2]),
    }
