"""Tests for DNS variable generation."""
from probekit.protocols.dns import VARIABLE_KEYS, generate_variables


class TestGenerateVariables:

    def test_subdomain(self):
        assert generate_variables("www.projectdiscovery.io") == {
            "FQDN": "www.projectdiscovery.io",
            "RDN": "projectdiscovery.io",
            "DN": "projectdiscovery",
            "TLD": "io",
            "SD": "www",
        }

    def test_two_labels(self):
        variables = generate_variables("example.com")
        assert variables["SD"] == ""
        assert variables["RDN"] == variables["FQDN"] == "example.com"
        assert variables["DN"] == "example"
        assert variables["TLD"] == "com"

    def test_single_label(self):
        assert generate_variables("localhost") == {
            "FQDN": "localhost",
            "RDN": "",
            "DN": "",
            "TLD": "localhost",
            "SD": "",
        }

    def test_deep_subdomain(self):
        variables = generate_variables("a.b.c.example.org")
        assert variables["SD"] == "a.b.c"
        assert variables["RDN"] == "example.org"

    def test_multi_label_suffix_is_not_special_cased(self):
        variables = generate_variables("www.example.co.uk")
        assert variables["TLD"] == "uk"
        assert variables["DN"] == "co"
        assert variables["RDN"] == "co.uk"
        assert variables["SD"] == "www.example"

    def test_always_has_every_key(self):
        for domain in ("", "x", "x.y", "x.y.z"):
            assert set(generate_variables(domain)) == set(VARIABLE_KEYS)

    def test_is_deterministic(self):
        assert generate_variables("api.example.com") == generate_variables("api.example.com")
