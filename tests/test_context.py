"""Tests for placeholder interpolation."""
from probekit.scanner import ExecutionContext


class TestInterpolate:

    def test_replaces_known_names(self):
        context = ExecutionContext(variables={"FQDN": "a.example.com", "TLD": "com"})
        assert context.interpolate("{{FQDN}}/{{ TLD }}") == "a.example.com/com"

    def test_unknown_names_left_verbatim(self):
        context = ExecutionContext(variables={"FQDN": "a.example.com"})
        assert context.interpolate("{{RDN}}.{{FQDN}}") == "{{RDN}}.a.example.com"

    def test_single_pass(self):
        context = ExecutionContext(variables={"A": "{{B}}", "B": "b"})
        assert context.interpolate("{{A}}") == "{{B}}"

    def test_unresolved(self):
        context = ExecutionContext(variables={"SD": ""})
        assert context.unresolved("{{SD}}.{{DN}}.{{ TLD }}") == ["DN", "TLD"]

    def test_empty_value(self):
        context = ExecutionContext(variables={"SD": ""})
        assert context.interpolate("{{SD}}.example.com") == ".example.com"
