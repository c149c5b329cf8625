# tests/test_metrics.py
from prometheus_client import REGISTRY
from conftest import FakeClient, FakeSession, datacenter, host
from vcenter_ticket.api import CertificateRequestService
from vcenter_ticket.config import Credentials
from vcenter_ticket.exceptions import HostNotFoundError
from vcenter_ticket.metrics import record_request
from vcenter_ticket.resolver import HostResolver


def sample(name, labels):
    """Read a sample value, 0.0 if the series does not exist yet."""
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestRecordRequest:
    """Tests for record_request function."""

    def test_success(self):
        """Test that a success increments the success outcome only."""
        labels = {"vcenter": "vc-metrics-1", "operation": "request_ticket", "outcome": "success"}
        before = sample("vcenter_requests_total", labels)

        record_request("vc-metrics-1", "request_ticket")

        assert sample("vcenter_requests_total", labels) == before + 1

    def test_error(self):
        """Test that an error increments the outcome and error counters."""
        error = HostNotFoundError("esx01", "vc-metrics-2")
        outcome = {
            "vcenter": "vc-metrics-2",
            "operation": "request_ticket",
            "outcome": "HostNotFoundError",
        }
        errors = {"vcenter": "vc-metrics-2", "error": "HostNotFoundError"}
        before_outcome = sample("vcenter_requests_total", outcome)
        before_errors = sample("vcenter_errors_total", errors)

        record_request("vc-metrics-2", "request_ticket", error)

        assert sample("vcenter_requests_total", outcome) == before_outcome + 1
        assert sample("vcenter_errors_total", errors) == before_errors + 1


class TestServiceMetrics:
    """Tests for metrics recorded by CertificateRequestService."""

    def test_resolution_method_counted(self):
        """Test that the matching pass is counted."""
        before_exact = sample("vcenter_host_resolution_total", {"method": "exact"})
        before_short = sample("vcenter_host_resolution_total", {"method": "short_name"})
        before_ip = sample("vcenter_host_resolution_total", {"method": "ip"})
        session = FakeSession(
            hosts=[host("esx01"), host("esx02.example.com")],
            datacenters=[datacenter("DC1")],
            ip_index={("DC1", "10.0.0.5"): [host("H1")]},
        )
        resolver = HostResolver(resolve_ips=lambda name: ["10.0.0.5"])

        resolver.resolve(session, "esx01")
        resolver.resolve(session, "esx02")
        resolver.resolve(session, "esx03")

        assert sample("vcenter_host_resolution_total", {"method": "exact"}) == before_exact + 1
        assert sample("vcenter_host_resolution_total", {"method": "short_name"}) == before_short + 1
        assert sample("vcenter_host_resolution_total", {"method": "ip"}) == before_ip + 1

    def test_latency_observed(self):
        """Test that each request is observed in the latency histogram."""
        labels = {"vcenter": "vc-metrics-3", "operation": "list_all_hosts"}
        before = sample("vcenter_request_latency_seconds_count", labels)
        service = CertificateRequestService(FakeClient(FakeSession(hosts=[host("a")])))

        service.list_all_hosts("vc-metrics-3", Credentials("user", "pass"))

        assert sample("vcenter_request_latency_seconds_count", labels) == before + 1
