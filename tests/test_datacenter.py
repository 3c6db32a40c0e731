import pytest

from geotrust.services.enrichment.constants import DEFAULT_DATACENTER_CIDRS
from geotrust.services.enrichment.datacenter import DatacenterClassifier


@pytest.fixture
def classifier() -> DatacenterClassifier:
    return DatacenterClassifier(DEFAULT_DATACENTER_CIDRS)


@pytest.mark.parametrize("ip", ["34.1.2.3", "52.95.110.1", "104.16.0.1", "104.31.255.255"])
def test_datacenter_members(classifier: DatacenterClassifier, ip: str) -> None:
    assert classifier.is_datacenter(ip) is True


@pytest.mark.parametrize("ip", ["8.8.8.8", "104.32.0.1", "203.0.113.5", "10.0.0.1"])
def test_non_members(classifier: DatacenterClassifier, ip: str) -> None:
    assert classifier.is_datacenter(ip) is False


@pytest.mark.parametrize("ip", ["", "not-an-ip", "10.10.10.256", "34", "34.0.0.0/8", "::zz", "34.1", "52.1.2", "034.1.2.3"])
def test_unparseable_ip_is_never_member(classifier: DatacenterClassifier, ip: str) -> None:
    assert classifier.is_datacenter(ip) is False


def test_invalid_cidrs_are_skipped() -> None:
    classifier = DatacenterClassifier(["garbage", "52.0.0.0/8", "300.0.0.0/8"])

    assert len(classifier.blocks) == 1
    assert classifier.is_datacenter("52.1.1.1") is True


def test_host_bits_are_normalised() -> None:
    classifier = DatacenterClassifier(["34.1.0.0/8"])

    assert classifier.is_datacenter("34.200.0.1") is True


def test_ipv6_blocks() -> None:
    classifier = DatacenterClassifier(["2600:1f00::/24", "52.0.0.0/8"])

    assert classifier.is_datacenter("2600:1f00::1") is True
    assert classifier.is_datacenter("2001:db8::1") is False
    assert classifier.is_datacenter("::1") is False


def test_block_order_is_preserved() -> None:
    cidrs = ["104.16.0.0/12", "34.0.0.0/8", "52.0.0.0/8"]
    classifier = DatacenterClassifier(cidrs)

    assert [str(block) for block in classifier.blocks] == cidrs
