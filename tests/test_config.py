# tests/test_config.py
import dataclasses
import pytest
from vcenter_ticket.config import (
    ENTITY_DATACENTER,
    ENTITY_HOST_SYSTEM,
    SDK_PATH,
    Credentials,
    InventoryEntity,
    SessionTicket,
    VCenterConfig,
)


class TestVCenterConfig:
    """Tests for VCenterConfig dataclass."""

    def test_required_fields(self):
        """Test VCenterConfig with only required fields."""
        config = VCenterConfig(hostname="vc.example.com", username="admin", password="secret")
        assert config.hostname == "vc.example.com"
        assert config.username == "admin"
        assert config.password == "secret"

    def test_default_values(self):
        """Test VCenterConfig default values."""
        config = VCenterConfig(hostname="vc", username="admin", password="secret")
        assert config.verify_ssl is False
        assert config.port == 443

    def test_frozen(self):
        """Test that VCenterConfig is immutable."""
        config = VCenterConfig(hostname="vc", username="admin", password="secret")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.hostname = "other"

    def test_password_not_in_repr(self):
        """Test that the password is hidden from repr()."""
        config = VCenterConfig(hostname="vc", username="admin", password="secret")
        assert "secret" not in repr(config)

    def test_credentials(self):
        """Test the credentials property."""
        config = VCenterConfig(hostname="vc", username="admin", password="secret")
        assert config.credentials == Credentials("admin", "secret")


class TestCredentials:
    """Tests for Credentials dataclass."""

    def test_password_not_in_repr(self):
        """Test that the password is hidden from repr()."""
        assert "secret" not in repr(Credentials("admin", "secret"))


class TestInventoryEntity:
    """Tests for InventoryEntity dataclass."""

    def test_ref_ignored_in_equality(self):
        """Test that two entities differing only by ref are equal."""
        a = InventoryEntity("esx01", ENTITY_HOST_SYSTEM, ref=object())
        b = InventoryEntity("esx01", ENTITY_HOST_SYSTEM, ref=object())
        assert a == b

    def test_type_in_equality(self):
        """Test that the type tag is part of equality."""
        assert InventoryEntity("x", ENTITY_HOST_SYSTEM) != InventoryEntity("x", ENTITY_DATACENTER)


class TestSessionTicket:
    """Tests for SessionTicket dataclass."""

    def test_fields(self):
        """Test SessionTicket fields."""
        ticket = SessionTicket(session_id="52b3-aa", host_name="esx01")
        assert ticket.session_id == "52b3-aa"
        assert ticket.host_name == "esx01"

    def test_session_id_not_in_repr(self):
        """Test that the session id is hidden from repr()."""
        assert "52b3-aa" not in repr(SessionTicket(session_id="52b3-aa"))


class TestConstants:
    """Tests for module constants."""

    def test_values(self):
        """Test entity type names and SDK path."""
        assert ENTITY_HOST_SYSTEM == "HostSystem"
        assert ENTITY_DATACENTER == "Datacenter"
        assert SDK_PATH == "/sdk"
