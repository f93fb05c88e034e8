"""Integration tests for BcryptPasswordService (real bcrypt).

Tests cover:
- Hash/verify of correct and wrong passwords
- Malformed hashes verify as False
- Cost factor validation
"""

import pytest

from account_tokens.infrastructure.security import BcryptPasswordService


@pytest.mark.integration
class TestBcryptPasswordService:
    """Test bcrypt hashing."""

    def test_hash_and_verify(self, password_service):
        """Test the hash verifies the original password only."""
        password_hash = password_service.hash_password("S3cure!pass")

        assert password_hash.startswith("$2b$10$")
        assert password_service.verify_password("S3cure!pass", password_hash)
        assert not password_service.verify_password("wrong", password_hash)

    def test_hashes_are_salted(self, password_service):
        """Test hashing twice gives different hashes."""
        assert password_service.hash_password("pw") != password_service.hash_password("pw")

    @pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$10$short"])
    def test_malformed_hash_is_false(self, password_service, bad_hash):
        """Test malformed stored hashes never verify."""
        assert password_service.verify_password("pw", bad_hash) is False

    @pytest.mark.parametrize("cost_factor", [9, 21])
    def test_cost_factor_out_of_range(self, cost_factor):
        """Test cost factors outside 10..20 are rejected."""
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost_factor)
