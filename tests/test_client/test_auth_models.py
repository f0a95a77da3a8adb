"""Tests for auth_models.py"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from anaplan_client.auth_models import AuthTokenResponse, TokenInfo, TokenValidationResponse


def test_token_info_from_wire():
    """Test TokenInfo parses camelCase fields."""
    info = TokenInfo.model_validate(
        {"tokenValue": "abc", "expiresAt": 1700000000000, "tokenId": "id-1"}
    )

    assert info.token_value == "abc"
    assert info.expires_at == 1700000000000
    assert info.token_id == "id-1"
    assert info.refresh_token_id is None


def test_token_info_expiry_datetime():
    """Test millisecond expiry conversion."""
    info = TokenInfo(token_value="abc", expires_at=1700000000000)

    assert info.expires_at_datetime == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)


def test_token_info_requires_value():
    """Test that tokenValue is required."""
    with pytest.raises(ValidationError):
        TokenInfo.model_validate({"expiresAt": 1})


def test_auth_token_response():
    """Test full auth response parsing."""
    response = AuthTokenResponse.model_validate(
        {
            "meta": {"validationUrl": "https://auth.anaplan.com/token/validate"},
            "status": "SUCCESS",
            "statusMessage": "Login successful",
            "tokenInfo": {"tokenValue": "abc", "expiresAt": 1},
        }
    )

    assert response.status == "SUCCESS"
    assert response.status_message == "Login successful"
    assert response.token_info.token_value == "abc"


def test_token_validation_response_without_value():
    """Test the validate response parses without a tokenValue."""
    response = TokenValidationResponse.model_validate(
        {
            "status": "SUCCESS",
            "statusMessage": "Token validated",
            "userInfo": {"userGuid": "8a89d999", "userId": "a.user@anaplan.com"},
            "tokenInfo": {"expiresAt": 1700000000000, "tokenId": "4d677e7d"},
        }
    )

    assert response.token_info.token_id == "4d677e7d"
    assert response.token_info.expires_at_datetime.year == 2023
    assert response.user_info is not None
    assert response.user_info.customer_guid is None
