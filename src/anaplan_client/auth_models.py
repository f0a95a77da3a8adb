"""Authentication models mirroring the Anaplan auth service responses."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class TokenDetails(BaseModel):
    """Token block without the token value, as returned by /token/validate.

    Example:
        {
            "expiresAt": 1509728252000,
            "tokenId": "4d677e7d-c0ae-11e7-9f79-b179910b5099"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    expires_at: int = Field(
        ..., alias="expiresAt", description="Expiry timestamp (milliseconds since epoch)"
    )
    token_id: str | None = Field(None, alias="tokenId", description="Token ID")
    refresh_token_id: str | None = Field(
        None, alias="refreshTokenId", description="Refresh token ID"
    )

    @property
    def expires_at_datetime(self) -> datetime:
        """Convert expires_at (milliseconds) to an aware UTC datetime."""
        return datetime.fromtimestamp(self.expires_at / 1000, tz=UTC)


class TokenInfo(TokenDetails):
    """Token block of an authenticate or refresh response.

    Example:
        {
            "expiresAt": 1579097285123,
            "tokenId": "2d7b5c4a-...",
            "tokenValue": "0Ae3Mkk8...",
            "refreshTokenId": "94ccd3cb-..."
        }
    """

    token_value: str = Field(..., alias="tokenValue", description="Token to send")


class AuthTokenResponse(BaseModel):
    """Response from /token/authenticate and /token/refresh.

    Example:
        {
            "meta": {"validationUrl": "https://auth.anaplan.com/token/validate"},
            "status": "SUCCESS",
            "statusMessage": "Login successful",
            "tokenInfo": {...}
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., description="SUCCESS or FAILURE")
    status_message: str | None = Field(None, alias="statusMessage")
    token_info: TokenInfo = Field(..., alias="tokenInfo")


class UserInfo(BaseModel):
    """Owner of a validated token."""

    model_config = ConfigDict(populate_by_name=True)

    user_guid: str | None = Field(None, alias="userGuid")
    user_id: str | None = Field(None, alias="userId", description="Login name")
    customer_guid: str | None = Field(None, alias="customerGuid")


class TokenValidationResponse(BaseModel):
    """Response from /token/validate.

    Example:
        {
            "status": "SUCCESS",
            "statusMessage": "Token validated",
            "userInfo": {"userGuid": "8a89d999...", "userId": "a.user@anaplan.com"},
            "tokenInfo": {"expiresAt": 1509728252000, "tokenId": "4d677e7d-..."}
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., description="SUCCESS or FAILURE")
    status_message: str | None = Field(None, alias="statusMessage")
    user_info: UserInfo | None = Field(None, alias="userInfo")
    token_info: TokenDetails = Field(..., alias="tokenInfo")
