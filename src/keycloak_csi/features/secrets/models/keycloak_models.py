"""Keycloak API payload models."""

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """Token endpoint response for the password grant."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1, description="Bearer token")
    expires_in: int = Field(..., ge=0, description="Token lifetime in seconds")


class ClientRepresentation(BaseModel):
    """Entry of the admin client listing."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Internal client UUID")


class ClientSecretResponse(BaseModel):
    """Admin client-secret endpoint response."""

    model_config = ConfigDict(extra="ignore")

    value: str = Field(default="", description="Client secret")
