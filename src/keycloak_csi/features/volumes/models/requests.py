"""Volume API request models."""

from typing import Dict

from pydantic import BaseModel, Field


class PublishVolumeRequest(BaseModel):
    """Publish (mount) request model."""

    target_path: str = Field(..., min_length=1, description="Directory to materialize the credential files in")
    volume_context: Dict[str, str] = Field(
        default_factory=dict,
        description="Volume attributes; must carry the client name under 'clientID'",
    )


class UnpublishVolumeRequest(BaseModel):
    """Unpublish (unmount) request model."""

    target_path: str = Field(..., min_length=1, description="Directory the credential files were written to")
