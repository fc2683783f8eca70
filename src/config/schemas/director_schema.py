"""Director behaviour configuration schema."""
from pydantic import BaseModel, Field


class DirectorConfig(BaseModel):
    """Settings governing destructive VM operations."""

    force_delete: bool = Field(
        False, description="Log and ignore CPI errors while deleting VMs"
    )
    enable_virtual_delete_vms: bool = Field(
        False, description="Forget VMs without calling the CPI"
    )
    event_user: str = Field("director", description="User recorded on director events")
