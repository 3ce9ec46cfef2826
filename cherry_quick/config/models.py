"""Pydantic models for config types."""

from typing import Optional
from pydantic import BaseModel, Field

class BranchConfig(BaseModel):
    """Branches the tool compares, all resolved against the remote."""
    from_branch: str = "dev"
    to_branch: str = "master"
    include_branch: Optional[str] = None
    remote: str = "origin"

    class Config:
        """Pydantic config."""
        extra = "allow"  # Allow extra fields

class UiConfig(BaseModel):
    """Interactive picker configuration."""
    rows: int = Field(default=20, gt=0)

    class Config:
        """Pydantic config."""
        extra = "allow"  # Allow extra fields

class CherryQuickConfig(BaseModel):
    """Full cherry-quick configuration."""
    branches: BranchConfig = Field(default_factory=BranchConfig)
    ui: UiConfig = Field(default_factory=UiConfig)
    # Name of the branch to create for the cherry-picks, if any
    branch: Optional[str] = None

    def remote_ref(self, branch: str) -> str:
        """Qualify a branch name with the configured remote."""
        return f"{self.branches.remote}/{branch}"
