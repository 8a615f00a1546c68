"""Configuration models for sail."""

from typing import Optional

from pydantic import BaseModel

from ..core.constants import DEFAULT_IMAGE, DEFAULT_NETWORK, DEFAULT_SUBNET


class SailConfig(BaseModel):
    """User configuration for sail."""
    default_network: str = DEFAULT_NETWORK
    default_subnet: str = DEFAULT_SUBNET
    default_image: str = DEFAULT_IMAGE
    meta_root: Optional[str] = None
    code_server_path: Optional[str] = None
