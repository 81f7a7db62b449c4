from .errors import (
    ComponentAssetError,
    FrozenRegistryError,
    InvalidComponentValueError,
    UnreadableAssetError,
    UnsupportedAssetKindError,
)
from .handler import AssetEnvironment, RenderPass, current_pass, get_environment, reset_environment

__all__ = [
    "AssetEnvironment",
    "ComponentAssetError",
    "FrozenRegistryError",
    "InvalidComponentValueError",
    "RenderPass",
    "UnreadableAssetError",
    "UnsupportedAssetKindError",
    "current_pass",
    "get_environment",
    "reset_environment",
]
