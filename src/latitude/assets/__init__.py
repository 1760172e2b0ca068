"""Static asset pipeline: routing, header policy, compression, serving."""

from latitude.assets.policy import AssetPolicy
from latitude.assets.routes import resolve_path
from latitude.assets.server import StaticAssetServer

__all__ = ["AssetPolicy", "StaticAssetServer", "resolve_path"]
