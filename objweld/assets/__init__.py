from objweld.assets.handle import AssetHandle, AssetId
from objweld.assets.importers import AssetImporter, ObjImporter, load_obj
from objweld.assets.registry import AssetRegistry
from objweld.assets.server import AssetServer

__all__ = [
    "AssetServer",
    "AssetHandle",
    "AssetId",
    "AssetImporter",
    "AssetRegistry",
    "ObjImporter",
    "load_obj",
]
