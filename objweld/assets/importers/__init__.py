from objweld.assets.importers.base import AssetImporter
from objweld.assets.importers.obj import ObjImporter, load_obj

__all__ = ["AssetImporter", "ObjImporter", "load_obj"]
