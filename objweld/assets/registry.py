# objweld/assets/registry.py
from typing import Dict, Optional

from objweld.assets.handle import AssetId
from objweld.mesh import Mesh


class AssetRegistry:
    """
    Stores imported meshes (CPU side) mapped by AssetId.
    """

    def __init__(self) -> None:
        self._storage: Dict[AssetId, Mesh] = {}

    def store(self, asset_id: AssetId, mesh: Mesh) -> None:
        self._storage[asset_id] = mesh

    def get(self, asset_id: AssetId) -> Optional[Mesh]:
        return self._storage.get(asset_id)

    def __contains__(self, asset_id: AssetId) -> bool:
        return asset_id in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def clear(self) -> None:
        """Drop every stored mesh."""
        self._storage.clear()
