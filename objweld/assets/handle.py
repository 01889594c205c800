# objweld/assets/handle.py
import hashlib
from dataclasses import dataclass
from typing import NewType

AssetId = NewType("AssetId", int)


def asset_id_for(path: str) -> AssetId:
    """Stable id derived from the asset's relative path."""
    return AssetId(int(hashlib.sha256(path.encode()).hexdigest(), 16) % (10**16))


@dataclass(frozen=True)
class AssetHandle:
    """
    Lightweight reference to a mesh asset.
    Holding this does not guarantee that the asset is loaded.
    """

    id: AssetId
    path: str
