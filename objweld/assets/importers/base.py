# objweld/assets/importers/base.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from objweld.mesh import Mesh


class AssetImporter(ABC):
    """
    Turns one mesh file into a Mesh. The asset server picks an importer by
    file suffix and calls it from worker threads.
    """

    @abstractmethod
    def import_file(self, path: Union[str, Path]) -> Mesh:
        """Read ``path`` and return the finished mesh; must be thread-safe."""

    @abstractmethod
    def import_source(
        self, data: Union[bytes, str], *, source: str = "<memory>"
    ) -> Mesh:
        """Import already-loaded file contents."""
