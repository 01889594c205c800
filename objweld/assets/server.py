# objweld/assets/server.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from queue import Empty, Queue
from typing import Dict, List, Optional, Tuple, Union

from objweld.assets.handle import AssetHandle, AssetId, asset_id_for
from objweld.assets.importers.base import AssetImporter
from objweld.assets.importers.obj import ObjImporter
from objweld.assets.registry import AssetRegistry
from objweld.errors import UnsupportedAssetError
from objweld.mesh import Mesh
from objweld.settings import ImportSettings

logger = logging.getLogger(__name__)

_Outcome = Tuple[AssetId, Union[Mesh, BaseException]]


class AssetServer:
    """
    Imports mesh files on worker threads.

    Every import owns its parser state, so different files load in
    parallel. Results are handed back through a queue and only enter the
    registry when the owner calls update().
    """

    def __init__(
        self,
        asset_root: Path,
        settings: Optional[ImportSettings] = None,
        max_workers: int = 2,
    ) -> None:
        self.root = Path(asset_root)
        self.registry = AssetRegistry()
        self.failures: Dict[AssetId, BaseException] = {}

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="AssetWorker"
        )
        self._loaded_queue: Queue[_Outcome] = Queue()

        self._handles: Dict[str, AssetHandle] = {}  # Path -> Handle

        self._importers: Dict[str, AssetImporter] = {
            ".obj": ObjImporter(settings),
        }

    def load(self, path: str) -> AssetHandle:
        """
        Non-blocking load request. Returns the handle instantly.
        """
        if path in self._handles:
            return self._handles[path]

        handle = AssetHandle(asset_id_for(path), path)
        self._handles[path] = handle

        full_path = self.root / path
        self._executor.submit(self._worker_load, handle.id, full_path)

        return handle

    def _worker_load(self, asset_id: AssetId, full_path: Path) -> None:
        try:
            ext = full_path.suffix.lower()
            importer = self._importers.get(ext)
            if importer is None:
                raise UnsupportedAssetError(f"No importer for {ext!r}")

            mesh = importer.import_file(full_path)
        except Exception as exc:
            logger.exception("[AssetServer] Failed to load %s", full_path)
            self._loaded_queue.put((asset_id, exc))
            return

        self._loaded_queue.put((asset_id, mesh))

    def update(self) -> List[AssetId]:
        """
        Drain finished loads on the calling thread.
        Returns the ids that became available (so upload code can pick them up).
        """
        loaded_ids = []
        while True:
            try:
                asset_id, outcome = self._loaded_queue.get_nowait()
            except Empty:
                break

            if isinstance(outcome, BaseException):
                self.failures[asset_id] = outcome
                continue

            self.registry.store(asset_id, outcome)
            loaded_ids.append(asset_id)

        return loaded_ids

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
