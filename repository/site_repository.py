# repository/site_repository.py
import logging
import os
import tempfile
from model.site import SiteRecord
from util.constants import SITE_CONFIG_FILE
from util.errors import SiteAlreadyExistsError, StorageFailureError

logger = logging.getLogger(__name__)


class SiteRepository:
    """
    Filesystem-backed namespace of claimed site names.

    Flow:
    - One directory per claimed name under the storage root; its existence IS the claim.
    - claim() relies on mkdir failing when the entry exists, so at most one caller
      (in any process sharing the root) ever wins a given name.
    - The SiteRecord lands in <root>/<name>/config.json after the claim. A failed
      write leaves the directory in place; names are never returned to the pool.
    """

    def __init__(self, root: str) -> None:
        self._root = root

    def _path(self, name: str) -> str:
        return os.path.join(self._root, name)

    def ensure_root(self) -> None:
        os.makedirs(self._root, mode=0o755, exist_ok=True)

    def exists(self, name: str) -> bool:
        """True if `name` was claimed at the time of the call."""
        try:
            os.stat(self._path(name))
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageFailureError(f"error checking site existence: {e}") from e
        return True

    def claim(self, name: str, record: SiteRecord) -> None:
        path = self._path(name)
        try:
            os.mkdir(path, 0o755)
        except FileExistsError:
            logger.info("site.claim.lost name=%s", name)
            raise SiteAlreadyExistsError(name)
        except OSError as e:
            logger.error("site.claim.error name=%s err=%s", name, e)
            raise StorageFailureError(f"error creating site directory: {e}") from e

        logger.info("site.claim.ok name=%s", name)
        try:
            self._write_record(path, record)
        except OSError as e:
            # Claim stays in place as evidence of the attempt
            logger.error("site.record.write.error name=%s err=%s", name, e)
            raise StorageFailureError(f"error writing site config: {e}") from e

    @staticmethod
    def _write_record(path: str, record: SiteRecord) -> None:
        payload = record.model_dump_json(exclude_none=True, indent=2) + "\n"
        fd, tmp = tempfile.mkstemp(prefix=".config-", suffix=".tmp", dir=path)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, os.path.join(path, SITE_CONFIG_FILE))
        except OSError:
            try:
                os.unlink(tmp)
            except FileNotFoundError:
                pass
            raise

