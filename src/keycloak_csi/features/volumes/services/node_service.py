"""Node service: materializes client credentials as volume files."""

import asyncio
import contextlib
import logging
import os
import shutil
import tempfile
from typing import Any, Callable, Mapping, Optional

from ....__version__ import __version__
from ....core.exceptions import MissingVolumeContextError, VolumeFilesystemError
from ....core.protocols import ClientSecretGetter
from ..models import (
    NodeCapabilitiesResponse,
    NodeInfoResponse,
    PluginCapabilitiesResponse,
    PluginCapability,
    PluginInfoResponse,
    ProbeResponse,
)

logger = logging.getLogger(__name__)

PLUGIN_NAME = "identity.keycloak.org"

CLIENT_ID_CONTEXT_KEY = "clientID"
CLIENT_ID_FILE = "client-id"
CLIENT_SECRET_FILE = "client-secret"

CLIENT_ID_FILE_MODE = 0o444
DEFAULT_SECRET_FILE_MODE = 0o444


def _write_file_atomic(path: str, data: bytes, mode: int) -> None:
    """Write ``data`` to ``path`` with ``mode``, replacing any existing file.

    The content is written to a temporary sibling first, so an existing
    read-only file can be replaced and readers never see a partial file.
    """
    directory, name = os.path.split(path)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{name}.")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_path)
        raise


def _remove_path(path: str) -> None:
    """Remove a file or directory tree. A missing path is not an error."""
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except FileNotFoundError:
        pass


class NodeService:
    """Publishes and unpublishes credential volumes.

    A published volume is nothing more than two files in the target
    directory: ``client-id`` holding the client name and ``client-secret``
    holding the raw secret. Their presence is the mount state.
    """

    def __init__(
        self,
        getter: ClientSecretGetter,
        node_id: str = "",
        secret_file_mode: int = DEFAULT_SECRET_FILE_MODE,
    ):
        """Initialize node service.

        Args:
            getter: Backend resolving client names to secrets
            node_id: Identifier reported by node info queries
            secret_file_mode: Permission bits for the client-secret file
        """
        if not getter:
            raise ValueError("Client secret getter is required")
        self.getter = getter
        self.node_id = node_id
        self.secret_file_mode = secret_file_mode

    async def publish(
        self,
        volume_id: str,
        target_path: str,
        volume_context: Optional[Mapping[str, str]],
    ) -> None:
        """Fetch the client secret and write the credential files.

        Files already written when a later step fails are left in place;
        ``unpublish`` cleans them up.

        Args:
            volume_id: Volume identifier, used for logging
            target_path: Directory to write the files into (created if missing)
            volume_context: Volume attributes carrying the client name

        Raises:
            MissingVolumeContextError: If the client name is missing
            VolumeFilesystemError: If a directory or file cannot be written
            KeycloakCSIError: If the secret cannot be fetched
        """
        client_name = (volume_context or {}).get(CLIENT_ID_CONTEXT_KEY)
        if not client_name:
            raise MissingVolumeContextError(CLIENT_ID_CONTEXT_KEY, volume_id=volume_id)

        try:
            secret = await self.getter.fetch(client_name)
        except Exception as e:
            logger.error(f"error while getting secret for volume {volume_id!r}: {e}")
            raise

        await self._run_fs(
            "creating mount dir", volume_id, target_path,
            os.makedirs, target_path, exist_ok=True,
        )

        client_id_path = os.path.join(target_path, CLIENT_ID_FILE)
        await self._run_fs(
            "writing client ID", volume_id, client_id_path,
            _write_file_atomic, client_id_path, client_name.encode("utf-8"), CLIENT_ID_FILE_MODE,
        )

        client_secret_path = os.path.join(target_path, CLIENT_SECRET_FILE)
        await self._run_fs(
            "writing secret", volume_id, client_secret_path,
            _write_file_atomic, client_secret_path, secret, self.secret_file_mode,
        )

        logger.info(f"mounted {volume_id}")

    async def unpublish(self, volume_id: str, target_path: str) -> None:
        """Remove the credential files. Calling it again is a no-op.

        Raises:
            VolumeFilesystemError: If a file exists but cannot be removed
        """
        for name in (CLIENT_ID_FILE, CLIENT_SECRET_FILE):
            path = os.path.join(target_path, name)
            await self._run_fs("removing file", volume_id, path, _remove_path, path)

        logger.info(f"unmounted {volume_id}")

    async def _run_fs(
        self,
        action: str,
        volume_id: str,
        path: str,
        func: Callable[..., Any],
        *args,
        **kwargs,
    ) -> Any:
        """Run a blocking filesystem call in a worker thread."""
        try:
            return await asyncio.to_thread(func, *args, **kwargs)
        except OSError as e:
            logger.error(f"error while {action} for volume {volume_id!r}: {e}")
            raise VolumeFilesystemError(f"{action}: {e}", volume_id=volume_id, path=path) from e

    # Identity and node queries

    def get_plugin_info(self) -> PluginInfoResponse:
        return PluginInfoResponse(name=PLUGIN_NAME, vendor_version=__version__)

    def get_plugin_capabilities(self) -> PluginCapabilitiesResponse:
        return PluginCapabilitiesResponse(capabilities=[PluginCapability.CONTROLLER_SERVICE])

    def probe(self) -> ProbeResponse:
        return ProbeResponse(ready=True)

    def get_node_info(self) -> NodeInfoResponse:
        return NodeInfoResponse(node_id=self.node_id)

    def get_node_capabilities(self) -> NodeCapabilitiesResponse:
        return NodeCapabilitiesResponse(capabilities=[])
