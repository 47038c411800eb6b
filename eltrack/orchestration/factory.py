"""Factory wiring a RideLog from configuration."""

import logging

from eltrack.config import ElTrackConfig
from eltrack.interfaces import RemoteStore
from eltrack.services import (
    HttpRecordStore,
    JsonSettingsStore,
    LocalStore,
    Reconciler,
    RemoteSyncQueue,
)

from .ride_log import RideLog

logger = logging.getLogger(__name__)


def create_ride_log(config: ElTrackConfig, remote: RemoteStore | None = None) -> RideLog:
    """Build a RideLog with local storage and, if configured, cloud sync.

    Args:
        config: Application configuration
        remote: Remote store to use instead of the HTTP record service

    Returns:
        A RideLog with its local rides already loaded
    """
    local_store = LocalStore(JsonSettingsStore(config.settings_path), key=config.entries_key)

    if remote is None and config.remote_configured:
        remote = HttpRecordStore(config)

    push_queue = None
    reconciler = None
    if remote is not None:
        push_queue = RemoteSyncQueue(remote, config)
        reconciler = Reconciler(local_store, remote)
    else:
        logger.debug("No remote store configured; running local-only")

    ride_log = RideLog(local_store, push_queue=push_queue, reconciler=reconciler)
    ride_log.load()
    return ride_log
