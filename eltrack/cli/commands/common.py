"""Shared setup for CLI subcommands."""

import logging

from eltrack.config import ElTrackConfig, config_from_env
from eltrack.interfaces import PresenterProtocol
from eltrack.models import PushResult
from eltrack.orchestration import RideLog, create_ride_log


def build_config(args) -> ElTrackConfig:
    """Create the configuration from the environment and global CLI options."""
    overrides = {}
    if getattr(args, "data_dir", None):
        overrides["data_dir"] = args.data_dir
    if getattr(args, "offline", False):
        overrides["remote_url"] = ""
    return config_from_env(**overrides)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def open_ride_log(args) -> tuple[ElTrackConfig, RideLog]:
    config = build_config(args)
    return config, create_ride_log(config)


def flush_pushes(ride_log: RideLog, config: ElTrackConfig, presenter: PresenterProtocol) -> None:
    """Wait for queued cloud pushes so they are not lost when the CLI exits."""
    if ride_log.push_queue is None:
        return
    budget = config.remote_timeout * config.retry_max_attempts + config.retry_max_delay
    results: list[PushResult] = ride_log.push_queue.wait_idle(timeout=budget)
    failed = [r for r in results if not r.ok]
    for result in failed:
        presenter.show_warning(
            f"Cloud {result.operation} of {result.entry_id} failed: {result.error}"
        )
    if failed:
        presenter.show_info("Local changes are saved; run 'eltrack sync' later.")
