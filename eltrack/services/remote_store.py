"""Remote record stores for cloud sync."""

import logging
from typing import Any

import requests

from eltrack.config import ElTrackConfig
from eltrack.exceptions import EntryParseError, RemoteError, RemoteErrorKind
from eltrack.models import AccountStatus, ElevatorEntry

logger = logging.getLogger(__name__)


def entry_to_record(entry: ElevatorEntry) -> dict[str, Any]:
    """Build the cloud record for an entry (record name = entry id)."""
    return {
        "recordName": entry.record_name,
        "fields": {
            "startingFloor": entry.starting_floor,
            "endingFloor": entry.ending_floor,
            "elevator": entry.elevator.value,
            "timestamp": entry.timestamp.isoformat(),
        },
    }


def record_to_entry(record: Any) -> ElevatorEntry:
    """Materialize an entry from a cloud record.

    Raises:
        EntryParseError: If the record is missing fields or cannot be parsed
    """
    if not isinstance(record, dict) or not isinstance(record.get("fields"), dict):
        raise EntryParseError("Record has no fields object")
    fields = record["fields"]
    return ElevatorEntry.from_dict(
        {
            "id": record.get("recordName"),
            "startingFloor": fields.get("startingFloor"),
            "endingFloor": fields.get("endingFloor"),
            "elevator": fields.get("elevator"),
            "timestamp": fields.get("timestamp"),
        }
    )


def parse_records(records: list[Any]) -> list[ElevatorEntry]:
    """Convert records to entries, dropping the malformed ones."""
    entries = []
    for record in records:
        try:
            entries.append(record_to_entry(record))
        except EntryParseError as e:
            logger.debug(f"Dropping malformed remote record: {e}")
    return entries


class HttpRecordStore:
    """Remote store backed by a JSON record service over HTTP.

    Implements RemoteStore protocol. One record per entry lives at
    ``{remote_url}/records/{record_type}/{entry id}``.
    """

    def __init__(self, config: ElTrackConfig):
        """Initialize the HTTP record store.

        Args:
            config: Configuration with remote URL, token and timeout
        """
        self.config = config
        self._base_url = config.remote_url.rstrip("/")

    @property
    def collection_url(self) -> str:
        return f"{self._base_url}/records/{self.config.remote_record_type}"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config.remote_token:
            headers["Authorization"] = f"Bearer {self.config.remote_token}"
        return headers

    def _require_configured(self) -> None:
        if not self.config.remote_configured:
            raise RemoteError(RemoteErrorKind.NOT_CONFIGURED, "Cloud sync is not configured")

    @staticmethod
    def _raise_for_status(response: requests.Response, action: str) -> None:
        """Translate an HTTP error status into a RemoteError."""
        status = response.status_code
        if status < 400:
            return
        if status == 401:
            kind = RemoteErrorKind.NOT_CONFIGURED
        elif status == 404:
            kind = RemoteErrorKind.NOT_FOUND
        elif status in (429, 507):
            kind = RemoteErrorKind.QUOTA_EXCEEDED
        else:
            kind = RemoteErrorKind.TRANSIENT
        raise RemoteError(kind, f"{action} failed: HTTP {status}")

    def fetch_all(self) -> list[ElevatorEntry]:
        """Fetch every entry record.

        Raises:
            RemoteError: If the backend call fails or returns an unreadable body
        """
        self._require_configured()
        try:
            response = requests.get(
                self.collection_url,
                headers=self._headers(),
                timeout=self.config.remote_timeout,
            )
        except requests.RequestException as e:
            raise RemoteError(RemoteErrorKind.TRANSIENT, f"Fetch failed: {e}") from e

        self._raise_for_status(response, "Fetch")

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteError(RemoteErrorKind.PARSE_FAILURE, "Fetch returned invalid JSON") from e

        records = data.get("records") if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise RemoteError(RemoteErrorKind.PARSE_FAILURE, "Fetch returned no record list")

        entries = parse_records(records)
        if len(entries) < len(records):
            logger.info(f"Dropped {len(records) - len(entries)} malformed remote records")
        return entries

    def save(self, entry: ElevatorEntry) -> None:
        """Upsert the record for entry.

        Raises:
            RemoteError: If the backend rejects the record
        """
        self._require_configured()
        try:
            response = requests.put(
                f"{self.collection_url}/{entry.record_name}",
                json=entry_to_record(entry),
                headers=self._headers(),
                timeout=self.config.remote_timeout,
            )
        except requests.RequestException as e:
            raise RemoteError(RemoteErrorKind.TRANSIENT, f"Save failed: {e}") from e
        self._raise_for_status(response, "Save")

    def delete(self, entry_id: str) -> None:
        """Delete the record for entry_id.

        Raises:
            RemoteError: NOT_FOUND if the record does not exist remotely
        """
        self._require_configured()
        try:
            response = requests.delete(
                f"{self.collection_url}/{entry_id}",
                headers=self._headers(),
                timeout=self.config.remote_timeout,
            )
        except requests.RequestException as e:
            raise RemoteError(RemoteErrorKind.TRANSIENT, f"Delete failed: {e}") from e
        self._raise_for_status(response, "Delete")

    def account_status(self) -> AccountStatus:
        """Ask the service whether the account is usable.

        Never raises; any failure maps to an advisory status.
        """
        if not self.config.remote_configured or not self.config.remote_token:
            return AccountStatus.NO_ACCOUNT
        try:
            response = requests.get(
                f"{self._base_url}/account",
                headers=self._headers(),
                timeout=self.config.remote_timeout,
            )
        except (requests.ConnectionError, requests.Timeout):
            return AccountStatus.TEMPORARILY_UNAVAILABLE
        except requests.RequestException:
            logger.debug("Account status check failed", exc_info=True)
            return AccountStatus.UNKNOWN

        if response.status_code == 401:
            return AccountStatus.NO_ACCOUNT
        if response.status_code == 403:
            return AccountStatus.RESTRICTED
        if response.status_code == 503:
            return AccountStatus.TEMPORARILY_UNAVAILABLE
        if response.status_code != 200:
            return AccountStatus.UNKNOWN

        try:
            return AccountStatus(response.json().get("status", ""))
        except (ValueError, AttributeError):
            return AccountStatus.UNKNOWN


class InMemoryRecordStore:
    """Remote store kept in a dict, with the same semantics as the cloud.

    Implements RemoteStore protocol. Useful for offline use and tests;
    ``fail_with`` makes every call raise the given error kind.
    """

    def __init__(self, entries: list[ElevatorEntry] | None = None):
        self._records: dict[str, dict[str, Any]] = {}
        self.fail_with: RemoteErrorKind | None = None
        self.status = AccountStatus.AVAILABLE
        for entry in entries or []:
            self._records[entry.record_name] = entry_to_record(entry)

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise RemoteError(self.fail_with, f"Simulated {self.fail_with.value} failure")

    def put_raw(self, record: dict[str, Any]) -> None:
        """Store a record as-is, bypassing validation."""
        self._records[str(record.get("recordName"))] = record

    def fetch_all(self) -> list[ElevatorEntry]:
        self._check_failure()
        return parse_records(list(self._records.values()))

    def save(self, entry: ElevatorEntry) -> None:
        self._check_failure()
        self._records[entry.record_name] = entry_to_record(entry)

    def delete(self, entry_id: str) -> None:
        self._check_failure()
        if str(entry_id) not in self._records:
            raise RemoteError(RemoteErrorKind.NOT_FOUND, f"No record {entry_id}")
        del self._records[str(entry_id)]

    def account_status(self) -> AccountStatus:
        return self.status

    def __contains__(self, entry_id: object) -> bool:
        return str(entry_id) in self._records

    def __len__(self) -> int:
        return len(self._records)
