"""Tests for remote_store module."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from eltrack.config import ElTrackConfig
from eltrack.exceptions import RemoteError, RemoteErrorKind
from eltrack.models import AccountStatus, ElevatorType
from eltrack.services.remote_store import (
    HttpRecordStore,
    InMemoryRecordStore,
    entry_to_record,
    parse_records,
    record_to_entry,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _mock_response(status=200, body=None, json_error=False):
    """Create a mock requests.Response with the given status and JSON body."""
    resp = MagicMock()
    resp.status_code = status
    if json_error:
        resp.json.side_effect = ValueError("No JSON")
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def store(test_config):
    return HttpRecordStore(test_config)


# ---------------------------------------------------------------------------
# TestRecordConversion
# ---------------------------------------------------------------------------


class TestRecordConversion:
    """Tests for entry_to_record / record_to_entry."""

    def test_record_schema(self, make_entry):
        entry = make_entry(elevator=ElevatorType.SE1)
        record = entry_to_record(entry)
        assert record["recordName"] == str(entry.id)
        assert set(record["fields"]) == {"startingFloor", "endingFloor", "elevator", "timestamp"}
        assert record["fields"]["elevator"] == "SE1"

    def test_round_trip(self, make_entry):
        entry = make_entry(starting_floor="L", ending_floor="16")
        restored = record_to_entry(entry_to_record(entry))
        assert restored == entry
        assert restored.timestamp == entry.timestamp
        assert restored.ending_floor == "16"

    def test_parse_records_drops_malformed(self, make_entry):
        good = entry_to_record(make_entry())
        missing_field = entry_to_record(make_entry())
        del missing_field["fields"]["elevator"]
        bad_id = entry_to_record(make_entry())
        bad_id["recordName"] = "not-a-uuid"
        bad_time = entry_to_record(make_entry())
        bad_time["fields"]["timestamp"] = "someday"

        entries = parse_records([good, missing_field, bad_id, bad_time, "junk", {}])
        assert [str(e.id) for e in entries] == [good["recordName"]]


# ---------------------------------------------------------------------------
# TestFetchAll
# ---------------------------------------------------------------------------


class TestFetchAll:
    """Tests for HttpRecordStore.fetch_all."""

    def test_success(self, store, make_entry):
        entries = [make_entry(), make_entry()]
        body = {"records": [entry_to_record(e) for e in entries]}

        with patch("requests.get", return_value=_mock_response(body=body)) as mock_get:
            result = store.fetch_all()

        assert result == entries
        url = mock_get.call_args[0][0]
        assert url == "https://records.test/api/records/ElevatorEntry"
        headers = mock_get.call_args[1]["headers"]
        assert headers["Authorization"] == "Bearer test-token"
        assert mock_get.call_args[1]["timeout"] == 2.0

    def test_drops_malformed_records(self, store, make_entry):
        body = {"records": [entry_to_record(make_entry()), {"recordName": "x", "fields": {}}]}
        with patch("requests.get", return_value=_mock_response(body=body)):
            assert len(store.fetch_all()) == 1

    def test_not_configured_makes_no_request(self, tmp_path):
        store = HttpRecordStore(ElTrackConfig(data_dir=tmp_path))
        with patch("requests.get") as mock_get, pytest.raises(RemoteError) as exc_info:
            store.fetch_all()
        assert exc_info.value.kind is RemoteErrorKind.NOT_CONFIGURED
        mock_get.assert_not_called()

    @pytest.mark.parametrize(
        "status,kind",
        [
            (401, RemoteErrorKind.NOT_CONFIGURED),
            (404, RemoteErrorKind.NOT_FOUND),
            (429, RemoteErrorKind.QUOTA_EXCEEDED),
            (507, RemoteErrorKind.QUOTA_EXCEEDED),
            (500, RemoteErrorKind.TRANSIENT),
            (503, RemoteErrorKind.TRANSIENT),
            (400, RemoteErrorKind.TRANSIENT),
        ],
    )
    def test_http_status_mapping(self, store, status, kind):
        with (
            patch("requests.get", return_value=_mock_response(status=status)),
            pytest.raises(RemoteError) as exc_info,
        ):
            store.fetch_all()
        assert exc_info.value.kind is kind
        assert str(status) in exc_info.value.message

    def test_connection_error_is_transient(self, store):
        with (
            patch("requests.get", side_effect=requests.exceptions.ConnectionError()),
            pytest.raises(RemoteError) as exc_info,
        ):
            store.fetch_all()
        assert exc_info.value.kind is RemoteErrorKind.TRANSIENT

    def test_timeout_is_transient(self, store):
        with (
            patch("requests.get", side_effect=requests.exceptions.Timeout()),
            pytest.raises(RemoteError) as exc_info,
        ):
            store.fetch_all()
        assert exc_info.value.kind is RemoteErrorKind.TRANSIENT

    def test_invalid_json_is_parse_failure(self, store):
        with (
            patch("requests.get", return_value=_mock_response(json_error=True)),
            pytest.raises(RemoteError) as exc_info,
        ):
            store.fetch_all()
        assert exc_info.value.kind is RemoteErrorKind.PARSE_FAILURE

    def test_missing_record_list_is_parse_failure(self, store):
        with (
            patch("requests.get", return_value=_mock_response(body={"items": []})),
            pytest.raises(RemoteError) as exc_info,
        ):
            store.fetch_all()
        assert exc_info.value.kind is RemoteErrorKind.PARSE_FAILURE


# ---------------------------------------------------------------------------
# TestSaveAndDelete
# ---------------------------------------------------------------------------


class TestSaveAndDelete:
    """Tests for HttpRecordStore.save and delete."""

    def test_save_puts_record_at_entry_url(self, store, make_entry):
        entry = make_entry()
        with patch("requests.put", return_value=_mock_response(status=200)) as mock_put:
            store.save(entry)

        url = mock_put.call_args[0][0]
        assert url == f"https://records.test/api/records/ElevatorEntry/{entry.id}"
        assert mock_put.call_args[1]["json"] == entry_to_record(entry)

    def test_save_quota_exceeded(self, store, make_entry):
        with (
            patch("requests.put", return_value=_mock_response(status=429)),
            pytest.raises(RemoteError) as exc_info,
        ):
            store.save(make_entry())
        assert exc_info.value.kind is RemoteErrorKind.QUOTA_EXCEEDED

    def test_delete_success(self, store):
        with patch("requests.delete", return_value=_mock_response(status=204)) as mock_delete:
            store.delete("abc")
        assert mock_delete.call_args[0][0].endswith("/records/ElevatorEntry/abc")

    def test_delete_missing_record(self, store):
        with (
            patch("requests.delete", return_value=_mock_response(status=404)),
            pytest.raises(RemoteError) as exc_info,
        ):
            store.delete("abc")
        assert exc_info.value.kind is RemoteErrorKind.NOT_FOUND

    def test_trailing_slash_in_url(self, tmp_path, make_entry):
        config = ElTrackConfig(data_dir=tmp_path, remote_url="https://records.test/")
        with patch("requests.put", return_value=_mock_response()) as mock_put:
            HttpRecordStore(config).save(make_entry())
        assert mock_put.call_args[0][0].startswith("https://records.test/records/")

    def test_no_token_sends_no_auth_header(self, tmp_path):
        config = ElTrackConfig(data_dir=tmp_path, remote_url="https://records.test")
        with patch("requests.delete", return_value=_mock_response(status=200)) as mock_delete:
            HttpRecordStore(config).delete("abc")
        assert "Authorization" not in mock_delete.call_args[1]["headers"]


# ---------------------------------------------------------------------------
# TestAccountStatus
# ---------------------------------------------------------------------------


class TestAccountStatus:
    """Tests for HttpRecordStore.account_status."""

    def test_available(self, store):
        body = {"status": "available"}
        with patch("requests.get", return_value=_mock_response(body=body)) as mock_get:
            assert store.account_status() is AccountStatus.AVAILABLE
        assert mock_get.call_args[0][0] == "https://records.test/api/account"

    def test_reported_restricted(self, store):
        with patch("requests.get", return_value=_mock_response(body={"status": "restricted"})):
            assert store.account_status() is AccountStatus.RESTRICTED

    def test_without_credentials(self, tmp_path):
        config = ElTrackConfig(data_dir=tmp_path, remote_url="https://records.test")
        with patch("requests.get") as mock_get:
            assert HttpRecordStore(config).account_status() is AccountStatus.NO_ACCOUNT
        mock_get.assert_not_called()

    @pytest.mark.parametrize(
        "status,expected",
        [
            (401, AccountStatus.NO_ACCOUNT),
            (403, AccountStatus.RESTRICTED),
            (503, AccountStatus.TEMPORARILY_UNAVAILABLE),
            (500, AccountStatus.UNKNOWN),
        ],
    )
    def test_status_codes(self, store, status, expected):
        with patch("requests.get", return_value=_mock_response(status=status)):
            assert store.account_status() is expected

    def test_connection_error(self, store):
        with patch("requests.get", side_effect=requests.exceptions.ConnectionError()):
            assert store.account_status() is AccountStatus.TEMPORARILY_UNAVAILABLE

    def test_unrecognised_body(self, store):
        with patch("requests.get", return_value=_mock_response(body={"status": "sleepy"})):
            assert store.account_status() is AccountStatus.UNKNOWN

    def test_invalid_json(self, store):
        with patch("requests.get", return_value=_mock_response(json_error=True)):
            assert store.account_status() is AccountStatus.UNKNOWN


# ---------------------------------------------------------------------------
# TestInMemoryRecordStore
# ---------------------------------------------------------------------------


class TestInMemoryRecordStore:
    """Tests for InMemoryRecordStore."""

    def test_save_is_idempotent_upsert(self, remote, make_entry):
        entry = make_entry()
        remote.save(entry)
        remote.save(entry)
        assert len(remote) == 1
        assert remote.fetch_all() == [entry]

    def test_delete_missing_raises_not_found(self, remote):
        with pytest.raises(RemoteError) as exc_info:
            remote.delete("missing")
        assert exc_info.value.kind is RemoteErrorKind.NOT_FOUND

    def test_delete_existing(self, remote, make_entry):
        entry = make_entry()
        remote.save(entry)
        remote.delete(entry.record_name)
        assert entry.id not in remote

    def test_fetch_drops_raw_malformed_records(self, remote, make_entry):
        remote.save(make_entry())
        remote.put_raw({"recordName": "bogus", "fields": {"startingFloor": "L"}})
        assert len(remote) == 2
        assert len(remote.fetch_all()) == 1

    def test_simulated_failure(self, remote):
        remote.fail_with = RemoteErrorKind.TRANSIENT
        with pytest.raises(RemoteError):
            remote.fetch_all()
