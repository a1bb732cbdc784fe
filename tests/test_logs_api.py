from http import HTTPStatus

from log_manager_api.app.core.messages import ErrorMessages, InfoMessages

LOGS = "/api/v1/logs/"


def _log(client, message, severity="INFO", user=None):
    return client.post(LOGS, json={"message": message, "severity": severity, "user": user})


def test_create_log(client, user_factory):
    user_factory("Petra")
    response = _log(client, "Backup finished", "warning", "Petra")
    assert response.status_code == HTTPStatus.CREATED
    body = response.json()
    assert body["id"] == 1
    assert body["message"] == "Backup finished"
    assert body["severity"] == "WARNING"
    assert body["user"] == "Petra"
    assert body["timestamp"]


def test_log_for_unknown_user_has_no_reference(client):
    response = _log(client, "Test", user="Ghost")
    assert response.status_code == HTTPStatus.CREATED
    assert response.json()["user"] is None


def test_create_log_with_illegal_severity(client):
    response = _log(client, "Test", severity="LOUD")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()["detail"] == ErrorMessages.SEVERITY_ILLEGAL_PLUS_CHOICE.format(
        choices="INFO, WARNING, ERROR"
    )


def test_create_log_without_message(client):
    response = client.post(LOGS, json={"severity": "INFO"})
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()["detail"] == ErrorMessages.LOG_MESSAGE_MISSING


def test_get_log(client):
    _log(client, "Test")
    response = client.get(f"{LOGS}1")
    assert response.status_code == HTTPStatus.OK
    assert response.json()["message"] == "Test"


def test_get_log_with_wrong_id_format(client):
    response = client.get(f"{LOGS}hallo")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    detail = response.json()["detail"]
    assert detail.startswith(ErrorMessages.PARAMETER_WRONG_FORMAT)
    assert "'hallo'" in detail


def test_get_missing_log(client):
    response = client.get(f"{LOGS}20")
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json()["detail"] == "No log entry with id 20 exists!"


def test_list_logs_with_filters(client, user_factory):
    user_factory("Petra")
    _log(client, "Backup finished", "INFO", "Petra")
    _log(client, "Disk almost full", "WARNING")
    _log(client, "Backup failed", "ERROR", "Petra")

    all_logs = client.get(LOGS).json()["result"]
    assert [log["id"] for log in all_logs] == [1, 2, 3]

    warnings = client.get(LOGS, params={"severity": "warning"}).json()["result"]
    assert [log["id"] for log in warnings] == [2]

    by_petra = client.get(LOGS, params={"user": "Petra"}).json()["result"]
    assert [log["id"] for log in by_petra] == [1, 3]

    backups = client.get(LOGS, params={"message": "Backup"}).json()["result"]
    assert [log["id"] for log in backups] == [1, 3]

    page = client.get(LOGS, params={"limit": 1, "offset": 1}).json()["result"]
    assert [log["id"] for log in page] == [2]


def test_message_filter_treats_wildcards_literally(client):
    _log(client, "disk 50% full")
    _log(client, "disk 500 full")
    _log(client, "user_name changed")
    _log(client, "username changed")

    percent = client.get(LOGS, params={"message": "50%"}).json()["result"]
    assert [log["message"] for log in percent] == ["disk 50% full"]

    underscore = client.get(LOGS, params={"message": "user_name"}).json()["result"]
    assert [log["message"] for log in underscore] == ["user_name changed"]


def test_list_logs_by_date_range(client):
    _log(client, "Test")
    assert len(client.get(LOGS, params={"start_date": "2000-01-01"}).json()["result"]) == 1
    assert client.get(LOGS, params={"end_date": "2000-01-01"}).json() == {"result": []}


def test_list_logs_with_malformed_date(client):
    response = client.get(LOGS, params={"start_date": "yesterday"})
    assert response.status_code == HTTPStatus.BAD_REQUEST


def test_delete_logs_by_ids(client):
    for message in ("one", "two", "three"):
        _log(client, message)
    response = client.delete(LOGS, params={"ids": [1, 2]})
    assert response.status_code == HTTPStatus.OK
    assert response.json()["message"] == "Entries with the ID(s) 1, 2 were deleted from database."
    assert [log["message"] for log in client.get(LOGS).json()["result"]] == ["three"]


def test_delete_logs_with_unknown_id_deletes_nothing(client):
    _log(client, "one")
    response = client.delete(LOGS, params={"ids": [1, 20]})
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json()["detail"] == "No log entry with id 20 exists!"
    assert len(client.get(LOGS).json()["result"]) == 1


def test_delete_logs_by_filter(client):
    _log(client, "Backup finished", "INFO")
    _log(client, "Disk almost full", "WARNING")
    _log(client, "Backup failed", "WARNING")
    response = client.delete(LOGS, params={"severity": "warning", "message": "Backup"})
    assert response.status_code == HTTPStatus.OK
    assert response.json()["message"] == "Entries with the ID(s) 3 were deleted from database."
    assert [log["id"] for log in client.get(LOGS).json()["result"]] == [1, 2]


def test_delete_logs_by_filter_without_match(client):
    _log(client, "one")
    response = client.delete(LOGS, params={"severity": "ERROR"})
    assert response.status_code == HTTPStatus.OK
    assert response.json()["message"] == InfoMessages.NO_ENTRIES_DELETED
    assert len(client.get(LOGS).json()["result"]) == 1


def test_delete_logs_needs_ids_or_filter(client):
    _log(client, "one")
    response = client.delete(LOGS)
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()["detail"] == ErrorMessages.LOG_FILTER_MISSING
    assert len(client.get(LOGS).json()["result"]) == 1


def test_deleting_logs_unblocks_user_deletion(client):
    client.post(
        "/api/v1/users/",
        json={
            "actor": "Petra",
            "name": "Petra",
            "birthdate": "1999-12-13",
            "weight": 65.0,
            "height": 1.6,
            "favouriteColor": "Red",
        },
    )
    assert client.delete("/api/v1/users/", params={"actor": "Petra"}).status_code == HTTPStatus.CONFLICT
    client.delete(LOGS, params={"ids": [1]})
    assert client.delete("/api/v1/users/", params={"actor": "Petra"}).status_code == HTTPStatus.OK


def test_health(client):
    response = client.get("/api/v1/health/")
    assert response.status_code == HTTPStatus.OK
    assert response.json()["status"] == "ok"
