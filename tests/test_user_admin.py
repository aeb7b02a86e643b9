from unittest.mock import call

import requests

from greenchat.constants import ErrorKinds, Messages
from greenchat.user_admin import UserDirectory

USERS = [
    {"id": 1, "username": "admin", "email": "admin@greenriver.edu", "first_name": "Ad", "last_name": "Min"},
    {"id": 2, "username": "alice", "email": "alice@greenriver.edu", "first_name": "Alice", "last_name": "Lee"},
]


def test_refresh_loads_users(client, http, fake_response):
    http.get.return_value = fake_response(200, USERS)
    directory = UserDirectory(client)
    response = directory.refresh()
    assert response["status"] == "success"
    assert directory.users == USERS


def test_failed_refresh_keeps_previous_list(client, http, fake_response):
    directory = UserDirectory(client)
    http.get.return_value = fake_response(200, USERS)
    directory.refresh()

    http.get.side_effect = requests.ConnectionError("down")
    response = directory.refresh()
    assert response["status"] == "error"
    assert response["message"] == Messages.USERS_UNAVAILABLE
    assert directory.users == USERS


def test_admin_is_not_deletable(client):
    directory = UserDirectory(client)
    assert not directory.can_delete(USERS[0])
    assert directory.can_delete(USERS[1])


def test_delete_refuses_admin(client, http, fake_response):
    http.get.return_value = fake_response(200, USERS)
    directory = UserDirectory(client)
    directory.refresh()

    response = directory.delete(1)
    assert response["error"] == ErrorKinds.VALIDATION_FAILED
    http.delete.assert_not_called()


def test_delete_unknown_user(client, http):
    directory = UserDirectory(client)
    response = directory.delete(99)
    assert response["error"] == ErrorKinds.VALIDATION_FAILED
    http.delete.assert_not_called()


def test_delete_refetches_list(client, http, fake_response):
    http.get.side_effect = [fake_response(200, USERS), fake_response(200, USERS[:1])]
    http.delete.return_value = fake_response(200, None)
    directory = UserDirectory(client)
    directory.refresh()

    response = directory.delete(2)
    assert response["status"] == "success"
    assert http.get.call_count == 2
    assert directory.find(2) is None
    assert directory.users == USERS[:1]


def test_failed_delete_does_not_refetch(client, http, fake_response):
    http.get.return_value = fake_response(200, USERS)
    http.delete.return_value = fake_response(500, None)
    directory = UserDirectory(client)
    directory.refresh()

    response = directory.delete(2)
    assert response["status"] == "error"
    assert http.get.call_count == 1
    assert directory.users == USERS


def test_delete_mirrors_after_primary(mirrored_client, http, fake_response):
    http.get.side_effect = [fake_response(200, USERS), fake_response(200, USERS[:1])]
    http.delete.return_value = fake_response(200, None)
    directory = UserDirectory(mirrored_client)
    directory.refresh()

    response = directory.delete(2)
    assert response["status"] == "success"
    assert http.delete.call_args_list == [
        call("https://backend.test/users/2"),
        call("http://localhost:3001/other-users/2"),
    ]


def test_mirror_skipped_when_primary_fails(mirrored_client, http, fake_response):
    http.get.return_value = fake_response(200, USERS)
    http.delete.return_value = fake_response(404, None)
    directory = UserDirectory(mirrored_client)
    directory.refresh()

    directory.delete(2)
    http.delete.assert_called_once_with("https://backend.test/users/2")


def test_mirror_failure_is_partial(mirrored_client, http, fake_response):
    http.get.side_effect = [fake_response(200, USERS), fake_response(200, USERS[:1])]
    http.delete.side_effect = [fake_response(200, None), requests.ConnectionError("down")]
    directory = UserDirectory(mirrored_client)
    directory.refresh()

    response = directory.delete(2)
    assert response["status"] == "partial"
    assert "localhost:3001" in response["message"]
    assert directory.users == USERS[:1]
