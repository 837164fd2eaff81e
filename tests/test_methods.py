import pytest

from errors import BadRequest, MethodNotFound, NotAuthorized
from routes.methods import call_method, method_handlers
from schemas import Caller


def test_registered_methods():
    assert set(method_handlers) == {
        "tasks.insert",
        "tasks.remove",
        "tasks.setChecked",
        "tasks.setPrivate",
    }


def test_handlers_can_be_called_directly(service, repository, owner, task_id):
    remove = method_handlers["tasks.remove"]

    remove(service, owner, [task_id])

    assert repository.count() == 0


def test_insert_requires_login(service, repository, task_id):
    with pytest.raises(NotAuthorized):
        method_handlers["tasks.insert"](service, Caller(username="me"), ["task one"])

    assert repository.count() == 1


def test_wrong_param_count(service, owner, task_id):
    with pytest.raises(BadRequest):
        method_handlers["tasks.setChecked"](service, owner, [task_id])


@pytest.mark.parametrize("params", [["1", True], [1, "yes"], [True, True]])
def test_wrong_param_types(service, owner, params):
    with pytest.raises(BadRequest):
        method_handlers["tasks.setChecked"](service, owner, params)


def test_unknown_method(service, owner):
    with pytest.raises(MethodNotFound):
        call_method("tasks.rename", service, owner, [])


def test_invoke_over_http(client, auth_headers, owner, other):
    response = client.post(
        "/api/methods/tasks.insert", json={"params": ["task one"]}, headers=auth_headers(owner)
    )
    assert response.status_code == 200
    task_id = response.json()["data"]

    response = client.post(
        "/api/methods/tasks.setPrivate", json={"params": [task_id, True]}, headers=auth_headers(owner)
    )
    assert response.status_code == 200

    response = client.post(
        "/api/methods/tasks.remove", json={"params": [task_id]}, headers=auth_headers(other)
    )
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "not-authorized"

    [task] = client.get("/api/tasks", headers=auth_headers(owner)).json()["data"]["tasks"]
    assert task["private"] is True


def test_unknown_method_over_http(client, auth_headers, owner):
    response = client.post("/api/methods/tasks.nope", json={"params": []}, headers=auth_headers(owner))

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "method-not-found"


def test_bad_params_over_http(client, auth_headers, owner):
    response = client.post(
        "/api/methods/tasks.insert", json={"params": [""]}, headers=auth_headers(owner)
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "bad-request"


@pytest.mark.parametrize("task_id", [0, 2**63, 2**70])
def test_id_outside_integer_range(service, owner, task_id):
    with pytest.raises(BadRequest):
        method_handlers["tasks.setChecked"](service, owner, [task_id, True])


def test_id_outside_integer_range_over_http(client, auth_headers, owner):
    response = client.post(
        "/api/methods/tasks.remove", json={"params": [2**70]}, headers=auth_headers(owner)
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "bad-request"
