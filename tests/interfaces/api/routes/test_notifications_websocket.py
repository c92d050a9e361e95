"""End-to-end tests for realtime delivery over the notification websocket."""

from crimewatch.utils import new_identifier


def _admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer admin-{new_identifier()}"}


def _assert_nothing_else_pending(websocket) -> None:
    # A ping round-trip proves no other message was queued before the pong.
    websocket.send_json({"type": "ping"})
    assert websocket.receive_json() == {"type": "pong"}


def test_connected_owner_receives_exactly_one_status_push(client, report_factory):
    owner = new_identifier()
    report = report_factory(title="Car theft", user_id=owner)

    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.send_json({"type": "join_user", "data": owner})
        assert websocket.receive_json() == {"type": "load_notifications", "data": []}

        response = client.put(
            f"/reports/{report.id}/status",
            json={"status": "Investigating"},
            headers=_admin_headers(),
        )
        assert response.status_code == 200

        pushed = websocket.receive_json()
        assert pushed["type"] == "new_notification"
        assert pushed["data"]["recipient"] == owner
        assert pushed["data"]["type"] == "status_update"
        assert pushed["data"]["reportId"] == report.id
        assert pushed["data"]["read"] is False
        _assert_nothing_else_pending(websocket)


def test_offline_owner_gets_missed_note_on_join(client, report_factory):
    owner = new_identifier()
    report = report_factory(title="Stolen bicycle", user_id=owner)
    content = "n" * 140

    response = client.post(
        f"/reports/{report.id}/notes", json={"content": content}, headers=_admin_headers()
    )
    assert response.status_code == 200

    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.send_json({"type": "join_user", "data": owner})
        load = websocket.receive_json()

    assert load["type"] == "load_notifications"
    assert len(load["data"]) == 1
    assert load["data"][0]["type"] == "admin_note"
    assert load["data"][0]["message"].endswith("n" * 100 + "...")


def test_connected_admins_receive_new_report(client):
    with client.websocket_connect("/notifications/ws") as first, client.websocket_connect(
        "/notifications/ws"
    ) as second:
        for websocket in (first, second):
            websocket.send_json({"type": "join_admin"})
            assert websocket.receive_json()["type"] == "load_notifications"

        response = client.post(
            "/reports/",
            json={
                "title": "Suspicious van",
                "description": "Parked for three days",
                "location": "Elm Street",
                "is_anonymous": True,
            },
        )
        assert response.status_code == 201

        for websocket in (first, second):
            pushed = websocket.receive_json()
            assert pushed["type"] == "new_notification"
            assert pushed["data"]["recipientType"] == "admin"
            assert pushed["data"]["recipient"] is None
            assert pushed["data"]["reportId"] == response.json()["id"]
            _assert_nothing_else_pending(websocket)


def test_join_load_is_capped_at_fifty(client, report_factory, notification_factory):
    report = report_factory()
    for _ in range(55):
        notification_factory(report=report)

    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.send_json({"type": "join_admin"})
        load = websocket.receive_json()

    assert load["type"] == "load_notifications"
    assert len(load["data"]) == 50
    created = [item["createdAt"] for item in load["data"]]
    assert created == sorted(created, reverse=True)


def test_disconnected_user_is_removed_from_presence(client):
    user_id = new_identifier()

    with client.websocket_connect("/notifications/ws") as websocket:
        websocket.send_json({"type": "join_user", "data": user_id})
        websocket.receive_json()
        registry = client.app.state.presence_registry
        assert registry.lookup_user(user_id) is not None

    _wait_for_unregister(client, registry, user_id)
    assert registry.lookup_user(user_id) is None


def _wait_for_unregister(client, registry, user_id) -> None:
    # The server side runs its cleanup after the client closes; an extra
    # request on the same loop gives it the chance to finish.
    for _ in range(10):
        if registry.lookup_user(user_id) is None:
            return
        client.get("/notifications/admin")
