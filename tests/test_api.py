from __future__ import annotations

import io

EVENT = {
    "title": "Training",
    "description": "Weekly session",
    "location": "Pitch 2",
    "date": "2025-06-01",
    "startTime": "18:00",
    "endTime": "19:30",
}


def _upload(client, data: bytes, filename: str, content_type: str = "image/png", **form):
    payload = {"photo": (io.BytesIO(data), filename, content_type), **form}
    return client.post("/api/photos", data=payload, content_type="multipart/form-data")


def test_register_login_logout_cycle(make_client, signed_up):
    client, user = signed_up("alice@example.com", "Alice")

    assert "passwordHash" not in user
    assert client.get("/api/auth/user").get_json()["id"] == user["id"]

    assert client.post("/api/auth/logout").get_json() == {"message": "Logged out successfully"}
    assert client.get("/api/auth/user").status_code == 401

    other = make_client()
    resp = other.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret1"})
    assert resp.status_code == 200
    assert resp.get_json()["displayName"] == "Alice"
    assert other.get("/api/auth/user").status_code == 200


def test_session_cookie_is_dead_after_logout(make_client, signed_up):
    client, _ = signed_up("alice@example.com", "Alice")
    cookie = client.get_cookie("session")
    assert cookie is not None

    client.post("/api/auth/logout")

    replay = make_client()
    replay.set_cookie("session", cookie.value)
    assert replay.get("/api/auth/user").status_code == 401


def test_sign_in_issues_a_fresh_session_id(make_client, signed_up):
    client, _ = signed_up("alice@example.com", "Alice")
    registered_sid = client.get_cookie("session").value

    resp = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret1"})
    login_sid = client.get_cookie("session").value

    assert resp.status_code == 200
    assert login_sid != registered_sid
    assert client.get("/api/auth/user").status_code == 200

    stale = make_client()
    stale.set_cookie("session", registered_sid)
    assert stale.get("/api/auth/user").status_code == 401


def test_planted_session_id_is_replaced_on_login(make_client, signed_up):
    signed_up("alice@example.com", "Alice")
    client = make_client()
    client.set_cookie("session", "planted-session-id")

    client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret1"})

    assert client.get_cookie("session").value != "planted-session-id"

    attacker = make_client()
    attacker.set_cookie("session", "planted-session-id")
    assert attacker.get("/api/auth/user").status_code == 401


def test_duplicate_and_invalid_registration(make_client, signed_up):
    signed_up("alice@example.com", "Alice")
    client = make_client()

    dup = client.post("/api/auth/register", json={"email": "alice@example.com", "password": "another1"})
    short = client.post("/api/auth/register", json={"email": "bob@example.com", "password": "123"})

    assert (dup.status_code, dup.get_json()) == (400, {"message": "User already exists"})
    assert (short.status_code, short.get_json()) == (400, {"message": "Invalid registration data"})


def test_bad_credentials_do_not_reveal_which_part_was_wrong(make_client, signed_up):
    signed_up("alice@example.com", "Alice")
    client = make_client()

    wrong = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope123"})
    unknown = client.post("/api/auth/login", json={"email": "zed@example.com", "password": "nope123"})
    empty = client.post("/api/auth/login", json={"email": "alice@example.com"})

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.get_json() == unknown.get_json() == {"message": "Invalid credentials"}
    assert (empty.status_code, empty.get_json()) == (400, {"message": "Invalid login data"})
    assert client.get("/api/auth/user").status_code == 401


def test_protected_routes_need_a_session(make_client):
    client = make_client()

    for method, path in [
        ("get", "/api/events"),
        ("post", "/api/events"),
        ("get", "/api/photos"),
        ("post", "/api/events/1/attend"),
    ]:
        resp = getattr(client, method)(path)
        assert resp.status_code == 401
        assert resp.get_json() == {"message": "Unauthorized"}


def test_event_ownership_through_http(signed_up):
    alice, _ = signed_up("alice@example.com", "Alice")
    bob, _ = signed_up("bob@example.com", "Bob")

    created = alice.post("/api/events", json=EVENT)
    assert created.status_code == 201
    event_id = created.get_json()["id"]

    hijack = bob.put(f"/api/events/{event_id}", json={"title": "Hijacked"})
    assert (hijack.status_code, hijack.get_json()) == (400, {"message": "Failed to update event"})
    assert bob.delete(f"/api/events/{event_id}").status_code == 400
    assert alice.get(f"/api/events/{event_id}").get_json()["title"] == "Training"

    renamed = alice.put(f"/api/events/{event_id}", json={"title": "Match"})
    assert renamed.status_code == 200
    assert renamed.get_json()["title"] == "Match"
    assert renamed.get_json()["location"] == "Pitch 2"

    assert alice.delete(f"/api/events/{event_id}").status_code == 204
    missing = alice.get(f"/api/events/{event_id}")
    assert (missing.status_code, missing.get_json()) == (404, {"message": "Event not found"})


def test_event_validation_and_ordering(signed_up):
    alice, _ = signed_up("alice@example.com", "Alice")

    bad = alice.post("/api/events", json={**EVENT, "startTime": "late"})
    assert (bad.status_code, bad.get_json()) == (400, {"message": "Failed to create event"})

    alice.post("/api/events", json={**EVENT, "title": "Old", "date": "2024-01-01"})
    alice.post("/api/events", json={**EVENT, "title": "New", "date": "2026-01-01"})

    assert [e["title"] for e in alice.get("/api/events").get_json()] == ["New", "Old"]


def test_attendance_through_http(signed_up):
    alice, _ = signed_up("alice@example.com", "Alice")
    bob, bob_user = signed_up("bob@example.com", "Bob")
    event_id = alice.post("/api/events", json=EVENT).get_json()["id"]

    assert bob.post(f"/api/events/{event_id}/attend").status_code == 201
    again = bob.post(f"/api/events/{event_id}/attend")
    assert (again.status_code, again.get_json()) == (400, {"message": "Already attending this event"})

    assert bob.get(f"/api/events/{event_id}/attending").get_json() == {"attending": True}
    assert alice.get(f"/api/events/{event_id}/attending").get_json() == {"attending": False}
    attendees = alice.get(f"/api/events/{event_id}/attendees").get_json()
    assert [a["user"]["id"] for a in attendees] == [bob_user["id"]]

    assert bob.delete(f"/api/events/{event_id}/attend").status_code == 204
    assert bob.delete(f"/api/events/{event_id}/attend").status_code == 204
    assert bob.get(f"/api/events/{event_id}/attending").get_json() == {"attending": False}

    missing = bob.post("/api/events/9999/attend")
    assert (missing.status_code, missing.get_json()) == (400, {"message": "Failed to attend event"})


def test_deleting_event_drops_its_attendees(signed_up):
    alice, _ = signed_up("alice@example.com", "Alice")
    bob, _ = signed_up("bob@example.com", "Bob")
    event_id = alice.post("/api/events", json=EVENT).get_json()["id"]
    bob.post(f"/api/events/{event_id}/attend")

    assert alice.delete(f"/api/events/{event_id}").status_code == 204

    assert bob.get(f"/api/events/{event_id}/attendees").get_json() == []
    assert bob.get(f"/api/events/{event_id}/attending").get_json() == {"attending": False}


def test_photo_lifecycle_through_http(signed_up, upload_dir, image_bytes):
    alice, alice_user = signed_up("alice@example.com", "Alice")
    bob, _ = signed_up("bob@example.com", "Bob")
    data = image_bytes("PNG")

    resp = _upload(alice, data, "op1.png", title="Opening day", description="First match")
    assert resp.status_code == 201
    photo = resp.get_json()
    assert photo["title"] == "Opening day"
    assert photo["url"] == f"/uploads/{photo['filename']}"
    assert (upload_dir / photo["filename"]).exists()

    served = bob.get(photo["url"])
    assert served.status_code == 200
    assert served.data == data

    listed = bob.get("/api/photos").get_json()
    assert listed[0]["uploadedBy"]["displayName"] == "Alice"
    assert listed[0]["uploadedBy"]["id"] == alice_user["id"]
    assert [p["id"] for p in alice.get("/api/photos/mine").get_json()] == [photo["id"]]
    assert bob.get("/api/photos/mine").get_json() == []

    refused = bob.delete(f"/api/photos/{photo['id']}")
    assert (refused.status_code, refused.get_json()) == (400, {"message": "Failed to delete photo"})
    assert (upload_dir / photo["filename"]).exists()
    assert bob.put(f"/api/photos/{photo['id']}", json={"title": "Mine"}).status_code == 400

    assert alice.put(f"/api/photos/{photo['id']}", json={"title": "Kick-off"}).get_json()["title"] == "Kick-off"
    assert alice.delete(f"/api/photos/{photo['id']}").status_code == 204
    assert not (upload_dir / photo["filename"]).exists()
    assert bob.get(photo["url"]).status_code == 404
    assert bob.get("/api/photos").get_json() == []


def test_photo_upload_rejections_leave_no_trace(signed_up, upload_dir):
    alice, _ = signed_up("alice@example.com", "Alice")

    not_image = _upload(alice, b"hello", "notes.txt", "text/plain")
    too_big = _upload(alice, b"\0" * (10 * 1024 * 1024 + 1), "big.png")
    no_file = alice.post("/api/photos", data={"title": "x"}, content_type="multipart/form-data")

    assert (not_image.status_code, not_image.get_json()) == (400, {"message": "Only image files are allowed"})
    assert (too_big.status_code, too_big.get_json()) == (400, {"message": "File too large"})
    assert (no_file.status_code, no_file.get_json()) == (400, {"message": "No file uploaded"})
    assert list(upload_dir.iterdir()) == []
    assert alice.get("/api/photos").get_json() == []


def test_upload_records_exif_capture_date(signed_up, image_bytes):
    alice, _ = signed_up("alice@example.com", "Alice")

    resp = _upload(alice, image_bytes("JPEG", exif_datetime="2023:05:01 10:20:30"), "team.jpg", "image/jpeg")

    assert resp.status_code == 201
    assert resp.get_json()["dateTaken"] == "2023-05-01T10:20:30"
    assert resp.get_json()["title"] == "team.jpg"


def test_unknown_api_route_is_json_404(make_client):
    resp = make_client().get("/api/nope")

    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Not found"}
