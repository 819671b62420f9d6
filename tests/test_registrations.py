from models import Registrations, Users


def register(client, **fields):
    payload = {"name": "A", "email": "a@x.com", "event": "Hackathon"}
    payload.update(fields)
    return client.post("/api/register", json=payload)


def test_register_then_admin_sees_it(client, admin_headers):
    resp = register(client)
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    ticket_id = body["ticketId"]

    listing = client.get("/api/admin/registrations", headers=admin_headers)
    assert listing.status_code == 200
    records = listing.json()
    assert [r["id"] for r in records] == [ticket_id]
    assert records[0]["status"] == "Registered"
    assert records[0]["event"] == "Hackathon"
    assert records[0]["timestamp"]


def test_register_keeps_team_details(client, admin_headers):
    register(
        client,
        college="IIT",
        universityId="U-9",
        phone="555-0100",
        teamName="Null Pointers",
        teamMembers=["B", "C"],
    )
    record = client.get("/api/admin/registrations", headers=admin_headers).json()[0]
    assert record["college"] == "IIT"
    assert record["universityId"] == "U-9"
    assert record["teamName"] == "Null Pointers"
    assert record["teamMembers"] == ["B", "C"]


def test_interest_is_used_when_event_is_missing(client, admin_headers):
    register(client, event=None, interest="Robo Wars")
    record = client.get("/api/admin/registrations", headers=admin_headers).json()[0]
    assert record["event"] == "Robo Wars"


def test_timestamp_is_not_client_controlled(client, db_session):
    ticket_id = register(client, timestamp="2001-01-01T00:00:00", status="Attended").json()["ticketId"]
    reg = db_session.get(Registrations, ticket_id)
    assert reg.timestamp.year != 2001
    assert reg.status == "Registered"


def test_register_requires_name_and_email(client):
    resp = client.post("/api/register", json={"event": "Hackathon"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_list_is_newest_first(client, admin_headers):
    ids = [register(client, name=f"P{i}").json()["ticketId"] for i in range(3)]
    listed = [r["id"] for r in client.get("/api/admin/registrations", headers=admin_headers).json()]
    assert listed == list(reversed(ids))


def test_status_update_changes_only_status(client, admin_headers):
    ticket_id = register(client, teamName="T", teamMembers=["x"]).json()["ticketId"]
    before = client.get("/api/admin/registrations", headers=admin_headers).json()[0]

    resp = client.put(f"/api/admin/registrations/{ticket_id}", json={"status": "Attended"}, headers=admin_headers)
    assert resp.json() == {"success": True}

    after = client.get("/api/admin/registrations", headers=admin_headers).json()[0]
    assert after["status"] == "Attended"
    before.pop("status")
    after.pop("status")
    assert after == before


def test_status_update_of_unknown_id_is_a_no_op(client, admin_headers):
    resp = client.put("/api/admin/registrations/999", json={"status": "Attended"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}


def test_delete_registration(client, admin_headers):
    ticket_id = register(client).json()["ticketId"]
    resp = client.delete(f"/api/admin/registrations/{ticket_id}", headers=admin_headers)
    assert resp.json() == {"success": True}
    assert client.get("/api/admin/registrations", headers=admin_headers).json() == []


def test_my_registrations_are_scoped_to_the_callers_email(client, signup):
    token = signup(email="asha@example.com").json()["token"]
    register(client, email="asha@example.com", event="Hackathon")
    register(client, email="someone@example.com", event="Hackathon")
    register(client, email="asha@example.com", event="Quiz")

    resp = client.get("/api/my-registrations", headers={"Authorization": token})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert [r["event"] for r in body["registrations"]] == ["Quiz", "Hackathon"]
    assert {r["email"] for r in body["registrations"]} == {"asha@example.com"}


def test_my_registrations_for_deleted_user(client, signup, db_session):
    token = signup().json()["token"]
    db_session.query(Users).delete()
    db_session.commit()

    resp = client.get("/api/my-registrations", headers={"Authorization": token})
    assert resp.status_code == 404
    assert resp.json()["message"] == "User not found"


def test_my_registrations_with_mixed_case_emails(client, signup):
    token = signup(email="asha@Example.com").json()["token"]
    register(client, email="asha@Example.com", event="Hackathon")
    register(client, email="ASHA@EXAMPLE.COM", event="Quiz")

    resp = client.get("/api/my-registrations", headers={"Authorization": token})
    assert resp.status_code == 200
    assert [r["event"] for r in resp.json()["registrations"]] == ["Quiz", "Hackathon"]
