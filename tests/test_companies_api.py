from __future__ import annotations


def test_create_company_normalizes_skills_and_defaults(client) -> None:
    r = client.post(
        "/api/companies",
        json={"name": "Acme", "role": "Backend Intern", "required_skills": " Python , SQL,, ,Docker "},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["required_skills"] == ["Python", "SQL", "Docker"]
    assert body["location"] == "Not specified"
    assert body["type"] == "Internship"
    assert body["is_favorite"] is False
    assert body["notes"] == ""
    assert body["added_date"]


def test_create_company_rejects_blank_name(client) -> None:
    r = client.post("/api/companies", json={"name": "   ", "role": "Engineer"})
    assert r.status_code == 422


def test_list_keeps_insertion_order(client, add_company) -> None:
    add_company("First")
    add_company("Second", type="Contract", location="Remote")
    r = client.get("/api/companies")
    assert r.status_code == 200
    body = r.json()
    assert [c["name"] for c in body] == ["First", "Second"]
    assert body[0]["type"] == "Full-time"
    assert body[1]["type"] == "Contract"
    assert body[1]["location"] == "Remote"


def test_company_detail_reports_gap_for_own_skills(client, add_company, set_skills) -> None:
    company = add_company("Acme", skills=["Python", "SQL", "python"])
    set_skills(["PYTHON", "Go"])

    r = client.get(f"/api/companies/{company['id']}")
    assert r.status_code == 200
    body = r.json()
    assert body["company"]["name"] == "Acme"
    assert body["gap"] == {"matched": ["Python"], "missing": ["SQL"], "readiness_percent": 50}


def test_company_detail_without_required_skills(client, add_company) -> None:
    company = add_company("Empty")
    r = client.get(f"/api/companies/{company['id']}")
    assert r.json()["gap"] == {"matched": [], "missing": [], "readiness_percent": 0}


def test_toggle_favorite_and_notes(client, add_company) -> None:
    company = add_company("Acme")
    cid = company["id"]

    r = client.post(f"/api/companies/{cid}/favorite")
    assert r.status_code == 200
    assert r.json()["is_favorite"] is True
    r = client.post(f"/api/companies/{cid}/favorite")
    assert r.json()["is_favorite"] is False

    r = client.put(f"/api/companies/{cid}/notes", json={"notes": "Revise SQL joins"})
    assert r.status_code == 200
    assert r.json()["notes"] == "Revise SQL joins"


def test_delete_company(client, add_company) -> None:
    company = add_company("Gone")
    r = client.delete(f"/api/companies/{company['id']}")
    assert r.status_code == 204
    assert client.get(f"/api/companies/{company['id']}").status_code == 404
    assert client.get("/api/companies").json() == []


def test_unknown_company_is_404(client) -> None:
    assert client.get("/api/companies/999").status_code == 404
    assert client.post("/api/companies/999/favorite").status_code == 404
    assert client.put("/api/companies/999/notes", json={"notes": "x"}).status_code == 404
    assert client.delete("/api/companies/999").status_code == 404
