from __future__ import annotations

JD_TEXT = "Looking for a Kubernetes engineer with Docker and Terraform. AWS a plus."


def test_analyze_jd_scores_against_user_skills(client, set_skills) -> None:
    set_skills(["docker", "aws"])
    r = client.post("/api/analyzer/jd", json={"text": JD_TEXT})
    assert r.status_code == 200
    body = r.json()
    # Single-letter entries match inside words ("c" in "docker", "r" in "for").
    assert body["extracted"] == ["C", "R", "AWS", "Docker", "Kubernetes", "Terraform"]
    assert body["matched"] == ["AWS", "Docker"]
    assert body["missing"] == ["C", "R", "Kubernetes", "Terraform"]
    assert body["score"] == 33
    assert body["tier"] == "low"


def test_analyze_jd_without_known_skills(client) -> None:
    r = client.post("/api/analyzer/jd", json={"text": "xyz"})
    assert r.status_code == 200
    assert r.json() == {"extracted": [], "matched": [], "missing": [], "score": 0, "tier": "low"}


def test_analyze_jd_requires_text(client) -> None:
    assert client.post("/api/analyzer/jd", json={"text": ""}).status_code == 422


def test_commit_jd_creates_company_with_extracted_skills(client) -> None:
    r = client.post(
        "/api/analyzer/jd/commit",
        json={"text": JD_TEXT, "company_name": "CloudCo", "role_name": "DevOps Intern"},
    )
    assert r.status_code == 201
    body = r.json()
    company = body["company"]
    assert company["name"] == "CloudCo"
    assert company["type"] == "Internship"
    assert company["required_skills"] == ["C", "R", "AWS", "Docker", "Kubernetes", "Terraform"]
    assert company["notes"] == "Added from JD Analyzer."
    assert company["description"] == JD_TEXT
    assert body["analysis"]["score"] == 0

    listed = client.get("/api/companies").json()
    assert [c["name"] for c in listed] == ["CloudCo"]


def test_commit_jd_defaults_names(client) -> None:
    r = client.post("/api/analyzer/jd/commit", json={"text": JD_TEXT, "company_name": "  "})
    assert r.status_code == 201
    company = r.json()["company"]
    assert company["name"] == "Unknown Company"
    assert company["role"] == "Unknown Role"
    assert company["type"] == "Full-time"


def test_commit_jd_without_skills_is_rejected(client) -> None:
    r = client.post("/api/analyzer/jd/commit", json={"text": "xyz"})
    assert r.status_code == 400
    assert r.json()["detail"] == "No skills detected to add"
    assert client.get("/api/companies").json() == []
