from backend import api

RESUME = "Experienced React and TypeScript developer with AWS and Docker skills"
JD = "Looking for a React, TypeScript, and AWS engineer"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["ok"] is True


def test_analyze_basic(client):
    r = client.post("/analyze", json={"resume": RESUME, "job_description": JD})
    assert r.status_code == 200

    out = r.get_json()
    assert out["match_percentage"] == 51
    assert out["matched_skills"] == ["typescript", "react", "aws"]
    assert out["missing_skills"] == []
    assert len(out["top_keywords"]) == 5
    assert out["score_tier"] == "moderate"
    assert 2 <= len(out["suggestions"]) <= 4


def test_analyze_blank_texts_are_allowed(client):
    r = client.post("/analyze", json={"resume": "", "job_description": ""})
    assert r.status_code == 200
    assert r.get_json()["match_percentage"] == 0


def test_analyze_requires_both_fields(client):
    r = client.post("/analyze", json={"resume": RESUME})
    assert r.status_code == 400
    assert "job_description" in r.get_json()["error"]


def test_analyze_rejects_non_text(client):
    r = client.post("/analyze", json={"resume": 123, "job_description": JD})
    assert r.status_code == 400

    r = client.post("/analyze", json=["not", "an", "object"])
    assert r.status_code == 400


def test_analyze_size_limit(client, monkeypatch):
    monkeypatch.setattr(api, "MAX_TEXT_CHARS", 10)
    r = client.post("/analyze", json={"resume": "x" * 11, "job_description": "short"})
    assert r.status_code == 413


def test_skills_extract_size_limit(client, monkeypatch):
    monkeypatch.setattr(api, "MAX_TEXT_CHARS", 10)
    r = client.post("/skills/extract", json={"text": "python " * 10})
    assert r.status_code == 413


def test_select_resume_size_limit(client, monkeypatch):
    monkeypatch.setattr(api, "MAX_TEXT_CHARS", 10)
    r = client.post(
        "/select_resume",
        json={"job_description": "python", "resumes": [{"id": "r1", "text": "python " * 10}]},
    )
    assert r.status_code == 413


def test_max_text_chars_from_env(monkeypatch):
    monkeypatch.setenv("MAX_TEXT_CHARS", "5000")
    assert api.read_max_text_chars() == 5000


def test_max_text_chars_ignores_invalid(monkeypatch, capsys):
    monkeypatch.setenv("MAX_TEXT_CHARS", "lots")
    assert api.read_max_text_chars() == api.DEFAULT_MAX_TEXT_CHARS
    assert "MAX_TEXT_CHARS" in capsys.readouterr().err


def test_skills_extract_basic(client):
    payload = {"text": "Experienced with Python, SQL Server, React and Docker. Also used AWS."}
    r = client.post("/skills/extract", json=payload)
    assert r.status_code == 200

    data = r.get_json()
    assert data["skills"] == ["python", "react", "sql server", "docker", "aws"]
    assert data["by_category"]["cloud_devops"] == ["docker", "aws"]


def test_skills_extract_empty_text(client):
    """Empty text should not error and should return an empty list."""
    r = client.post("/skills/extract", json={"text": ""})
    assert r.status_code == 200
    assert r.get_json() == {"skills": [], "by_category": {}}


def test_skills_extract_rejects_non_text(client):
    for bad in (0, False, [], {}, 12):
        r = client.post("/skills/extract", json={"text": bad})
        assert r.status_code == 400


def test_skills_extract_null_text(client):
    r = client.post("/skills/extract", json={"text": None})
    assert r.status_code == 200
    assert r.get_json()["skills"] == []


def test_select_resume(client):
    r = client.post(
        "/select_resume",
        json={
            "job_description": "React developer with AWS and Docker",
            "resumes": [
                {"id": "r1", "text": "Java Spring Boot SQL"},
                {"id": "r2", "text": "React Next.js AWS Docker CI/CD"},
            ],
        },
    )
    assert r.status_code == 200
    out = r.get_json()
    assert out["best"]["id"] == "r2"
    assert out["ranking"][0][0] == "r2"


def test_select_resume_bad_payload(client):
    r = client.post("/select_resume", json={"job_description": JD, "resumes": [{"text": "no id"}]})
    assert r.status_code == 400


def test_comparisons_summary(client):
    r = client.post("/comparisons/summary", json={"scores": [72, 45, 90]})
    assert r.status_code == 200
    assert r.get_json() == {"count": 3, "average_score": 69, "top_score": 90, "strong_matches": 2}


def test_comparisons_summary_bad_payload(client):
    r = client.post("/comparisons/summary", json={"scores": ["high"]})
    assert r.status_code == 400


def test_unknown_route_returns_json(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.get_json()["code"] == 404


def test_choose_dev_port_override(monkeypatch):
    monkeypatch.setenv("ANALYZER_PORT", "5123")
    assert api.choose_dev_port() == 5123


def test_choose_dev_port_ignores_invalid(monkeypatch):
    monkeypatch.setenv("ANALYZER_PORT", "abc")
    assert api.choose_dev_port() in (5000, 5001, 5002, 5003, 5004)
