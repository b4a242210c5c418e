from __future__ import annotations


def _statuses(body) -> list[str]:
    return [w["status"] for p in body["paragraphs"] for w in p["words"]]


def test_initial_session(client) -> None:
    res = client.get("/api/session")
    assert res.status_code == 200
    body = res.json()

    assert _statuses(body) == ["current", "pending", "pending", "pending", "pending"]
    assert body["currentPosition"] == {"paraIndex": 0, "wordIndex": 0}
    assert body["progressPercentage"] == 0
    assert body["totalWords"] == 5
    assert body["isComplete"] is False


def test_transcript_updates_and_restart(client) -> None:
    res = client.post("/api/session/transcript", json={"transcript": "ਸਤਿ ਨਾਲੁ ਕਰਤਾ ਪੁਰਖੁ"})
    assert res.status_code == 200
    body = res.json()
    assert _statuses(body) == ["correct", "error", "correct", "correct", "current"]
    assert body["currentPosition"] == {"paraIndex": 1, "wordIndex": 1}
    assert body["progressPercentage"] == 80
    assert body["feedback"][0]["type"] == "error"

    # Blank transcripts leave the session untouched.
    res = client.post("/api/session/transcript", json={"transcript": " "})
    assert res.json() == body

    res = client.post("/api/session/restart")
    assert res.status_code == 200
    assert _statuses(res.json()) == ["current", "pending", "pending", "pending", "pending"]
    assert res.json()["feedback"] == []


def test_complete_session(client) -> None:
    res = client.post(
        "/api/session/transcript", json={"transcript": "ਸਤਿ ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ ਨਿਰਭਉ"}
    )
    body = res.json()
    assert body["isComplete"] is True
    assert body["currentPosition"] is None
    assert body["progressPercentage"] == 100


def test_health_reports_provider(client) -> None:
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "comparison_provider": "local", "reference_words": 5}
