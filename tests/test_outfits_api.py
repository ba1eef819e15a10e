"""Profile, recommendation and outfit lifecycle endpoints in mock mode."""


def _recommend(client, headers, **body):
    payload = {"occasion": "work-meeting", "mood": "confident"}
    payload.update(body)
    response = client.post("/api/recommendations", json=payload, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


def test_profile_defaults_then_partial_update_merges(client, register) -> None:
    headers = register()

    profile = client.get("/api/profile", headers=headers).json()
    assert profile["stylePreferences"] == {"minimalist": 50, "boldColors": 50, "vintage": 50, "formal": 50}
    assert profile["colorPersonality"]["undertone"] == "neutral"

    response = client.put(
        "/api/profile",
        json={
            "stylePreferences": {"minimalist": 80},
            "colorPersonality": {"undertone": "warm"},
            "favoriteOccasions": ["Date Night", "date-night", "workout"],
        },
        headers=headers,
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["stylePreferences"]["minimalist"] == 80
    assert updated["stylePreferences"]["formal"] == 50
    assert updated["colorPersonality"]["undertone"] == "warm"
    assert updated["favoriteOccasions"] == ["date-night", "workout"]
    assert client.get("/api/profile", headers=headers).json() == updated


def test_profile_rejects_out_of_range_slider(client, register) -> None:
    headers = register()

    response = client.put("/api/profile", json={"stylePreferences": {"vintage": 140}}, headers=headers)

    assert response.status_code == 400


def test_mock_recommendations_are_saved_with_demo_notice(client, register) -> None:
    headers = register()

    outfits = _recommend(client, headers)

    assert len(outfits) == 2
    first, second = outfits
    assert first["name"] == "Perfect work-meeting Look"
    assert second["name"] == "Casual confident Style"
    assert first["confidenceScore"] == 85 and second["confidenceScore"] == 80
    assert first["occasion"] == "work-meeting"
    assert first["isFavorite"] is False
    assert set(first["items"]) == {"top", "bottom", "shoes", "accessories"}
    assert all(color.startswith("#") for color in first["colors"])
    assert "demo" in first["aiAnalysis"]["feedback"].lower()
    assert first["aiAnalysis"]["suggestions"]

    listed = client.get("/api/outfits", headers=headers).json()
    assert {o["id"] for o in listed} == {o["id"] for o in outfits}


def test_recommendation_count_is_respected(client, register) -> None:
    headers = register()

    assert len(_recommend(client, headers, count=1)) == 1


def test_recommendation_requires_occasion_and_mood(client, register) -> None:
    headers = register()

    response = client.post("/api/recommendations", json={"occasion": "workout"}, headers=headers)

    assert response.status_code == 400
    assert "mood" in response.json()["message"]


def test_favorite_toggle_persists(client, register) -> None:
    headers = register()
    outfit_id = _recommend(client, headers)[0]["id"]

    response = client.put(f"/api/outfits/{outfit_id}/favorite", json={"isFavorite": True}, headers=headers)
    assert response.status_code == 200
    assert response.json()["isFavorite"] is True

    fetched = client.get(f"/api/outfits/{outfit_id}", headers=headers).json()
    assert fetched["isFavorite"] is True

    client.put(f"/api/outfits/{outfit_id}/favorite", json={"isFavorite": False}, headers=headers)
    assert client.get(f"/api/outfits/{outfit_id}", headers=headers).json()["isFavorite"] is False


def test_outfits_are_private_to_their_owner(client, register) -> None:
    owner = register("owner")
    intruder = register("intruder")
    outfit_id = _recommend(client, owner)[0]["id"]

    assert client.get("/api/outfits", headers=intruder).json() == []
    assert client.get(f"/api/outfits/{outfit_id}", headers=intruder).status_code == 404
    assert (
        client.put(f"/api/outfits/{outfit_id}/favorite", json={"isFavorite": True}, headers=intruder).status_code
        == 404
    )
    assert client.delete(f"/api/outfits/{outfit_id}", headers=intruder).status_code == 404
    assert client.get(f"/api/outfits/{outfit_id}", headers=owner).json()["isFavorite"] is False


def test_delete_outfit(client, register) -> None:
    headers = register()
    outfit_id = _recommend(client, headers)[0]["id"]

    response = client.delete(f"/api/outfits/{outfit_id}", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Outfit deleted successfully"}
    missing = client.get(f"/api/outfits/{outfit_id}", headers=headers)
    assert missing.status_code == 404
    assert missing.json() == {"message": "Outfit not found"}


def test_stats_track_confidence_and_counts(client, register) -> None:
    headers = register()

    empty = client.get("/api/stats", headers=headers).json()
    assert empty["confidence"] == {"average": 0, "trend": "neutral"}
    assert empty["outfitCount"] == 0

    outfit_id = _recommend(client, headers)[0]["id"]
    client.put(f"/api/outfits/{outfit_id}/favorite", json={"isFavorite": True}, headers=headers)
    client.post(
        "/api/wardrobe",
        json={"name": "Denim jacket", "category": "outerwear", "colors": ["blue"]},
        headers=headers,
    )

    stats = client.get("/api/stats", headers=headers).json()
    assert stats["confidence"]["average"] == 83
    assert stats["outfitCount"] == 2
    assert stats["favoriteCount"] == 1
    assert stats["analysisCount"] == 0
    assert stats["wardrobeByCategory"] == {"outerwear": 1}


def test_healthcheck_reports_mock_mode(client) -> None:
    body = client.get("/healthz").json()

    assert body["status"] == "ok"
    assert body["aiEnabled"] is False


def test_correlation_id_is_echoed(client) -> None:
    response = client.get("/healthz", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"
