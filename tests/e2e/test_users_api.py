"""End-to-end tests for user, collection and tag endpoints."""

from devflow.config import Settings

QUESTION = {
    "title": "What is a context variable?",
    "content": "<p>When should I use contextvars instead of thread locals?</p>",
    "tag_names": ["python"],
}


class TestUserWebhook:
    """Account creation from the identity provider."""

    def test_bad_secret_is_rejected(self, client):
        response = client.post(
            "/users",
            json={
                "clerk_id": "user_x",
                "name": "X",
                "username": "xavier",
                "email": "x@example.com",
            },
            headers={"X-Webhook-Secret": "wrong"},
        )

        assert response.status_code == 401

    def test_duplicate_username_conflicts(self, client, register):
        register("alice")

        response = client.post(
            "/users",
            json={
                "clerk_id": "user_other",
                "name": "Other Alice",
                "username": "alice",
                "email": "other@example.com",
            },
            headers={"X-Webhook-Secret": Settings().auth.webhook_secret},
        )

        assert response.status_code == 409


class TestProfiles:
    """Reading and updating profiles."""

    def test_get_nonexistent_user_profile(self, client):
        response = client.get("/users/user_nobody")

        assert response.status_code == 404

    def test_profile_totals(self, client, register):
        _, cookies = register("alice")
        client.post("/questions", json=QUESTION, cookies=cookies)

        response = client.get("/users/user_alice")

        assert response.status_code == 200
        assert response.json()["total_questions"] == 1
        assert response.json()["total_answers"] == 0

    def test_update_profile_without_auth_fails(self, client):
        response = client.patch("/users/me", json={"bio": "This should fail"})

        assert response.status_code == 401
        assert "Not authenticated" in response.json()["detail"]

    def test_update_profile(self, client, register):
        _, cookies = register("alice")

        response = client.patch(
            "/users/me", json={"bio": "Python developer"}, cookies=cookies
        )

        assert response.status_code == 200
        assert response.json()["bio"] == "Python developer"
        assert response.json()["affected_views"] == ["/profile/user_alice"]

    def test_bio_max_length(self, client, register):
        _, cookies = register("alice")

        response = client.patch("/users/me", json={"bio": "a" * 501}, cookies=cookies)

        assert response.status_code == 422

    def test_user_answers(self, client, register):
        alice, alice_cookies = register("alice")
        _, bob_cookies = register("bob")
        question_id = client.post(
            "/questions", json=QUESTION, cookies=bob_cookies
        ).json()["question_id"]
        client.post(
            f"/questions/{question_id}/answers",
            json={"content": "<p>Use them for async-aware request state.</p>"},
            cookies=alice_cookies,
        )

        response = client.get(f"/users/{alice['user_id']}/answers")

        body = response.json()
        assert body["total"] == 1
        assert body["answers"][0]["question_title"] == QUESTION["title"]


class TestCollection:
    """Saving questions to a collection."""

    def test_save_and_list_collection(self, client, register):
        _, alice = register("alice")
        _, bob = register("bob")
        question_id = client.post("/questions", json=QUESTION, cookies=alice).json()[
            "question_id"
        ]

        saved = client.post(f"/users/me/saved/{question_id}", cookies=bob)
        collection = client.get("/questions", params={"saved_by": "user_bob"}).json()
        unsaved = client.post(f"/users/me/saved/{question_id}", cookies=bob)

        assert saved.json()["saved"] is True
        assert saved.json()["affected_views"] == ["/collection"]
        assert [q["question_id"] for q in collection["questions"]] == [question_id]
        assert unsaved.json()["saved"] is False

    def test_collection_of_unknown_user(self, client):
        response = client.get("/questions", params={"saved_by": "user_nobody"})

        assert response.status_code == 404


class TestTags:
    """Tag listing."""

    def test_list_tags_with_counts(self, client, register):
        _, cookies = register("alice")
        client.post("/questions", json=QUESTION, cookies=cookies)
        client.post(
            "/questions",
            json={**QUESTION, "title": "Another python one", "tag_names": ["Python", "typing"]},
            cookies=cookies,
        )

        response = client.get("/tags", params={"sort": "popular"})

        tags = response.json()["tags"]
        assert [(t["name"], t["question_count"]) for t in tags] == [
            ("python", 2),
            ("typing", 1),
        ]

    def test_unknown_sort(self, client):
        response = client.get("/tags", params={"sort": "alphabetical"})

        assert response.status_code == 422


class TestHealth:
    """Health check."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
