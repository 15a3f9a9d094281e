"""Tests for GET /me."""

from fastapi.testclient import TestClient

from api.app import app


class TestMe:
    def test_anonymous(self, container):
        response = TestClient(app).get("/me")
        assert response.status_code == 200
        assert response.json() == {"authenticated": False}

    def test_authenticated(self, container, member, login):
        client = TestClient(app)
        client.cookies.update(login(member))

        response = client.get("/me")

        assert response.status_code == 200
        assert response.json() == {
            "authenticated": True,
            "user": {
                "id": member.id,
                "display_name": "Member",
                "avatar_url": None,
                "role": "member",
            },
        }
        assert response.headers["Cache-Control"] == "no-store"

    def test_inactive_user_is_anonymous(self, container, member, users, login):
        client = TestClient(app)
        client.cookies.update(login(member))
        users.set_active(member.id, False)

        assert client.get("/me").json() == {"authenticated": False}
