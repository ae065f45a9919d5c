"""
Authentication guard and public probe tests
"""

import pytest
from datetime import timedelta
from httpx import AsyncClient
from jose import jwt

from venue_registry.config import settings
from venue_registry.core.security import create_access_token

VENUES_URL = "/api/v1/venues/"


@pytest.mark.asyncio
class TestVenueAuthentication:

    async def test_missing_token(self, client: AsyncClient):
        response = await client.get(VENUES_URL)

        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "AUTH_ERROR"

    @pytest.mark.parametrize("method", ["get", "post", "put", "delete"])
    async def test_every_route_is_guarded(self, client: AsyncClient, method):
        url = VENUES_URL if method in ("get", "post") else f"{VENUES_URL}some-id"
        kwargs = {"json": {"name": "Club"}} if method in ("post", "put") else {}

        response = await client.request(method.upper(), url, **kwargs)

        assert response.status_code == 401

    async def test_malformed_token(self, client: AsyncClient):
        response = await client.get(VENUES_URL, headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401

    async def test_expired_token(self, client: AsyncClient):
        token = create_access_token({"sub": "user-123"}, expires_delta=timedelta(minutes=-5))

        response = await client.get(VENUES_URL, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    async def test_wrong_signature(self, client: AsyncClient):
        token = jwt.encode({"sub": "user-123", "type": "access"}, "x" * 40, algorithm=settings.JWT_ALGORITHM)

        response = await client.get(VENUES_URL, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    async def test_refresh_token_is_not_accepted(self, client: AsyncClient):
        token = jwt.encode(
            {"sub": "user-123", "type": "refresh"},
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM
        )

        response = await client.get(VENUES_URL, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    async def test_token_without_subject(self, client: AsyncClient):
        token = create_access_token({"role": "user"})

        response = await client.get(VENUES_URL, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    async def test_valid_token(self, client: AsyncClient, auth_headers):
        response = await client.get(VENUES_URL, headers=auth_headers)

        assert response.status_code == 200


@pytest.mark.asyncio
class TestProbes:

    async def test_liveness_needs_no_token(self, client: AsyncClient):
        response = await client.get("/api/v1/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    async def test_readiness_checks_database(self, client: AsyncClient):
        response = await client.get("/api/v1/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"]["database"] is True

    async def test_request_id_header(self, client: AsyncClient):
        response = await client.get("/api/v1/health/live", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
