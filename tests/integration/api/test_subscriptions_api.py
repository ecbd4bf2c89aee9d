"""Integration tests for Subscription API endpoints"""

import pytest
from httpx import AsyncClient

BASE = "/api/v1/subscriptions"

NETFLIX = {
    "service_name": "Netflix",
    "price": 500,
    "user_id": "60601fee-2bf1-4721-ae6f-7636e79a0cba",
    "start_date": "07-2025",
}


async def _create(client: AsyncClient, **overrides) -> dict:
    response = await client.post(BASE, json={**NETFLIX, **overrides})
    assert response.status_code == 201
    return response.json()


class TestSubscriptionAPIIntegration:
    """Integration test suite for Subscription API endpoints"""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"ok": True}

    @pytest.mark.asyncio
    async def test_create_returns_201_with_id(self, client: AsyncClient):
        response = await client.post(BASE, json=NETFLIX)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["service_name"] == "Netflix"
        assert data["price"] == 500
        assert data["start_date"] == "07-2025"
        # Open-ended subscriptions have no end_date key at all
        assert "end_date" not in data

    @pytest.mark.asyncio
    async def test_create_with_end_date(self, client: AsyncClient):
        data = await _create(client, end_date="12-2025")

        assert data["end_date"] == "12-2025"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"start_date": "2025-07"},
            {"start_date": "13-2025"},
            {"end_date": "06-2025"},
            {"price": -1},
            {"service_name": "  "},
            {"user_id": ""},
        ],
    )
    async def test_create_invalid_input_returns_400(self, client: AsyncClient, overrides):
        response = await client.post(BASE, json={**NETFLIX, **overrides})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    @pytest.mark.asyncio
    async def test_create_missing_field_returns_422(self, client: AsyncClient):
        payload = {k: v for k, v in NETFLIX.items() if k != "price"}

        response = await client.post(BASE, json=payload)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_get_existing_and_missing(self, client: AsyncClient):
        created = await _create(client)

        found = await client.get(f"{BASE}/{created['id']}")
        missing = await client.get(f"{BASE}/999999")
        invalid = await client.get(f"{BASE}/0")

        assert found.status_code == 200
        assert found.json() == created
        assert missing.status_code == 404
        assert missing.json()["error"]["code"] == "SUBSCRIPTION_NOT_FOUND"
        assert invalid.status_code == 400

    @pytest.mark.asyncio
    async def test_patch_end_date_tri_state(self, client: AsyncClient):
        created = await _create(client, end_date="12-2025")
        url = f"{BASE}/{created['id']}"

        omitted = await client.patch(url, json={"price": 650})
        assert omitted.status_code == 200
        assert omitted.json()["price"] == 650
        assert omitted.json()["end_date"] == "12-2025"

        replaced = await client.patch(url, json={"end_date": "03-2026"})
        assert replaced.status_code == 200
        assert replaced.json()["end_date"] == "03-2026"

        cleared = await client.patch(url, json={"end_date": None})
        assert cleared.status_code == 200
        assert "end_date" not in cleared.json()

        stored = await client.get(url)
        assert "end_date" not in stored.json()
        assert stored.json()["price"] == 650

    @pytest.mark.asyncio
    async def test_patch_rejected_range_keeps_row(self, client: AsyncClient):
        created = await _create(client, end_date="09-2025")
        url = f"{BASE}/{created['id']}"

        response = await client.patch(url, json={"start_date": "10-2025", "price": 1})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"
        assert (await client.get(url)).json() == created

    @pytest.mark.asyncio
    async def test_patch_null_for_non_nullable_field_returns_422(self, client: AsyncClient):
        created = await _create(client)

        response = await client.patch(f"{BASE}/{created['id']}", json={"price": None})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_patch_missing_returns_404(self, client: AsyncClient):
        response = await client.patch(f"{BASE}/999999", json={"price": 1})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_then_delete_again(self, client: AsyncClient):
        created = await _create(client)
        url = f"{BASE}/{created['id']}"

        first = await client.delete(url)
        second = await client.delete(url)

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 404
        assert (await client.get(url)).status_code == 404

    @pytest.mark.asyncio
    async def test_list_filters_and_paging(self, client: AsyncClient):
        a = await _create(client, user_id="u1")
        b = await _create(client, user_id="u1", service_name="Spotify")
        await _create(client, user_id="u2")
        await _create(client, user_id="u1", start_date="01-2024", end_date="03-2024")

        by_user = await client.get(BASE, params={"user_id": "u1", "from": "06-2025", "to": "09-2025"})
        assert by_user.status_code == 200
        data = by_user.json()
        assert [s["id"] for s in data["subscriptions"]] == [a["id"], b["id"]]
        assert data["limit"] == 50
        assert data["offset"] == 0

        page = await client.get(BASE, params={"limit": 1, "offset": 1})
        assert [s["id"] for s in page.json()["subscriptions"]] == [b["id"]]

        capped = await client.get(BASE, params={"limit": 5000})
        assert capped.json()["limit"] == 200

    @pytest.mark.asyncio
    async def test_list_bad_month_returns_400(self, client: AsyncClient):
        response = await client.get(BASE, params={"from": "2025-06"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    @pytest.mark.asyncio
    async def test_total_cost(self, client: AsyncClient):
        await _create(client)
        await _create(client, service_name="Spotify", price=300, start_date="09-2025", end_date="09-2025")
        await _create(client, user_id="someone-else", price=10000)

        response = await client.get(
            f"{BASE}/total",
            params={"from": "06-2025", "to": "09-2025", "user_id": NETFLIX["user_id"]},
        )

        assert response.status_code == 200
        assert response.json() == {
            "total": 500 * 3 + 300,
            "currency": "RUB",
            "from": "06-2025",
            "to": "09-2025",
        }

    @pytest.mark.asyncio
    async def test_total_cost_with_service_filter(self, client: AsyncClient):
        await _create(client)
        await _create(client, service_name="Spotify", price=300)

        response = await client.get(
            f"{BASE}/total",
            params={"from": "07-2025", "to": "07-2025", "service_name": "Spotify"},
        )

        assert response.status_code == 200
        assert response.json()["total"] == 300

    @pytest.mark.asyncio
    async def test_total_cost_nothing_matches_is_zero(self, client: AsyncClient):
        response = await client.get(f"{BASE}/total", params={"from": "01-2020", "to": "12-2020"})

        assert response.status_code == 200
        assert response.json()["total"] == 0

    @pytest.mark.asyncio
    async def test_total_cost_reversed_range_returns_400(self, client: AsyncClient):
        response = await client.get(f"{BASE}/total", params={"from": "10-2025", "to": "07-2025"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_DATE_RANGE"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [
            {"to": "07-2025"},
            {"from": "07-2025"},
            {"from": "7-2025", "to": "08-2025"},
        ],
    )
    async def test_total_cost_missing_or_malformed_returns_400(self, client: AsyncClient, params):
        response = await client.get(f"{BASE}/total", params=params)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, client: AsyncClient):
        response = await client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers.get("X-Request-ID") == "req-123"

    @pytest.mark.asyncio
    async def test_list_up_to_december_9999(self, client: AsyncClient):
        created = await _create(client, start_date="01-2024")

        response = await client.get(BASE, params={"from": "01-2024", "to": "12-9999"})

        assert response.status_code == 200
        assert [s["id"] for s in response.json()["subscriptions"]] == [created["id"]]

    @pytest.mark.asyncio
    async def test_total_cost_in_december_9999(self, client: AsyncClient):
        await _create(client, start_date="01-2024")

        response = await client.get(f"{BASE}/total", params={"from": "12-9999", "to": "12-9999"})

        assert response.status_code == 200
        assert response.json()["total"] == 500

    @pytest.mark.asyncio
    async def test_price_above_bigint_rejected(self, client: AsyncClient):
        created = await _create(client)

        create = await client.post(BASE, json={**NETFLIX, "price": 2**63})
        patch = await client.patch(f"{BASE}/{created['id']}", json={"price": 2**63})

        assert create.status_code == 400
        assert create.json()["error"]["code"] == "INVALID_INPUT"
        assert patch.status_code == 400
        assert (await client.get(f"{BASE}/{created['id']}")).json()["price"] == 500

    @pytest.mark.asyncio
    async def test_largest_bigint_price_stored(self, client: AsyncClient):
        created = await _create(client, price=2**63 - 1)

        assert (await client.get(f"{BASE}/{created['id']}")).json()["price"] == 2**63 - 1
