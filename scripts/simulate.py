"""
Smoke Simulation Script

Walks every route of a running API: creates dishes and orders,
updates them, exercises the validation failures, and deletes
pending orders.

Start the server first:  python -m restaurant_api
Then run from project root: python scripts/simulate.py
"""

import argparse
import asyncio
import random
import sys
import time
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:5000"
TOTAL_ORDERS = 20

MENU_ITEMS = [
    {"name": "Margherita pizza", "description": "Tomato, mozzarella and basil", "price": 14, "image_url": "https://example.com/margherita.jpg"},
    {"name": "Caesar salad", "description": "Romaine, parmesan and croutons", "price": 9, "image_url": "https://example.com/caesar.jpg"},
    {"name": "Garlic bread", "description": "Toasted with herb butter", "price": 5, "image_url": "https://example.com/garlic.jpg"},
    {"name": "Tiramisu", "description": "Coffee soaked ladyfingers and mascarpone", "price": 7, "image_url": "https://example.com/tiramisu.jpg"},
]
STREETS = ["Main St", "Broadway", "5th Avenue", "Park Ave", "Madison Ave"]


def generate_order_payload(dishes: list[dict[str, Any]]) -> dict[str, Any]:
    """Generate a random order body from the current menu."""
    lines = []
    for dish in random.sample(dishes, k=random.randint(1, min(3, len(dishes)))):
        line = dict(dish)
        line["quantity"] = random.randint(1, 3)
        lines.append(line)

    return {
        "data": {
            "deliverTo": f"{random.randint(1, 999)} {random.choice(STREETS)}",
            "mobileNumber": f"555-{random.randint(100, 999)}-{random.randint(1000, 9999)}",
            "dishes": lines,
        }
    }


def check(label: str, response: httpx.Response, expected: int) -> bool:
    """Print a one-line result for a request."""
    ok = response.status_code == expected
    marker = "✅" if ok else "❌"
    detail = ""
    if response.content:
        body = response.json()
        detail = body.get("message", "") if isinstance(body, dict) else ""
    print(f"   {marker} {label}: {response.status_code} (expected {expected}) {detail}")
    return ok


# =============================================================================
# SINGLE FLOWS
# =============================================================================

async def test_single_flows(client: httpx.AsyncClient) -> bool:
    """Exercise each route once, including failure paths."""
    results = []

    print("\n1️⃣ Health Check...")
    results.append(check("GET /health", await client.get("/health"), 200))

    print("\n2️⃣ Dishes...")
    response = await client.post("/dishes", json={"data": MENU_ITEMS[0]})
    results.append(check("POST /dishes", response, 201))
    dish = response.json()["data"] if response.status_code == 201 else None

    bad_price = dict(MENU_ITEMS[1], price=0)
    results.append(check("POST /dishes price=0", await client.post("/dishes", json={"data": bad_price}), 400))

    if dish:
        updated = dict(dish, price=dish["price"] + 1)
        results.append(check("PUT /dishes/:id", await client.put(f"/dishes/{dish['id']}", json={"data": updated}), 200))
        mismatch = dict(updated, id="not-the-route-id")
        results.append(check("PUT /dishes/:id id mismatch", await client.put(f"/dishes/{dish['id']}", json={"data": mismatch}), 400))
    results.append(check("GET /dishes/unknown", await client.get("/dishes/unknown"), 404))

    print("\n3️⃣ Orders...")
    menu = (await client.get("/dishes")).json()["data"]
    response = await client.post("/orders", json=generate_order_payload(menu))
    results.append(check("POST /orders", response, 201))
    order = response.json()["data"] if response.status_code == 201 else None

    empty = {"data": {"deliverTo": "1 Main St", "mobileNumber": "555-000-0000", "dishes": []}}
    results.append(check("POST /orders no dishes", await client.post("/orders", json=empty), 400))

    if order:
        preparing = dict(order, status="preparing")
        results.append(check("PUT /orders/:id", await client.put(f"/orders/{order['id']}", json={"data": preparing}), 200))
        results.append(check("DELETE /orders/:id not pending", await client.delete(f"/orders/{order['id']}"), 400))

    response = await client.post("/orders", json=generate_order_payload(menu))
    if response.status_code == 201:
        pending_id = response.json()["data"]["id"]
        results.append(check("DELETE /orders/:id", await client.delete(f"/orders/{pending_id}"), 204))
        results.append(check("GET deleted order", await client.get(f"/orders/{pending_id}"), 404))

    return all(results)


# =============================================================================
# BULK SIMULATION
# =============================================================================

async def run_simulation(client: httpx.AsyncClient, total_orders: int) -> None:
    """Create many orders concurrently and report timing."""
    menu = (await client.get("/dishes")).json()["data"]
    if not menu:
        print("❌ Menu is empty, create dishes first")
        return

    start_time = time.time()
    responses = await asyncio.gather(*[
        client.post("/orders", json=generate_order_payload(menu))
        for _ in range(total_orders)
    ])
    elapsed = round(time.time() - start_time, 3)

    created = sum(1 for r in responses if r.status_code == 201)
    ids = {r.json()["data"]["id"] for r in responses if r.status_code == 201}

    print("\n" + "=" * 60)
    print("📊 SIMULATION RESULTS")
    print("=" * 60)
    print(f"   Orders sent:    {total_orders}")
    print(f"   Created:        {created}")
    print(f"   Unique ids:     {len(ids)}")
    print(f"   Total time:     {elapsed}s")
    print("=" * 60)


async def main(base_url: str, total_orders: int, skip_tests: bool) -> int:
    async with httpx.AsyncClient(base_url=base_url, timeout=30.0) as client:
        if not skip_tests:
            print("=" * 60)
            print(f"🔍 SINGLE FLOW CHECKS against {base_url}")
            print("=" * 60)
            if not await test_single_flows(client):
                print("\n❌ Some checks failed.")
                return 1
            print("\n✅ All single flow checks passed!")

        await run_simulation(client, total_orders)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Smoke Simulation Script")
    parser.add_argument("--url", default=API_BASE_URL, help="API base URL")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Number of orders")
    parser.add_argument("--skip-tests", action="store_true", help="Skip single flow checks")
    args = parser.parse_args()

    sys.exit(asyncio.run(main(args.url, args.orders, args.skip_tests)))
