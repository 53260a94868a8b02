#!/usr/bin/env python3
"""
Smoke test a running API end-to-end.

Usage:
    doppler run -- python scripts/smoke_test.py
    API_URL=http://localhost:8000 SMOKE_ADMIN_EMAIL=owner@example.com \\
        SMOKE_ADMIN_PASSWORD=... python scripts/smoke_test.py

Requires:
    - Django running (default http://localhost:8000)
    - An admin account (see the create_admin management command)
"""

import os
import sys
import time

import httpx


def fail(message: str) -> int:
    print(f"   ✗ FAILED: {message}")
    return 1


def main() -> int:
    base_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    email = os.environ.get("SMOKE_ADMIN_EMAIL")
    password = os.environ.get("SMOKE_ADMIN_PASSWORD")
    if not email or not password:
        return fail("SMOKE_ADMIN_EMAIL and SMOKE_ADMIN_PASSWORD must be set")

    test_id = f"smoke-{int(time.time())}"
    print(f"Smoke testing {base_url} ({test_id})...")

    with httpx.Client(base_url=f"{base_url}/api", timeout=10.0) as client:
        # 1. Public menu
        print()
        print("1. Reading the public menu...")
        try:
            response = client.get("/menu-items")
        except httpx.HTTPError as e:
            return fail(f"Could not reach the API - {e}")
        if response.status_code != 200:
            return fail(f"GET /menu-items returned {response.status_code}")
        print(f"   {len(response.json())} menu item(s)")
        print("   ✓ Menu readable")

        # 2. Public reservation
        print()
        print("2. Creating a reservation...")
        response = client.post(
            "/reservations",
            json={
                "name": f"Smoke Test {test_id}",
                "email": f"{test_id}@example.com",
                "phoneNumber": "555-000-0000",
                "numberOfGuests": 2,
                "date": "2030-01-01",
                "time": "19:00",
                "message": "Automated smoke test",
            },
        )
        if response.status_code != 201:
            return fail(f"POST /reservations returned {response.status_code}")
        reservation = response.json()
        print(f"   Reservation ID: {reservation['id']}")
        if warning := reservation.get("notificationWarning"):
            print(f"   ! Inbox notice not sent: {warning}")
        print("   ✓ Reservation created")

        # 3. Admin session
        print()
        print("3. Signing in...")
        response = client.post(
            "/auth/sign-in", json={"email": email, "password": password}
        )
        if response.status_code != 200:
            return fail(f"Sign-in returned {response.status_code}: {response.text}")
        print("   ✓ Signed in")

        # 4. Status workflow
        print()
        print("4. Confirming the reservation...")
        url = f"/reservations/{reservation['id']}"
        response = client.patch(url, json={"status": "Confirmed"})
        if response.status_code != 200:
            return fail(f"PATCH {url} returned {response.status_code}")
        if response.json()["status"] != "Confirmed":
            return fail("Status was not updated")
        print("   ✓ Reservation confirmed")

        # 5. Cleanup
        print()
        print("5. Cleaning up test data...")
        response = client.delete(url)
        if response.status_code != 200:
            return fail(f"DELETE {url} returned {response.status_code}")
        client.post("/auth/sign-out")
        print("   ✓ Cleanup complete")

    print()
    print("═══════════════════════════════════════")
    print("  SMOKE TEST PASSED")
    print("═══════════════════════════════════════")

    return 0


if __name__ == "__main__":
    sys.exit(main())
