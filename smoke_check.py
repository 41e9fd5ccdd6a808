"""
Quick smoke check against a running Users API.
Walks the endpoint contract: health, list/filter, create, fetch, delete,
and the catch-all 404. Leaves the table as it found it (the created user
is deleted again).

Usage: USERS_API_URL=http://localhost:5000 python smoke_check.py
"""
import os
import sys

import requests

BASE_URL = os.environ.get("USERS_API_URL", "http://localhost:5000").rstrip("/")
TIMEOUT = 30
TEST_USERNAME = "Trinity"


def print_header(text):
    print("\n" + "=" * 60)
    print(text)
    print("=" * 60)


def check_envelope(response, status, success=True):
    """Assert status, JSON content type and envelope shape; return the body."""
    if response.status_code != status:
        raise AssertionError(
            f"expected {status}, got {response.status_code}: {response.text[:200]}"
        )
    content_type = response.headers.get("Content-Type", "")
    if "application/json" not in content_type:
        raise AssertionError(f"unexpected Content-Type: {content_type}")
    body = response.json()
    if body.get("success") is not success:
        raise AssertionError(f"unexpected envelope: {body}")
    return body


def check_health():
    print_header("Health")
    body = check_envelope(requests.get(f"{BASE_URL}/api/health", timeout=TIMEOUT), 200)
    print(f"✅ {body['payload']}")


def check_list():
    print_header("List users")
    body = check_envelope(requests.get(f"{BASE_URL}/api/users", timeout=TIMEOUT), 200)
    print(f"✅ {len(body['payload'])} users")


def check_create_fetch_delete():
    print_header("Create, fetch and delete a user")
    body = check_envelope(
        requests.post(
            f"{BASE_URL}/api/users", json={"username": TEST_USERNAME}, timeout=TIMEOUT
        ),
        201,
    )
    created = body["payload"]
    print(f"✅ Created {created}")

    body = check_envelope(
        requests.get(f"{BASE_URL}/api/users/{created['id']}", timeout=TIMEOUT), 200
    )
    if body["payload"] != created:
        raise AssertionError(f"fetched {body['payload']}, expected {created}")
    print("✅ Fetched it back")

    body = check_envelope(
        requests.get(
            f"{BASE_URL}/api/users", params={"username": TEST_USERNAME.lower()}, timeout=TIMEOUT
        ),
        200,
    )
    if created not in body["payload"]:
        raise AssertionError(f"filter did not return {created}")
    print("✅ Found it by username")

    check_envelope(
        requests.delete(f"{BASE_URL}/api/users/{created['id']}", timeout=TIMEOUT), 200
    )
    check_envelope(
        requests.get(f"{BASE_URL}/api/users/{created['id']}", timeout=TIMEOUT),
        404,
        success=False,
    )
    print("✅ Deleted it")


def check_catch_all():
    print_header("Catch-all 404")
    body = check_envelope(
        requests.get(f"{BASE_URL}/non-existent-path", timeout=TIMEOUT), 404, success=False
    )
    print(f"✅ {body['reason']}")


CHECKS = [
    ("health", check_health),
    ("list", check_list),
    ("create/fetch/delete", check_create_fetch_delete),
    ("catch-all", check_catch_all),
]


def main():
    print_header("USERS API SMOKE CHECK")
    print(f"Server: {BASE_URL}")

    results = {}
    for name, check in CHECKS:
        try:
            check()
            results[name] = True
        except requests.exceptions.RequestException as e:
            print(f"❌ {name}: request failed: {e}")
            results[name] = False
        except AssertionError as e:
            print(f"❌ {name}: {e}")
            results[name] = False

    print_header("SUMMARY")
    for name, passed in results.items():
        print(f"{'✅ PASS' if passed else '❌ FAIL'} - {name}")

    passed = sum(results.values())
    print(f"\nResults: {passed}/{len(results)} checks passed")
    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        sys.exit(1)
