import os
import requests
import time

BASE_URL = os.getenv("VERIFY_BASE_URL", "http://127.0.0.1:5050")
HTTP_TIMEOUT = 30

def test_api():
    print("Waiting for server to start...")
    time.sleep(2)

    # 1. Create Account (with credential)
    print("Testing Create Account...")
    payload = {
        "conta": "verify@example.com",
        "empresa_id": 1,
        "crd_id": "CRD-VERIFY",
        "tipo_conta": "imap"
    }
    try:
        resp = requests.post(f"{BASE_URL}/emails", json=payload, timeout=HTTP_TIMEOUT)
        print(f"Create: {resp.status_code}")
        print(f"Create Response: {resp.json()}")
        account_id = resp.json().get("id")
    except Exception as e:
        print(f"Create Failed: {e}")
        return

    if not account_id:
        print("Skipping list/delete tests due to create failure")
        return

    # 2. Create Account (without credential)
    print("\nTesting Create Account without crd_id...")
    bare_payload = {k: v for k, v in payload.items() if k != "crd_id"}
    resp = requests.post(f"{BASE_URL}/emails", json=bare_payload, timeout=HTTP_TIMEOUT)
    print(f"Create: {resp.status_code}")
    bare_id = resp.json().get("id")
    print(f"crd_id stored as: {resp.json().get('crd_id')!r}")

    # 3. List Accounts
    print("\nTesting List Accounts...")
    resp = requests.get(f"{BASE_URL}/emails", timeout=HTTP_TIMEOUT)
    accounts = resp.json()
    print(f"List: {resp.status_code}, {len(accounts)} accounts")
    if any(a["id"] == account_id for a in accounts):
        print("Create Verified: SUCCESS")
    else:
        print("Create Verified: FAILED")

    # 4. Invalid input
    print("\nTesting Invalid Input...")
    resp = requests.post(f"{BASE_URL}/emails", json={"conta": "x", "empresa_id": "one"}, timeout=HTTP_TIMEOUT)
    print(f"Invalid JSON: {resp.status_code} {resp.json()}")
    resp = requests.delete(f"{BASE_URL}/emails/abc", timeout=HTTP_TIMEOUT)
    print(f"Invalid ID: {resp.status_code} {resp.json()}")

    # 5. Delete Accounts (second delete of the same id must still succeed)
    print("\nTesting Delete Account...")
    for target in (account_id, bare_id, account_id):
        resp = requests.delete(f"{BASE_URL}/emails/{target}", timeout=HTTP_TIMEOUT)
        print(f"Delete {target}: {resp.status_code}")

    # 6. Verify Delete
    resp = requests.get(f"{BASE_URL}/emails", timeout=HTTP_TIMEOUT)
    remaining = [a for a in resp.json() if a["id"] in (account_id, bare_id)]
    if not remaining:
        print("Delete Verified: SUCCESS")
    else:
        print("Delete Verified: FAILED")

if __name__ == "__main__":
    test_api()
