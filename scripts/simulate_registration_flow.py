import argparse
import random

import requests


def main() -> int:
    ap = argparse.ArgumentParser(description="Register, re-register and retrieve against a running server")
    ap.add_argument("--base", default="http://127.0.0.1:8000")
    ap.add_argument("--city", default="Guntur")
    args = ap.parse_args()

    base = args.base.rstrip("/")
    n = random.randint(100000, 999999)
    email = f"sim{n}@example.com"
    phone = f"9000{n}"

    s = requests.Session()

    r = s.get(f"{base}/api/cities", timeout=10)
    print("GET /api/cities", r.status_code, [c["name"] for c in r.json()] if r.ok else r.text[:200])
    if r.status_code != 200:
        return 2

    r = s.post(
        f"{base}/api/registrations",
        json={"name": f"Sim {n}", "email": email, "phoneNumber": phone, "city": args.city},
        timeout=10,
    )
    print("POST /api/registrations", r.status_code, r.text[:200])
    if r.status_code != 200:
        return 3
    code = r.json()["promocode"]

    r = s.post(
        f"{base}/api/registrations",
        json={"name": f"Sim {n}", "email": email, "phoneNumber": "0", "city": args.city},
        timeout=10,
    )
    print("POST /api/registrations (duplicate)", r.status_code, r.text[:200])
    if r.status_code != 409:
        return 3

    r = s.post(f"{base}/api/promocode/retrieve", json={"email": email, "phoneNumber": phone}, timeout=10)
    print("POST /api/promocode/retrieve", r.status_code, r.text[:200])
    if r.status_code != 200 or r.json().get("promocode") != code:
        return 4

    r = s.post(f"{base}/api/promocode/retrieve", json={"email": email, "phoneNumber": "0"}, timeout=10)
    print("POST /api/promocode/retrieve (wrong phone)", r.status_code)
    if r.status_code != 404:
        return 4

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
