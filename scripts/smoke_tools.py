from __future__ import annotations

import json
import os
import sys

from fastapi.testclient import TestClient

# Ensure job_portal/ is importable when running as a script.
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from job_portal.main import create_app


def _call(client: TestClient, name: str, payload: dict) -> dict:
    r = client.post(f"/tools/{name}", json=payload)
    body = r.json()
    print(f"POST /tools/{name} ->", r.status_code)
    print(json.dumps(body, indent=2, ensure_ascii=False))
    return body


def main() -> int:
    profile = {"name": "A", "email": "a@x.com", "phone": "1234567890", "skills": ["Go"]}

    with TestClient(create_app()) as client:
        # 1) two creates -> ids 1 and 2
        first = _call(client, "create_profile", profile)
        second = _call(client, "create_profile", profile)
        if first["data"]["id"] != 1 or second["data"]["id"] != 2:
            return 1

        # 2) delete id=1, next create must reuse max+1 = 3
        deleted = _call(client, "delete_profile", {"id": 1})
        if not deleted["success"]:
            return 1
        third = _call(client, "create_profile", profile)
        if third["data"]["id"] != 3:
            return 1

        # 3) filter resource
        r = client.get("/resources/read", params={"uri": "profiles://filter?skills=go"})
        print("\nGET /resources/read?uri=profiles://filter?skills=go ->", r.status_code)
        items = r.json()["items"]
        print("count=", len(items))
        if [item["id"] for item in items] != [2, 3]:
            return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
