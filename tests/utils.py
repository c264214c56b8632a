from typing import Any


def book_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "title": "Discreet Math",
        "author": "Rajesh",
        "published_date": "2023-12-01",
    }
    payload.update(overrides)
    return payload


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
