from __future__ import annotations

import json
import os
import sys
import time
from pathlib import Path

import httpx
from dotenv import load_dotenv


def build_update(text: str, user_id: int) -> dict:
    update_id = int(time.time())
    return {
        "update_id": update_id,
        "message": {
            "message_id": update_id,
            "date": update_id,
            "chat": {"id": user_id, "type": "private"},
            "from": {"id": user_id, "is_bot": False, "first_name": "Local"},
            "text": text,
        },
    }


def main() -> None:
    project_root = Path(__file__).resolve().parents[1]
    load_dotenv(project_root / ".env", override=False)

    port = os.getenv("PORT", "8080")
    webhook_url = os.getenv("LOCAL_WEBHOOK_URL", f"http://localhost:{port}/telegram/webhook")
    secret = os.getenv("TELEGRAM_SECRET_TOKEN", "")
    user_id = int(os.getenv("TEST_CHAT_ID", "1"))
    text = sys.argv[1] if len(sys.argv) > 1 else "/start"

    body = json.dumps(build_update(text, user_id), ensure_ascii=False, separators=(",", ":"))
    headers = {"content-type": "application/json"}
    if secret:
        headers["X-Telegram-Bot-Api-Secret-Token"] = secret

    print(f"POST {webhook_url}")
    print(f"Secret attached: {bool(secret)}")

    response = httpx.post(webhook_url, content=body.encode(), headers=headers, timeout=10.0)

    print(f"Status: {response.status_code}")
    try:
        print(f"Body: {response.json()}")
    except ValueError:
        print(f"Raw body: {response.text}")


if __name__ == "__main__":
    main()
