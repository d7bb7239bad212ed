"""
Seed a running server with extra todo items from extra_todo_data.json via POST /api/todos.
"""

import json
import os
from pathlib import Path

import httpx

BASE_URL = os.getenv("TODO_API_URL", "http://localhost:3000") + "/api/todos"
DATA_FILE = Path(__file__).parent / "extra_todo_data.json"


def main() -> None:
    texts = json.loads(DATA_FILE.read_text())

    with httpx.Client() as client:
        for i, text in enumerate(texts, start=1):
            resp = client.post(BASE_URL, json={"text": text})
            resp.raise_for_status()
            created = resp.json()
            print(f"[{i}/{len(texts)}] Created #{created['id']}: {created['text']}")

    print(f"\nDone. {len(texts)} todos added.")


if __name__ == "__main__":
    main()
