# scripts/call_pie_local.py
import sys, pathlib, os, json
from dotenv import load_dotenv, find_dotenv

# Ensure project root is on sys.path (run from anywhere)
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

load_dotenv(find_dotenv())

print("SCRIPT render log:", os.environ.get("PIEVIZ_RENDER_LOG") or "(off)")

from fastapi.testclient import TestClient
from pieviz.server.app import app

client = TestClient(app)

payload = {
    "title": "Why dogs are better than cats",
    "labels": ["Cat", "Dog", "Hamster"],
    "values": [10.0, 20.0, 5.0],
    "colour_palette": ["fbb4ae", "b3cde3", "ccebc5"],
    "standalone": True,
}

r = client.post("/pie/svg", json=payload)
print("status:", r.status_code)
print(r.text[:1200])

r = client.post("/pie/layout", json=payload)
print(json.dumps(r.json(), indent=2)[:1200])
