"""Write a manual status to a running backend and print the resulting weekly grid."""

import argparse
import requests
from datetime import date

BACKEND_URL = "http://127.0.0.1:8080/api/v1"


def put_override(vehicle, day, shift, status, notes, author, api_key):
    payload = {
        "vehicle_number": vehicle,
        "date": day,
        "shift": shift,
        "status": status,
        "notes": notes,
        "author_id": author,
    }
    resp = requests.put(f"{BACKEND_URL}/attendance/override", json=payload,
                        headers=_headers(api_key), timeout=10)
    print(f"✅ override {vehicle} {day} {shift} → {status} | HTTP {resp.status_code}: {resp.json()}")


def print_week(vehicle, week_offset, api_key):
    params = {"week_offset": week_offset}
    if vehicle:
        params["vehicle_number"] = vehicle
    resp = requests.get(f"{BACKEND_URL}/attendance/weekly", params=params,
                        headers=_headers(api_key), timeout=10)
    if resp.status_code != 200:
        print(f"❌ weekly grid → HTTP {resp.status_code}: {resp.text}")
        return

    grid = resp.json()
    print(f"\n📅 Week {grid['week_start']} → {grid['week_end']} (shifts: {', '.join(grid['shifts'])})")
    for row in grid["rows"]:
        statuses = " ".join(f"{c['date'][5:]}/{c['shift'][0]}={c['status'] or '?'}" for c in row["cells"])
        print(f"  {row['vehicle_number']:<12} {statuses}")
    print(f"📊 Totals: {grid['totals']} | unavailable: {grid['unavailable']}")


def _headers(api_key):
    return {"X-API-Key": api_key} if api_key else {}


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Simulate a manual attendance entry")
    parser.add_argument("--vehicle", default="V1")
    parser.add_argument("--date", default=date.today().isoformat())
    parser.add_argument("--shift", default="morning", choices=["daily", "morning", "night"])
    parser.add_argument("--status", default="breakdown")
    parser.add_argument("--notes", default="simulated entry")
    parser.add_argument("--author", default="sim-operator")
    parser.add_argument("--week", type=int, default=0)
    parser.add_argument("--api-key", default=None)
    parser.add_argument("--url", default=BACKEND_URL)
    args = parser.parse_args()

    BACKEND_URL = args.url.rstrip("/")
    put_override(args.vehicle, args.date, args.shift, args.status, args.notes, args.author, args.api_key)
    print_week(args.vehicle, args.week, args.api_key)
