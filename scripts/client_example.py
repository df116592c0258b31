# path: osm-feature-extractor/scripts/client_example.py

"""
Example client: asks a running server for the features inside a small polygon
and prints a per-category summary.

    python scripts/client_example.py --base-url http://localhost:3000
"""

import argparse
import json
import sys
from collections import Counter

import httpx

# Closed ring: the first point is repeated at the end
POLYGON = [
    {"lat": 32.260, "lng": -97.790},
    {"lat": 32.260, "lng": -97.780},
    {"lat": 32.270, "lng": -97.780},
    {"lat": 32.270, "lng": -97.790},
    {"lat": 32.260, "lng": -97.790},
]

FEATURE_TYPES = ["building", "highway", "waterway", "power"]


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--base-url", default="http://localhost:3000")
    parser.add_argument("--forcepolygon", action="store_true")
    parser.add_argument("--out", help="write the raw response JSON to this file")
    args = parser.parse_args()

    payload = {"polygon": POLYGON, "featureTypes": FEATURE_TYPES}
    if args.forcepolygon:
        payload["forcepolygon"] = True

    try:
        resp = httpx.post(f"{args.base_url.rstrip('/')}/api/features", json=payload, timeout=300)
    except httpx.RequestError as exc:
        print(f"Error fetching features: {exc}", file=sys.stderr)
        return 1
    if resp.status_code != 200:
        print(f"Error fetching features: HTTP {resp.status_code} {resp.text}", file=sys.stderr)
        return 1

    data = resp.json()
    counts = Counter(f["type"] for f in data["features"])
    print(f"Found {data['metadata']['count']} features:")
    print(f"- Buildings: {counts.get('building', 0)}")
    print(f"- Roads: {counts.get('road', 0)}")
    print(f"- Water features: {counts.get('water', 0)}")
    print(f"- Utilities: {counts.get('utility', 0)}")

    print("\nExample features:")
    for category, label in (("building", "Building"), ("road", "Road")):
        example = next((f for f in data["features"] if f["type"] == category), None)
        if example:
            print(f"{label}: {example['name']} ({example['id']})")

    if args.out:
        with open(args.out, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2)
    return 0


if __name__ == "__main__":
    sys.exit(main())
