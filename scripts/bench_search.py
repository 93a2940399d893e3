#!/usr/bin/env python3
"""Benchmark search: latency (p50, p95, p99) and QPS.

Seeds the caller's knowledge base with documents, then fires search requests
at POST /v1/search.

Usage:
  export API_URL=http://localhost:8000
  # with Keycloak enabled on the server:
  export KEYCLOAK_URL=... KEYCLOAK_CLIENT_SECRET=... BENCH_USER=... BENCH_PASSWORD=...
  python scripts/bench_search.py [--num-docs 200] [--num-queries 50]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx

SENTENCES = (
    "Retrieval quality depends on how text is split.",
    "Overlapping chunks keep context across boundaries.",
    "Cosine similarity compares the direction of two vectors.",
    "Each document contributes at most two chunks to a result.",
    "Brute-force scans are fine for small personal corpora.",
)


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def build_headers() -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    client_secret = os.environ.get("KEYCLOAK_CLIENT_SECRET")
    if not client_secret:
        return headers
    print("Getting token...")
    token = get_token(
        os.environ.get("KEYCLOAK_URL", "http://localhost:8080"),
        os.environ.get("KEYCLOAK_REALM", "chunkwise"),
        os.environ.get("KEYCLOAK_CLIENT_ID", "chunkwise-api"),
        client_secret,
        os.environ.get("BENCH_USER", "testuser"),
        os.environ.get("BENCH_PASSWORD", "testpass"),
    )
    headers["Authorization"] = f"Bearer {token}"
    return headers


def percentile(sorted_values: list[float], fraction: float) -> float:
    index = max(0, int(len(sorted_values) * fraction) - 1)
    return sorted_values[index]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark search")
    parser.add_argument("--num-docs", type=int, default=200, help="Documents to create before searching")
    parser.add_argument("--num-queries", type=int, default=50, help="Number of search requests")
    parser.add_argument("--limit", type=int, default=5, help="Search result limit")
    parser.add_argument("--output", type=str, default="bench_search.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    headers = build_headers()

    created: list[str] = []
    with httpx.Client(timeout=60.0) as client:
        print(f"Seeding {args.num_docs} documents...")
        for i in range(args.num_docs):
            body = " ".join(SENTENCES[(i + k) % len(SENTENCES)] for k in range(len(SENTENCES)))
            r = client.post(
                f"{api_url}/v1/documents",
                json={"title": f"Benchmark document {i}", "content": f"{body} Marker {i}."},
                headers=headers,
            )
            r.raise_for_status()
            created.append(r.json()["document"]["id"])

        latencies: list[float] = []
        errors = 0
        print(f"Running {args.num_queries} search requests...")
        start_total = time.perf_counter()
        for i in range(args.num_queries):
            t0 = time.perf_counter()
            r = client.post(
                f"{api_url}/v1/search",
                json={"query": SENTENCES[i % len(SENTENCES)], "limit": args.limit},
                headers=headers,
            )
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
        total_elapsed = time.perf_counter() - start_total

        print(f"Deleting {len(created)} documents...")
        for doc_id in created:
            client.delete(f"{api_url}/v1/documents/{doc_id}", headers=headers)

    n = len(latencies)
    if n == 0:
        print("No successful searches.")
        return 1

    ordered = sorted(latencies)
    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = percentile(ordered, 0.95) * 1000 if n >= 20 else p50
    p99 = percentile(ordered, 0.99) * 1000 if n >= 100 else p95

    summary = (
        f"Search benchmark (documents={args.num_docs}, queries={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError as exc:
        print(f"Could not write {args.output}: {exc}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
