"""Async load generator for the payments endpoint."""

import argparse
import asyncio
import random
import statistics
import time
from uuid import uuid4

import httpx


CURRENCIES = ["USD", "EUR", "GBP", "XYZ"]


async def send_one(client: httpx.AsyncClient, base_url: str, customer_idx: int, decline_ratio: float):
    """Send one payment request and return (status_code, latency_ms)."""

    started = time.perf_counter()
    prefix = "force-decline" if random.random() < decline_ratio else "pmt"
    payload = {
        "payment_id": f"{prefix}-{uuid4()}",
        "amount": f"{random.randint(100, 250000) / 100:.2f}",
        "currency": random.choice(CURRENCIES),
        "customer_id": f"cust-{customer_idx}",
    }
    try:
        resp = await client.post(f"{base_url}/payments", json=payload, headers={"x-trace-id": str(uuid4())})
        latency = (time.perf_counter() - started) * 1000
        return resp.status_code, latency
    except httpx.HTTPError:
        latency = (time.perf_counter() - started) * 1000
        return 599, latency


def pct(values, p):
    """Simple percentile helper for latency values."""

    if not values:
        return 0.0
    idx = min(len(values) - 1, max(0, int((p / 100.0) * len(values)) - 1))
    return sorted(values)[idx]


async def run(total: int, concurrency: int, base_url: str, decline_ratio: float):
    """Execute a bounded-concurrency load run and print summary stats."""

    sem = asyncio.Semaphore(concurrency)
    results = []

    async with httpx.AsyncClient(timeout=10.0) as client:
        async def worker(i: int):
            async with sem:
                return await send_one(client, base_url, i % 500, decline_ratio)

        tasks = [asyncio.create_task(worker(i)) for i in range(total)]
        for task in asyncio.as_completed(tasks):
            results.append(await task)

    codes = [c for c, _ in results]
    lats = [latency for _, latency in results]
    success = sum(1 for c in codes if 200 <= c < 300)
    errors = total - success

    print(f"total={total}")
    print(f"success={success}")
    print(f"errors={errors}")
    print(f"error_rate={(errors / total) * 100:.2f}%")
    print(f"p50_ms={pct(lats, 50):.2f}")
    print(f"p95_ms={pct(lats, 95):.2f}")
    print(f"p99_ms={pct(lats, 99):.2f}")
    print(f"avg_ms={statistics.mean(lats):.2f}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--total", type=int, default=1000)
    parser.add_argument("--concurrency", type=int, default=100)
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--decline-ratio", type=float, default=0.05)
    args = parser.parse_args()
    asyncio.run(run(args.total, args.concurrency, args.base_url, args.decline_ratio))
