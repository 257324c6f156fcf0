"""
examples/latency.py – REST round-trip latency benchmark.

Issues N_SAMPLES sequential ping and server-time requests through a
single shared AsyncClient and reports P50 / P95 / P99 / max in
milliseconds.  Useful for comparing hosts, proxies and regions.

HOW TO RUN
----------
    python examples/latency.py

    # Optional overrides (shown with defaults):
    export BINANCE_ENV="testnet"
    export BINANCE_N_SAMPLES="20"
    export BINANCE_PROXY=""            # e.g. http://127.0.0.1:8888
"""

from __future__ import annotations

import asyncio
import logging
import os
import statistics
import time

from binance_sdk import AsyncClient, Empty, Futures, ServerTime, futures_host

logging.basicConfig(
    level=logging.WARNING,  # suppress SDK noise during benchmark
    format="%(asctime)s  %(levelname)-8s  %(name)s – %(message)s",
)
logger = logging.getLogger("latency")

ENV       = os.environ.get("BINANCE_ENV",       "testnet")
N_SAMPLES = int(os.environ.get("BINANCE_N_SAMPLES", "20"))
PROXY     = os.environ.get("BINANCE_PROXY") or None


def _percentile(samples: list[float], pct: float) -> float:
    ordered = sorted(samples)
    index   = min(len(ordered) - 1, int(round(pct / 100 * (len(ordered) - 1))))
    return ordered[index]


def _report(name: str, samples_ms: list[float]) -> None:
    print(
        f"{name:<12} n={len(samples_ms):<4} "
        f"p50={statistics.median(samples_ms):7.2f}  "
        f"p95={_percentile(samples_ms, 95):7.2f}  "
        f"p99={_percentile(samples_ms, 99):7.2f}  "
        f"max={max(samples_ms):7.2f}  (ms)"
    )


async def _measure(client: AsyncClient, endpoint: Futures, response_type: type) -> list[float]:
    samples: list[float] = []
    for _ in range(N_SAMPLES):
        t0 = time.perf_counter()
        await client.get(endpoint, response_type=response_type)
        samples.append((time.perf_counter() - t0) * 1000)
    return samples


async def main() -> None:
    async with AsyncClient(host=futures_host(ENV), proxy=PROXY) as client:
        # Warm the connection pool so the first TLS handshake is not counted
        await client.get(Futures.PING, response_type=Empty)

        _report("ping", await _measure(client, Futures.PING, Empty))
        _report("server time", await _measure(client, Futures.TIME, ServerTime))


if __name__ == "__main__":
    asyncio.run(main())
