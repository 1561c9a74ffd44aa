#!/usr/bin/env python3
"""
Smoke Probe

Sends requests to a running hello server and checks that each one comes
back with the expected message.
"""
import argparse
import json
import logging
import sys
import time
from typing import List, Dict, Optional

import requests

from devops_hello.server import PORT, render_body

LOGGER = logging.getLogger(__name__)

DEFAULT_URL = f"http://127.0.0.1:{PORT}"


class Probe:
    def __init__(self, server_url: str = DEFAULT_URL, interval_ms: int = 200, timeout_ms: int = 5000):
        """
        Initialize the probe.

        Args:
            server_url: Target server URL
            interval_ms: Time between requests in milliseconds
            timeout_ms: Request timeout in milliseconds
        """
        self.server_url = server_url
        self.interval_s = interval_ms / 1000.0
        self.timeout_s = timeout_ms / 1000.0
        self.expected_body = render_body()
        self.metrics: List[Dict] = []

    def make_request(self, request_id: int) -> Dict:
        """
        Make a single request and classify the answer.

        Args:
            request_id: Sequence number of this request

        Returns:
            Dictionary containing request metrics
        """
        start_time = time.time()
        metric = {
            "request_id": request_id,
            "start_time": start_time,
            "status_code": None,
        }

        try:
            response = requests.get(self.server_url, timeout=self.timeout_s)
            metric["status_code"] = response.status_code
            if response.status_code != 200:
                metric["result"] = "http_error"
            elif response.content != self.expected_body:
                metric["result"] = "unexpected_body"
            else:
                metric["result"] = "success"
        except requests.exceptions.Timeout:
            metric["result"] = "timeout"
        except requests.exceptions.RequestException as e:
            metric["result"] = "error"
            metric["error"] = str(e)

        end_time = time.time()
        metric["end_time"] = end_time
        metric["latency_ms"] = (end_time - start_time) * 1000

        if metric["result"] == "success":
            LOGGER.info("Request %4d: %7.2f ms - HTTP %s",
                        request_id, metric["latency_ms"], metric["status_code"])
        else:
            LOGGER.warning("Request %4d: %7.2f ms - %s",
                           request_id, metric["latency_ms"], metric["result"].upper())

        return metric

    def run(self, num_requests: int = 1):
        """Make num_requests sequential requests, pausing between them."""
        LOGGER.info("Probing %s", self.server_url)

        for request_id in range(1, num_requests + 1):
            self.metrics.append(self.make_request(request_id))
            if request_id < num_requests:
                time.sleep(self.interval_s)

    def summary(self) -> Dict:
        if not self.metrics:
            return {}

        total = len(self.metrics)
        successful = len([m for m in self.metrics if m["result"] == "success"])
        latencies = [m["latency_ms"] for m in self.metrics]

        return {
            "total": total,
            "successful": successful,
            "failed": total - successful,
            "min_latency_ms": min(latencies),
            "avg_latency_ms": sum(latencies) / len(latencies),
            "max_latency_ms": max(latencies),
        }

    @property
    def healthy(self) -> bool:
        return bool(self.metrics) and all(m["result"] == "success" for m in self.metrics)

    def export_metrics(self, output_path: str):
        """Export metrics to JSON file."""
        with open(output_path, 'w') as f:
            json.dump(self.metrics, f, indent=2)
        LOGGER.info("Metrics exported to %s", output_path)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Hello server smoke probe")
    parser.add_argument('--url', default=DEFAULT_URL, help='Target server URL')
    parser.add_argument('--requests', type=int, default=1, help='Number of requests to make')
    parser.add_argument('--interval', type=int, default=200,
                        help='Interval between requests (milliseconds)')
    parser.add_argument('--timeout', type=int, default=5000, help='Request timeout (milliseconds)')
    parser.add_argument('--output', help='Optional JSON file for the collected metrics')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )

    probe = Probe(server_url=args.url, interval_ms=args.interval, timeout_ms=args.timeout)
    probe.run(num_requests=args.requests)

    stats = probe.summary()
    if stats:
        LOGGER.info("%d/%d successful, avg latency %.2f ms",
                    stats["successful"], stats["total"], stats["avg_latency_ms"])

    if args.output:
        probe.export_metrics(args.output)

    sys.exit(0 if probe.healthy else 1)


if __name__ == '__main__':
    main()
