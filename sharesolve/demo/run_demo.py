#!/usr/bin/env python3
"""ShareSolve demo.

Usage:
    python -m sharesolve.demo.run_demo

Solves the two classic test vectors.  With ``SHARESOLVE_URL`` set (e.g.
``http://localhost:8000``) the documents are posted to a running service's
``/solve`` endpoint instead of being solved in-process.
"""

from __future__ import annotations

import sys
from typing import Any, Dict

import httpx

from sharesolve.config import SERVICE_URL
from sharesolve.errors import ShareError
from sharesolve.loader.shareset import load_shareset, solve

# ---------- test vectors (legacy keyed form) ------------------------------
TEST_VECTOR_1: Dict[str, Any] = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}

TEST_VECTOR_2: Dict[str, Any] = {
    "keys": {"n": 10, "k": 7},
    "1": {"base": "6", "value": "13444211440455345511"},
    "2": {"base": "15", "value": "aed7015a346d63"},
    "3": {"base": "15", "value": "6aeeb69631c227c"},
    "4": {"base": "16", "value": "e1b5e05623d881f"},
    "5": {"base": "8", "value": "316034514573652620673"},
    "6": {"base": "3", "value": "2122212201122002221120200210011020220200"},
    "7": {"base": "3", "value": "20120221122211000100210021102001201112121"},
    "8": {"base": "6", "value": "20220554335330240002224253"},
    "9": {"base": "12", "value": "45153788322a1255483"},
    "10": {"base": "7", "value": "1101613130313526312514143"},
}


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def solve_local(document: Dict[str, Any]) -> str:
    shareset = load_shareset(document)
    used = [s.x for s in shareset.select()]
    print(f"   k = {shareset.threshold}, n = {shareset.total}, using x = {used}")
    return str(solve(shareset))


def solve_remote(client: httpx.Client, document: Dict[str, Any]) -> str:
    resp = client.post("/solve", json={"document": document})
    if resp.status_code != 200:
        body = resp.json()
        raise SystemExit(f"   {body.get('error', resp.status_code)}: {body.get('message', resp.text)}")
    body = resp.json()
    print(f"   k = {body['threshold']}, using x = {body['used']}")
    return body["secret"]


def main() -> int:
    vectors = [("Test Case 1", TEST_VECTOR_1), ("Test Case 2", TEST_VECTOR_2)]

    if SERVICE_URL:
        with httpx.Client(base_url=SERVICE_URL, timeout=10.0) as client:
            for name, doc in vectors:
                banner(f"Solving {name} via {SERVICE_URL}")
                print(f"   Secret: {solve_remote(client, doc)}")
        return 0

    status = 0
    for name, doc in vectors:
        banner(f"Solving {name}")
        try:
            print(f"   Secret: {solve_local(doc)}")
        except ShareError as exc:
            print(f"   {exc.kind}: {exc}")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
