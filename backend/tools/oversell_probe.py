"""
Fire concurrent createTransactionItem calls at a running server and check that
the product never ends up oversold.

Usage:
    python tools/oversell_probe.py --transaction 1 --product 3 --workers 16 --qty 1
"""
import argparse
import concurrent.futures
import os
from collections import Counter

import requests

BASE = os.environ.get("REPAIRDESK_BASE", "http://127.0.0.1:8000")


def sell_task(i, transaction_id, product_id, qty, unit_price):
    payload = {
        "transaction_id": transaction_id,
        "product_id": product_id,
        "quantity": qty,
        "unit_price": unit_price,
    }
    try:
        r = requests.post(f"{BASE}/api/transaction-items", json=payload, timeout=10)
        return (i, r.status_code, r.text)
    except requests.RequestException as e:
        return (i, "ERR", str(e))


def product_stock(product_id):
    r = requests.get(f"{BASE}/api/products/{product_id}", timeout=10)
    r.raise_for_status()
    body = r.json()
    return body["stock_quantity"] if body else None


def run(workers, transaction_id, product_id, qty, unit_price):
    before = product_stock(product_id)
    print(f"stock before={before}, workers={workers}, qty per call={qty}")
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [
            ex.submit(sell_task, i, transaction_id, product_id, qty, unit_price)
            for i in range(workers)
        ]
        results = [f.result() for f in futures]
    codes = Counter(r[1] for r in results)
    after = product_stock(product_id)
    sold = codes.get(200, 0) * qty
    print("status codes:", dict(codes))
    print(f"stock after={after}, sold={sold}")
    if before is not None and after is not None:
        ok = after == before - sold and after >= 0
        print("consistent" if ok else "OVERSOLD / INCONSISTENT")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Concurrent sell probe for the stock floor.")
    parser.add_argument("--transaction", type=int, required=True)
    parser.add_argument("--product", type=int, required=True)
    parser.add_argument("--qty", type=int, default=1)
    parser.add_argument("--price", type=float, default=1.0)
    parser.add_argument("--workers", type=int, default=8)
    args = parser.parse_args()
    run(args.workers, args.transaction, args.product, args.qty, args.price)
