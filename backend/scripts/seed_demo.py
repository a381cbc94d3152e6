#!/usr/bin/env python3
"""
Seed a demo dataset: an admin, a technician, a few customers and a spare-parts
catalogue, optionally read from a JSON file. Safe to re-run: users are matched
by username, customers and products by name.

Usage:
    python scripts/seed_demo.py
    python scripts/seed_demo.py --file products.json --reset
"""
import argparse
import json
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from repairdesk.db import SessionLocal, init_db
from repairdesk.logging_config import configure_logging
from repairdesk.models.customer import Customer
from repairdesk.models.product import Product
from repairdesk.repositories.user_repo import UserRepository
from repairdesk.services.customer_service import CustomerService
from repairdesk.services.product_service import ProductService
from repairdesk.services.user_service import UserService

DEMO_USERS = [
    {"username": "admin", "email": "admin@repairdesk.local", "password": "admin123",
     "full_name": "Shop Admin", "role": "admin"},
    {"username": "tech1", "email": "tech1@repairdesk.local", "password": "tech123",
     "full_name": "Bench Technician", "role": "technician"},
]

DEMO_CUSTOMERS = [
    {"name": "Walk-in Customer", "phone": None, "email": None, "address": None},
    {"name": "Rina Putri", "phone": "0812-555-0101", "email": "rina@example.com", "address": "Jl. Merdeka 10"},
]

DEMO_PRODUCTS = [
    {"name": "SSD 512GB", "type": "sparepart", "price": "54.90", "stock_quantity": 12, "minimum_stock": 4},
    {"name": "Laptop Battery 6-cell", "type": "sparepart", "price": "39.50", "stock_quantity": 3, "minimum_stock": 5},
    {"name": "Thermal Paste 4g", "type": "other", "price": "6.25", "stock_quantity": 30, "minimum_stock": 10},
    {"name": "USB-C Charger 65W", "type": "accessory", "price": "24.99", "stock_quantity": 8, "minimum_stock": 3},
]


def _normalize_product(entry):
    """Return dict with keys: name, type, price, stock_quantity, minimum_stock, description"""
    return {
        "name": entry.get("name") or entry.get("title") or "",
        "type": entry.get("type") or "other",
        "price": str(entry.get("price", "0")),
        "stock_quantity": int(entry.get("stock_quantity", entry.get("stock", 0)) or 0),
        "minimum_stock": int(entry.get("minimum_stock", 0) or 0),
        "description": entry.get("description"),
    }


def load_products(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("items", list(data.values()))
    return [_normalize_product(e) for e in data]


def seed(products):
    db = SessionLocal()
    created = {"users": 0, "customers": 0, "products": 0}
    try:
        users = UserService(db)
        for u in DEMO_USERS:
            if not UserRepository(db).get_by_username(u["username"]):
                users.create(**u)
                created["users"] += 1

        customers = CustomerService(db)
        for c in DEMO_CUSTOMERS:
            if not db.query(Customer).filter(Customer.name == c["name"]).first():
                customers.create(**c)
                created["customers"] += 1

        catalogue = ProductService(db)
        for p in products:
            if not p["name"]:
                continue
            if not db.query(Product).filter(Product.name == p["name"]).first():
                catalogue.create(**p)
                created["products"] += 1
    finally:
        db.close()
    print("Seeded:", created)


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", default=None, help="JSON list of products (defaults to the built-in demo catalogue)")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    args = parser.parse_args()
    configure_logging("INFO")
    if args.file and not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    init_db(reset=args.reset)
    seed(load_products(args.file) if args.file else [_normalize_product(p) for p in DEMO_PRODUCTS])
