# =============================================================================
# core/seed.py - Sample Data Loader
# =============================================================================
# Loads the pet-store sample data through the service_role client.
# Mirrors supabase/seed.sql:
# - categories: upsert on name, existing rows left untouched
# - products:   upsert on sku, existing rows overwritten
# - customers, orders, order items: plain inserts (a second run fails on
#   the unique email / order_number constraints)
#
# Usage:
#   python scripts/seed.py
# =============================================================================

import logging
from typing import Any

from supabase import Client

logger = logging.getLogger(__name__)


CATEGORIES: list[dict[str, Any]] = [
    {"name": "Medications", "description": "Prescription and over-the-counter medications for pets"},
    {"name": "Food", "description": "Pet food and nutrition products"},
    {"name": "Grooming", "description": "Pet grooming supplies and tools"},
    {"name": "Treats", "description": "Pet treats and chews"},
    {"name": "Supplies", "description": "General pet care supplies"},
    {"name": "Accessories", "description": "Pet accessories and travel gear"},
]

# (category name, product row)
PRODUCTS: list[tuple[str, dict[str, Any]]] = [
    ("Medications", {"name": "Flea & Tick Prevention", "description": "Monthly flea and tick prevention treatment for dogs", "sku": "MED-001", "price": 45.99, "cost": 25.00, "stock": 50, "min_stock": 10, "status": "active"}),
    ("Food", {"name": "Dog Food - Premium", "description": "High-quality dry dog food, 15kg bag", "sku": "FOOD-001", "price": 89.99, "cost": 50.00, "stock": 30, "min_stock": 5, "status": "active"}),
    ("Food", {"name": "Cat Food - Grain Free", "description": "Grain-free wet cat food, 24-pack", "sku": "FOOD-002", "price": 34.99, "cost": 18.00, "stock": 45, "min_stock": 10, "status": "active"}),
    ("Grooming", {"name": "Pet Shampoo", "description": "Hypoallergenic pet shampoo, 500ml", "sku": "GROOM-001", "price": 19.99, "cost": 8.00, "stock": 75, "min_stock": 15, "status": "active"}),
    ("Treats", {"name": "Dental Chews", "description": "Dental health chews for dogs, 30-pack", "sku": "TREAT-001", "price": 24.99, "cost": 12.00, "stock": 60, "min_stock": 10, "status": "active"}),
    ("Medications", {"name": "Heartworm Prevention", "description": "Monthly heartworm prevention medication", "sku": "MED-002", "price": 52.99, "cost": 28.00, "stock": 40, "min_stock": 10, "status": "active"}),
    ("Supplies", {"name": "Cat Litter - Clumping", "description": "Premium clumping cat litter, 20kg", "sku": "SUPP-001", "price": 29.99, "cost": 15.00, "stock": 25, "min_stock": 8, "status": "active"}),
    ("Supplies", {"name": "Pet Vitamins", "description": "Daily multivitamin supplement for pets", "sku": "SUPP-002", "price": 39.99, "cost": 20.00, "stock": 55, "min_stock": 10, "status": "active"}),
    ("Grooming", {"name": "Nail Clippers", "description": "Professional pet nail clippers", "sku": "GROOM-002", "price": 15.99, "cost": 7.00, "stock": 80, "min_stock": 15, "status": "active"}),
    ("Accessories", {"name": "Pet Carrier", "description": "Portable pet carrier for travel", "sku": "ACC-001", "price": 69.99, "cost": 35.00, "stock": 20, "min_stock": 5, "status": "active"}),
]

CUSTOMERS: list[dict[str, Any]] = [
    {"name": "John Smith", "email": "john.smith@email.com", "phone": "555-0101", "address": "123 Main St", "city": "Springfield", "state": "IL", "zip_code": "62701", "status": "active"},
    {"name": "Sarah Johnson", "email": "sarah.j@email.com", "phone": "555-0102", "address": "456 Oak Ave", "city": "Springfield", "state": "IL", "zip_code": "62702", "status": "active"},
    {"name": "Michael Brown", "email": "mbrown@email.com", "phone": "555-0103", "address": "789 Pine Rd", "city": "Springfield", "state": "IL", "zip_code": "62703", "status": "active"},
    {"name": "Emily Davis", "email": "emily.davis@email.com", "phone": "555-0104", "address": "321 Elm St", "city": "Springfield", "state": "IL", "zip_code": "62704", "status": "active"},
    {"name": "David Wilson", "email": "dwilson@email.com", "phone": "555-0105", "address": "654 Maple Dr", "city": "Springfield", "state": "IL", "zip_code": "62705", "status": "active"},
]

# (customer email, order row)
ORDERS: list[tuple[str, dict[str, Any]]] = [
    ("john.smith@email.com", {"order_number": "ORD-2024-001", "total_amount": 156.97, "discount": 0, "tax": 12.56, "status": "completed", "payment_status": "paid", "payment_method": "credit_card"}),
    ("sarah.j@email.com", {"order_number": "ORD-2024-002", "total_amount": 89.99, "discount": 5.00, "tax": 6.80, "status": "completed", "payment_status": "paid", "payment_method": "debit_card"}),
    ("mbrown@email.com", {"order_number": "ORD-2024-003", "total_amount": 74.98, "discount": 0, "tax": 6.00, "status": "processing", "payment_status": "paid", "payment_method": "credit_card"}),
    ("emily.davis@email.com", {"order_number": "ORD-2024-004", "total_amount": 45.99, "discount": 0, "tax": 3.68, "status": "pending", "payment_status": "unpaid", "payment_method": None}),
    ("dwilson@email.com", {"order_number": "ORD-2024-005", "total_amount": 124.97, "discount": 10.00, "tax": 9.20, "status": "completed", "payment_status": "paid", "payment_method": "cash"}),
]

# (order number, product sku, product name, quantity, unit price, subtotal)
ORDER_ITEMS: list[tuple[str, str, str, int, float, float]] = [
    ("ORD-2024-001", "MED-001", "Flea & Tick Prevention", 2, 45.99, 91.98),
    ("ORD-2024-001", "TREAT-001", "Dental Chews", 1, 24.99, 24.99),
    ("ORD-2024-001", "SUPP-002", "Pet Vitamins", 1, 39.99, 39.99),
    ("ORD-2024-002", "FOOD-001", "Dog Food - Premium", 1, 89.99, 89.99),
    ("ORD-2024-003", "FOOD-002", "Cat Food - Grain Free", 1, 34.99, 34.99),
    ("ORD-2024-003", "SUPP-001", "Cat Litter - Clumping", 1, 29.99, 29.99),
    ("ORD-2024-003", "GROOM-001", "Pet Shampoo", 1, 19.99, 19.99),
    ("ORD-2024-004", "MED-001", "Flea & Tick Prevention", 1, 45.99, 45.99),
    ("ORD-2024-005", "MED-002", "Heartworm Prevention", 1, 52.99, 52.99),
    ("ORD-2024-005", "ACC-001", "Pet Carrier", 1, 69.99, 69.99),
]


def _id_map(client: Client, table: str, key: str) -> dict[str, str]:
    """Map a unique column to row ids, e.g. category name -> id."""
    response = client.table(table).select(f"id, {key}").execute()
    return {row[key]: row["id"] for row in response.data or []}


def seed_database(client: Client) -> dict[str, int]:
    """
    Insert the sample data.

    Args:
        client: A service_role client (seeding bypasses RLS)

    Returns:
        Rows written per table

    Raises:
        postgrest.exceptions.APIError: On the first failing statement
    """
    client.table("categories").upsert(
        CATEGORIES, on_conflict="name", ignore_duplicates=True
    ).execute()
    category_ids = _id_map(client, "categories", "name")
    logger.info(f"Seeded {len(CATEGORIES)} categories")

    products = [
        {**row, "category_id": category_ids.get(category)}
        for category, row in PRODUCTS
    ]
    client.table("products").upsert(products, on_conflict="sku").execute()
    product_ids = _id_map(client, "products", "sku")
    logger.info(f"Seeded {len(products)} products")

    client.table("customers").insert(CUSTOMERS).execute()
    customer_ids = _id_map(client, "customers", "email")
    logger.info(f"Seeded {len(CUSTOMERS)} customers")

    orders = [
        {**row, "customer_id": customer_ids.get(email)}
        for email, row in ORDERS
    ]
    client.table("orders").insert(orders).execute()
    order_ids = _id_map(client, "orders", "order_number")
    logger.info(f"Seeded {len(orders)} orders")

    items = [
        {
            "order_id": order_ids[order_number],
            "product_id": product_ids.get(sku),
            "product_name": name,
            "quantity": quantity,
            "unit_price": unit_price,
            "subtotal": subtotal,
        }
        for order_number, sku, name, quantity, unit_price, subtotal in ORDER_ITEMS
    ]
    client.table("order_items").insert(items).execute()
    logger.info(f"Seeded {len(items)} order items")

    return {
        "categories": len(CATEGORIES),
        "products": len(products),
        "customers": len(CUSTOMERS),
        "orders": len(orders),
        "order_items": len(items),
    }
