#!/usr/bin/env python3
# =============================================================================
# scripts/seed.py - Load Sample Data
# =============================================================================
# Writes the pet-store sample categories, products, customers, orders and
# order items using the service_role key.
#
# Usage:
#   python scripts/seed.py
#
# Prerequisites:
#   - supabase/migrations/001_initial_schema.sql has been applied
#   - SUPABASE_URL and SUPABASE_SERVICE_KEY are set (.env file)
#
# Customers and orders are plain inserts, so a second run stops at the
# unique email constraint.
# =============================================================================

import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from postgrest.exceptions import APIError

from core.seed import seed_database
from lib.supabase_client import SupabaseClient, SupabaseClientError


def main() -> int:
    """Seed the database and print what was written."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")

    print("=" * 60)
    print("Inventory Admin - Sample Data")
    print("=" * 60)
    print()

    try:
        client = SupabaseClient.get_client()
        counts = seed_database(client)
    except SupabaseClientError as e:
        print(f"Could not connect: {e}")
        return 1
    except APIError as e:
        print(f"Seeding failed: {SupabaseClient.error_message(e)}")
        return 1

    for table, count in counts.items():
        print(f"  {table:<12} {count:>3} rows")
    print()
    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
