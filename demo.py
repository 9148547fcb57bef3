#!/usr/bin/env python
from sdk.inventory_client import InventoryClient, DEFAULT_BASE_URL

def main():
    c = InventoryClient(base_url=DEFAULT_BASE_URL)

    # -----------------------------
    # Create products
    # -----------------------------
    print("Creating products...")
    lamp = c.create_product("Desk Lamp", 12, 24.50, "LED lamp with adjustable arm", "lighting")
    chair = c.create_product("Office Chair", 4, 149.00, "Mesh back, adjustable height", "furniture")
    bulb = c.create_product("Lamp Bulb", 40, 3.25, "E27 warm white", "lighting")
    print(lamp)
    print(chair)
    print(bulb)

    # -----------------------------
    # Search + sort
    # -----------------------------
    print("\nSearching for 'lamp', cheapest first...")
    print(c.list_products(search="lamp", sort_by="price", order="asc"))

    # -----------------------------
    # Paginate
    # -----------------------------
    print("\nFirst page of two...")
    print(c.list_products(page=1, limit=2))

    # -----------------------------
    # Update
    # -----------------------------
    print("\nRestocking the chair...")
    print(c.update_product(chair["id"], quantity=10))

    # -----------------------------
    # Delete
    # -----------------------------
    print("\nDeleting the bulb...")
    print(c.delete_product(bulb["id"]))
    print(c.list_products())

if __name__ == "__main__":
    main()
