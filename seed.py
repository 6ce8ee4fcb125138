import asyncio

from app.db import create_client
from app.forums.categories import DEFAULT_CATEGORIES, upsert_categories

async def main():
    db = create_client()
    await db.connect()

    # Upsert by slug so the script can be re-run safely
    print("Seeding forum categories...")
    categories = await upsert_categories(db, DEFAULT_CATEGORIES)
    for category in categories:
        print(f"  {category.order}. {category.name} ({category.slug})")
    print(f"Seeded {len(categories)} forum categories")

    await db.disconnect()

if __name__ == "__main__":
    asyncio.run(main())
