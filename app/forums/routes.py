# ---
# File: forums/routes.py
# Purpose: FastAPI routes for listing forum categories and seeding the default set
# ---

from fastapi import APIRouter, Depends, HTTPException
import logging

from app.auth.dependencies import require_admin
from app.db import get_db
from app.forums.categories import DEFAULT_CATEGORIES, upsert_categories

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/forums", tags=["Forums"])

# ---
# List every forum category ordered by its `order` field (ascending).
# Each category carries `_count.posts`, the number of posts filed under it.
# Public endpoint, no authentication.
# ---
@router.get("/categories")
async def get_categories(db=Depends(get_db)):
    try:
        categories = await db.forumcategory.find_many(order={"order": "asc"})
        data = []
        for category in categories:
            post_count = await db.forumpost.count(where={"categoryId": category.id})
            data.append({**category.model_dump(exclude={"posts"}), "_count": {"posts": post_count}})
    except Exception as e:
        logger.error(f"[FORUMS][CATEGORIES][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch categories")

    return {"success": True, "data": data}

# ---
# Upsert the default categories by slug. Admin only.
# Safe to call repeatedly: existing categories are updated in place.
# ---
@router.post("/categories/seed")
async def seed_categories(db=Depends(get_db), admin=Depends(require_admin)):
    try:
        logger.info(f"[FORUMS][SEED] Seeding categories requested by {admin.id}")
        results = await upsert_categories(db, DEFAULT_CATEGORIES)
    except Exception as e:
        logger.error(f"[FORUMS][SEED][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to seed categories")

    return {
        "success": True,
        "message": "Forum categories seeded successfully",
        "data": results,
    }
