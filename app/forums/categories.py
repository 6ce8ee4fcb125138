# ---
# File: forums/categories.py
# Purpose: Default forum categories and the idempotent upsert shared by the seed route and seed.py
# ---

from typing import Any, Dict, List

DEFAULT_CATEGORIES: List[Dict[str, Any]] = [
    {
        "name": "General Discussion",
        "slug": "general",
        "description": "Chat about anything dog-related",
        "icon": "💬",
        "color": "#FF6B35",
        "order": 1,
    },
    {
        "name": "Health & Wellness",
        "slug": "health",
        "description": "Discuss health issues, symptoms, and vet experiences",
        "icon": "🏥",
        "color": "#22C55E",
        "order": 2,
    },
    {
        "name": "Training & Behavior",
        "slug": "training",
        "description": "Tips and questions about training your pup",
        "icon": "🎓",
        "color": "#3B82F6",
        "order": 3,
    },
    {
        "name": "Nutrition & Diet",
        "slug": "nutrition",
        "description": "Food recommendations, diet tips, and feeding schedules",
        "icon": "🍖",
        "color": "#F59E0B",
        "order": 4,
    },
    {
        "name": "Breed Talk",
        "slug": "breeds",
        "description": "Discuss specific breeds and their characteristics",
        "icon": "🐕",
        "color": "#8B5CF6",
        "order": 5,
    },
    {
        "name": "Puppy Corner",
        "slug": "puppies",
        "description": "Everything about raising puppies",
        "icon": "🐶",
        "color": "#EC4899",
        "order": 6,
    },
    {
        "name": "Senior Dogs",
        "slug": "seniors",
        "description": "Care and support for older dogs",
        "icon": "🦮",
        "color": "#6B7280",
        "order": 7,
    },
    {
        "name": "Lost & Found",
        "slug": "lost-found",
        "description": "Help reunite lost dogs with their families",
        "icon": "🔍",
        "color": "#EF4444",
        "order": 8,
    },
]


async def upsert_categories(db, categories: List[Dict[str, Any]]) -> list:
    """Create or update each category keyed by slug; returns the stored records in input order."""
    results = []
    for category in categories:
        result = await db.forumcategory.upsert(
            where={"slug": category["slug"]},
            data={"create": category, "update": category},
        )
        results.append(result)
    return results
