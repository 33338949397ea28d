from __future__ import annotations

from typing import Any

SEED_MENU_ITEMS: tuple[dict[str, Any], ...] = (
    {
        "name": "Classic Burger",
        "description": "Beef patty with lettuce, tomato, and cheese on a sesame seed bun",
        "price": 12.99,
        "category": "entree",
        "ingredients": ["beef", "lettuce", "tomato", "cheese", "bun"],
        "available": True,
    },
    {
        "name": "Caesar Salad",
        "description": "Fresh romaine lettuce with Caesar dressing, croutons, and parmesan cheese",
        "price": 9.99,
        "category": "appetizer",
        "ingredients": ["romaine lettuce", "caesar dressing", "croutons", "parmesan cheese"],
        "available": True,
    },
    {
        "name": "Chocolate Lava Cake",
        "description": "Warm chocolate cake with a molten chocolate center, served with vanilla ice cream",
        "price": 7.99,
        "category": "dessert",
        "ingredients": ["chocolate", "flour", "eggs", "sugar", "butter", "vanilla ice cream"],
        "available": True,
    },
)
