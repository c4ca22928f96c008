#!/usr/bin/env python3
"""Seed demo data.

Creates a demo user with a few pour-over recipes, their machine steps, tags,
preferences and a couple of cats.

Usage:
    # From project root:
    python scripts/seed_demo_data.py

    # Or against another database:
    DATABASE_URL=sqlite:///./data/demo.db python scripts/seed_demo_data.py
"""

import logging

from decaf.config import get_settings
from decaf.context import RequestContext
from decaf.database import build_engine, build_session_factory, init_db
from decaf.models import Cat, Recipe, RecipeStep, User, UserPreferences
from decaf.services.security import hash_secret
from decaf.services.tags import TagService

logger = logging.getLogger("decaf.seed")

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demopass123"
DEMO_PIN = "12345678"

RECIPES = [
    {
        "name": "Classic V60",
        "description": "Bright, clean single cup",
        "coffee_weight": 15.0,
        "water_weight": 250.0,
        "water_temperature": 94,
        "grind_size": "medium-fine",
        "brew_time": 180,
        "tags": ["Pour Over", "Light Roast"],
        "steps": [
            ("grind", 20, 15),
            ("move", 5, None),
            ("pour", 30, 50),
            ("wait", 30, None),
            ("pour", 60, 200),
            ("wait", 45, None),
        ],
    },
    {
        "name": "Morning Brew",
        "description": "Big batch for the office",
        "coffee_weight": 60.0,
        "water_weight": 1000.0,
        "water_temperature": 93,
        "grind_size": "medium",
        "brew_time": 300,
        "tags": ["Morning Brew", "Batch"],
        "steps": [
            ("measure", 10, 60),
            ("grind", 40, 60),
            ("pour", 240, 1000),
        ],
    },
]


def seed_demo_data():
    """Seed the database with representative data."""
    settings = get_settings()
    engine = build_engine(settings.database_url)
    init_db(engine)
    session = build_session_factory(engine)()

    try:
        # Check if demo user already exists
        existing_user = session.query(User).filter_by(username=DEMO_USERNAME).first()
        if existing_user:
            print("Demo data already exists. Clearing and re-seeding...")
            session.query(Recipe).filter(Recipe.created_by == existing_user.id).delete()
            session.delete(existing_user)
            session.commit()

        user = User(
            username=DEMO_USERNAME,
            password_hash=hash_secret(DEMO_PASSWORD, settings.bcrypt_rounds),
            pin_hash=hash_secret(DEMO_PIN, settings.bcrypt_rounds),
        )
        session.add(user)
        session.flush()

        session.add(UserPreferences(user_id=user.id, strength_preference="strong", units="metric"))

        recipes = []
        for data in RECIPES:
            recipe = Recipe(
                created_by=user.id,
                **{k: v for k, v in data.items() if k not in ("tags", "steps")},
            )
            for order, (command, duration, parameter) in enumerate(data["steps"]):
                recipe.steps.append(
                    RecipeStep(
                        step_order=order,
                        command_type=command,
                        duration_sec=duration,
                        command_parameter=parameter,
                    )
                )
            session.add(recipe)
            recipes.append((recipe, data["tags"]))

        session.add_all([Cat(name="Mocha", type="bengal"), Cat(name="Latte", type="ragdoll")])
        session.commit()

        ctx = RequestContext(db=session, user=user, logger=logger)
        for recipe, tag_names in recipes:
            TagService(ctx).add_tags_to_recipe(recipe.id, tag_names)

        print("Demo data seeded successfully!")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
