"""Tag service: slugging, tag creation and attaching tags to recipes."""

import re

from sqlalchemy.exc import IntegrityError

from decaf.context import RequestContext
from decaf.errors import ConflictError, NotFoundError, ValidationError, is_unique_violation
from decaf.models.recipe import Recipe
from decaf.models.tag import RecipeTag, Tag

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def create_slug(name: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to "-", strip edge hyphens."""
    return _NON_ALNUM.sub("-", name.lower()).strip("-")


class TagService:
    """Service for tag-related operations."""

    def __init__(self, ctx: RequestContext):
        self.ctx = ctx
        self.db = ctx.db

    def list_tags(self) -> list[Tag]:
        return self.db.query(Tag).order_by(Tag.name).all()

    def get_tag(self, tag_id: str) -> Tag:
        tag = self.db.get(Tag, tag_id)
        if not tag:
            raise NotFoundError(f"Tag with ID {tag_id} not found")
        return tag

    def get_tag_by_slug(self, slug: str) -> Tag | None:
        return self.db.query(Tag).filter(Tag.slug == slug).first()

    def create_tag(self, name: str) -> Tag:
        """Create a single tag, failing if the name or slug is taken."""
        trimmed = name.strip()
        tag = Tag(name=trimmed, slug=create_slug(trimmed))
        self.db.add(tag)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                raise ConflictError("Tag already exists") from None
            raise
        self.db.refresh(tag)
        return tag

    def add_tags_to_recipe(self, recipe_id: str, tag_names: list[str]) -> list[Tag]:
        """Resolve tag names to tags, creating missing ones, and link them to a recipe.

        Names are matched exactly first; names without an exact match fall back
        to a slug lookup so "espresso" reuses an existing "Espresso". Inserts
        are committed one at a time and a unique violation is treated as
        "someone else got there first": the tag is re-read by slug and an
        existing link is left alone. Calling this twice with the same input
        leaves the database unchanged the second time.

        Returns:
            The attached tags, de-duplicated, in first-seen order.
        """
        if not tag_names:
            raise ValidationError("At least one tag name is required")

        if not self.db.get(Recipe, recipe_id):
            raise NotFoundError(f"Recipe with ID {recipe_id} not found")

        # Step 1: Exact (case-sensitive) name matches
        existing_tags = self.db.query(Tag).filter(Tag.name.in_(tag_names)).all()
        existing_names = {tag.name for tag in existing_tags}
        missing_names = [name for name in tag_names if name not in existing_names]

        # Step 2: Resolve the rest by slug, creating tags where needed
        resolved_tags = []
        for tag_name in missing_names:
            trimmed = tag_name.strip()
            if not trimmed:
                continue
            tag = self._get_or_create_by_slug(trimmed)
            if tag is not None:
                resolved_tags.append(tag)

        # Step 3: De-duplicate, keeping the first occurrence
        all_tags: list[Tag] = []
        seen_ids = set()
        for tag in [*existing_tags, *resolved_tags]:
            if tag.id not in seen_ids:
                seen_ids.add(tag.id)
                all_tags.append(tag)

        # Step 4: Link each tag to the recipe
        for tag in all_tags:
            self._link(recipe_id, tag)

        self.ctx.logger.info(f"Attached {len(all_tags)} tag(s) to recipe {recipe_id}")
        return all_tags

    def _get_or_create_by_slug(self, name: str) -> Tag | None:
        slug = create_slug(name)

        tag = self.get_tag_by_slug(slug)
        if tag is not None:
            return tag

        tag = Tag(name=name, slug=slug)
        self.db.add(tag)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if not is_unique_violation(e):
                raise
            # Created concurrently between our lookup and insert
            tag = self.get_tag_by_slug(slug)
            if tag is None:
                self.ctx.logger.warning(f"Tag '{name}' conflicted but no tag has slug '{slug}'")
            return tag

        self.db.refresh(tag)
        return tag

    def _link(self, recipe_id: str, tag: Tag) -> None:
        if self.db.get(RecipeTag, (recipe_id, tag.id)) is not None:
            return

        self.db.add(RecipeTag(recipe_id=recipe_id, tag_id=tag.id))
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if not is_unique_violation(e):
                raise
            # Already linked
