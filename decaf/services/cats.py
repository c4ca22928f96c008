"""Cat service."""

from decaf.context import RequestContext
from decaf.errors import NotFoundError
from decaf.models.cat import Cat
from decaf.schemas.cat import CatCreate, CatUpdate


class CatService:
    def __init__(self, ctx: RequestContext):
        self.ctx = ctx
        self.db = ctx.db

    def list_cats(self) -> list[Cat]:
        return self.db.query(Cat).order_by(Cat.created_at).all()

    def get_cat(self, cat_id: str) -> Cat:
        cat = self.db.get(Cat, cat_id)
        if not cat:
            raise NotFoundError(f"Cat with ID {cat_id} not found")
        return cat

    def create_cat(self, data: CatCreate) -> Cat:
        cat = Cat(**data.model_dump(mode="json"))
        self.db.add(cat)
        self.db.commit()
        self.db.refresh(cat)
        return cat

    def update_cat(self, cat_id: str, data: CatUpdate) -> Cat:
        cat = self.get_cat(cat_id)
        updates = data.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        for field, value in updates.items():
            setattr(cat, field, value)
        self.db.commit()
        self.db.refresh(cat)
        return cat

    def delete_cat(self, cat_id: str) -> None:
        cat = self.get_cat(cat_id)
        self.db.delete(cat)
        self.db.commit()
