"""User preferences service. Every operation targets the caller's own row."""

from sqlalchemy.exc import IntegrityError

from decaf.context import RequestContext
from decaf.errors import ConflictError, NotFoundError, is_unique_violation
from decaf.models.user_preferences import UserPreferences
from decaf.schemas.user_preferences import UserPreferencesCreate, UserPreferencesUpdate

ALREADY_EXISTS = "User preferences already exist. Use PUT to update them."


class UserPreferencesService:
    def __init__(self, ctx: RequestContext):
        self.ctx = ctx
        self.db = ctx.db

    def _find(self) -> UserPreferences | None:
        return (
            self.db.query(UserPreferences)
            .filter(UserPreferences.user_id == self.ctx.user_id)
            .first()
        )

    def get_preferences(self) -> UserPreferences:
        preferences = self._find()
        if not preferences:
            raise NotFoundError("User preferences not found")
        return preferences

    def create_preferences(self, data: UserPreferencesCreate) -> UserPreferences:
        """Create the caller's preferences; omitted fields take column defaults."""
        if self._find():
            raise ConflictError(ALREADY_EXISTS)

        preferences = UserPreferences(
            user_id=self.ctx.user_id,
            **data.model_dump(mode="json", exclude_none=True),
        )
        self.db.add(preferences)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                raise ConflictError(ALREADY_EXISTS) from None
            raise
        self.db.refresh(preferences)
        return preferences

    def update_preferences(self, data: UserPreferencesUpdate) -> UserPreferences:
        preferences = self.get_preferences()
        for field, value in data.model_dump(mode="json", exclude_unset=True).items():
            if value is None and not UserPreferences.__table__.c[field].nullable:
                continue
            setattr(preferences, field, value)
        self.db.commit()
        self.db.refresh(preferences)
        return preferences

    def delete_preferences(self) -> None:
        preferences = self.get_preferences()
        self.db.delete(preferences)
        self.db.commit()
