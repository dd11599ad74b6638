"""
Skill repository - shared skills and the user_skills join table.
"""
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.skill import Skill, UserSkill
from app.repositories.base import BaseRepository, dialect_insert


class SkillRepository(BaseRepository[Skill]):
    def __init__(self):
        super().__init__(Skill)

    async def upsert(
        self,
        db: AsyncSession,
        name: str,
    ) -> int:
        """
        Insert a skill or reuse the existing one; returns its id either way.

        The no-op DO UPDATE makes RETURNING yield the row on conflict too.
        """
        stmt = dialect_insert(db, Skill).values(name=name)
        stmt = stmt.on_conflict_do_update(
            index_elements=[Skill.name],
            set_={"name": stmt.excluded.name},
        ).returning(Skill.skill_id)
        result = await db.execute(stmt)
        return result.scalar_one()

    async def link_to_user(
        self,
        db: AsyncSession,
        user_id: int,
        skill_id: int,
    ) -> bool:
        """Insert the join row; False if the user already had the skill."""
        stmt = (
            dialect_insert(db, UserSkill)
            .values(user_id=user_id, skill_id=skill_id)
            .on_conflict_do_nothing(index_elements=[UserSkill.user_id, UserSkill.skill_id])
            .returning(UserSkill.user_id)
        )
        result = await db.execute(stmt)
        return result.first() is not None

    async def unlink_from_user(
        self,
        db: AsyncSession,
        user_id: int,
        skill_name: str,
    ) -> bool:
        """Delete the join row for a skill name; False if there was none."""
        skill_ids = select(Skill.skill_id).where(Skill.name == skill_name).scalar_subquery()
        result = await db.execute(
            delete(UserSkill).where(
                UserSkill.user_id == user_id,
                UserSkill.skill_id == skill_ids,
            )
        )
        return result.rowcount > 0
