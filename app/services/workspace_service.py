"""Teams and the back-office billing account"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.billing import BillingAccount
from app.models.team import Team


class TeamService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_teams(self) -> List[Team]:
        result = await self.db.execute(select(Team).order_by(Team.name))
        return list(result.scalars().all())

    async def create_team(self, name: str) -> Team:
        team = Team(name=name)
        self.db.add(team)
        await self.db.commit()
        await self.db.refresh(team)
        return team


class BillingAccountService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_or_create(self) -> BillingAccount:
        """Return the billing account, creating it with defaults on first read"""
        result = await self.db.execute(
            select(BillingAccount).order_by(BillingAccount.created_at).limit(1)
        )
        account = result.scalar_one_or_none()
        if account:
            return account

        account = BillingAccount(plan="free", next_invoice_date=None)
        self.db.add(account)
        await self.db.commit()
        await self.db.refresh(account)
        return account
