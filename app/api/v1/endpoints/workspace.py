from typing import Any, List

from fastapi import APIRouter, Depends, status

from app.api import deps
from app.services.workspace_service import BillingAccountService, TeamService
from app.schemas.workspace import BillingAccountResponse, TeamCreate, TeamResponse

teams_router = APIRouter(dependencies=[Depends(deps.get_current_user)])
billing_router = APIRouter(dependencies=[Depends(deps.get_current_user)])


@teams_router.get("", response_model=List[TeamResponse])
async def list_teams(teams: TeamService = Depends(deps.get_team_service)) -> Any:
    return await teams.list_teams()


@teams_router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(
    team_in: TeamCreate,
    teams: TeamService = Depends(deps.get_team_service),
) -> Any:
    return await teams.create_team(team_in.name)


@billing_router.get("", response_model=BillingAccountResponse)
async def get_billing_account(
    billing: BillingAccountService = Depends(deps.get_billing_account_service),
) -> Any:
    """Back-office billing account; created with the free plan on first read."""
    return await billing.get_or_create()
