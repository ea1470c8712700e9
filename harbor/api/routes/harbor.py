from fastapi import APIRouter, Query

from harbor.api.deps import HarborQueriesDep
from harbor.domain.assignment.read_models import HarborOverview
from harbor.domain.assignment.value_objects import ResourceKind

router = APIRouter(prefix="/harbor", tags=["harbor"])


@router.get(
    "/overview",
    summary="Harbor overview",
    description="Occupancy of every resource plus the ships not assigned anywhere.",
    response_model=HarborOverview,
)
def get_harbor_overview(
    queries: HarborQueriesDep,
    kind: ResourceKind | None = Query(None, description="Filter by resource kind"),
) -> HarborOverview:
    return queries.harbor_overview(kind=kind)
