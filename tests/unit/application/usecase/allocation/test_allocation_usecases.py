"""Unit tests for the allocation use cases."""

from decimal import Decimal

import pytest
import pytest_asyncio

from tally.application.usecase.allocation import (
    AllocateVesselRequest,
    AllocateVesselUseCase,
    GetAllocationSummaryRequest,
    GetAllocationSummaryUseCase,
    ReleaseVesselAllocationRequest,
    ReleaseVesselAllocationUseCase,
    UpdateVesselQuantityRequest,
    UpdateVesselQuantityUseCase,
)
from tally.domain.repository import (
    ContractRepository,
    LetterOfCreditRepository,
    VesselRepository,
)
from tally.domain.value import AllocatableEntityType
from tests.conftest import make_contract, make_letter_of_credit, make_vessel
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest_asyncio.fixture
async def seeded_env(unit_env):
    contract_repo = await unit_env.get(ContractRepository)
    vessel_repo = await unit_env.get(VesselRepository)
    lc_repo = await unit_env.get(LetterOfCreditRepository)
    await contract_repo.save(make_contract(1, "1000"))
    await vessel_repo.save(make_vessel(1, "500", contract_id=1))
    await vessel_repo.save(make_vessel(2, None, contract_id=None))
    await lc_repo.save(make_letter_of_credit(1, "300"))
    return unit_env


@pytest.mark.asyncio
async def test_allocate_then_release(seeded_env):
    allocate = await seeded_env.get(AllocateVesselUseCase)
    release = await seeded_env.get(ReleaseVesselAllocationUseCase)

    allocated = await allocate.execute(
        AllocateVesselRequest(lc_id=1, vessel_id=1, quantity=Decimal("200"))
    )
    released = await release.execute(
        ReleaseVesselAllocationRequest(relation_id=allocated.relation_id)
    )

    assert allocated.summary.allocated == Decimal("200")
    assert allocated.summary.remaining == Decimal("100")
    assert released.lc_id == 1
    assert released.summary.allocated == Decimal("0")


@pytest.mark.asyncio
async def test_get_summary(seeded_env):
    use_case = await seeded_env.get(GetAllocationSummaryUseCase)

    response = await use_case.execute(
        GetAllocationSummaryRequest(
            entity_type=AllocatableEntityType.CONTRACT, entity_id=1
        )
    )

    assert response.summary.allocated == Decimal("500")
    assert response.summary.remaining == Decimal("500")


@pytest.mark.asyncio
async def test_update_quantity_reports_contract_summary(seeded_env):
    use_case = await seeded_env.get(UpdateVesselQuantityUseCase)

    response = await use_case.execute(
        UpdateVesselQuantityRequest(vessel_id=1, quantity=Decimal("1100"))
    )

    assert response.contract_id == 1
    assert response.contract_summary.remaining == Decimal("-100")
    assert response.contract_summary.over_allocated is True


@pytest.mark.asyncio
async def test_update_quantity_of_unassigned_vessel(seeded_env):
    use_case = await seeded_env.get(UpdateVesselQuantityUseCase)

    response = await use_case.execute(
        UpdateVesselQuantityRequest(vessel_id=2, quantity=Decimal("80"))
    )

    assert response.contract_id is None
    assert response.contract_summary is None
