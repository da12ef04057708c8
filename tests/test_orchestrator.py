"""End-to-end tests for scan creation and background execution."""

import asyncio
from datetime import date

import pytest
import pytest_asyncio

from clearance_scout.config import Settings
from clearance_scout.providers.base import Provider, ProviderError, ScanOptions
from clearance_scout.providers.registry import ProviderRegistry
from clearance_scout.scan import plan_limits
from clearance_scout.scan.errors import QuotaExceededError, ScanValidationError, UserNotFoundError
from clearance_scout.scan.jobs import JobRunner
from clearance_scout.scan.orchestrator import ScanOrchestrator, ScanRequest
from clearance_scout.scan.state import ScanStatus


class SlowProvider(Provider):
    def __init__(self):
        self.initialized = False
        self.closed = False

    async def init(self):
        self.initialized = True

    async def fetch_deals(self, options: ScanOptions):
        await asyncio.sleep(10)
        return []

    async def close(self):
        self.closed = True


class BrokenLaunchProvider(Provider):
    async def init(self):
        raise ProviderError("browser launch failed")

    async def fetch_deals(self, options: ScanOptions):
        raise AssertionError("fetch_deals must not run after a failed init")


class StubRegistry(ProviderRegistry):
    def __init__(self, cache, provider):
        super().__init__(cache, Settings())
        self.provider = provider

    def create(self, retailer, mode=None):
        return self.provider


@pytest.fixture
def job_runner():
    return JobRunner()


@pytest_asyncio.fixture
async def make_orchestrator(seeded_storage, resolver, observation_cache, job_runner):
    def factory(registry=None, config=None, timeout_seconds=5):
        return ScanOrchestrator(
            storage=seeded_storage,
            resolver=resolver,
            registry=registry or ProviderRegistry(observation_cache, config or Settings()),
            job_runner=job_runner,
            timeout_seconds=timeout_seconds,
            radius_miles=50,
        )

    yield factory
    await job_runner.shutdown(grace_seconds=1)


async def _run(orchestrator, user_id, request):
    scan = await orchestrator.create_scan(user_id, request)
    assert scan.status == ScanStatus.PENDING.value
    await orchestrator.job_runner.drain()
    return await orchestrator.storage.get_scan(scan.id)


@pytest.mark.asyncio
async def test_scenario_a_free_plan_scans_nearest_store(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator()
    await seeded_storage.upsert_user("alice", zip_code="90017", subscription_plan="free")

    assert await orchestrator.resolve_store_ids("home-depot", "90017", "free") == ["HD-0206"]

    scan = await _run(orchestrator, "alice", ScanRequest(retailer="home-depot"))
    assert scan.store_count == 1
    results, _ = await seeded_storage.get_scan_results(scan.id)
    assert {r.store_id for r in results} == {"HD-0206"}


@pytest.mark.asyncio
async def test_business_plan_scans_five_nearest(make_orchestrator):
    orchestrator = make_orchestrator()
    store_ids = await orchestrator.resolve_store_ids("home-depot", "90017", "business")
    assert len(store_ids) == 5
    assert store_ids[0] == "HD-0206"


@pytest.mark.asyncio
async def test_scenario_b_ace_radius(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator()
    await seeded_storage.upsert_user("bob", zip_code="90017", subscription_plan="free")

    scan = await _run(orchestrator, "bob", ScanRequest(retailer="ace-hardware"))

    assert scan.status == "completed"
    assert scan.store_count == 4
    results, total = await seeded_storage.get_scan_results(scan.id)
    assert total == scan.result_count
    assert all(r.store_id == "ACE-001" and r.purchase_in_store for r in results)


@pytest.mark.asyncio
async def test_radius_with_no_stores_completes_empty(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator()
    await seeded_storage.upsert_user("carol", zip_code="59001", subscription_plan="pro")

    scan = await _run(orchestrator, "carol", ScanRequest(retailer="ace-hardware"))

    assert scan.status == "completed"
    assert scan.store_count == 0
    assert scan.result_count == 0
    assert scan.clearance_count == 0


@pytest.mark.asyncio
async def test_scenario_c_mock_clearance_only(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator()
    await seeded_storage.upsert_user("dave", zip_code="90017", subscription_plan="pro")

    scan = await _run(orchestrator, "dave", ScanRequest(retailer="home-depot", clearance_only=True))

    assert scan.status == "completed"
    assert scan.started_at is not None
    assert scan.completed_at >= scan.started_at
    assert scan.result_count == 4
    assert scan.clearance_count == 4
    results, _ = await seeded_storage.get_scan_results(scan.id)
    assert {r.sku for r in results} == {"DWD726-20V", "MG-50QT-001", "GE-14294", "BEHR-PREM-001"}
    assert all(r.is_on_clearance for r in results)


@pytest.mark.asyncio
async def test_scenario_d_killswitch_overrides_alt(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator(config=Settings(HD_DATA_MODE="alt", HD_KILLSWITCH=True))
    await seeded_storage.upsert_user("erin", zip_code="90017", subscription_plan="pro")

    scan = await _run(orchestrator, "erin", ScanRequest(retailer="home-depot"))

    assert scan.status == "completed"
    results, _ = await seeded_storage.get_scan_results(scan.id)
    assert results and all(r.source == "mock" for r in results)


@pytest.mark.asyncio
async def test_timeout_marks_failed_and_releases_provider(make_orchestrator, seeded_storage, observation_cache):
    provider = SlowProvider()
    orchestrator = make_orchestrator(registry=StubRegistry(observation_cache, provider), timeout_seconds=0.05)
    await seeded_storage.upsert_user("frank", zip_code="90017", subscription_plan="pro")

    scan = await _run(orchestrator, "frank", ScanRequest(retailer="home-depot"))

    assert scan.status == "failed"
    assert scan.completed_at is not None
    assert provider.initialized
    assert provider.closed


@pytest.mark.asyncio
async def test_provider_init_failure_marks_failed(make_orchestrator, seeded_storage, observation_cache):
    orchestrator = make_orchestrator(registry=StubRegistry(observation_cache, BrokenLaunchProvider()))
    await seeded_storage.upsert_user("gina", zip_code="90017", subscription_plan="pro")

    scan = await _run(orchestrator, "gina", ScanRequest(retailer="home-depot"))

    assert scan.status == "failed"
    assert scan.result_count == 0


@pytest.mark.asyncio
async def test_api_mode_marks_failed(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator(config=Settings(HD_DATA_MODE="api"))
    await seeded_storage.upsert_user("hank", zip_code="90017", subscription_plan="pro")

    scan = await _run(orchestrator, "hank", ScanRequest(retailer="home-depot"))
    assert scan.status == "failed"


@pytest.mark.asyncio
async def test_execute_scan_ignores_non_pending(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator()
    await seeded_storage.upsert_user("ivy", zip_code="90017", subscription_plan="pro")
    scan = await _run(orchestrator, "ivy", ScanRequest(retailer="home-depot"))

    await orchestrator.execute_scan(scan.id)

    again = await seeded_storage.get_scan(scan.id)
    assert again.status == "completed"
    assert again.completed_at == scan.completed_at


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "request_kwargs,field",
    [
        ({"retailer": "lowes"}, "retailer"),
        ({"retailer": "home-depot", "zip_code": "9001"}, "zip_code"),
        ({"retailer": "home-depot", "zip_code": "9001a"}, "zip_code"),
        ({"retailer": "home-depot", "product_selection": "specific"}, "specific_skus"),
        ({"retailer": "home-depot", "product_selection": "some"}, "product_selection"),
        ({"retailer": "home-depot", "price_range": "10-20"}, "price_range"),
        ({"retailer": "home-depot", "sort_by": "cheapest"}, "sort_by"),
    ],
)
async def test_validation_rejects_before_persisting(make_orchestrator, seeded_storage, request_kwargs, field):
    orchestrator = make_orchestrator()
    await seeded_storage.upsert_user("jack", zip_code="90017", subscription_plan="pro")

    with pytest.raises(ScanValidationError) as exc:
        await orchestrator.create_scan("jack", ScanRequest(**request_kwargs))

    assert exc.value.field == field
    assert await seeded_storage.list_scans("jack") == []


@pytest.mark.asyncio
async def test_unknown_plan_is_rejected(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator()
    await seeded_storage.upsert_user("kate", zip_code="90017", subscription_plan="enterprise")

    with pytest.raises(ScanValidationError):
        await orchestrator.create_scan("kate", ScanRequest(retailer="home-depot"))


@pytest.mark.asyncio
async def test_missing_zip_is_rejected(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator()
    await seeded_storage.upsert_user("liam", subscription_plan="pro")

    with pytest.raises(ScanValidationError):
        await orchestrator.create_scan("liam", ScanRequest(retailer="home-depot"))


@pytest.mark.asyncio
async def test_unknown_user(make_orchestrator):
    orchestrator = make_orchestrator()
    with pytest.raises(UserNotFoundError):
        await orchestrator.create_scan("nobody", ScanRequest(retailer="home-depot"))


@pytest.mark.asyncio
async def test_quota_exceeded_reports_usage(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator()
    await seeded_storage.upsert_user("mia", zip_code="90017", subscription_plan="free")

    await orchestrator.create_scan("mia", ScanRequest(retailer="home-depot"))
    with pytest.raises(QuotaExceededError) as exc:
        await orchestrator.create_scan("mia", ScanRequest(retailer="ace-hardware"))

    assert exc.value.limit == 1
    assert exc.value.used == 1
    assert exc.value.remaining == 0
    assert exc.value.reset_date == plan_limits.quota_reset_date()
    assert isinstance(exc.value.reset_date, date)


@pytest.mark.asyncio
async def test_plan_snapshot_and_request_zip(make_orchestrator, seeded_storage):
    orchestrator = make_orchestrator()
    await seeded_storage.upsert_user("noah", zip_code="10001", subscription_plan="pro")

    scan = await orchestrator.create_scan("noah", ScanRequest(retailer="home-depot", zip_code="90017"))
    await seeded_storage.upsert_user("noah", subscription_plan="business")
    await orchestrator.job_runner.drain()

    done = await seeded_storage.get_scan(scan.id)
    assert done.zip_code == "90017"
    assert done.plan == "pro"
    assert done.store_count == 2

    usage = await orchestrator.usage("noah")
    assert usage["used"] == 1
    assert usage["limit"] == 50
