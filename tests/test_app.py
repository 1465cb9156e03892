"""Tests for CivicApp wiring and the boot sequence."""

from pathlib import Path

from civic.app import CivicApp
from civic.config import AdminConfig, AppConfig, SeedConfig, StorageConfig, UIConfig
from civic.models import IssueDraft
from civic.storage import FileStorage, MemoryStorage


def _app(**overrides: object) -> CivicApp:
    config = AppConfig(**overrides)
    return CivicApp(config, storage=MemoryStorage(), clock=lambda: 1_000)


def test_boot_seeds_and_returns_none_without_notifications() -> None:
    """First boot seeds three issues; nothing to consume yet."""
    app = _app()
    assert app.boot() is None
    assert len(app.issues.list()) == 3


def test_boot_skips_seed_when_disabled() -> None:
    app = _app(seed=SeedConfig(enabled=False))
    app.boot()
    assert app.issues.list() == []


def test_boot_consumes_one_notification_per_call() -> None:
    """Admin changes status twice; each boot shows one message."""
    app = _app()
    app.boot()
    first, second = app.issues.list()[:2]
    app.issues.set_status(first.id, "Resolved")
    app.issues.set_status(second.id, "Resolved")
    assert app.boot().text == 'Status for "Pothole on Main St" changed to Resolved'
    assert app.boot().text == 'Status for "Streetlight not working" changed to Resolved'
    assert app.boot() is None


def test_report_scenario() -> None:
    """Submit a valid report: list grows, new record first, reporter is Bronze."""
    app = _app()
    app.boot()
    issue = app.issues.create(
        IssueDraft(
            name="Kim",
            email="kim@example.com",
            location="Harbor Rd",
            category="Water",
            description="Water main leaking onto road",
        )
    )
    issues = app.issues.list()
    assert len(issues) == 4
    assert issues[0].id == issue.id
    assert app.reputation.count_for("kim@example.com") == 1
    assert app.reputation.badge_for("kim@example.com").value == "Bronze"


def test_file_backend_from_config(tmp_path: Path) -> None:
    """Default storage comes from config.storage and survives a new app instance."""
    config = AppConfig(storage=StorageConfig(backend="file", path=str(tmp_path / "slots")))
    app = CivicApp(config)
    assert isinstance(app.storage, FileStorage)
    app.boot()
    again = CivicApp(config)
    assert [i.id for i in again.issues.list()] == [i.id for i in app.issues.list()]
    assert (tmp_path / "slots" / "civic_issues.json").is_file()


def test_boot_recovers_from_undecodable_issue_file(tmp_path: Path) -> None:
    """A non-UTF-8 issue slot reads as empty, so boot reseeds over it."""
    slots = tmp_path / "slots"
    slots.mkdir()
    (slots / "civic_issues.json").write_bytes(b"\xff\xfe[garbage")
    app = CivicApp(AppConfig(storage=StorageConfig(backend="file", path=str(slots))))
    assert app.boot() is None
    assert len(app.issues.list()) == 3


def test_admin_credentials_from_config() -> None:
    app = _app(admin=AdminConfig(username="clerk", password="pw"))
    app.session.login("clerk", "pw")
    assert app.session.is_authenticated()


def test_map_url_uses_configured_base() -> None:
    app = _app(ui=UIConfig(map_base_url="https://maps.example.org/embed"))
    assert app.map_url("Main St & 5th Ave") == "https://maps.example.org/embed?q=Main%20St%20%26%205th%20Ave&output=embed"
    assert app.map_url("") == "https://maps.example.org/embed?q=City%20Center&output=embed"
