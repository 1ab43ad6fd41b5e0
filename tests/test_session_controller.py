# tests/test_session_controller.py
from dessertclicker.controller.session import SHARING_NOT_AVAILABLE, SessionController
from dessertclicker.model.errors import SharingUnavailable


def _unavailable(text):
    raise SharingUnavailable("no share target")


def test_click_emits_snapshot(qapp, small_catalog):
    controller = SessionController(small_catalog, share_handler=lambda text: None)
    snapshots = []
    controller.state_changed.connect(snapshots.append)

    controller.on_dessert_clicked()
    controller.on_dessert_clicked()

    assert [s.desserts_sold for s in snapshots] == [1, 2]
    assert snapshots[-1].revenue == 10


def test_dessert_changed_only_when_tier_advances(qapp, small_catalog):
    controller = SessionController(small_catalog, share_handler=lambda text: None)
    unlocked = []
    controller.dessert_changed.connect(unlocked.append)

    for _ in range(10):
        controller.on_dessert_clicked()

    assert [d.name for d in unlocked] == ["Donut", "Eclair"]


def test_share_passes_summary_to_handler(qapp, small_catalog):
    received = []
    controller = SessionController(small_catalog, share_handler=received.append)
    shared = []
    controller.shared.connect(shared.append)
    for _ in range(3):
        controller.on_dessert_clicked()

    assert controller.on_share_clicked() is True
    assert received == ["I've clicked 3 desserts for a total of $15!"]
    assert shared == received


def test_share_failure_is_reported_and_state_untouched(qapp, small_catalog):
    controller = SessionController(small_catalog, share_handler=_unavailable)
    messages = []
    controller.share_failed.connect(messages.append)
    controller.on_dessert_clicked()
    before = controller.snapshot()

    assert controller.on_share_clicked() is False

    assert messages == [SHARING_NOT_AVAILABLE]
    assert controller.snapshot() == before


def test_restore_and_reset_notify_views(qapp, small_catalog):
    controller = SessionController(small_catalog, share_handler=lambda text: None)
    snapshots = []
    controller.state_changed.connect(snapshots.append)

    controller.restore(7, 45)
    controller.reset()

    assert (snapshots[0].desserts_sold, snapshots[0].revenue) == (7, 45)
    assert snapshots[0].dessert.name == "Donut"
    assert (snapshots[1].desserts_sold, snapshots[1].revenue) == (0, 0)


def test_default_catalog_is_used(qapp):
    controller = SessionController(share_handler=lambda text: None)
    assert len(controller.catalog) == 13
