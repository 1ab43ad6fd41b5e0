# tests/test_retention.py
from dessertclicker.controller.retention import KEY_DESSERTS_SOLD, KEY_REVENUE, SessionStore
from dessertclicker.model.state import SessionState


def test_both_counters_survive_recreate(ini_settings, small_catalog):
    state = SessionState(catalog=small_catalog)
    for _ in range(6):
        state.tap()
    SessionStore(ini_settings).save(state)

    recreated = SessionState(catalog=small_catalog)
    assert SessionStore(ini_settings).load_into(recreated) is True

    assert recreated.desserts_sold == 6
    assert recreated.revenue == 35
    assert recreated.current_dessert.name == "Donut"


def test_nothing_saved(ini_settings, small_catalog):
    state = SessionState(catalog=small_catalog)
    assert SessionStore(ini_settings).load() is None
    assert SessionStore(ini_settings).load_into(state) is False
    assert state.desserts_sold == 0


def test_unreadable_values_are_ignored(ini_settings):
    ini_settings.setValue(KEY_DESSERTS_SOLD, "lots")
    ini_settings.setValue(KEY_REVENUE, "10")
    assert SessionStore(ini_settings).load() is None


def test_negative_values_are_ignored(ini_settings):
    ini_settings.setValue(KEY_DESSERTS_SOLD, "-3")
    ini_settings.setValue(KEY_REVENUE, "10")
    assert SessionStore(ini_settings).load() is None


def test_large_values_are_kept(ini_settings, small_catalog):
    state = SessionState(catalog=small_catalog)
    state.restore(2 ** 70, 2 ** 72)
    store = SessionStore(ini_settings)
    store.save(state)
    assert store.load() == (2 ** 70, 2 ** 72)


def test_clear(ini_settings, small_catalog):
    store = SessionStore(ini_settings)
    store.save(SessionState(catalog=small_catalog))
    assert store.has_saved_session()
    store.clear()
    assert not store.has_saved_session()
