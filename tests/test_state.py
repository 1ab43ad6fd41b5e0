# tests/test_state.py
import pytest

from dessertclicker.model.state import SessionState


def test_new_session_starts_at_defaults(small_catalog):
    state = SessionState(catalog=small_catalog)
    assert (state.desserts_sold, state.revenue, state.current_index) == (0, 0, 0)
    assert state.current_dessert.name == "Cupcake"


def test_four_taps_stay_on_first_dessert(small_catalog):
    state = SessionState(catalog=small_catalog)
    for _ in range(4):
        state.tap()
    assert state.desserts_sold == 4
    assert state.revenue == 20
    assert state.current_index == 0


def test_fifth_tap_is_charged_at_old_price_then_advances(small_catalog):
    state = SessionState(catalog=small_catalog)
    for _ in range(4):
        state.tap()

    result = state.tap()

    assert result.price_charged == 5
    assert result.advanced
    assert (result.previous_index, result.current_index) == (0, 1)
    assert state.desserts_sold == 5
    assert state.revenue == 25
    assert state.current_dessert.name == "Donut"

    # The next tap uses the new price
    assert state.tap().price_charged == 10
    assert state.revenue == 35


def test_revenue_is_sum_of_prices_at_time_of_tap(small_catalog):
    state = SessionState(catalog=small_catalog)
    charged = [state.tap().price_charged for _ in range(17)]

    assert state.desserts_sold == 17
    assert state.revenue == sum(charged)
    assert charged == [5] * 5 + [10] * 5 + [15] * 7


def test_tier_index_never_decreases():
    state = SessionState()
    last = state.current_index
    for _ in range(600):
        state.tap()
        assert state.current_index >= last
        last = state.current_index
    assert state.current_dessert.name == "Ice Cream Sandwich"


def test_snapshot_is_a_copy(small_catalog):
    state = SessionState(catalog=small_catalog)
    state.tap()
    snapshot = state.snapshot()
    state.tap()

    assert snapshot.desserts_sold == 1
    assert snapshot.revenue == 5
    assert snapshot.dessert.name == "Cupcake"


def test_restore_derives_the_dessert(small_catalog):
    state = SessionState(catalog=small_catalog)
    state.restore(desserts_sold=12, revenue=95)

    assert state.desserts_sold == 12
    assert state.revenue == 95
    assert state.current_dessert.name == "Eclair"


@pytest.mark.parametrize("sold, revenue", [(-1, 0), (0, -1)])
def test_restore_rejects_negative_values(small_catalog, sold, revenue):
    state = SessionState(catalog=small_catalog)
    with pytest.raises(ValueError):
        state.restore(sold, revenue)
    assert (state.desserts_sold, state.revenue) == (0, 0)


def test_reset(small_catalog):
    state = SessionState(catalog=small_catalog)
    for _ in range(11):
        state.tap()
    state.reset()
    assert (state.desserts_sold, state.revenue, state.current_index) == (0, 0, 0)


def test_constructor_derives_index(small_catalog):
    state = SessionState(catalog=small_catalog, desserts_sold=6, revenue=40)
    assert state.current_index == 1


def test_counts_do_not_wrap(small_catalog):
    big = 2 ** 63 - 1
    state = SessionState(catalog=small_catalog)
    state.restore(desserts_sold=big, revenue=big)
    state.tap()
    assert state.desserts_sold == 2 ** 63
    assert state.revenue == big + 15
