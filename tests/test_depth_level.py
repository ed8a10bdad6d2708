import pytest

from liquibook.depth_level import INVALID_LEVEL_PRICE, DepthLevel


def test_new_level_is_empty():
    level = DepthLevel()
    assert level.price() == INVALID_LEVEL_PRICE
    assert level.order_count() == 0
    assert level.aggregate_qty() == 0
    assert level.is_excess() is False


def test_add_and_close_orders():
    level = DepthLevel()
    level.init(1250, False)
    level.add_order(100)
    level.add_order(200)
    assert level.order_count() == 2
    assert level.aggregate_qty() == 300
    assert level.close_order(100) is False
    assert level.order_count() == 1
    assert level.aggregate_qty() == 200
    assert level.close_order(200) is True
    assert level.order_count() == 0
    assert level.aggregate_qty() == 0


def test_close_last_order_ignores_quantity():
    level = DepthLevel()
    level.add_order(100)
    assert level.close_order(5000) is True
    assert level.aggregate_qty() == 0


def test_close_order_on_empty_level_raises():
    with pytest.raises(RuntimeError, match="count too low"):
        DepthLevel().close_order(100)


def test_close_order_quantity_too_large_raises():
    level = DepthLevel()
    level.add_order(100)
    level.add_order(100)
    with pytest.raises(RuntimeError, match="quantity too low"):
        level.close_order(300)


def test_increase_and_decrease_qty():
    level = DepthLevel()
    level.add_order(100)
    level.increase_qty(50)
    assert level.aggregate_qty() == 150
    level.decrease_qty(50)
    assert level.aggregate_qty() == 100
    assert level.order_count() == 1


def test_init_resets_counts_and_sets_excess():
    level = DepthLevel()
    level.add_order(100)
    level.init(1251, True)
    assert level.price() == 1251
    assert level.order_count() == 0
    assert level.aggregate_qty() == 0
    assert level.is_excess() is True


def test_set_overwrites_values():
    level = DepthLevel()
    level.set(1252, 400, 3, 7)
    assert level.price() == 1252
    assert level.aggregate_qty() == 400
    assert level.order_count() == 3
    assert level.last_change == 7


def test_set_defaults_change_stamp():
    level = DepthLevel()
    level.last_change = 9
    level.set(1252, 400, 3)
    assert level.last_change == 0


def test_changed_since():
    level = DepthLevel()
    level.last_change = 5
    assert level.changed_since(4)
    assert not level.changed_since(5)
    assert not level.changed_since(6)


def test_assign_copies_stamp_for_valid_price_but_not_excess():
    source = DepthLevel()
    source.init(1250, True)
    source.add_order(100)
    source.last_change = 3
    target = DepthLevel()
    target.assign(source)
    assert target.price() == 1250
    assert target.order_count() == 1
    assert target.aggregate_qty() == 100
    assert target.last_change == 3
    assert target.is_excess() is False


def test_assign_keeps_stamp_for_invalid_price():
    source = DepthLevel()
    source.last_change = 3
    target = DepthLevel()
    target.last_change = 8
    target.assign(source)
    assert target.last_change == 8
    assert target.price() == INVALID_LEVEL_PRICE