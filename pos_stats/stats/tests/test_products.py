from decimal import Decimal

from pos_stats.data.models import ItemAllocation
from pos_stats.stats.products import rank_products, share_percentage


def _allocation(name, line_total, discount=0, quantity=1, item_id=None):
    line_total = Decimal(line_total)
    return ItemAllocation(
        item_id=item_id or name,
        order_id="1",
        product_name=name,
        unit_price=line_total / quantity,
        quantity=quantity,
        line_total=line_total,
        discount=Decimal(discount),
    )


def test_ranked_by_revenue_with_shares():
    ranked = rank_products([_allocation("A", 100), _allocation("B", 300), _allocation("C", 600)])
    assert [p.name for p in ranked] == ["C", "B", "A"]
    assert [p.revenue for p in ranked] == [Decimal("600"), Decimal("300"), Decimal("100")]
    assert [p.percentage for p in ranked] == [60, 30, 10]


def test_groups_by_product_name():
    ranked = rank_products([
        _allocation("Bạc xỉu", 64, quantity=2, item_id="1"),
        _allocation("Bạc xỉu", 32, discount=2, item_id="2"),
        _allocation("Bánh mì thịt", 30, item_id="3"),
    ])
    assert ranked[0].name == "Bạc xỉu"
    assert ranked[0].quantity == 3
    assert ranked[0].revenue == Decimal("94")


def test_revenue_is_net_of_allocated_discount():
    ranked = rank_products([_allocation("A", 300, discount=27), _allocation("B", 700, discount=63)])
    assert [(p.name, p.revenue, p.percentage) for p in ranked] == [("B", Decimal("637"), 70), ("A", Decimal("273"), 30)]


def test_limit_and_shares_of_returned_products_only():
    allocations = [_allocation(name, value) for name, value in [("A", 50), ("B", 40), ("C", 10), ("D", 5)]]
    ranked = rank_products(allocations, limit=2)
    assert [p.name for p in ranked] == ["A", "B"]
    assert [p.percentage for p in ranked] == [56, 44]


def test_ties_keep_first_seen_order():
    ranked = rank_products([_allocation("X", 100), _allocation("Y", 100), _allocation("Z", 100)])
    assert [p.name for p in ranked] == ["X", "Y", "Z"]


def test_empty():
    assert rank_products([]) == []


def test_share_percentage_of_nothing():
    assert share_percentage(Decimal("10"), Decimal("0")) == 0
