# core/analytics_service.py
from sqlalchemy.orm import Session
from models.order import Order, OrderItem, CANCELLED
from models.food_item import FoodItem
from core.range_selection import DateRange
from datetime import datetime, time, timedelta
from collections import defaultdict
import pandas as pd

def range_bounds_to_datetimes(date_range: DateRange):
    """
    Turn a picked date range into a half-open datetime window.
    Returns: (start at 00:00, day after end at 00:00)
    """
    if not date_range.is_complete:
        raise ValueError("Sales reports need both a start and an end date")
    start, end = sorted((date_range.start, date_range.end))
    return datetime.combine(start, time.min), datetime.combine(end + timedelta(days=1), time.min)

def get_orders_in_range(db: Session, date_range: DateRange, include_cancelled=False):
    start_dt, end_dt = range_bounds_to_datetimes(date_range)
    query = db.query(Order).filter(
        Order.created_at >= start_dt,
        Order.created_at < end_dt
    )
    if not include_cancelled:
        query = query.filter(Order.status != CANCELLED)
    return query.order_by(Order.created_at).all()

def get_range_summary(db: Session, date_range: DateRange):
    """
    Get headline numbers for the picked range
    Returns: dict with order count, revenue, average order value, cancelled count
    """
    orders = get_orders_in_range(db, date_range, include_cancelled=True)
    valid = [o for o in orders if o.status != CANCELLED]
    revenue = sum(o.total_price for o in valid)

    return {
        "total_orders": len(valid),
        "total_revenue": revenue,
        "average_order_value": revenue / len(valid) if valid else 0.0,
        "cancelled_orders": len(orders) - len(valid),
        "days": (max(date_range.start, date_range.end) - min(date_range.start, date_range.end)).days + 1,
    }

def get_daily_revenue(db: Session, date_range: DateRange):
    """
    Get revenue per day over the picked range, days without orders included as 0
    Returns: dict with dates (YYYY-MM-DD) and revenue
    """
    start_dt, end_dt = range_bounds_to_datetimes(date_range)
    orders = get_orders_in_range(db, date_range)

    all_days = pd.date_range(start_dt, end_dt - timedelta(days=1), freq="D")
    if orders:
        frame = pd.DataFrame(
            {"revenue": [o.total_price for o in orders]},
            index=pd.to_datetime([o.created_at for o in orders]),
        )
        daily = frame["revenue"].resample("D").sum()
    else:
        daily = pd.Series(dtype=float)
    daily = daily.reindex(all_days, fill_value=0.0)

    return {
        "dates": [d.strftime("%Y-%m-%d") for d in daily.index],
        "revenue": [float(v) for v in daily.values]
    }

def get_best_selling_items(db: Session, date_range: DateRange, limit=10):
    """
    Get top selling food items within the picked range
    Returns: list of dicts with item name, quantity sold, revenue, category
    """
    start_dt, end_dt = range_bounds_to_datetimes(date_range)
    rows = (
        db.query(OrderItem, FoodItem)
        .join(Order, OrderItem.order_id == Order.id)
        .join(FoodItem, OrderItem.food_id == FoodItem.id)
        .filter(
            Order.created_at >= start_dt,
            Order.created_at < end_dt,
            Order.status != CANCELLED
        )
        .all()
    )

    item_stats = defaultdict(lambda: {"quantity": 0, "revenue": 0.0, "category": "Unknown"})
    for order_item, food in rows:
        item_stats[food.name]["quantity"] += order_item.quantity
        item_stats[food.name]["revenue"] += order_item.subtotal
        item_stats[food.name]["category"] = food.category or "Unknown"

    items_list = [
        {
            "name": name,
            "quantity": stats["quantity"],
            "revenue": stats["revenue"],
            "category": stats["category"]
        }
        for name, stats in item_stats.items()
    ]

    items_list.sort(key=lambda x: (-x["quantity"], x["name"]))

    return items_list[:limit]
