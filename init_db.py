import random
from datetime import datetime, timedelta
from core.config import ADMIN_EMAIL
from core.db import Base, engine, SessionLocal
from models.user import User
from models.food_item import FoodItem
from models.order import Order, OrderItem, COMPLETED, CANCELLED
from models.audit_log import AuditLog

DEMO_ORDER_DAYS = 60

def seed_users(db):
    if db.query(User).first():
        print("Users already seeded.")
        return
    db.add_all([
        User(full_name="Administrator", email=ADMIN_EMAIL, role="admin"),
        User(full_name="Juan Dela Cruz", email="juan@example.com"),
        User(full_name="Maria Santos", email="maria@example.com"),
    ])
    db.commit()
    print("Users seeded.")

def seed_food_items(db):
    if db.query(FoodItem).first():
        print("Food items already seeded.")
        return
    db.add_all([
        FoodItem(name="BimBimBowl", category="Korean Bowls", price=100.0),
        FoodItem(name="Buldak Spicy Chicken", category="Noodles", price=90.0),
        FoodItem(name="Spam Bowl", category="Korean Bowls", price=100.0),
        FoodItem(name="Kimchi Fried Rice", category="Korean Bowls", price=180.0),
        FoodItem(name="Ramen + Chicken Combo", category="Combo", price=400.0),
        FoodItem(name="Iced Milk Tea", category="Drinks", price=120.0),
    ])
    db.commit()
    print("Sample food items seeded.")

def seed_orders(db, days=DEMO_ORDER_DAYS, rng=None):
    """Spread demo orders over the last `days` days."""
    if db.query(Order).first():
        print("Orders already seeded.")
        return
    rng = rng or random.Random(42)
    customers = db.query(User).filter(User.role == "customer").all()
    foods = db.query(FoodItem).all()
    now = datetime.utcnow()

    for offset in range(days):
        day = now - timedelta(days=offset)
        for _ in range(rng.randint(0, 4)):
            created = day.replace(hour=rng.randint(10, 21), minute=rng.randint(0, 59))
            picks = rng.sample(foods, k=rng.randint(1, 3))
            items = [OrderItem(food_id=f.id, quantity=q, subtotal=f.price * q)
                     for f, q in ((f, rng.randint(1, 2)) for f in picks)]
            db.add(Order(
                user_id=rng.choice(customers).id,
                total_price=sum(i.subtotal for i in items),
                status=rng.choice([COMPLETED, COMPLETED, COMPLETED, CANCELLED]),
                created_at=created,
                items=items,
            ))
    db.commit()
    print(f"Demo orders seeded for the last {days} days.")

def init_db():
    print("Rebuilding database (drop/create)...")
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print("All tables created:")
    for table in Base.metadata.sorted_tables:
        print(f"   - {table.name}")

    db = SessionLocal()
    try:
        seed_users(db)
        seed_food_items(db)
        seed_orders(db)
    finally:
        db.close()
    print("\nDatabase initialization complete!")
    print(f"Report admin: {ADMIN_EMAIL}")

if __name__ == "__main__":
    init_db()
