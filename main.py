import flet as ft

# Import all models FIRST to ensure SQLAlchemy relationships are registered
from models.user import User
from models.food_item import FoodItem
from models.order import Order, OrderItem
from models.audit_log import AuditLog

from core.config import ADMIN_EMAIL
from core.db import SessionLocal
from ui.analytics_view import analytics_view


def load_admin_session():
    """Look up the configured admin account for the report screen."""
    db = SessionLocal()
    try:
        admin = db.query(User).filter(User.email == ADMIN_EMAIL, User.role == "admin").first()
        if not admin:
            print(f"⚠️ No admin account for {ADMIN_EMAIL} - run init_db.py first")
            return None
        return {"id": admin.id, "email": admin.email, "full_name": admin.full_name, "role": admin.role}
    except Exception as ex:
        print(f"❌ Admin lookup error: {ex}")
        return None
    finally:
        db.close()


def main(page: ft.Page):
    page.window.width = 400
    page.window.height = 760
    page.padding = 0
    page.spacing = 0

    page.title = "Pojangmacha"
    page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
    page.vertical_alignment = ft.MainAxisAlignment.START

    page.session.set("user", load_admin_session())

    def route_change(e):
        page.clean()
        if page.route in ["/", "/analytics"]:
            analytics_view(page)
        else:
            page.go("/analytics")

    page.on_route_change = route_change
    page.go("/analytics")

if __name__ == "__main__":
    ft.app(target=main)
