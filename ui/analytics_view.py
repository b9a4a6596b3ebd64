import flet as ft
from flet.plotly_chart import PlotlyChart
import plotly.graph_objects as go
from datetime import date, timedelta
from core.db import SessionLocal
from core.config import REPORT_DEFAULT_DAYS, REPORT_MIN_DATE
from core.logger import log_action
from core.bounds_policy import Bounds
from core.date_range_picker import DateRangePicker, format_range
from core.range_selection import DateRange
from core.analytics_service import (
    get_range_summary,
    get_daily_revenue,
    get_best_selling_items,
)
from core.report_loader import LatestRangeLoader
from ui.date_range_picker_view import build_date_range_picker


def default_report_range(today: date):
    """Last REPORT_DEFAULT_DAYS days, today included."""
    return DateRange(start=today - timedelta(days=REPORT_DEFAULT_DAYS - 1), end=today)


def analytics_view(page: ft.Page):
    page.title = "Sales Report - Pojangmacha"

    # Check if user is admin
    user_data = page.session.get("user")
    if not user_data or user_data.get("role") != "admin":
        page.snack_bar = ft.SnackBar(ft.Text("Access denied. Admins only."), open=True)
        page.update()
        return

    container_width = page.window.width or 400

    # ✅ Range owned by this screen; the picker only reports completed picks
    today = date.today()
    report_range = {"value": default_report_range(today)}

    report_body = ft.Column(spacing=12, scroll=ft.ScrollMode.AUTO, expand=True)

    def on_range_change(new_range: DateRange):
        report_range["value"] = new_range
        picker.set_value(new_range)
        print(f"📅 Report range changed: {format_range(new_range)}")
        log_action(user_data.get("email"), f"Viewed sales report {format_range(new_range)}")
        loader.request(new_range)

    picker = DateRangePicker(
        on_change=on_range_change,
        value=report_range["value"],
        bounds=Bounds(min=REPORT_MIN_DATE, max=today),
    )
    picker_control = build_date_range_picker(page, picker, width=min(320, container_width - 40))

    # ===================== CARD / CHART BUILDERS =====================

    def summary_card(value, label, bgcolor):
        return ft.Container(
            content=ft.Column([
                ft.Text(value, size=22, weight="bold"),
                ft.Text(label, size=12, color="grey700"),
            ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=3),
            padding=12, bgcolor=bgcolor, border_radius=8, expand=1, height=80
        )

    def create_daily_revenue_chart(data):
        if not any(data["revenue"]):
            return ft.Container(
                content=ft.Text("No sales in this range", size=14, color="grey"),
                alignment=ft.alignment.center,
                padding=30
            )

        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=data["dates"],
            y=data["revenue"],
            mode='lines+markers',
            name='Revenue',
            line=dict(color='#2196F3', width=2),
            marker=dict(size=6),
            fill='tozeroy',
            fillcolor='rgba(33, 150, 243, 0.1)'
        ))
        fig.update_layout(
            title=dict(text="Daily Revenue", font=dict(size=14)),
            xaxis_title="Date",
            yaxis_title="Revenue (₱)",
            hovermode='x unified',
            height=280,
            margin=dict(l=40, r=20, t=40, b=40),
            font=dict(size=10)
        )
        return PlotlyChart(fig, expand=True)

    def create_best_sellers_list(items):
        if not items:
            return ft.Text("No items sold", size=13, color="grey")
        return ft.Column([
            ft.Row([
                ft.Text(f"{i}. {item['name']}", size=13, expand=True),
                ft.Text(f"x{item['quantity']}", size=13, color="grey700"),
                ft.Text(f"₱{item['revenue']:,.0f}", size=13, color="green"),
            ])
            for i, item in enumerate(items, start=1)
        ], spacing=4)

    # ===================== LOAD DATA =====================

    def show_loading():
        report_body.controls = [
            ft.Container(
                content=ft.Column([
                    ft.ProgressRing(width=40, height=40, stroke_width=4, color="#FEB23F"),
                    ft.Text("Loading report...", size=14, color="grey700")
                ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=20),
                alignment=ft.alignment.center,
                padding=30
            )
        ]
        page.update()

    def load_report(selected):
        show_loading()
        db = SessionLocal()
        try:
            summary = get_range_summary(db, selected)
            daily = get_daily_revenue(db, selected)
            best_sellers = get_best_selling_items(db, selected, limit=5)

            report_body.controls = [
                ft.Row([
                    summary_card(str(summary["total_orders"]), "Orders", "blue50"),
                    summary_card(f"₱{summary['total_revenue']:,.0f}", "Revenue", "green50"),
                ], spacing=8),
                ft.Row([
                    summary_card(f"₱{summary['average_order_value']:,.0f}", "Avg. Order", "orange50"),
                    summary_card(str(summary["cancelled_orders"]), "Cancelled", "red50"),
                ], spacing=8),
                ft.Container(content=create_daily_revenue_chart(daily), border=ft.border.all(1, "grey300"),
                             border_radius=8, padding=12, bgcolor="white"),
                ft.Container(
                    content=ft.Column([
                        ft.Text("Top Sellers", size=16, weight="bold"),
                        ft.Divider(height=1),
                        create_best_sellers_list(best_sellers)
                    ], spacing=8),
                    border=ft.border.all(1, "grey300"), border_radius=8, padding=12, bgcolor="white"
                ),
            ]
            print(f"✅ Sales report loaded for {format_range(selected)}")
        except Exception as ex:
            report_body.controls = [
                ft.Icon(ft.Icons.ERROR_OUTLINE, size=60, color="red"),
                ft.Text(f"Error loading report: {str(ex)}", size=14, color="red", text_align=ft.TextAlign.CENTER),
                ft.ElevatedButton("Try Again", on_click=lambda e: loader.request(report_range["value"]), bgcolor="#FEB23F", color="white")
            ]
            print(f"❌ Sales report error: {ex}")
        finally:
            db.close()
            page.update()

    # Ranges picked mid-load are queued, never dropped
    loader = LatestRangeLoader(load_report)

    # ===================== BUILD VIEW =====================

    page.clean()
    page.add(ft.Container(
        content=ft.Column([
            ft.Container(
                content=ft.Text("Sales Report", size=20, weight="bold", color="black"),
                padding=ft.padding.only(left=15, right=15, top=10, bottom=8)
            ),
            ft.Divider(height=1, color="grey300", thickness=1),
            ft.Container(content=picker_control, padding=ft.padding.symmetric(horizontal=15, vertical=8)),
            ft.Container(content=report_body, expand=True, padding=ft.padding.symmetric(horizontal=15)),
        ], expand=True, spacing=0),
        width=container_width,
        expand=True,
        padding=0
    ))
    loader.request(report_range["value"])
