"""
Flet renderer for the date range picker.
All state lives in core.date_range_picker.DateRangePicker; this module only draws it
and forwards clicks/hover events back to it.
"""
import flet as ft
from core.calendar_view import ViewMode
from core.date_range_picker import DateRangePicker

PRIMARY = "#FEB23F"
RANGE_BG = "#FFE8C2"
CELL_SIZE = 38


def build_date_range_picker(page: ft.Page, picker: DateRangePicker, width: int = 320):
    """
    Build the picker control.

    Args:
        page: Flet page object
        picker: Controller holding the selection and view state
        width: Width of the dropdown calendar

    Returns:
        ft.Column: Trigger button plus the (hidden until opened) calendar panel
    """

    trigger_text = ft.Text(picker.display_value(), size=14, color="black")
    trigger = ft.OutlinedButton(
        content=ft.Row([
            ft.Icon(ft.Icons.CALENDAR_MONTH, size=18, color="grey700"),
            trigger_text,
        ], spacing=8),
        on_click=lambda e: on_toggle(),
        disabled=picker.disabled,
        width=width,
    )
    panel = ft.Container(
        visible=False,
        width=width,
        padding=10,
        bgcolor="white",
        border=ft.border.all(1, "grey300"),
        border_radius=8,
    )

    # ===================== EVENT HANDLERS =====================

    def refresh():
        trigger_text.value = picker.display_value()
        trigger_text.color = "black" if picker.current_range().start else "grey600"
        trigger.disabled = picker.disabled
        panel.visible = picker.is_open
        if picker.is_open:
            panel.content = build_panel()
        page.update()

    def on_toggle():
        picker.toggle()
        refresh()

    def on_day_click(cell):
        picker.pick_cell(cell)
        refresh()

    def on_day_hover(e, cell):
        if e.data == "true" and cell.in_displayed_month:
            picker.hover(cell.date)
            refresh()

    def on_grid_leave(e):
        if e.data == "false":
            picker.leave_grid()
            refresh()

    def run(command, *args):
        command(*args)
        refresh()

    # ===================== PANEL BUILDERS =====================

    def build_header():
        return ft.Row([
            ft.IconButton(
                icon=ft.Icons.CHEVRON_LEFT,
                on_click=lambda e: run(picker.prev),
                disabled=not picker.can_go_prev(),
            ),
            ft.TextButton(
                picker.header_label(),
                on_click=lambda e: run(picker.activate_label),
                expand=True,
            ),
            ft.IconButton(
                icon=ft.Icons.CHEVRON_RIGHT,
                on_click=lambda e: run(picker.next),
                disabled=not picker.can_go_next(),
            ),
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN)

    def build_day_cell(cell):
        if cell.is_start or cell.is_end:
            bgcolor, color = PRIMARY, "white"
        elif cell.in_range or cell.in_preview:
            bgcolor, color = RANGE_BG, "black"
        elif cell.is_hovered:
            bgcolor, color = "grey200", "black"
        else:
            bgcolor, color = None, "black" if cell.selectable else "grey400"

        return ft.Container(
            content=ft.Text(str(cell.date.day), size=13, color=color,
                            weight="bold" if cell.is_today else None),
            width=CELL_SIZE,
            height=CELL_SIZE,
            alignment=ft.alignment.center,
            bgcolor=bgcolor if cell.in_displayed_month else None,
            border=ft.border.all(1, PRIMARY) if cell.is_today and cell.in_displayed_month else None,
            border_radius=CELL_SIZE // 2,
            on_click=(lambda e, c=cell: on_day_click(c)) if cell.selectable else None,
            on_hover=lambda e, c=cell: on_day_hover(e, c),
            opacity=1.0 if cell.in_displayed_month else 0.3,
        )

    def build_day_view():
        cells = picker.day_cells()
        weeks = [cells[i:i + 7] for i in range(0, len(cells), 7)]
        weekday_row = ft.Row([
            ft.Container(ft.Text(label, size=12, color="grey700"), width=CELL_SIZE, alignment=ft.alignment.center)
            for label in picker.weekday_labels()
        ], spacing=2)
        grid = ft.Container(
            content=ft.Column([
                ft.Row([build_day_cell(c) for c in week], spacing=2) for week in weeks
            ], spacing=2),
            on_hover=on_grid_leave,
        )
        today_action = ft.TextButton(
            picker.today_button_label(),
            on_click=lambda e: run(picker.jump_to_today),
            disabled=not picker.can_jump_to_today(),
        )
        return ft.Column([weekday_row, grid, ft.Divider(height=1), today_action], spacing=6)

    def build_month_view():
        buttons = [
            ft.Container(
                content=ft.TextButton(
                    option.label[:3],
                    on_click=lambda e, i=option.month_index: run(picker.choose_month, i),
                    disabled=not option.enabled,
                    style=ft.ButtonStyle(bgcolor=PRIMARY if option.current else None,
                                         color="white" if option.current else None),
                ),
                col=4,
            )
            for option in picker.month_options()
        ]
        return ft.ResponsiveRow(buttons)

    def build_year_view():
        return ft.Column([
            ft.TextButton(
                str(year),
                on_click=lambda e, y=year: run(picker.choose_year, y),
                style=ft.ButtonStyle(color=PRIMARY if year == picker.view.state.viewing_year else None),
            )
            for year in picker.year_options()
        ], height=240, scroll=ft.ScrollMode.AUTO, horizontal_alignment=ft.CrossAxisAlignment.CENTER)

    def build_panel():
        if picker.mode is ViewMode.MONTH:
            body = build_month_view()
        elif picker.mode is ViewMode.YEAR:
            body = build_year_view()
        else:
            body = build_day_view()
        return ft.Column([build_header(), body], spacing=8)

    return ft.Column([trigger, panel], spacing=4)
