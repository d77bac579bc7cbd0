"""Layout helpers shared by the dashboard pages."""

from decimal import Decimal, InvalidOperation

from dash import html

from credwise.config import settings

CARD_STYLE = {
    "backgroundColor": "white",
    "border": "1px solid #ddd",
    "borderRadius": "8px",
    "padding": "1rem 1.5rem",
    "minWidth": "180px",
    "textAlign": "center",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

ROW_STYLE = {"display": "flex", "gap": "1rem", "marginBottom": "1rem", "flexWrap": "wrap"}

WARNING_STYLE = {
    "border": "1px solid #f5c6cb",
    "backgroundColor": "#fdecea",
    "color": "#a94442",
    "borderRadius": "6px",
    "padding": "1rem",
}

EMPTY_MSG_STYLE = {
    "textAlign": "center",
    "padding": "4rem 2rem",
    "color": "#888",
    "fontSize": "1.1rem",
}

RATING_COLORS = {
    "Exceptional": "#27ae60",
    "Excellent": "#27ae60",
    "Very Good": "#2ecc71",
    "Good": "#2ecc71",
    "Fair": "#f39c12",
    "Poor": "#e67e22",
    "Very Poor": "#e94560",
}


def to_decimal(value, default: Decimal | None = None) -> Decimal | None:
    """Dash inputs arrive as int, float, str or None."""
    if value is None or value == "":
        return default
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return default


def money(value) -> str:
    return f"{settings.currency_symbol}{value:,.2f}"


def field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "160px"})


def metric_card(label, value, color=None):
    value_style = {"fontSize": "1.5rem", "fontWeight": "bold"}
    if color:
        value_style["color"] = color
    return html.Div([
        html.Div(value, style=value_style),
        html.Div(label, style={"fontSize": "0.85rem", "color": "#666"}),
    ], style=CARD_STYLE)


def tip_list(title, tips):
    return html.Div([
        html.H4(title),
        html.Ul([html.Li(tip, style={"marginBottom": "0.5rem"}) for tip in tips]),
    ], style={"marginTop": "1.5rem"})
