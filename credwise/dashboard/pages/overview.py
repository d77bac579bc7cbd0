"""Overview page: profile summary cards and six-month trends.

Driven entirely by the profile-store; sends first-time visitors to onboarding.
"""

import dash
from dash import html, dcc, callback, Input, Output
import plotly.graph_objects as go

from credwise.config import settings
from credwise.dashboard.components import EMPTY_MSG_STYLE, ROW_STYLE, CARD_STYLE, money
from credwise.data.profile_store import StoreProfileRepository
from credwise.engine.profile import month_over_month_change, profile_dti

dash.register_page(__name__, path="/", name="Overview")

layout = html.Div([
    html.Div(id="overview-content"),
])


def _change_text(history, is_money=False):
    change = month_over_month_change(history)
    if change is None:
        return ""
    sign = "+" if change > 0 else ""
    amount = f"{settings.currency_symbol}{change:,.0f}" if is_money else f"{change:,.0f}"
    return f"{sign}{amount} from last month"


def _summary_card(label, value, subtitle=""):
    return html.Div([
        html.Div(label, style={"fontSize": "0.85rem", "color": "#666"}),
        html.Div(value, style={"fontSize": "1.5rem", "fontWeight": "bold"}),
        html.Div(subtitle, style={"fontSize": "0.75rem", "color": "#999", "marginTop": "0.25rem"}),
    ], style=CARD_STYLE)


def _trend_chart(title, history, color):
    fig = go.Figure(go.Scatter(
        x=[p.month for p in history],
        y=[float(p.value) for p in history],
        mode="lines+markers",
        line=dict(color=color, width=3),
    ))
    fig.update_layout(title=title, height=300, margin=dict(t=40, b=30))
    return fig


@callback(
    Output("overview-content", "children"),
    Input("profile-store", "data"),
)
def render_overview(data):
    profile = StoreProfileRepository(data).load()
    if profile is None or not profile.has_completed_onboarding:
        return html.Div([
            html.P("Set up your financial profile to see your overview."),
            dcc.Link("Start onboarding", href="/onboarding"),
        ], style=EMPTY_MSG_STYLE)

    dti = profile_dti(profile)
    dti_subtitle = (
        f"{money(profile.monthly_debt)} of {money(profile.monthly_income)} income"
        if dti is not None else "Not calculated"
    )

    cards = html.Div([
        _summary_card(
            "Credit Score",
            str(profile.credit_score) if profile.credit_score else "Not set",
            _change_text(profile.credit_history),
        ),
        _summary_card("DTI Ratio", f"{dti}%" if dti is not None else "N/A", dti_subtitle),
        _summary_card(
            "Savings",
            money(profile.total_savings) if profile.total_savings else "Not set",
            _change_text(profile.savings_history, is_money=True),
        ),
        _summary_card(
            "Total Debt",
            money(profile.total_debt) if profile.total_debt else "Not set",
            _change_text(profile.debt_history, is_money=True),
        ),
    ], style=ROW_STYLE)

    title = f"Welcome back, {profile.name}" if profile.name else "Welcome back"
    return html.Div([
        html.H2(title),
        cards,
        html.Div([
            html.Div(dcc.Graph(figure=_trend_chart("Credit Score", profile.credit_history, "#2ecc71")),
                     style={"width": "33%"}),
            html.Div(dcc.Graph(figure=_trend_chart("Savings", profile.savings_history, "#3498db")),
                     style={"width": "33%"}),
            html.Div(dcc.Graph(figure=_trend_chart("Debt", profile.debt_history, "#e94560")),
                     style={"width": "33%"}),
        ], style={"display": "flex", "gap": "1rem"}),
        html.Div(dcc.Link("Update your profile", href="/onboarding"), style={"marginTop": "1rem"}),
    ])
