"""Onboarding page: collect the financial profile kept in local storage."""

from datetime import date

import dash
from dash import html, dcc, callback, Input, Output, State, no_update

from credwise.dashboard.components import FIELD_STYLE, ROW_STYLE, field, to_decimal
from credwise.data.profile_store import StoreProfileRepository
from credwise.engine.profile import complete_onboarding
from credwise.models.profile import FinancialProfile

dash.register_page(__name__, path="/onboarding", name="Onboarding")

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#14532d",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

layout = html.Div([
    html.H2("Set Up Your Financial Profile"),
    html.P("These figures personalize your overview. You can update them anytime."),

    html.Div([
        field("Name", dcc.Input(id="ob-name", type="text", style=FIELD_STYLE)),
        field("Credit Score", dcc.Input(id="ob-score", type="number", min=300, max=850, style=FIELD_STYLE)),
    ], style=ROW_STYLE),
    html.Div([
        field("Monthly Income", dcc.Input(id="ob-income", type="number", min=0, style=FIELD_STYLE)),
        field("Monthly Debt Payments", dcc.Input(id="ob-monthly-debt", type="number", min=0, style=FIELD_STYLE)),
    ], style=ROW_STYLE),
    html.Div([
        field("Total Savings", dcc.Input(id="ob-savings", type="number", min=0, style=FIELD_STYLE)),
        field("Total Debt", dcc.Input(id="ob-total-debt", type="number", min=0, style=FIELD_STYLE)),
    ], style=ROW_STYLE),

    html.Div([
        html.Button("Finish", id="ob-finish", n_clicks=0, style=BTN_STYLE),
        html.Button("Reset Profile", id="ob-reset", n_clicks=0, style={**BTN_STYLE, "backgroundColor": "#888"}),
    ], style={"display": "flex", "gap": "1rem"}),
    html.Div(id="ob-status", style={"marginTop": "1rem"}),
])


@callback(
    Output("profile-store", "data"),
    Output("ob-status", "children"),
    Input("ob-finish", "n_clicks"),
    State("ob-name", "value"),
    State("ob-score", "value"),
    State("ob-income", "value"),
    State("ob-monthly-debt", "value"),
    State("ob-savings", "value"),
    State("ob-total-debt", "value"),
    State("profile-store", "data"),
    prevent_initial_call=True,
)
def finish_onboarding(n_clicks, name, score, income, monthly_debt, savings, total_debt, stored):
    repo = StoreProfileRepository(stored)
    current = repo.load() or FinancialProfile()
    try:
        profile = current.model_copy(update={
            "name": name or current.name,
            "credit_score": int(score) if score else None,
            "monthly_income": to_decimal(income),
            "monthly_debt": to_decimal(monthly_debt),
            "total_savings": to_decimal(savings),
            "total_debt": to_decimal(total_debt),
        })
        profile = FinancialProfile.model_validate(profile.model_dump())
    except ValueError as e:
        return no_update, html.P(f"Please check your entries: {e}", style={"color": "#e94560"})

    repo.save(complete_onboarding(profile, date.today()))
    return repo.data, html.Div([
        "Profile saved. ",
        dcc.Link("Go to your overview", href="/"),
    ])


@callback(
    Output("profile-store", "data", allow_duplicate=True),
    Output("ob-status", "children", allow_duplicate=True),
    Input("ob-reset", "n_clicks"),
    prevent_initial_call=True,
)
def reset_profile(n_clicks):
    repo = StoreProfileRepository(None)
    repo.clear()
    return repo.data, html.P("Profile cleared.")
