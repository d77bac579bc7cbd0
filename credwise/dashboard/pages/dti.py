"""Debt-to-income page."""

import dash
from dash import html, dcc, callback, Input, Output
import plotly.graph_objects as go

from credwise.dashboard.components import (
    FIELD_STYLE,
    RATING_COLORS,
    ROW_STYLE,
    field,
    metric_card,
    tip_list,
    to_decimal,
)
from credwise.engine.dti import compute_dti

dash.register_page(__name__, path="/dti", name="DTI")

layout = html.Div([
    html.H2("Debt-to-Income Calculator"),
    html.P("Calculate your debt-to-income ratio to understand how lenders view your financial health."),

    html.Div([
        field("Gross Monthly Income", dcc.Input(id="dti-income", type="number", value=5000, min=0, style=FIELD_STYLE)),
        field("Monthly Debt Payments", dcc.Input(id="dti-debt", type="number", value=1400, min=0, style=FIELD_STYLE)),
    ], style=ROW_STYLE),

    html.Div(id="dti-results"),
])


@callback(
    Output("dti-results", "children"),
    Input("dti-income", "value"),
    Input("dti-debt", "value"),
)
def update_dti(income, debt):
    income = to_decimal(income)
    debt = to_decimal(debt)
    if income is None or debt is None or debt < 0:
        return html.P("Enter your monthly income and debt payments.")

    result = compute_dti(income, debt)
    if result.ratio is None:
        return html.P("Monthly income must be greater than zero.")

    fig = go.Figure(go.Pie(
        labels=["Debt Payments", "Remaining Income"],
        values=[float(debt), float(result.remaining_income)],
        marker=dict(colors=["#e94560", "#2ecc71"]),
        hole=0.4,
    ))
    fig.update_layout(title="Income Allocation")

    return html.Div([
        html.Div([
            metric_card("DTI Ratio", f"{result.ratio}%", color=RATING_COLORS.get(result.rating.label)),
            metric_card("Rating", result.rating.label, color=RATING_COLORS.get(result.rating.label)),
        ], style=ROW_STYLE),
        html.P(result.rating.description),
        dcc.Graph(figure=fig),
        tip_list("Tips to Improve Your DTI", result.tips),
    ])
